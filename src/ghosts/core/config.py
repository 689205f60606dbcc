"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Solo la CLI lee `AppSettings`; las funciones del Core reciben parámetros
  explícitos (dominios, nombres de lista, capacidades).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ghosts.core.domains import DEFAULT_DOMAINS, parse_domains_text


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "ghosts"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "ghosts"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "ghosts"
    return Path.home() / ".config" / "ghosts"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="GHOSTS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    domains: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DOMAINS),
        min_length=1,
        description="Dominios a resolver, en el orden en que se publican.",
    )
    domains_file: Path | None = Field(
        default=None,
        description="Fichero con un dominio por línea; reemplaza `domains`.",
    )

    output_dir: Path = Field(
        default=Path("."),
        description="Directorio donde se escriben todos los ficheros generados.",
    )
    hosts_filename: str = Field(default="hosts", min_length=1)
    mdns_filename: str = Field(default="hosts.mdns", min_length=1)
    address_list_filename: str = Field(default="github-ip-list.rsc", min_length=1)
    dns_list_filename: str = Field(default="github-dns-list.rsc", min_length=1)
    meta_ipv4_filename: str = Field(default="github-ipv4-list.rsc", min_length=1)
    meta_ipv6_filename: str = Field(default="github-ipv6-list.rsc", min_length=1)

    address_list_name: str = Field(
        default="github-list",
        min_length=1,
        description="Nombre de la address-list RouterOS para los dominios resueltos.",
    )
    meta_list_name: str = Field(
        default="github-list-all",
        min_length=1,
        description="Nombre de la address-list RouterOS para los rangos de GitHub meta.",
    )
    dns_comment: str = Field(default="github", min_length=1)

    lookup_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Reintentos para la política de lookup alternativa.",
    )
    resolve_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout opcional por dominio (segundos). None = sin límite.",
    )
    dns_lifetime_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Tiempo máximo de cada consulta A/AAAA (dnspython lifetime).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="github-hosts-updater",
        min_length=1,
        description="User-Agent para la API de GitHub.",
    )
    meta_url: str = Field(
        default="https://api.github.com/meta",
        min_length=8,
    )
    meta_accept: str = Field(
        default="application/vnd.github.v3+json",
        min_length=1,
    )
    skip_meta: bool = Field(
        default=False,
        description="No descargar los rangos publicados por GitHub.",
    )

    def load_domains(self) -> list[str]:
        """Dominios efectivos: `domains_file` si está definido, si no `domains`."""

        if self.domains_file is not None:
            return parse_domains_text(self.domains_file.read_text(encoding="utf-8"))
        return list(self.domains)
