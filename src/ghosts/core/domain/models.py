"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde (documento meta de GitHub) y modelos
  inmutables para los resultados de resolución.
- Un único `DomainRecord` normalizado: `addresses` siempre presente, así los
  renderers no necesitan ramas defensivas tipo "lista o fallback".

Nota:
- Estos modelos describen *qué* se resolvió, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class AddressFamily(str, Enum):
    """Address family tag derived from the textual form of an address."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"

    def host_prefix(self) -> int:
        """Prefix length of a single-host network in this family."""

        return 128 if self is AddressFamily.IPV6 else 32

    def label(self) -> str:
        return "IPv6" if self is AddressFamily.IPV6 else "IPv4"


class DomainRecord(BaseModel):
    """Resultado de resolver un dominio en una ejecución.

    Reglas:
    - `addresses` guarda todas las direcciones en orden de resolución
      (IPv4 primero, luego IPv6).
    - `addresses` vacío y `primary_address` vacío = resolución fallida.
    """

    model_config = ConfigDict(frozen=True)

    # Cualquier cadena: un nombre inválido queda como registro fallido.
    domain: str = Field(..., description="Hostname consultado.")
    primary_address: str = Field(
        default="",
        description="Primera dirección obtenida (consumidores legacy/simples).",
    )
    addresses: tuple[str, ...] = Field(
        default=(),
        description="Todas las direcciones resueltas, en orden de resolución.",
    )

    @classmethod
    def failed(cls, domain: str) -> "DomainRecord":
        return cls(domain=domain)

    @classmethod
    def from_addresses(cls, domain: str, addresses: list[str] | tuple[str, ...]) -> "DomainRecord":
        found = tuple(a for a in addresses if a)
        return cls(domain=domain, primary_address=found[0] if found else "", addresses=found)

    @property
    def resolved(self) -> bool:
        return bool(self.addresses or self.primary_address)


class LookupOutcome(BaseModel):
    """Resultado explícito de una sub-consulta (A, AAAA o lookup genérico).

    Por qué un valor y no excepciones:
    - "La familia no tiene direcciones" es un caso normal y testeable, no un
      error que haya que silenciar con try/except.
    """

    model_config = ConfigDict(frozen=True)

    addresses: tuple[str, ...] = ()
    error: str | None = None

    @classmethod
    def found(cls, addresses: list[str] | tuple[str, ...]) -> "LookupOutcome":
        return cls(addresses=tuple(addresses))

    @classmethod
    def empty(cls, error: str | None = None) -> "LookupOutcome":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


class RangeEntry(BaseModel):
    """CIDR publicado por GitHub, etiquetado con su familia."""

    model_config = ConfigDict(frozen=True)

    cidr: str = Field(..., min_length=1)
    family: AddressFamily


META_CATEGORIES: tuple[str, ...] = ("web", "api", "git", "hooks", "packages", "pages", "actions")


class MetaDocument(BaseModel):
    """Subset del documento `https://api.github.com/meta` que nos interesa.

    Categorías desconocidas se ignoran; las ausentes (o que no son listas)
    cuentan como vacías.
    """

    model_config = ConfigDict(extra="ignore")

    web: list[str] = Field(default_factory=list)
    api: list[str] = Field(default_factory=list)
    git: list[str] = Field(default_factory=list)
    hooks: list[str] = Field(default_factory=list)
    packages: list[str] = Field(default_factory=list)
    pages: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)

    @field_validator(*META_CATEGORIES, mode="before")
    @classmethod
    def _only_lists(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [v for v in value if isinstance(v, str) and v]

    def all_ranges(self) -> list[str]:
        """Concatena las categorías en orden fijo (multiconjunto, sin dedupe)."""

        out: list[str] = []
        for category in META_CATEGORIES:
            out.extend(getattr(self, category))
        return out


class MetaAddressLists(BaseModel):
    """Los dos documentos RouterOS generados a partir del meta de GitHub."""

    model_config = ConfigDict(frozen=True)

    ipv4: str
    ipv6: str
