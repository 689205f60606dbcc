"""Errores del Core.

Solo los fallos no recuperables tienen excepción propia: los fallos por
dominio se registran como datos (`DomainRecord` vacío).
"""

from __future__ import annotations


class ResolutionCapabilityError(TypeError):
    """The name-resolution capability is neither a NameResolver nor callable."""


class MetaFetchCapabilityError(TypeError):
    """The meta fetch capability is not callable."""


class MetaFetchError(RuntimeError):
    """GitHub answered the meta request with a non-success status."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to fetch GitHub meta: {status_code} {reason}".rstrip())
