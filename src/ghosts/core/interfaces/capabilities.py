"""Contratos de las capacidades inyectadas.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Los tests pasan stubs mínimos; la CLI pasa el resolver del sistema.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, runtime_checkable

from ghosts.core.domain.models import LookupOutcome


@runtime_checkable
class NameResolver(Protocol):
    """Resolución completa de un hostname (política por defecto).

    Reglas de diseño:
    - Los tres métodos son asíncronos (I/O de red).
    - Devuelven un `LookupOutcome`: un fallo de una familia es un valor vacío,
      no una excepción.
    """

    async def resolve4(self, domain: str) -> LookupOutcome:
        """Todas las direcciones A del dominio."""

        ...

    async def resolve6(self, domain: str) -> LookupOutcome:
        """Todas las direcciones AAAA del dominio."""

        ...

    async def lookup(self, domain: str) -> LookupOutcome:
        """Una única dirección vía el resolver genérico del sistema."""

        ...


# Política alternativa: una función que devuelve una dirección (o vacío) y
# puede lanzar; se reintenta hasta agotar el presupuesto.
LookupFn = Callable[[str], Awaitable[str | None]]

# Obtiene el documento meta de GitHub ya parseado (dict JSON).
MetaFetcher = Callable[[], Awaitable[dict[str, Any]]]
