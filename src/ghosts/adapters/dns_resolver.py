"""Resolver DNS del sistema (dnspython + getaddrinfo).

Por qué dnspython:
- `dns.asyncresolver` devuelve *todos* los registros A/AAAA sin bloquear el
  event loop; `socket.getaddrinfo` solo sirve como fallback genérico.

Cada consulta devuelve un `LookupOutcome`: NXDOMAIN, NoAnswer, timeouts o
errores del resolver del sistema son resultados vacíos, no excepciones.
"""

from __future__ import annotations

import asyncio
import socket

import dns.asyncresolver
import dns.exception
import dns.rdatatype

from ghosts.core.domain.models import LookupOutcome


class SystemResolver:
    """`NameResolver` respaldado por el resolver configurado en el host."""

    def __init__(
        self,
        *,
        lifetime: float = 5.0,
        resolver: dns.asyncresolver.Resolver | None = None,
    ) -> None:
        self._resolver = resolver or dns.asyncresolver.Resolver()
        self._lifetime = lifetime

    async def _query(self, domain: str, rdtype: dns.rdatatype.RdataType) -> LookupOutcome:
        try:
            answer = await self._resolver.resolve(domain, rdtype, lifetime=self._lifetime)
        except dns.exception.DNSException as exc:
            return LookupOutcome.empty(f"{type(exc).__name__}: {exc}")
        return LookupOutcome.found([rdata.address for rdata in answer])

    async def resolve4(self, domain: str) -> LookupOutcome:
        return await self._query(domain, dns.rdatatype.A)

    async def resolve6(self, domain: str) -> LookupOutcome:
        return await self._query(domain, dns.rdatatype.AAAA)

    async def lookup(self, domain: str) -> LookupOutcome:
        loop = asyncio.get_running_loop()
        try:
            infos = await loop.getaddrinfo(domain, None, type=socket.SOCK_STREAM)
        except (OSError, UnicodeError) as exc:
            return LookupOutcome.empty(f"{type(exc).__name__}: {exc}")
        if not infos:
            return LookupOutcome.empty("no address")
        return LookupOutcome.found([str(infos[0][4][0])])
