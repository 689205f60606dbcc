"""Domain resolution: retry helper, per-domain resolver and batch fan-out.

This module holds the only part of the tool with real failure semantics.
A domain that cannot be resolved is recorded as an empty `DomainRecord`;
nothing raised by a lookup ever crosses `resolve` or `resolve_all`.

The name-resolution capability is always passed explicitly:

- a `NameResolver` (A + AAAA queried concurrently, generic lookup as
  fallback) selects the default policy;
- a bare async callable `lookup(domain) -> address` selects the alternate
  policy, retried up to `max_attempts` times.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Sequence, TypeVar, Union

from ghosts.core.domain.models import DomainRecord, LookupOutcome
from ghosts.core.errors import ResolutionCapabilityError
from ghosts.core.interfaces.capabilities import LookupFn, NameResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3

Capability = Union[NameResolver, LookupFn]


async def retry(operation: Callable[[], Awaitable[T]], attempts: int) -> T:
    """Await `operation` up to `attempts` times and return the first success.

    When every attempt fails the last exception is re-raised.
    """

    last_error: Exception | None = None
    for attempt in range(1, attempts + 1):
        try:
            return await operation()
        except Exception as exc:
            last_error = exc
            logger.debug("Attempt %d/%d failed: %s", attempt, attempts, exc)
    if last_error is None:
        raise ValueError(f"attempts must be >= 1 (got {attempts})")
    raise last_error


def check_capability(capability: object) -> None:
    """Reject anything that cannot resolve names before any work starts."""

    if isinstance(capability, NameResolver):
        return
    if callable(capability):
        return
    raise ResolutionCapabilityError(
        f"lookup capability must be a NameResolver or an async callable, got {type(capability).__name__}"
    )


async def _guarded(query: Callable[[str], Awaitable[LookupOutcome]], domain: str) -> LookupOutcome:
    # Boundary for stub/third-party resolvers that raise instead of returning
    # an outcome: the exception becomes an empty outcome carrying its text.
    try:
        outcome = await query(domain)
    except Exception as exc:
        return LookupOutcome.empty(f"{type(exc).__name__}: {exc}")
    if not isinstance(outcome, LookupOutcome):
        return LookupOutcome.empty(f"unexpected lookup result {type(outcome).__name__}")
    return outcome


async def _resolve_with_resolver(domain: str, resolver: NameResolver) -> DomainRecord:
    v4, v6 = await asyncio.gather(
        _guarded(resolver.resolve4, domain),
        _guarded(resolver.resolve6, domain),
    )
    if not v4.ok:
        logger.debug("%s: A query returned nothing (%s)", domain, v4.error)
    if not v6.ok:
        logger.debug("%s: AAAA query returned nothing (%s)", domain, v6.error)

    addresses = [*v4.addresses, *v6.addresses]
    if not addresses:
        fallback = await _guarded(resolver.lookup, domain)
        if fallback.addresses:
            addresses.append(fallback.addresses[0])
        elif not fallback.ok:
            logger.debug("%s: fallback lookup failed (%s)", domain, fallback.error)

    return DomainRecord.from_addresses(domain, addresses)


async def _resolve_with_lookup(domain: str, lookup: LookupFn, max_attempts: int) -> DomainRecord:
    async def attempt() -> str | None:
        return await lookup(domain)

    try:
        address = await retry(attempt, max_attempts)
    except Exception as exc:
        logger.debug("%s: lookup exhausted %d attempts: %s", domain, max_attempts, exc)
        return DomainRecord.failed(domain)

    if not address:
        return DomainRecord.failed(domain)
    return DomainRecord.from_addresses(domain, [str(address)])


async def resolve(
    domain: str,
    capability: Capability,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> DomainRecord:
    """Resolve one domain into a `DomainRecord` (empty on failure)."""

    check_capability(capability)
    if isinstance(capability, NameResolver):
        record = await _resolve_with_resolver(domain, capability)
    else:
        record = await _resolve_with_lookup(domain, capability, max_attempts)

    if record.resolved:
        logger.debug("%s -> %s", domain, " ".join(record.addresses))
    else:
        logger.warning("%s resolution failed", domain)
    return record


async def resolve_all(
    domains: Sequence[str],
    capability: Capability,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    timeout: float | None = None,
) -> list[DomainRecord]:
    """Resolve every domain concurrently, preserving input order.

    `timeout` (seconds, per domain) is optional hardening: a domain that
    exceeds it is recorded as failed instead of delaying the whole batch.
    """

    check_capability(capability)

    async def one(domain: str) -> DomainRecord:
        if timeout is None:
            return await resolve(domain, capability, max_attempts)
        try:
            return await asyncio.wait_for(resolve(domain, capability, max_attempts), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("%s resolution timed out after %.1fs", domain, timeout)
            return DomainRecord.failed(domain)

    records = await asyncio.gather(*(one(d) for d in domains))
    failed = sum(1 for r in records if not r.resolved)
    logger.info("Resolved %d/%d domains", len(records) - failed, len(records))
    return list(records)
