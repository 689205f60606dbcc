"""Shared fixtures: scripted name resolvers and a fixed clock."""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from ghosts.core.domain.models import LookupOutcome

# 2024-01-02 03:04:05 UTC is 11:04:05 AM in UTC+8.
FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class ScriptedResolver:
    """NameResolver answering from dicts; missing names fail that query.

    A value that is an Exception instance is raised instead of returned.
    """

    def __init__(
        self,
        v4: dict[str, object] | None = None,
        v6: dict[str, object] | None = None,
        fallback: dict[str, object] | None = None,
    ) -> None:
        self.v4 = v4 or {}
        self.v6 = v6 or {}
        self.fallback = fallback or {}
        self.calls: list[tuple[str, str]] = []

    @staticmethod
    def _answer(table: dict[str, object], domain: str) -> LookupOutcome:
        value = table.get(domain)
        if value is None:
            return LookupOutcome.empty("no records")
        if isinstance(value, Exception):
            raise value
        return LookupOutcome.found(list(value))  # type: ignore[arg-type]

    async def resolve4(self, domain: str) -> LookupOutcome:
        self.calls.append(("A", domain))
        return self._answer(self.v4, domain)

    async def resolve6(self, domain: str) -> LookupOutcome:
        self.calls.append(("AAAA", domain))
        return self._answer(self.v6, domain)

    async def lookup(self, domain: str) -> LookupOutcome:
        self.calls.append(("lookup", domain))
        return self._answer(self.fallback, domain)


@pytest.fixture
def fixed_now() -> datetime:
    """A clock value with a known UTC+8 rendering."""
    return FIXED_NOW


@pytest.fixture
def scripted_resolver() -> Callable[..., ScriptedResolver]:
    """Factory for ScriptedResolver instances."""
    return ScriptedResolver
