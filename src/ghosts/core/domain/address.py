"""Clasificación de direcciones por familia.

Helper puro usado por la resolución y por todos los renderers.
"""

from __future__ import annotations

import re
from typing import Iterable

from ghosts.core.domain.models import AddressFamily

# Tokens: runs of digits, single letters, any other single character.
_TOKENS = re.compile(r"(\d+)|([^\W\d_])|(.)", re.DOTALL)

# Primary order of punctuation in the root collation; unlisted characters
# go after these, by code point.
_PUNCTUATION = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"

_PUNCT, _NUMBER, _LETTER = 0, 1, 2

# IPv4 siempre precede a IPv6 cuando ambas aparecen en una misma sección.
FAMILY_ORDER: tuple[AddressFamily, ...] = (AddressFamily.IPV4, AddressFamily.IPV6)


def classify(address: str) -> AddressFamily:
    """Colon presence decides the family (``:`` means IPv6)."""

    return AddressFamily.IPV6 if ":" in address else AddressFamily.IPV4


def is_ipv6(address: str) -> bool:
    return classify(address) is AddressFamily.IPV6


def _collation_element(match: re.Match[str]) -> tuple[int, int, str]:
    digits, letter, other = match.groups()
    if digits is not None:
        return (_NUMBER, int(digits), "")
    if letter is not None:
        return (_LETTER, 0, letter.casefold())
    rank = _PUNCTUATION.find(other)
    return (_PUNCT, rank if rank >= 0 else len(_PUNCTUATION) + ord(other), "")


def natural_key(value: str) -> tuple[tuple[tuple[int, int, str], ...], str]:
    """Numeric-aware collation key ("10.0.0.2" < "10.0.0.10").

    Punctuation sorts before digit runs, digit runs before letters, and a
    key that is a prefix of another sorts first, so "2603:1000::/48"
    precedes "2603:1000:4::/56". The raw value breaks remaining ties.
    """

    return tuple(_collation_element(m) for m in _TOKENS.finditer(value)), value


def natural_sorted(values: Iterable[str]) -> list[str]:
    return sorted(values, key=natural_key)


def partition(addresses: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split addresses into (ipv4, ipv6) keeping their relative order."""

    v4: list[str] = []
    v6: list[str] = []
    for address in addresses:
        if not address:
            continue
        (v6 if is_ipv6(address) else v4).append(address)
    return v4, v6


def unique(addresses: Iterable[str]) -> list[str]:
    """Drop repeats, first occurrence wins and keeps its position."""

    seen: set[str] = set()
    out: list[str] = []
    for address in addresses:
        if address in seen:
            continue
        seen.add(address)
        out.append(address)
    return out
