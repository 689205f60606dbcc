"""GitHub meta → RouterOS address lists.

Independent of the domain records: one fetch per run, flattened across the
known categories, deduplicated and sorted per family, rendered into one
IPv4 and one IPv6 document. Any fetch failure propagates; there is no
partial output for this stage.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ghosts.core.domain.address import FAMILY_ORDER, classify, natural_sorted
from ghosts.core.domain.models import AddressFamily, MetaAddressLists, MetaDocument, RangeEntry
from ghosts.core.errors import MetaFetchCapabilityError
from ghosts.core.interfaces.capabilities import MetaFetcher
from ghosts.core.services.renderers import ADDRESS_LIST_HEADER, FIREWALL_SECTIONS

logger = logging.getLogger(__name__)

DEFAULT_META_LIST_NAME = "github-list-all"


def collect_ranges(meta: Mapping[str, Any] | MetaDocument) -> dict[AddressFamily, list[RangeEntry]]:
    """Flatten, dedupe and numerically sort the published CIDRs by family."""

    document = meta if isinstance(meta, MetaDocument) else MetaDocument.model_validate(meta)

    buckets: dict[AddressFamily, set[str]] = {family: set() for family in FAMILY_ORDER}
    for cidr in document.all_ranges():
        buckets[classify(cidr)].add(cidr)

    return {
        family: [RangeEntry(cidr=cidr, family=family) for cidr in natural_sorted(buckets[family])]
        for family in FAMILY_ORDER
    }


def _render_family(entries: list[RangeEntry], family: AddressFamily, list_name: str) -> str:
    lines = [
        ADDRESS_LIST_HEADER.rstrip("\n"),
        FIREWALL_SECTIONS[family],
        *(f"add address={entry.cidr} list={list_name}" for entry in entries),
    ]
    return "\n".join(lines) + "\n"


def render_meta_lists(
    meta: Mapping[str, Any] | MetaDocument,
    list_name: str = DEFAULT_META_LIST_NAME,
) -> MetaAddressLists:
    ranges = collect_ranges(meta)
    return MetaAddressLists(
        ipv4=_render_family(ranges[AddressFamily.IPV4], AddressFamily.IPV4, list_name),
        ipv6=_render_family(ranges[AddressFamily.IPV6], AddressFamily.IPV6, list_name),
    )


async def generate_address_lists(
    fetch_meta: MetaFetcher,
    list_name: str = DEFAULT_META_LIST_NAME,
) -> MetaAddressLists:
    """Fetch the meta document once and render both address lists."""

    if not callable(fetch_meta):
        raise MetaFetchCapabilityError(
            f"fetch_meta must be an async callable, got {type(fetch_meta).__name__}"
        )

    meta = await fetch_meta()
    lists = render_meta_lists(meta, list_name)
    logger.info(
        "GitHub meta: %d IPv4 / %d IPv6 ranges",
        lists.ipv4.count("\nadd "),
        lists.ipv6.count("\nadd "),
    )
    return lists
