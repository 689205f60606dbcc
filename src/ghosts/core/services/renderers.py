"""Format renderers over a list of `DomainRecord`.

Four independent, side-effect-free transforms:

- `render_hosts`: OS hosts file, at most one address per family per domain.
- `render_mdns_hosts`: one line per domain with every address.
- `render_address_list`: RouterOS firewall address-list, deduped per address.
- `render_dns_static`: RouterOS DNS static records, deduped per (domain, address).

Only the hosts/mDNS footer depends on the clock; pass `now` for
byte-identical output.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Sequence

from ghosts.core.domain.address import partition, unique
from ghosts.core.domain.models import AddressFamily, DomainRecord

HOSTS_HEADER = "# Auto-generated Github address list\n# https://github.com/lazywalker/ghosts\n\n"
ADDRESS_LIST_HEADER = "# Auto-generated MikroTik address list – GitHub IPs\n"
DNS_LIST_HEADER = "# Auto-generated MikroTik DNS list – GitHub IPs\n"

FIREWALL_SECTIONS = {
    AddressFamily.IPV4: "/ip firewall address-list",
    AddressFamily.IPV6: "/ipv6 firewall address-list",
}
DNS_SECTIONS = {
    AddressFamily.IPV4: "/ip dns static",
    AddressFamily.IPV6: "/ipv6 dns static",
}

DEFAULT_LIST_NAME = "github-list"
DEFAULT_DNS_COMMENT = "github"

# Timestamps are always shown in UTC+8.
UPDATE_TZ = timezone(timedelta(hours=8))


@dataclass(frozen=True)
class HostsDocument:
    """Rendered hosts file plus the timestamp embedded in its footer."""

    text: str
    update_time: str


def format_update_time(now: datetime | None = None) -> str:
    """`M/D/YYYY, h:MM:SS AM` in UTC+8."""

    moment = (now or datetime.now(timezone.utc)).astimezone(UPDATE_TZ)
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{moment.month}/{moment.day}/{moment.year}, "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
    )


def select_addresses(record: DomainRecord) -> tuple[list[str], list[str]]:
    """Per-family view of a record: (ipv4, ipv6) in resolution order."""

    if record.addresses:
        addr_list: Sequence[str] = record.addresses
    elif record.primary_address:
        addr_list = [record.primary_address]
    else:
        addr_list = []
    return partition(addr_list)


def _failure_line(domain: str) -> str:
    return f"# {domain} resolution failed"


def _footer(update_time: str) -> str:
    return f"\n# Last update: {update_time}\n"


def render_hosts(records: Sequence[DomainRecord], *, now: datetime | None = None) -> HostsDocument:
    lines: list[str] = []
    for record in records:
        v4, v6 = select_addresses(record)
        if not v4 and not v6:
            lines.append(_failure_line(record.domain))
            continue
        if v4:
            lines.append(f"{v4[0]}   {record.domain}")
        if v6:
            lines.append(f"{v6[0]}   {record.domain}")

    update_time = format_update_time(now)
    body = "".join(f"{line}\n" for line in lines)
    return HostsDocument(text=HOSTS_HEADER + body + _footer(update_time), update_time=update_time)


def render_mdns_hosts(records: Sequence[DomainRecord], *, now: datetime | None = None) -> str:
    lines: list[str] = []
    for record in records:
        v4, v6 = select_addresses(record)
        if not v4 and not v6:
            lines.append(_failure_line(record.domain))
        else:
            lines.append(" ".join([record.domain, *v4, *v6]))

    body = "".join(f"{line}\n" for line in lines)
    return HOSTS_HEADER + body + _footer(format_update_time(now))


def _section(header: str, lines: list[str]) -> str:
    if not lines:
        return ""
    return header + "\n" + "\n".join(lines) + "\n"


def render_address_list(records: Sequence[DomainRecord], list_name: str = DEFAULT_LIST_NAME) -> str:
    collected: list[str] = []
    for record in records:
        v4, v6 = select_addresses(record)
        collected.extend(v4)
        collected.extend(v6)

    v4_unique, v6_unique = partition(unique(collected))
    out = ADDRESS_LIST_HEADER
    for family, addresses in ((AddressFamily.IPV4, v4_unique), (AddressFamily.IPV6, v6_unique)):
        prefix = family.host_prefix()
        out += _section(
            FIREWALL_SECTIONS[family],
            [f"add address={a}/{prefix} list={list_name}" for a in addresses],
        )
    return out


def render_dns_static(records: Sequence[DomainRecord], comment: str = DEFAULT_DNS_COMMENT) -> str:
    v4_lines: list[str] = []
    v6_lines: list[str] = []
    seen: set[tuple[str, str]] = set()

    for record in records:
        v4, v6 = select_addresses(record)
        if not v4 and not v6:
            # Failures are reported in the IPv4 section.
            v4_lines.append(_failure_line(record.domain))
            continue
        for family_lines, addresses in ((v4_lines, v4), (v6_lines, v6)):
            for address in addresses:
                key = (record.domain, address)
                if key in seen:
                    continue
                seen.add(key)
                family_lines.append(f'add comment="{comment}" name="{record.domain}" address={address}')

    return (
        DNS_LIST_HEADER
        + _section(DNS_SECTIONS[AddressFamily.IPV4], v4_lines)
        + _section(DNS_SECTIONS[AddressFamily.IPV6], v6_lines)
    )
