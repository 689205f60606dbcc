"""Update run orchestration.

One run = resolve the configured domains, render and write the four
domain-based files, then fetch GitHub meta and write the two range lists.
The CLI only wires capabilities and settings into `run_update`; progress
reporting goes through `PipelineHooks` so the core never prints.

Stages run sequentially: a failure in the meta stage leaves the files of
the earlier stages in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable

from ghosts.adapters.file_exporter import export_text
from ghosts.core.config import AppSettings
from ghosts.core.domain.models import DomainRecord, MetaAddressLists
from ghosts.core.interfaces.capabilities import MetaFetcher
from ghosts.core.services.meta_ranges import generate_address_lists
from ghosts.core.services.renderers import (
    render_address_list,
    render_dns_static,
    render_hosts,
    render_mdns_hosts,
)
from ghosts.core.services.resolution import Capability, check_capability, resolve_all

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress tables, file listing)."""

    resolved: Callable[[list[DomainRecord]], None] | None = None
    written: Callable[[Path], None] | None = None


@dataclass
class UpdateResult:
    """Output of a pipeline invocation."""

    records: list[DomainRecord]
    update_time: str
    written: list[Path] = field(default_factory=list)
    meta_lists: MetaAddressLists | None = None

    @property
    def failed_domains(self) -> list[str]:
        return [r.domain for r in self.records if not r.resolved]


@dataclass
class RenderedFiles:
    """The four domain-based documents of one run, keyed by file name."""

    update_time: str
    documents: dict[str, str]


def render_domain_files(
    records: list[DomainRecord],
    *,
    settings: AppSettings,
    now: datetime | None = None,
) -> RenderedFiles:
    hosts = render_hosts(records, now=now)
    documents = {
        settings.hosts_filename: hosts.text,
        settings.mdns_filename: render_mdns_hosts(records, now=now),
        settings.address_list_filename: render_address_list(records, settings.address_list_name),
        settings.dns_list_filename: render_dns_static(records, settings.dns_comment),
    }
    return RenderedFiles(update_time=hosts.update_time, documents=documents)


async def run_update(
    *,
    settings: AppSettings,
    resolver: Capability,
    fetch_meta: MetaFetcher | None = None,
    hooks: PipelineHooks | None = None,
    now: datetime | None = None,
) -> UpdateResult:
    hooks = hooks or PipelineHooks()
    check_capability(resolver)

    domains = settings.load_domains()
    output_dir = settings.output_dir
    logger.info("Resolving %d domains", len(domains))

    records = await resolve_all(
        domains,
        resolver,
        max_attempts=settings.lookup_attempts,
        timeout=settings.resolve_timeout_seconds,
    )
    if hooks.resolved:
        hooks.resolved(records)

    written: list[Path] = []

    def write(filename: str, content: str) -> None:
        path = export_text(content=content, output_path=output_dir / filename)
        written.append(path)
        if hooks.written:
            hooks.written(path)

    rendered = render_domain_files(records, settings=settings, now=now)
    for filename, content in rendered.documents.items():
        write(filename, content)

    result = UpdateResult(records=records, update_time=rendered.update_time, written=written)

    if settings.skip_meta:
        logger.info("Skipping GitHub meta address lists")
        return result
    if fetch_meta is None:
        raise ValueError("fetch_meta is required unless skip_meta is set")

    lists = await generate_address_lists(fetch_meta, settings.meta_list_name)
    write(settings.meta_ipv4_filename, lists.ipv4)
    write(settings.meta_ipv6_filename, lists.ipv6)
    result.meta_lists = lists
    return result
