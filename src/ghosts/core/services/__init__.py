"""Servicios del Core: resolución, renderers y orquestación de una ejecución."""

from ghosts.core.services.meta_ranges import collect_ranges, generate_address_lists, render_meta_lists
from ghosts.core.services.renderers import (
    HostsDocument,
    render_address_list,
    render_dns_static,
    render_hosts,
    render_mdns_hosts,
)
from ghosts.core.services.resolution import resolve, resolve_all, retry

__all__ = [
    "HostsDocument",
    "collect_ranges",
    "generate_address_lists",
    "render_address_list",
    "render_dns_static",
    "render_hosts",
    "render_mdns_hosts",
    "render_meta_lists",
    "resolve",
    "resolve_all",
    "retry",
]
