"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El logging también sale por la consola Rich (RichHandler).
"""

from __future__ import annotations

import logging
from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ghosts.core.domain.address import partition
from ghosts.core.domain.models import AddressFamily, DomainRecord


def configure_logging(console: Console, *, verbose: bool = False) -> None:
    """Un único handler Rich para todo el proceso."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=True)],
        force=True,
    )


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("ghosts", style="bold cyan")
    subtitle = Text("GitHub hosts • RouterOS address lists • DNS static", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_records_table(records: Sequence[DomainRecord]) -> Table:
    """Tabla resumen: una fila por dominio, en el orden de entrada."""

    table = Table(title="Resolved domains")
    table.add_column("Domain", style="cyan", no_wrap=True)
    table.add_column(AddressFamily.IPV4.label(), style="white", justify="right")
    table.add_column(AddressFamily.IPV6.label(), style="white", justify="right")
    table.add_column("First address", style="magenta")
    table.add_column("Status")

    for record in records:
        v4, v6 = partition(record.addresses)
        status = "[green]OK[/green]" if record.resolved else "[red]FAILED[/red]"
        table.add_row(record.domain, str(len(v4)), str(len(v6)), record.primary_address or "-", status)
    return table
