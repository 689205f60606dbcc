"""Entry point de la CLI: `ghosts`.

Un solo comando sin argumentos obligatorios: resuelve, escribe todos los
ficheros y sale con código 1 ante cualquier fallo no recuperable.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ghosts.adapters.dns_resolver import SystemResolver
from ghosts.adapters.github_meta import github_meta_fetcher
from ghosts.cli.ui_components import build_records_table, configure_logging, print_banner
from ghosts.core.config import AppSettings
from ghosts.core.domain.models import DomainRecord
from ghosts.core.interfaces.capabilities import MetaFetcher, NameResolver
from ghosts.core.services.update_pipeline import PipelineHooks, run_update

app = typer.Typer(add_completion=False, help="Resolve GitHub domains and regenerate hosts/RouterOS files.")

logger = logging.getLogger(__name__)

_console = Console(stderr=True)


def build_resolver(settings: AppSettings) -> NameResolver:
    return SystemResolver(lifetime=settings.dns_lifetime_seconds)


def build_meta_fetcher(settings: AppSettings) -> MetaFetcher:
    return github_meta_fetcher(settings)


@app.command()
def update(
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the generated files (default: GHOSTS_OUTPUT_DIR or cwd).",
    ),
    skip_meta: bool = typer.Option(False, "--skip-meta", help="Do not fetch GitHub meta ranges."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No banner or summary table."),
) -> None:
    """Resolve every configured domain and write all output files."""

    configure_logging(_console, verbose=verbose)
    if not quiet:
        print_banner(_console)

    def show_records(records: list[DomainRecord]) -> None:
        if not quiet:
            _console.print(build_records_table(records))

    try:
        settings = AppSettings()
        overrides: dict[str, object] = {}
        if output_dir is not None:
            overrides["output_dir"] = output_dir
        if skip_meta:
            overrides["skip_meta"] = True
        if overrides:
            settings = settings.model_copy(update=overrides)

        logger.info("Starting hosts file update process...")
        result = asyncio.run(
            run_update(
                settings=settings,
                resolver=build_resolver(settings),
                fetch_meta=None if settings.skip_meta else build_meta_fetcher(settings),
                hooks=PipelineHooks(resolved=show_records),
            )
        )
    except Exception:
        logger.exception("Failed to update hosts file")
        raise typer.Exit(code=1)

    if result.failed_domains:
        logger.warning("%d domain(s) failed to resolve: %s", len(result.failed_domains), ", ".join(result.failed_domains))
    logger.info("Hosts file update completed successfully (%s)", result.update_time)


def run() -> None:
    app()
