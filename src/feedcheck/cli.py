"""Typer-based CLI for exchange feed coverage checks."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import ExitCode, FeedCheckError

if TYPE_CHECKING:
    from .runtime import PassResult
    from .settings import Settings


# Import with local function to avoid circular imports
def _load_settings(config_path: Optional[Path] = None):
    from .config import load_settings
    return load_settings(config_path)

def _create_adapters_from_settings(settings, only=None):
    from .exchanges.init import create_adapters_from_settings
    return create_adapters_from_settings(settings, only)

def _configure_logging(log_dir: Path | None = None, verbose: bool = False):
    from .logging import configure_logging
    return configure_logging(log_dir, verbose=verbose)

def _run_checks(adapters, settings: "Settings") -> list["PassResult"]:
    from .runtime import run_checks
    return asyncio.run(
        run_checks(
            adapters,
            feeds_url=settings.feeds_url,
            quotes=settings.quotes,
            timeout=settings.timeout,
        )
    )

app = typer.Typer(help="Exchange feed coverage checker")
console = Console(stderr=True)
logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


def run_cli(argv: list[str] | None = None) -> None:
    """Run CLI with optional argv parameter."""
    app(argv)


def _apply_overrides(
    settings: "Settings",
    quotes: Optional[List[str]],
    feeds_url: Optional[str],
    timeout: Optional[float],
) -> "Settings":
    data = settings.model_dump()
    if quotes:
        data["quotes"] = quotes
    if feeds_url:
        data["feeds_url"] = feeds_url
    if timeout is not None:
        data["timeout"] = timeout
    return type(settings).model_validate(data)


def _print_summary(results: list["PassResult"]) -> None:
    table = Table(title="Exchange coverage")
    table.add_column("Exchange", style="cyan")
    table.add_column("Status")
    table.add_column("Pairs", justify="right")
    table.add_column("Detail")

    for result in results:
        status = "[green]ok[/green]" if result.ok else "[red]failed[/red]"
        detail = escape(result.error.condition) if result.error else ""
        table.add_row(result.exchange, status, str(len(result.matches)), detail)

    console.print(table)


@app.command()
def check(
    exchange: Optional[List[str]] = typer.Option(
        None, "--exchange", "-e", help="Exchange to check (repeatable, default: all enabled)"
    ),
    quote: Optional[List[str]] = typer.Option(
        None, "--quote", "-q", help="Accepted quote currency (repeatable)"
    ),
    feeds_url: Optional[str] = typer.Option(None, help="Feed catalog URL"),
    timeout: Optional[float] = typer.Option(None, help="Request timeout in seconds"),
    output_format: OutputFormat = typer.Option(OutputFormat.text, "--format", help="Report format"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
    log_dir: Optional[Path] = typer.Option(None, help="Directory for rotating log files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Report which feed pairs each exchange can trade."""
    _configure_logging(log_dir, verbose)

    try:
        settings = _apply_overrides(_load_settings(config), quote, feeds_url, timeout)
        adapters = _create_adapters_from_settings(settings, exchange)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.MIXED_FAILURES)

    if not adapters:
        console.print("[red]Error:[/red] no exchanges enabled")
        raise typer.Exit(ExitCode.MIXED_FAILURES)

    try:
        results = _run_checks(adapters, settings)
    except FeedCheckError as e:
        logger.error("feed catalog unavailable: %s", e)
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(e.exit_code)

    from .report import render_failure, render_json, render_text
    from .runtime import aggregate_exit_code

    if output_format is OutputFormat.json:
        typer.echo(render_json(results))
    else:
        text = render_text(results)
        if text:
            typer.echo(text)

    for result in results:
        failure = render_failure(result)
        if failure:
            console.print(escape(failure), style="red")

    _print_summary(results)
    raise typer.Exit(aggregate_exit_code(results))


@app.command()
def exchanges(
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """List supported exchanges and their symbol conventions."""
    from .exchanges.factory import EXCHANGE_ADAPTERS

    try:
        settings = _load_settings(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.MIXED_FAILURES)

    table = Table(title="Supported exchanges")
    table.add_column("Name", style="cyan")
    table.add_column("Display")
    table.add_column("Endpoint", overflow="fold")
    table.add_column("Separator", justify="center")
    table.add_column("Casing")
    table.add_column("Enabled")

    for name, adapter_class in EXCHANGE_ADAPTERS.items():
        exchange_config = settings.exchanges.get(name)
        enabled = exchange_config.enabled if exchange_config else True
        convention = adapter_class.default_convention
        table.add_row(
            name,
            adapter_class.display_name,
            (exchange_config.url if exchange_config and exchange_config.url else adapter_class.default_url),
            repr(convention.separator),
            convention.casing,
            "[green]yes[/green]" if enabled else "[red]no[/red]",
        )

    # The listing is this command's result, so it goes to stdout at the current width.
    Console().print(table)
