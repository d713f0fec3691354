"""
Metrika Logs CLI.

Usage:
    metrika-logs counters
    metrika-logs requests --counter 123
    metrika-logs create --date1 2024-01-01 --date2 2024-01-31
    metrika-logs download 987654 --dest ./exports
    metrika-logs export --date1 2024-01-01 --date2 2024-01-31 --dest ./exports
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, Callable, TypeVar

import click
from rich.console import Console
from rich.table import Table

from metrika_logs import __version__
from metrika_logs.api.client import AsyncMetrikaAPI
from metrika_logs.api.fields import VISITS_FIELDS
from metrika_logs.config import get_settings
from metrika_logs.convert import tsv_to_csv
from metrika_logs.exceptions import MetrikaError
from metrika_logs.logging import configure_logging
from metrika_logs.models.log_request import LogRequest, LogSource
from metrika_logs.services.export import ExportResult

console = Console()
err_console = Console(stderr=True)

T = TypeVar("T")


def get_token(ctx: click.Context) -> str:
    """Get token from context or settings."""
    token = ctx.obj.get("token") if ctx.obj else None
    if not token:
        token = get_settings().token
    if not token:
        err_console.print("[red]Error:[/red] Set METRIKA_TOKEN environment variable")
        raise SystemExit(1)
    return token


def _make_api(ctx: click.Context) -> AsyncMetrikaAPI:
    """Build the async API client from CLI options."""
    return AsyncMetrikaAPI(
        token=get_token(ctx),
        counter_id=ctx.obj.get("counter_id"),
    )


def _run(ctx: click.Context, fn: Callable[[AsyncMetrikaAPI], Awaitable[T]]) -> T:
    """Run ``fn`` against a fresh client, turning SDK errors into exit code 1."""
    api = _make_api(ctx)

    async def runner() -> T:
        async with api:
            return await fn(api)

    try:
        return asyncio.run(runner())
    except MetrikaError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)
    except (OSError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)


def _print_status(log_request: LogRequest) -> None:
    err_console.print(
        f"[dim]log request {log_request.request_id}:[/dim] {log_request.status}"
    )


def _convert_files(files: list[Path], convert: bool) -> list[Path]:
    """Return the downloaded files, followed by their converted copies if requested."""
    if not convert:
        return files
    return files + [tsv_to_csv(path) for path in files]


def _print_files(files: list[Path]) -> None:
    for path in files:
        console.print(str(path))


@click.group()
@click.option("--token", envvar="METRIKA_TOKEN", help="Metrika OAuth token")
@click.option("--counter", "-c", "counter_id", type=int, envvar="METRIKA_COUNTER_ID", help="Counter ID")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="SDK log level",
)
@click.version_option(version=__version__, prog_name="metrika-logs")
@click.pass_context
def main(
    ctx: click.Context,
    token: str | None,
    counter_id: int | None,
    log_level: str,
) -> None:
    """Metrika Logs SDK command-line interface."""
    ctx.ensure_object(dict)
    ctx.obj["token"] = token
    ctx.obj["counter_id"] = counter_id
    configure_logging(level=log_level)


# =============================================================================
# Reference data
# =============================================================================


@main.command()
@click.pass_context
def counters(ctx: click.Context) -> None:
    """List counters available to the token."""
    items = _run(ctx, lambda api: api.counters.list())
    if not items:
        console.print("[yellow]No counters[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", width=12)
    table.add_column("Name", width=50)
    for counter in items:
        table.add_row(str(counter.id), counter.name)
    console.print(table)


# =============================================================================
# Log requests
# =============================================================================


@main.command("requests")
@click.pass_context
def list_requests(ctx: click.Context) -> None:
    """List log requests of the counter."""
    items = _run(ctx, lambda api: api.logs.list())
    if not items:
        console.print("[yellow]No log requests[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Source")
    table.add_column("Period")
    table.add_column("Status")
    table.add_column("Parts", justify="right")
    table.add_column("Size", justify="right")
    for item in items:
        table.add_row(
            str(item.request_id),
            item.source,
            f"{item.date1}..{item.date2}",
            item.status,
            str(len(item.parts)),
            f"{item.size:,}",
        )
    console.print(table)


@main.command()
@click.argument("request_id", type=int)
@click.pass_context
def status(ctx: click.Context, request_id: int) -> None:
    """Show status and parts of a log request."""
    item = _run(ctx, lambda api: api.logs.get(request_id))
    console.print(f"[dim]Request:[/dim] {item.request_id}")
    console.print(f"[dim]Status:[/dim] {item.status}")
    console.print(f"[dim]Size:[/dim] {item.size:,} bytes")
    for part in item.parts:
        console.print(f"  part {part.part_number}: {part.size:,} bytes")


@main.command()
@click.option("--date1", required=True, help="First day (YYYY-MM-DD)")
@click.option("--date2", required=True, help="Last day (YYYY-MM-DD)")
@click.option("--fields", default=VISITS_FIELDS, show_default="all visit fields", help="Comma-separated fields")
@click.option(
    "--source",
    type=click.Choice([s.value for s in LogSource]),
    default=LogSource.VISITS.value,
    show_default=True,
)
@click.option("--attribution", default=None, help="Attribution model")
@click.pass_context
def create(
    ctx: click.Context,
    date1: str,
    date2: str,
    fields: str,
    source: str,
    attribution: str | None,
) -> None:
    """Create a log request and print its ID."""
    item = _run(
        ctx,
        lambda api: api.logs.create(date1, date2, fields, source=source, attribution=attribution),
    )
    console.print(f"[green]Created[/green] log request {item.request_id} ({item.status})")


@main.command()
@click.argument("request_id", type=int)
@click.pass_context
def clean(ctx: click.Context, request_id: int) -> None:
    """Clean (delete) a log request."""
    item = _run(ctx, lambda api: api.logs.clean(request_id))
    console.print(f"log request {item.request_id}: {item.status}")


# =============================================================================
# Export workflow
# =============================================================================


@main.command()
@click.argument("request_id", type=int)
@click.option("--dest", "-d", type=click.Path(file_okay=False, path_type=Path), required=True)
@click.option("--parallel", "-p", type=click.IntRange(1, 16), default=None, help="Concurrent part downloads")
@click.option("--convert", is_flag=True, help="Also write '|'-delimited copies without quotes")
@click.pass_context
def download(
    ctx: click.Context,
    request_id: int,
    dest: Path,
    parallel: int | None,
    convert: bool,
) -> None:
    """Wait for a log request and download its parts."""

    async def run(api: AsyncMetrikaAPI) -> list[Path]:
        parts = await api.export.wait_ready(request_id, on_status=_print_status)
        files = await api.export.download_parts(request_id, parts, dest, max_parallel=parallel)
        return _convert_files(files, convert)

    _print_files(_run(ctx, run))


@main.command()
@click.option("--date1", required=True, help="First day (YYYY-MM-DD)")
@click.option("--date2", required=True, help="Last day (YYYY-MM-DD)")
@click.option("--fields", default=VISITS_FIELDS, show_default="all visit fields", help="Comma-separated fields")
@click.option(
    "--source",
    type=click.Choice([s.value for s in LogSource]),
    default=LogSource.VISITS.value,
    show_default=True,
)
@click.option("--attribution", default=None, help="Attribution model")
@click.option("--dest", "-d", type=click.Path(file_okay=False, path_type=Path), required=True)
@click.option("--parallel", "-p", type=click.IntRange(1, 16), default=None, help="Concurrent part downloads")
@click.option("--convert", is_flag=True, help="Also write '|'-delimited copies without quotes")
@click.pass_context
def export(
    ctx: click.Context,
    date1: str,
    date2: str,
    fields: str,
    source: str,
    attribution: str | None,
    dest: Path,
    parallel: int | None,
    convert: bool,
) -> None:
    """Create a log request, wait for it and download every part."""

    async def run(api: AsyncMetrikaAPI) -> tuple[ExportResult, list[Path]]:
        result = await api.export.run(
            date1,
            date2,
            fields,
            dest,
            source=source,
            attribution=attribution,
            max_parallel=parallel,
        )
        return result, _convert_files(result.files, convert)

    result, files = _run(ctx, run)
    err_console.print(f"[green]Log request {result.request_id} exported[/green]")
    err_console.print(result.metrics.summary())
    _print_files(files)


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    main()
