"""vodgate CLI application using Typer.

This module provides command-line utilities for the gateway: running
the API server, inspecting the resolved source catalogue and running a
fan-out search from the terminal.
"""

import asyncio

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from vodgate.application.queries import ResolveSourcesQuery, SourceRegistry
from vodgate.application.services import FanOutSearchService
from vodgate.domain.search import SearchChunk, SearchDone
from vodgate.domain.shared import MissingParameterError
from vodgate.infrastructure.http import UpstreamClient
from vodgate_config.settings import get_settings

app = typer.Typer(
    name="vodgate",
    help="vodgate - VOD aggregation gateway CLI",
    no_args_is_help=True,
)
console = Console()


@app.command("serve")
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default from settings)"),
    port: int = typer.Option(None, "--port", help="Bind port (default from settings)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the gateway API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "vodgate.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("sites")
def sites() -> None:
    """Show the resolved source catalogue."""
    registry = asyncio.run(_resolve_registry())

    table = Table(title=f"Sources ({registry.origin.value})")
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("API", style="dim")
    table.add_column("Active", justify="center")
    for source in registry.sources:
        table.add_row(
            source.key,
            source.name,
            source.endpoint,
            "[green]yes[/green]" if source.active else "[red]no[/red]",
        )
    console.print(table)


@app.command("search")
def search(
    keyword: str = typer.Argument(..., help="Search keyword"),
    timeout: float = typer.Option(
        None, "--timeout", help="Per-source timeout in seconds (default from settings)"
    ),
) -> None:
    """Search every active source and print results as they arrive."""
    try:
        asyncio.run(_run_search(keyword, timeout))
    except MissingParameterError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from None


async def _resolve_registry() -> SourceRegistry:
    settings = get_settings()
    upstream = UpstreamClient(timeout=settings.upstream_timeout_seconds)
    try:
        return await ResolveSourcesQuery(settings=settings, upstream=upstream).execute()
    finally:
        await upstream.close()


async def _run_search(keyword: str, timeout: float | None) -> None:
    settings = get_settings()
    upstream = UpstreamClient(timeout=settings.upstream_timeout_seconds)
    service = FanOutSearchService(
        upstream=upstream,
        source_timeout=timeout or settings.search_timeout_seconds,
    )
    try:
        registry = await ResolveSourcesQuery(settings=settings, upstream=upstream).execute()
        total = 0
        async for event in service.search(keyword, registry.active()):
            if isinstance(event, SearchChunk):
                total += len(event)
                _print_chunk(event)
            elif isinstance(event, SearchDone):
                console.print(
                    f"\n[bold]{total}[/bold] result(s) from "
                    f"{event.sources_succeeded}/{event.sources_total} source(s)"
                )
    finally:
        await upstream.close()


def _print_chunk(chunk: SearchChunk) -> None:
    console.print(f"\n[bold cyan]{chunk.source_key}[/bold cyan] ({len(chunk)})")
    for item in chunk.items:
        name = item.get("vod_name") or "?"
        remarks = item.get("vod_remarks") or ""
        console.print(f"  {item.get('vod_id', '')}  {name}  [dim]{remarks}[/dim]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
