"""tenable-api CLI - Command Line Interface.

A small Typer CLI exercising the Tenable.io asset endpoints.
"""

import asyncio
import sys
from typing import TYPE_CHECKING, Annotated, TypeVar

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from tenable_api.config import Settings
    from tenable_api.endpoints.base import Endpoint

from tenable_api import __version__
from tenable_api.backoff import async_sleep, sleep
from tenable_api.client import Tenable
from tenable_api.config import get_settings
from tenable_api.dispatch import (
    request,
    request_async,
    request_with_backoff,
    request_with_backoff_async,
)
from tenable_api.errors import TenableError
from tenable_api.models import Acr, AcrAsset, AcrUpdateReason, Assets, AssetsMoveDef
from tenable_api.utils.http_client import create_async_transport, create_transport

OutputT = TypeVar("OutputT")

app = typer.Typer(
    name="tenable-api",
    help="tenable-api - Tenable.io asset management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]tenable-api[/] version [green]{__version__}[/]")
        raise typer.Exit()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity."""
    logger.remove()
    logger.enable("tenable_api")
    level = "DEBUG" if verbose else "INFO"
    log_format = (
        "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
    )
    logger.add(sys.stderr, level=level, format=log_format)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """tenable-api - Query and manage Tenable.io assets."""
    setup_logging(verbose)


def _get_client(settings: "Settings") -> Tenable:
    """Create a client, exiting when no credentials are configured."""
    if not settings.tenable.has_credentials:
        console.print(
            "[red]✗[/] Tenable API keys not configured. "
            "Set TENABLE_ACCESS_KEY and TENABLE_SECRET_KEY."
        )
        raise typer.Exit(1)
    return Tenable.from_settings(settings)


def _send(endpoint: "Endpoint[OutputT]", settings: "Settings", backoff: bool = True) -> OutputT:
    """Send a request over a blocking httpx transport."""
    try:
        with create_transport(timeout=settings.tenable.timeout) as transport:
            if backoff:
                return request_with_backoff(endpoint, transport, sleep)
            return request(endpoint, transport)
    except TenableError as e:
        console.print(f"[red]✗[/] {e}")
        raise typer.Exit(1) from e


async def _send_async(
    endpoint: "Endpoint[OutputT]",
    settings: "Settings",
    backoff: bool = True,
) -> OutputT:
    """Send a request over an async httpx transport."""
    try:
        async with create_async_transport(timeout=settings.tenable.timeout) as transport:
            if backoff:
                return await request_with_backoff_async(endpoint, transport, async_sleep)
            return await request_async(endpoint, transport)
    except TenableError as e:
        console.print(f"[red]✗[/] {e}")
        raise typer.Exit(1) from e


def _print_assets(result: Assets) -> None:
    assets = result.assets or []
    if not assets:
        console.print("[yellow]No assets found[/]")
        return

    table = Table(title=f"Assets ({result.total or len(assets):,} total)", border_style="blue")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("FQDN", style="green")
    table.add_column("IPv4", style="magenta")
    table.add_column("Operating System", max_width=40)
    table.add_column("ACR", style="yellow")
    table.add_column("Last Seen")

    for asset in assets:
        table.add_row(
            asset.id or "",
            ", ".join(asset.fqdn or []),
            ", ".join(asset.ipv4 or []),
            ", ".join(asset.operating_system or []),
            str(asset.acr_score) if asset.acr_score is not None else "N/A",
            asset.last_seen or "",
        )

    console.print(table)


@app.command()
def assets(
    use_async: Annotated[
        bool,
        typer.Option(
            "--async",
            help="Send the request with the async client.",
        ),
    ] = False,
    backoff: Annotated[
        bool,
        typer.Option(
            "--backoff/--no-backoff",
            help="Back off and retry while the rate limit is reached.",
        ),
    ] = True,
) -> None:
    """List up to 5,000 assets."""
    settings = get_settings()
    tenable = _get_client(settings)
    endpoint = tenable.assets()

    if use_async:
        result = asyncio.run(_send_async(endpoint, settings, backoff))
    else:
        result = _send(endpoint, settings, backoff)

    _print_assets(result)


@app.command()
def asset(
    asset_uuid: Annotated[
        str,
        typer.Argument(help="UUID of the asset"),
    ],
) -> None:
    """Show details of a single asset."""
    settings = get_settings()
    tenable = _get_client(settings)

    result = _send(tenable.asset_by_uuid(asset_uuid), settings)
    if result is None:
        console.print(f"[yellow]Asset '{asset_uuid}' not found[/]")
        raise typer.Exit(1)

    table = Table(title=f"Asset {asset_uuid}", border_style="blue")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    for field, value in result.model_dump(exclude_none=True).items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        table.add_row(field, str(value))

    console.print(table)


@app.command(name="acr-update")
def acr_update(
    score: Annotated[
        int,
        typer.Argument(min=1, max=10, help="ACR to assign, from 1 to 10"),
    ],
    asset_ids: Annotated[
        list[str],
        typer.Option("--asset-id", "-a", help="UUID of an asset to update (repeatable)."),
    ],
    reasons: Annotated[
        list[AcrUpdateReason] | None,
        typer.Option("--reason", "-r", help="Reason for the update (repeatable)."),
    ] = None,
    note: Annotated[
        str | None,
        typer.Option("--note", "-n", help="Note clarifying the update."),
    ] = None,
) -> None:
    """Overwrite the Asset Criticality Rating of assets."""
    settings = get_settings()
    tenable = _get_client(settings)

    acr = Acr(
        acr_score=score,
        reason=reasons or None,
        note=note,
        asset=[AcrAsset(id=asset_id) for asset_id in asset_ids],
    )
    _send(tenable.acr_update([acr]), settings)
    console.print(f"[green]✓[/] ACR of {len(asset_ids)} asset(s) set to {score}")


@app.command()
def move(
    source: Annotated[str, typer.Argument(help="UUID of the current network")],
    destination: Annotated[str, typer.Argument(help="UUID of the target network")],
    targets: Annotated[
        str,
        typer.Argument(help="IPv4 addresses to move: list, range or CIDR"),
    ],
) -> None:
    """Move assets from one network to another."""
    settings = get_settings()
    tenable = _get_client(settings)

    definition = AssetsMoveDef(source=source, destination=destination, targets=targets)
    result = _send(tenable.assets_move(definition), settings)
    if result is None:
        console.print("[yellow]Networks not found[/]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/] Move job created for {result.asset_count or 0} asset(s)")


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = get_settings()

    table = Table(title="tenable-api Configuration", border_style="blue")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Log Level", settings.log_level)
    table.add_row("", "")
    table.add_row("[bold]Tenable[/]", "")
    table.add_row("  Base URL", settings.tenable.base_url)
    table.add_row(
        "  Access Key",
        "Set" if settings.tenable.access_key.get_secret_value() else "Not set",
    )
    table.add_row(
        "  Secret Key",
        "Set" if settings.tenable.secret_key.get_secret_value() else "Not set",
    )
    table.add_row("  Timeout", f"{settings.tenable.timeout}s")

    console.print(Panel.fit("[bold blue]tenable-api[/]", border_style="blue"))
    console.print(table)


if __name__ == "__main__":
    app()
