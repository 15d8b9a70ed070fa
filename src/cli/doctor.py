"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Show the effective settings and check that the API host answers."""

    settings = AppSettings()

    table = Table(title="active-model Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Host", "OK", settings.host)
    table.add_row("Namespace", "OK", settings.namespace or "(none)")
    table.add_row("Invalid statuses", "OK", ", ".join(str(s) for s in settings.invalid_statuses))
    if settings.irregular_plurals:
        pairs = ", ".join(f"{s}->{p}" for s, p in settings.irregular_plurals.items())
        table.add_row("Irregular plurals", "OK", pairs)
    else:
        table.add_row("Irregular plurals", "DEFAULT", "Rails defaults only")

    ok_http, detail_http = asyncio.run(_check_http(settings.host, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
    if not ok_http:
        raise typer.Exit(code=1)

