"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.cat_api import API_URL
from adapters.http_client import build_async_client
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.status_code == 200, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_output_dir(path: Path) -> tuple[bool, str]:
    """Check that images can be written into the output directory."""

    try:
        path.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(dir=path, prefix="_doctor_", delete=True):
            pass
        return True, str(path.resolve())
    except OSError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="meow-loader Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Log level", "OK", settings.log_level)

    ok_http, detail_http = asyncio.run(_check_http(API_URL, settings))
    table.add_row("TheCatAPI", "OK" if ok_http else "FAIL", detail_http)

    ok_dir, detail_dir = _check_output_dir(settings.output_dir)
    table.add_row("Output dir", "OK" if ok_dir else "FAIL", detail_dir)

    _console.print(table)

    if not ok_http:
        _console.print("\n[yellow]Note:[/yellow] `meow fetch` will report 'Network error' or 'Bad response'.")
    if not ok_dir:
        _console.print("\n[yellow]Note:[/yellow] set MEOW_OUTPUT_DIR to a writable directory.")
        raise typer.Exit(code=1)
