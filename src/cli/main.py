"""CLI principal (Typer).

`meow fetch` ejecuta un ciclo de descarga; `meow doctor` agrupa los
diagnósticos de entorno.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.image_store import FileImageSurface
from cli import doctor
from cli.ui_components import ConsoleImageView, ConsoleStatusLabel, print_banner
from core.config import AppSettings
from core.domain.models import FetchOutcome, ImageBytes
from core.services.cat_pipeline import CatPipeline
from core.services.controller import FetchController

app = typer.Typer(no_args_is_help=True, help="Fetch a random cat image from TheCatAPI.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

EXIT_FAILURE = 1
EXIT_CANCELLED = 130


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpcore es muy ruidoso en DEBUG
    logging.getLogger("httpcore").setLevel(max(logging.INFO, logging.getLevelName(level)))


async def _fetch_once(settings: AppSettings) -> FetchOutcome | None:
    image_view = ConsoleImageView(_console, FileImageSurface(settings.output_dir))
    label = ConsoleStatusLabel(_console)
    async with CatPipeline(settings) as pipeline:
        controller = FetchController(pipeline, image_surface=image_view, status_label=label)
        try:
            with _console.status("Fetching a cat..."):
                controller.start()
                outcome = await controller.wait()
        finally:
            await controller.close()
    return outcome


@app.command()
def fetch(
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the downloaded image (default: MEOW_OUTPUT_DIR or ./downloads).",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging of both requests."),
) -> None:
    """Fetch one random cat image and show the result."""

    settings = AppSettings()
    if output_dir is not None:
        settings = settings.model_copy(update={"output_dir": output_dir})
    configure_logging("DEBUG" if verbose else settings.log_level)

    if not no_banner:
        print_banner(_console)

    try:
        outcome = asyncio.run(_fetch_once(settings))
    except KeyboardInterrupt:
        _console.print("[yellow]Cancelled.[/yellow]")
        raise typer.Exit(code=EXIT_CANCELLED)

    if outcome is None:
        raise typer.Exit(code=EXIT_CANCELLED)
    if not isinstance(outcome, ImageBytes):
        raise typer.Exit(code=EXIT_FAILURE)


def run() -> None:
    app()
