"""Componentes de UI para CLI (Rich).

Separan los detalles visuales de los comandos. `ConsoleImageView` y
`ConsoleStatusLabel` implementan los Protocols de `core.interfaces.display`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.image_store import FileImageSurface, SavedImage
from core.services.controller import STATUS_SUCCESS


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("meow-loader", style="bold cyan")
    subtitle = Text("TheCatAPI • random cat", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _human_size(size_bytes: int) -> str:
    size = float(size_bytes)
    for unit in ("B", "KB", "MB"):
        if size < 1024 or unit == "MB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size_bytes} B"


def build_image_panel(saved: SavedImage) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim", justify="right")
    table.add_column(style="white")
    table.add_row("File", str(saved.path))
    table.add_row("Format", saved.image_format.upper())
    table.add_row("Size", _human_size(saved.size_bytes))
    return Panel(Align.center(table), title="Image", border_style="magenta")


def build_status_panel(text: str) -> Panel:
    style = "bold green" if text == STATUS_SUCCESS else "bold red"
    body = Align.center(Text(text, style=style))
    return Panel(body, border_style=style.split()[-1], width=45)


class ConsoleImageView:
    """Guarda la imagen en disco y muestra un resumen en la consola."""

    def __init__(self, console: Console, surface: FileImageSurface) -> None:
        self._console = console
        self._surface = surface

    def show_image(self, data: bytes) -> None:
        self._surface.show_image(data)
        if self._surface.last_saved is not None:
            self._console.print(Align.center(build_image_panel(self._surface.last_saved)))


class ConsoleStatusLabel:
    def __init__(self, console: Console) -> None:
        self._console = console
        self.text: str | None = None

    def set_text(self, text: str) -> None:
        self.text = text
        self._console.print(Align.center(build_status_panel(text)))
