"""Superficie de imagen basada en disco.

La terminal no puede pintar la imagen, así que "mostrarla" es guardarla en
`output_dir` con una extensión deducida de los magic bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\xff\xd8\xff", "jpg"),
    (b"\x89PNG\r\n\x1a\n", "png"),
    (b"GIF87a", "gif"),
    (b"GIF89a", "gif"),
)


def sniff_image_format(data: bytes) -> str:
    """Extensión según la cabecera del fichero (`bin` si no se reconoce)."""

    for signature, ext in _SIGNATURES:
        if data.startswith(signature):
            return ext
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "webp"
    return "bin"


@dataclass(frozen=True)
class SavedImage:
    path: Path
    size_bytes: int
    image_format: str


class FileImageSurface:
    """Implementa `ImageSurface` escribiendo cada imagen en un fichero nuevo."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir
        self.last_saved: SavedImage | None = None

    def _target_path(self, ext: str) -> Path:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        path = self._output_dir / f"cat-{stamp}.{ext}"
        counter = 1
        while path.exists():
            path = self._output_dir / f"cat-{stamp}-{counter}.{ext}"
            counter += 1
        return path

    def show_image(self, data: bytes) -> None:
        ext = sniff_image_format(data)
        path = self._target_path(ext)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        self.last_saved = SavedImage(path=path, size_bytes=len(data), image_format=ext)
