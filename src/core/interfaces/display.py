"""Contratos de las superficies de presentación.

El controlador solo conoce estos Protocols; la CLI (Rich + fichero) y los
tests aportan implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ImageSurface(Protocol):
    """Región donde se muestra la imagen descargada."""

    def show_image(self, data: bytes) -> None:
        """Muestra los bytes crudos como imagen."""

        ...


@runtime_checkable
class StatusLabel(Protocol):
    """Región de texto de estado."""

    def set_text(self, text: str) -> None:
        ...
