"""Controlador de la vista: ejecuta el pipeline y actualiza las superficies.

Mantiene una única tarea viva. Al cancelarla (o al cerrar el controlador)
se aborta la petición HTTP en curso y cualquier resultado tardío se descarta
sin tocar la vista.
"""

from __future__ import annotations

import asyncio
import logging

from core.domain.errors import BadPayload, BadStatus, NetworkError, PipelineError
from core.domain.models import FetchFailure, FetchOutcome, ImageBytes
from core.interfaces.display import ImageSurface, StatusLabel
from core.services.cat_pipeline import CatPipeline

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "Success"

_ERROR_MESSAGES: dict[type[PipelineError], str] = {
    BadStatus: "Bad response",
    BadPayload: "Bad response data",
    NetworkError: "Network error",
}


def status_text(outcome: FetchOutcome) -> str:
    """Texto fijo del label para un resultado; nunca incluye detalles del error."""

    if isinstance(outcome, ImageBytes):
        return STATUS_SUCCESS
    for error_type, message in _ERROR_MESSAGES.items():
        if isinstance(outcome.error, error_type):
            return message
    raise TypeError(f"unknown pipeline error: {type(outcome.error).__name__}")


class FetchController:
    def __init__(
        self,
        pipeline: CatPipeline,
        *,
        image_surface: ImageSurface,
        status_label: StatusLabel,
    ) -> None:
        self._pipeline = pipeline
        self._image_surface = image_surface
        self._status_label = status_label
        self._task: asyncio.Task[FetchOutcome] | None = None
        self._closed = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task[FetchOutcome]:
        """Lanza un ciclo de descarga. Requiere un event loop en marcha."""

        if self._closed:
            raise RuntimeError("controller is closed")
        if self.running:
            raise RuntimeError("a fetch is already running")
        self._task = asyncio.get_running_loop().create_task(self._cycle())
        return self._task

    async def _cycle(self) -> FetchOutcome:
        outcome = await self._pipeline.run()
        self._deliver(outcome)
        return outcome

    def _deliver(self, outcome: FetchOutcome) -> None:
        if self._closed:
            logger.debug("controller closed, dropping %s", type(outcome).__name__)
            return

        if isinstance(outcome, ImageBytes):
            logger.info("image loaded (%d bytes)", len(outcome.data))
            self._image_surface.show_image(outcome.data)
        elif isinstance(outcome, FetchFailure):
            logger.warning("fetch failed: %s", outcome.error)

        self._status_label.set_text(status_text(outcome))

    def cancel(self) -> None:
        task = self._task
        if task is not None and not task.done():
            logger.debug("cancelling in-flight fetch")
            task.cancel()

    async def wait(self) -> FetchOutcome | None:
        """Espera la tarea actual; `None` si fue cancelada o nunca se lanzó."""

        task = self._task
        if task is None:
            return None
        await asyncio.wait({task})
        if task.cancelled():
            return None
        return task.result()

    async def close(self) -> None:
        """Libera la suscripción: cancela, descarta resultados y cierra el pipeline."""

        self._closed = True
        task = self._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})
        await self._pipeline.aclose()
