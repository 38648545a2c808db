"""Pipeline de descarga: resolver de URL seguido de la descarga de bytes.

El pipeline es dueño explícito de su `httpx.AsyncClient`: lo crea al abrirse
(o recibe uno inyectado) y lo reutiliza para las dos peticiones. Un cliente
inyectado no se cierra aquí; su ciclo de vida pertenece a quien lo creó.
"""

from __future__ import annotations

import httpx

from adapters.cat_api import fetch_image_data, resolve_image_url
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import PipelineError
from core.domain.models import FetchFailure, FetchOutcome, ImageBytes


class CatPipeline:
    """Composición secuencial Resolver -> Fetcher."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> CatPipeline:
        self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def closed(self) -> bool:
        return self._client is None or self._client.is_closed

    def open(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client(self._settings)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def load(self) -> bytes:
        """Devuelve los bytes de la imagen o lanza el primer `PipelineError`."""

        client = self._client
        if client is None or client.is_closed:
            raise RuntimeError("pipeline is not open")
        url = await resolve_image_url(client)
        return await fetch_image_data(client, url)

    async def run(self) -> FetchOutcome:
        try:
            data = await self.load()
        except PipelineError as exc:
            return FetchFailure(exc)
        return ImageBytes(data)
