"""Cliente de TheCatAPI: resolver de URL y descarga de la imagen.

Ambas funciones reciben el `httpx.AsyncClient` del pipeline; no crean ni
cierran clientes. Los fallos se traducen a las categorías de
`core.domain.errors` y no se reintentan.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from core.domain.errors import BadPayload, BadStatus, NetworkError
from core.domain.models import SearchResults

logger = logging.getLogger(__name__)

API_URL = "https://api.thecatapi.com/v1/images/search"


async def _get(client: httpx.AsyncClient, url: str | httpx.URL) -> httpx.Response:
    """GET con la clasificación común de transporte/status."""

    logger.debug("GET %s", url)
    try:
        response = await client.get(url)
    except httpx.RequestError as exc:
        logger.debug("GET %s failed: %r", url, exc)
        raise NetworkError(exc) from exc

    logger.debug("GET %s -> %s (%d bytes)", url, response.status_code, len(response.content))
    if response.status_code != 200:
        raise BadStatus(status_code=response.status_code, url=str(response.request.url))
    return response


def parse_image_url(raw: str) -> httpx.URL:
    """Convierte el campo `url` en una URL absoluta http(s)."""

    try:
        url = httpx.URL(raw.strip())
        # el host IDNA se decodifica de forma perezosa
        host = url.host
    except (httpx.InvalidURL, UnicodeError, ValueError) as exc:
        raise BadPayload(f"invalid image url {raw!r}", cause=exc) from exc

    if url.scheme not in ("http", "https") or not host:
        raise BadPayload(f"invalid image url {raw!r}")
    if any(ch.isspace() or ch in "%/\\@" for ch in host):
        raise BadPayload(f"invalid host in image url {raw!r}")
    return url


async def resolve_image_url(client: httpx.AsyncClient) -> httpx.URL:
    """Pide una imagen aleatoria y devuelve la URL del primer resultado."""

    response = await _get(client, API_URL)

    try:
        results = SearchResults.validate_json(response.content)
    except ValidationError as exc:
        raise BadPayload("search response does not match [{url: str}]", cause=exc) from exc

    if not results:
        raise BadPayload("search response is an empty array")

    return parse_image_url(results[0].url)


async def fetch_image_data(client: httpx.AsyncClient, url: httpx.URL) -> bytes:
    """Descarga la imagen; el cuerpo se devuelve tal cual, sin validar content-type."""

    response = await _get(client, url)
    return response.content
