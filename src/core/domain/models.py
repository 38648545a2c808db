"""Modelos del dominio (Pydantic v2 + dataclasses).

Describen *qué* devuelve la API y el pipeline, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.config import ConfigDict

from core.domain.errors import PipelineError


class SearchResult(BaseModel):
    """Un elemento de la respuesta de `/v1/images/search`.

    Solo nos interesa `url`; el resto de campos (id, width, height, breeds...)
    se ignora.
    """

    model_config = ConfigDict(extra="ignore")

    url: str = Field(
        ...,
        strict=True,
        description="URL de la imagen tal como la devuelve la API.",
    )


SearchResults = TypeAdapter(list[SearchResult])


@dataclass(frozen=True)
class ImageBytes:
    """Resultado exitoso: el cuerpo crudo de la segunda respuesta."""

    data: bytes


@dataclass(frozen=True)
class FetchFailure:
    """Resultado fallido: la primera categoría de error encontrada."""

    error: PipelineError


FetchOutcome = Union[ImageBytes, FetchFailure]
