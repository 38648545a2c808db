"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) para que la CLI y los
adaptadores lean la misma configuración.

El endpoint de TheCatAPI no es configurable: vive como constante en
`adapters.cat_api`.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="MEOW_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout por request (segundos). Igual al default de httpx.",
    )
    user_agent: str = Field(
        default="meow-loader/0.1",
        min_length=1,
        description="User-Agent para ambas peticiones.",
    )
    output_dir: Path = Field(
        default=Path("downloads"),
        description="Directorio donde se guardan las imágenes descargadas.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (CRITICAL, ERROR, WARNING, INFO, DEBUG).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
