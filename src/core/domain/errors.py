"""Categorías de fallo del pipeline.

Tres categorías, sin más detalle hacia el usuario:

- `NetworkError`: fallo de transporte (DNS, timeout, conexión reseteada).
- `BadStatus`: hubo respuesta HTTP pero con status distinto de 200.
- `BadPayload`: status 200 pero el cuerpo no tiene la forma esperada.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base de todos los errores del pipeline."""


class NetworkError(PipelineError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"network error: {cause!r}")
        self.cause = cause


class BadStatus(PipelineError):
    def __init__(self, *, status_code: int, url: str) -> None:
        super().__init__(f"unexpected status {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class BadPayload(PipelineError):
    def __init__(self, reason: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"bad payload: {reason}")
        self.reason = reason
        self.cause = cause
