"""Decodificación estricta del payload.

Por qué Pydantic aquí:
- `model_validate_json` parsea y valida en un solo paso.
- Un JSON que no es objeto, o sin `title` string, es error: no hay parseo parcial.
"""

from __future__ import annotations

from pydantic import ValidationError

from core.domain.errors import MalformedPayloadError
from core.domain.models import ApiResponse


class ResponseDecoder:
    """Convierte bytes crudos en `ApiResponse`. Síncrono y sin efectos."""

    def decode(self, payload: bytes) -> ApiResponse:
        try:
            return ApiResponse.model_validate_json(payload)
        except ValidationError as exc:
            reasons = "; ".join(f"{'.'.join(map(str, e['loc'])) or '<root>'}: {e['msg']}" for e in exc.errors())
            raise MalformedPayloadError(f"malformed payload ({reasons})") from exc
