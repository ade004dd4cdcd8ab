"""Errores del dominio.

Dos familias disjuntas que nunca se mezclan:
- `FetchError`: la sesión (live o fixture) no pudo entregar bytes.
- `DecodeError`: hubo bytes, pero no son una respuesta válida.

Cada subclase fija su `kind` para que los tests y el shell puedan distinguir
el motivo sin depender del mensaje.
"""

from __future__ import annotations

from enum import Enum


class FetchErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"
    UNREADABLE = "unreadable"


class DecodeErrorKind(str, Enum):
    MALFORMED = "malformed"


class FetchError(Exception):
    """Fallo de una `DataSession` al obtener el payload."""

    kind: FetchErrorKind

    def __init__(self, message: str, *, locator: str | None = None) -> None:
        super().__init__(message)
        self.locator = locator


class ResourceNotFoundError(FetchError):
    """No existe el recurso/fixture, o el locator no es válido."""

    kind = FetchErrorKind.NOT_FOUND


class TransportError(FetchError):
    """Fallo de red: conexión, timeout o respuesta no-2xx."""

    kind = FetchErrorKind.TRANSPORT_ERROR

    def __init__(
        self,
        message: str,
        *,
        locator: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, locator=locator)
        self.status_code = status_code


class ResourceUnreadableError(FetchError):
    """La fixture existe pero no se pudo leer (permisos, I/O)."""

    kind = FetchErrorKind.UNREADABLE


class DecodeError(Exception):
    """Fallo al convertir el payload en `ApiResponse`."""

    kind: DecodeErrorKind


class MalformedPayloadError(DecodeError):
    kind = DecodeErrorKind.MALFORMED
