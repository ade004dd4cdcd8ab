"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `frozen=True` garantiza que locator y respuesta no se mutan tras crearse.

Nota:
- Estos modelos describen *qué* se pide y *qué* se obtiene, no *cómo*.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel, Field, StrictStr
from pydantic.config import ConfigDict

from core.domain.errors import DecodeError, FetchError
from core.domain.mode import SessionMode

__all__ = [
    "ApiResponse",
    "Failure",
    "RequestOutcome",
    "ResourceLocator",
    "SessionMode",
    "Success",
]


class ResourceLocator(BaseModel):
    """Identificador opaco de "qué pedir".

    - En modo live es una URL.
    - En modo fixture es un nombre lógico (no una ruta).
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(
        ...,
        min_length=1,
        description="URL (live) o nombre lógico de fixture (fixture).",
    )

    @classmethod
    def for_url(cls, url: str) -> "ResourceLocator":
        return cls(value=url)

    @classmethod
    def for_fixture(cls, name: str) -> "ResourceLocator":
        return cls(value=name)

    def __str__(self) -> str:
        return self.value


class ApiResponse(BaseModel):
    """Respuesta decodificada.

    Solo `title` forma parte del contrato; cualquier otro campo del JSON se
    ignora y no se conserva.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: StrictStr = Field(
        ...,
        description="Campo `title` del recurso JSON.",
    )


@dataclass(frozen=True)
class Success:
    response: ApiResponse

    @property
    def ok(self) -> bool:
        return True

    def title_or(self, default: str) -> str:
        return self.response.title


@dataclass(frozen=True)
class Failure:
    error: FetchError | DecodeError

    @property
    def ok(self) -> bool:
        return False

    def title_or(self, default: str) -> str:
        return default


RequestOutcome = Union[Success, Failure]
