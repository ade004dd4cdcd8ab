"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/fixtures) lean config de forma consistente.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import SessionMode

DEFAULT_ENDPOINT_URL = "https://jsonplaceholder.typicode.com/todos/1"
DEFAULT_FIXTURE_NAME = "FakeResponse"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="FAKENET_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="fakenet/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para la petición live.",
    )

    endpoint_url: str = Field(
        default=DEFAULT_ENDPOINT_URL,
        min_length=1,
        description="URL del endpoint JSON en modo live.",
    )
    fixture_name: str = Field(
        default=DEFAULT_FIXTURE_NAME,
        min_length=1,
        description="Nombre lógico de la fixture en modo fixture.",
    )
    fixtures_dir: Path | None = Field(
        default=None,
        description="Directorio alternativo de fixtures (por defecto, las incluidas en el paquete).",
    )

    default_mode: SessionMode = Field(
        default_factory=SessionMode.default,
        description="Modo usado por la CLI cuando no se indica --live/--fixture.",
    )

    verbose: bool = Field(
        default=False,
        description="Logs a nivel DEBUG.",
    )
    log_json: bool = Field(
        default=False,
        description="Logs como líneas JSON en stderr.",
    )
