"""Almacén de fixtures locales.

Este módulo vive en `core/` porque:
- resuelve *qué* fixture corresponde a un nombre lógico sin acoplarse a la CLI
- evita duplicar la lógica de paths en adaptadores y tests.

Las fixtures incluidas viven en `core/fixtures/<name>.json`.
"""

from __future__ import annotations

import re
from pathlib import Path

from core.domain.errors import ResourceNotFoundError, ResourceUnreadableError

FIXTURE_SUFFIX = ".json"

# Nombre lógico: sin separadores de ruta ni ficheros ocultos.
_NAME_RE = re.compile(r"^[A-Za-z0-9_-][A-Za-z0-9_.-]*$")


def bundled_fixtures_dir() -> Path:
    # core/fixture_store.py -> core -> core/fixtures
    return Path(__file__).resolve().parent / "fixtures"


class FixtureStore:
    """Resuelve un nombre lógico a los bytes de su fixture.

    No cachea contenido: cada `resolve` vuelve a leer el fichero.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = root or bundled_fixtures_dir()

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, name: str) -> Path:
        """Ruta del fichero de una fixture, validando que `name` sea un nombre y no un path."""

        if not _NAME_RE.match(name):
            raise ResourceNotFoundError(f"invalid fixture name: {name!r}", locator=name)
        return self._root / f"{name}{FIXTURE_SUFFIX}"

    def resolve(self, name: str) -> bytes:
        path = self.path_for(name)
        try:
            return path.read_bytes()
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise ResourceNotFoundError(f"fixture not found: {name}", locator=name) from exc
        except OSError as exc:
            raise ResourceUnreadableError(f"fixture unreadable: {name} ({exc})", locator=name) from exc

    def names(self) -> list[str]:
        """Nombres lógicos de las fixtures disponibles, ordenados."""

        if not self._root.is_dir():
            return []
        return sorted(p.stem for p in self._root.glob(f"*{FIXTURE_SUFFIX}") if p.is_file())
