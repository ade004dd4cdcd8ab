"""Sesión de fixtures: sustituye a la red en tests y demos.

Determinista y sin red; el único efecto es la lectura del fichero local,
que se hace en un hilo para no bloquear el event loop.
"""

from __future__ import annotations

import asyncio

import structlog

from core.config import AppSettings
from core.domain.models import ResourceLocator
from core.fixture_store import FixtureStore
from core.interfaces.session import DataSession

logger = structlog.get_logger(__name__)


class FixtureSession(DataSession):
    def __init__(self, store: FixtureStore | None = None, settings: AppSettings | None = None) -> None:
        if store is None:
            settings = settings or AppSettings()
            store = FixtureStore(settings.fixtures_dir)
        self._store = store

    @property
    def store(self) -> FixtureStore:
        return self._store

    async def fetch(self, locator: ResourceLocator) -> bytes:
        data = await asyncio.to_thread(self._store.resolve, locator.value)
        logger.debug("fixture.fetched", name=locator.value, size=len(data))
        return data
