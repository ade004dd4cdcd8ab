"""Shared pytest fixtures for fakenet tests."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path

import httpx
import pytest

from core.config import AppSettings
from core.fixture_store import FixtureStore
from core.logging import APP_LOGGERS


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep FAKENET_* env vars and any local .env out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("FAKENET_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and app logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_levels = {name: logging.getLogger(name).level for name in APP_LOGGERS}
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for name, level in app_levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """Fixture directory with a valid todo, an empty object and garbage."""
    root = tmp_path / "fixtures"
    root.mkdir()
    (root / "FakeResponse.json").write_text(
        json.dumps({"userId": 1, "id": 1, "title": "delectus aut autem", "completed": False}),
        encoding="utf-8",
    )
    (root / "Empty.json").write_text("{}", encoding="utf-8")
    (root / "Garbage.json").write_text("not json at all", encoding="utf-8")
    return root


@pytest.fixture
def store(fixtures_dir: Path) -> FixtureStore:
    return FixtureStore(fixtures_dir)


@pytest.fixture
def settings(fixtures_dir: Path) -> AppSettings:
    return AppSettings(fixtures_dir=fixtures_dir)


@pytest.fixture
def json_transport() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport that answers every request with a JSON body."""

    def _build(body: object, status_code: int = 200) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=body)

        return httpx.MockTransport(handler)

    return _build


@pytest.fixture
def failing_transport() -> httpx.MockTransport:
    """Transport that simulates an unreachable network."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("network unreachable", request=request)

    return httpx.MockTransport(handler)
