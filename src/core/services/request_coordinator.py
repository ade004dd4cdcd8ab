"""Request orchestration.

The shell calls a single entry point, `RequestCoordinator.run`, and gets back
exactly one `RequestOutcome`. Session selection, fetching and decoding stay
here so presentation code never touches sessions or the decoder directly.
"""

from __future__ import annotations

import structlog

from adapters.sessions import FixtureSession, LiveSession
from core.config import AppSettings
from core.decoder import ResponseDecoder
from core.domain.errors import DecodeError, FetchError
from core.domain.models import (
    Failure,
    RequestOutcome,
    ResourceLocator,
    SessionMode,
    Success,
)
from core.fixture_store import FixtureStore
from core.interfaces.session import DataSession

logger = structlog.get_logger(__name__)


class RequestCoordinator:
    """Fetch-and-decode for one logical request.

    Stateless between calls: the sessions and decoder it holds carry no
    per-request state, so concurrent `run` calls are independent.
    """

    def __init__(
        self,
        *,
        live: DataSession | None = None,
        fixture: DataSession | None = None,
        decoder: ResponseDecoder | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        if live is None:
            live = LiveSession(self._settings)
        if fixture is None:
            fixture = FixtureSession(FixtureStore(self._settings.fixtures_dir))
        self._sessions: dict[SessionMode, DataSession] = {
            SessionMode.LIVE: live,
            SessionMode.FIXTURE: fixture,
        }
        self._decoder = decoder or ResponseDecoder()

    def session_for(self, mode: SessionMode) -> DataSession:
        return self._sessions[SessionMode(mode)]

    def default_locator(self, mode: SessionMode) -> ResourceLocator:
        """Locator for the configured endpoint (live) or fixture (fixture)."""

        if SessionMode(mode) is SessionMode.LIVE:
            return ResourceLocator.for_url(self._settings.endpoint_url)
        return ResourceLocator.for_fixture(self._settings.fixture_name)

    async def run(self, mode: SessionMode, locator: ResourceLocator | None = None) -> RequestOutcome:
        mode = SessionMode(mode)
        locator = locator or self.default_locator(mode)
        log = logger.bind(mode=mode.value, locator=locator.value)
        session = self.session_for(mode)

        log.debug("request.start")
        try:
            payload = await session.fetch(locator)
        except FetchError as exc:
            log.warning("request.fetch_failed", kind=exc.kind.value, error=str(exc))
            return Failure(exc)

        try:
            response = self._decoder.decode(payload)
        except DecodeError as exc:
            log.warning("request.decode_failed", kind=exc.kind.value, error=str(exc))
            return Failure(exc)

        log.debug("request.succeeded", title=response.title)
        return Success(response)
