"""Tests for the rich UI components."""

from __future__ import annotations

from rich.console import Console

from cli.ui_components import ERROR_TEXT, build_outcome_panel
from core.domain.errors import TransportError
from core.domain.models import ApiResponse, Failure, ResourceLocator, SessionMode, Success


def _render(panel: object) -> str:
    console = Console(width=120, record=True)
    console.print(panel)
    return console.export_text()


class TestOutcomePanel:
    def test_success_shows_title(self) -> None:
        panel = build_outcome_panel(
            Success(ApiResponse(title="delectus aut autem")),
            mode=SessionMode.FIXTURE,
            locator=ResourceLocator.for_fixture("FakeResponse"),
        )
        assert panel.border_style == "green"
        text = _render(panel)
        assert "delectus aut autem" in text
        assert "Fake Network" in text

    def test_failure_shows_error_and_kind(self) -> None:
        panel = build_outcome_panel(
            Failure(TransportError("down")),
            mode=SessionMode.LIVE,
            locator=ResourceLocator.for_url("https://example.com"),
        )
        assert panel.border_style == "red"
        text = _render(panel)
        assert ERROR_TEXT in text
        assert "transport_error: down" in text
