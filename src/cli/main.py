"""CLI principal.

Comandos:
- `fetch`: una petición (live o fixture) y su resultado.
- `fixtures`: lista las fixtures disponibles.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from cli.ui_components import LOADING_TEXT, build_fixtures_table, print_outcome
from core.config import AppSettings
from core.domain.models import ResourceLocator, SessionMode
from core.fixture_store import FixtureStore
from core.logging import configure_logging
from core.services.request_coordinator import RequestCoordinator

app = typer.Typer(no_args_is_help=True, help="Fetch a JSON resource from the network or a local fixture.")

_console = Console()


@app.command()
def fetch(
    live: bool | None = typer.Option(
        None,
        "--live/--fixture",
        help="Real network or bundled fixture (default: FAKENET_DEFAULT_MODE).",
    ),
    locator: str | None = typer.Option(
        None,
        "--locator",
        "-l",
        help="URL (live) or fixture name (fixture). Defaults to the configured pair.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logs to stderr."),
    log_json: bool = typer.Option(False, "--log-json", help="Logs as JSON lines."),
) -> None:
    """Run one GET request and print its `title` (or an error)."""

    settings = AppSettings()
    configure_logging(verbose=verbose or settings.verbose, log_json=log_json or settings.log_json)

    mode = settings.default_mode if live is None else SessionMode.from_bool(live)
    coordinator = RequestCoordinator(settings=settings)
    target = ResourceLocator(value=locator) if locator else coordinator.default_locator(mode)

    with _console.status(LOADING_TEXT):
        outcome = asyncio.run(coordinator.run(mode, target))

    print_outcome(_console, outcome, mode=mode, locator=target)
    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command()
def fixtures() -> None:
    """List the fixture names available in fixture mode."""

    settings = AppSettings()
    names = FixtureStore(settings.fixtures_dir).names()
    _console.print(build_fixtures_table(names))


def run() -> None:
    app()
