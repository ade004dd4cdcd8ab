"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Failure, RequestOutcome, ResourceLocator, SessionMode, Success

ERROR_TEXT = "error"
LOADING_TEXT = "Loading data..."


def build_outcome_panel(outcome: RequestOutcome, *, mode: SessionMode, locator: ResourceLocator) -> Panel:
    """Panel con el `title` obtenido o un indicador genérico de error."""

    body = Text()
    if isinstance(outcome, Success):
        body.append(outcome.response.title, style="bold green")
        border = "green"
    elif isinstance(outcome, Failure):
        body.append(ERROR_TEXT, style="bold red")
        body.append(f"\n{outcome.error.kind.value}: {outcome.error}", style="dim")
        border = "red"
    body.append(f"\n\n{mode.label()} • {locator.value}", style="dim")
    return Panel(body, title=Text("GET", style="bold"), border_style=border)


def build_fixtures_table(names: list[str]) -> Table:
    table = Table(title="Fixtures")
    table.add_column("Name", style="cyan", no_wrap=True)
    for name in names:
        table.add_row(name)
    return table


def print_outcome(console: Console, outcome: RequestOutcome, *, mode: SessionMode, locator: ResourceLocator) -> None:
    console.print(build_outcome_panel(outcome, mode=mode, locator=locator))
