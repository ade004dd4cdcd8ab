"""Sesiones concretas (implementaciones de `core.interfaces.session.DataSession`).

- `LiveSession`: GET real por HTTP.
- `FixtureSession`: lee una fixture local, sin red.
"""

from adapters.sessions.fixture import FixtureSession
from adapters.sessions.live import LiveSession

__all__ = [
	"FixtureSession",
	"LiveSession",
]
