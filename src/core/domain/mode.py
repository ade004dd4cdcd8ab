"""Session mode selection.

The shell exposes a single toggle (live vs. fixture). Keeping the enum in the
domain layer lets config, CLI and coordinator share one source of truth
without importing adapters.
"""

from __future__ import annotations

from enum import Enum


class SessionMode(str, Enum):
    """Which provider serves a request."""

    LIVE = "live"
    FIXTURE = "fixture"

    @classmethod
    def default(cls) -> "SessionMode":
        """Return the mode used when the caller does not choose one."""

        return cls.LIVE

    @classmethod
    def from_bool(cls, use_live: bool) -> "SessionMode":
        """Derive a mode from the shell's boolean toggle."""

        return cls.LIVE if use_live else cls.FIXTURE

    def label(self) -> str:
        """Human readable label for the shell and logging."""

        return "Real Network" if self is SessionMode.LIVE else "Fake Network"
