"""Canal de diagnósticos: anomalías (!!) y fallas estructurales (**)."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

ANOMALY = "!!"
FAILURE = "**"

_LOGGER = logging.getLogger("bitacora_tool.diagnostics")


@dataclass(frozen=True)
class Diagnostic:
    """One advisory line about the input."""

    severity: str
    line_number: int | None
    message: str

    def render(self) -> str:
        """Format as a single diagnostics line."""
        if self.line_number is None:
            return f"{self.severity} {self.message}"
        return f"{self.severity} line {self.line_number}: {self.message}"


@dataclass
class Diagnostics:
    """Collects diagnostics for a run and forwards them to logging.

    Diagnostics are advisory: they never stop a run or change the exit code.
    """

    messages: list[Diagnostic] = field(default_factory=list)

    def anomaly(self, message: str, line_number: int | None = None) -> None:
        """Record a recoverable anomaly (value is still emitted)."""
        self._add(Diagnostic(ANOMALY, line_number, message), logging.WARNING)

    def failure(self, message: str, line_number: int | None = None) -> None:
        """Record a structural failure (entry or activity is skipped)."""
        self._add(Diagnostic(FAILURE, line_number, message), logging.ERROR)

    def info(self, message: str) -> None:
        """Informational line on the same channel (end-of-run reports)."""
        _LOGGER.info(message)

    def _add(self, diagnostic: Diagnostic, level: int) -> None:
        self.messages.append(diagnostic)
        _LOGGER.log(level, diagnostic.render())

    @property
    def anomalies(self) -> list[Diagnostic]:
        return [d for d in self.messages if d.severity == ANOMALY]

    @property
    def failures(self) -> list[Diagnostic]:
        return [d for d in self.messages if d.severity == FAILURE]


def setup_logging(stream: TextIO | None = None) -> None:
    """Send diagnostics to stderr as bare lines."""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    _LOGGER.handlers.clear()
    _LOGGER.addHandler(handler)
    _LOGGER.setLevel(logging.INFO)
    _LOGGER.propagate = False
