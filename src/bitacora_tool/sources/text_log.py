"""Lectura de la bitácora en texto plano."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LogFilePaths:
    """Path to a log file, or to a folder holding ``*.txt`` logs."""

    root: Path


class LogFileSource:
    """Plain-text exercise log source."""

    def __init__(self, paths: LogFilePaths) -> None:
        """Create a log source.

        Args:
            paths: Log file or folder.
        """
        self._paths = paths

    def validate(self) -> None:
        """Validate that the log file or folder exists.

        Raises:
            FileNotFoundError: If the path is missing.
        """
        if not self._paths.root.exists():
            raise FileNotFoundError(str(self._paths.root))

    def log_file(self) -> Path:
        """Return the log file itself, or the newest ``*.txt`` in the folder."""
        root = self._paths.root
        if root.is_file():
            return root
        files = sorted(
            root.glob("*.txt"),
            key=lambda p: p.stat().st_mtime,
            reverse=True,
        )
        if not files:
            raise FileNotFoundError(f"No *.txt log in {root}")
        return files[0]

    def read_lines(self, path: Path) -> list[str]:
        """Read the log, tolerating stray bytes from old editors."""
        text = path.read_text(encoding="utf-8", errors="replace")
        return text.splitlines()
