"""Punto de entrada: ``python -m bitacora_tool``."""

from __future__ import annotations

from bitacora_tool.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
