"""Eliminación de comentarios entre paréntesis."""

from __future__ import annotations


def strip_comments(text: str) -> str:
    """Delete ``(...)`` spans, restarting from the start after each one.

    Stops at the first apparent nesting (another ``(`` before the closing
    ``)``) and leaves the rest of the text as is, comments included.
    """
    while True:
        start = text.find("(")
        if start < 0:
            return text
        end = text.find(")", start + 1)
        if end < 0:
            return text
        if text.find("(", start + 1, end) >= 0:
            return text
        text = text[:start] + text[end + 1 :]
