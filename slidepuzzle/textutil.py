"""Small string helpers used by the map and settings readers."""

from __future__ import annotations


def strip(text: str) -> str:
    """Remove leading and trailing spaces (other whitespace is kept)."""
    return text.strip(" ")


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter`` and strip spaces from each piece.

    A delimiter that opens a new piece is kept as part of that piece, so
    empty pieces are never produced by consecutive delimiters.
    """
    pieces: list[str] = []
    current = ""
    for char in text:
        if char == delimiter and current:
            pieces.append(strip(current))
            current = ""
        else:
            current += char
    if current:
        pieces.append(strip(current))
    return pieces