"""Key translation and on-screen keyboard layout for a character keyboard."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

_ROW2 = ".,:;!?$%&@#_-"
_ROW1 = "=+*<>/|\\()[]{"
_ROW0 = {"}": 0, "^": 1, "~": 2, "'": 4, '"': 7}
_DIGITS = "1234567890"


def _build_layout() -> Dict[str, Tuple[int, int]]:
    layout: Dict[str, Tuple[int, int]] = {}
    rows = (
        ("ABCDEFGHIJKLM", 7),
        ("NOPQRSTUVWXYZ", 6),
        ("abcdefghijklm", 5),
        ("nopqrstuvwxyz", 4),
        (_DIGITS, 3),
        (_ROW2, 2),
        (_ROW1, 1),
    )
    for chars, row in rows:
        for x, ch in enumerate(chars):
            layout[ch] = (x, row)
    for ch, x in _ROW0.items():
        layout[ch] = (x, 0)
    layout[" "] = (10, 3)
    return layout


_LAYOUT = _build_layout()
_NO_KEY = frozenset("\0\r\n")


def map_char(c: str) -> Optional[Tuple[int, int]]:
    """Grid position (x, y) of a character on the keyboard image.

    Returns None for NUL, carriage return and newline. Characters not on
    the layout map to (0, 0).
    """
    if len(c) != 1:
        raise ValueError("expected a single character")
    if c in _NO_KEY:
        return None
    return _LAYOUT.get(c, (0, 0))


def translate_keys(data: Iterable[int]) -> bytes:
    """Turn raw key bytes into text: CR becomes LF and NUL bytes are dropped."""
    out = bytearray()
    for value in bytes(data):
        if value == 0x0D:
            value = 0x0A
        if value != 0x00:
            out.append(value)
    return bytes(out)