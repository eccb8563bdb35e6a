from __future__ import annotations

import string
from typing import Optional, Tuple

_LETTERS = string.ascii_lowercase


def parse_coord(text: str) -> Optional[Tuple[int, int]]:
    """Parse a cell name such as ``"b2"`` into zero-based ``(row, col)``.

    The row is a single letter (case-insensitive, ``a`` is row 0) and the
    column a positive 1-based integer. Returns ``None`` for anything else.
    The result is not checked against any board's dimensions.
    """
    if text is None:
        return None
    text = text.strip()
    if len(text) < 2:
        return None
    letter, digits = text[0].lower(), text[1:]
    if letter not in _LETTERS:
        return None
    # isdecimal() rejects signs, spaces and non-ASCII digit forms int() would accept.
    if not (digits.isascii() and digits.isdecimal()):
        return None
    column = int(digits)
    if column < 1:
        return None
    return _LETTERS.index(letter), column - 1


def format_coord(row: int, col: int) -> str:
    if not 0 <= row < len(_LETTERS) or col < 0:
        raise ValueError(f"({row}, {col}) has no cell name")
    return f"{_LETTERS[row]}{col + 1}"


def row_label(row: int) -> str:
    return _LETTERS[row]
