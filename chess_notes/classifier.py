"""Destination-square extraction for a single ply."""

from __future__ import annotations

import re

from chess_notes.moves import (
    UNPARSEABLE,
    Square,
    SquareMove,
    as_move_record,
    square_from_coordinates,
)

_CASTLE_RE = re.compile(r"^O-O(-O)?([+#]{1,2})?\Z")
_LONG_CASTLE_RE = re.compile(r"^O-O-O")
# trailing destination, then optional promotion and check/mate marks ("++" is mate too)
_SQUARE_RE = re.compile(r"([a-h][1-8])(?:=[QRBN])?(?:[+#]{1,2})?\Z", re.IGNORECASE)


def castle_square(text: str, ply: int) -> Square:
    """King destination of a castling move; white moves on even plies."""
    rank = 1 if ply % 2 == 0 else 8
    if _LONG_CASTLE_RE.match(text):
        return Square("C", rank)
    return Square("G", rank)


def classify(move, ply: int):
    """Resolve *move* at zero-based *ply* to a :class:`Square` or ``UNPARSEABLE``.

    Never raises: anything that does not name a destination square is
    ``UNPARSEABLE``.
    """
    record = as_move_record(move)

    if isinstance(record, SquareMove):
        return square_from_coordinates(record.file, record.rank)

    text = record.text

    if _CASTLE_RE.match(text):
        return castle_square(text, ply)

    match = _SQUARE_RE.search(text)
    if match:
        square = match.group(1)
        return Square(square[0].upper(), int(square[1]))

    return UNPARSEABLE
