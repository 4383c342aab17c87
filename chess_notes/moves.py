"""Move records and squares shared by the readers, classifier and renderer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

BOARD_FILES = "ABCDEFGH"
BOARD_RANKS = range(1, 9)


@dataclass(frozen=True, slots=True)
class Square:
    """A destination square, file ``A``..``H`` and rank 1..8."""

    file: str
    rank: int

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


class _Unparseable:
    _instance: _Unparseable | None = None

    def __new__(cls) -> _Unparseable:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNPARSEABLE"

    def __bool__(self) -> bool:
        return False


UNPARSEABLE = _Unparseable()


@dataclass(frozen=True, slots=True)
class SquareMove:
    """A move whose destination coordinates are already known."""

    file: str
    rank: str


@dataclass(frozen=True, slots=True)
class SanMove:
    """A move known only by its raw notation, e.g. ``"Nxe5"`` or ``"O-O"``."""

    text: str


MoveRecord = SquareMove | SanMove


def square_from_coordinates(file: str, rank: str | int) -> Square | _Unparseable:
    """Build a :class:`Square` from loose file/rank values, or ``UNPARSEABLE``."""
    letter = str(file).upper()
    if len(letter) != 1 or letter not in BOARD_FILES:
        return UNPARSEABLE
    digits = str(rank)
    if not digits.isdigit() or int(digits) not in BOARD_RANKS:
        return UNPARSEABLE
    return Square(letter, int(digits))


def as_move_record(obj: object) -> MoveRecord:
    """Normalise the move shapes PGN parsers hand out into a :class:`MoveRecord`.

    Accepted shapes:

    * an existing :class:`SquareMove` / :class:`SanMove`
    * a bare notation string
    * ``{"notation": {"col": "e", "row": "4"}, ...}``
    * ``{"notation": {"notation": "e4"}, ...}``
    * ``{"move": "e4", ...}``

    Anything else becomes an empty :class:`SanMove`, which never resolves
    to a square.
    """
    if isinstance(obj, (SquareMove, SanMove)):
        return obj
    if isinstance(obj, str):
        return SanMove(obj)
    if not isinstance(obj, Mapping):
        return SanMove("")

    notation = obj.get("notation")
    if isinstance(notation, Mapping):
        col, row = notation.get("col"), notation.get("row")
        if col and row:
            return SquareMove(str(col), str(row))
        if isinstance(notation.get("notation"), str):
            return SanMove(notation["notation"])
    if isinstance(obj.get("move"), str):
        return SanMove(obj["move"])
    return SanMove("")


@dataclass(slots=True)
class ParsedGame:
    """One game as read from PGN; only ``moves`` matters for conversion."""

    headers: dict[str, str] = field(default_factory=dict)
    moves: list[MoveRecord] = field(default_factory=list)
    result: str = "*"
