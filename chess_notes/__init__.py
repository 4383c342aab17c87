"""Turn PGN chess games into note names, one note per move."""

from chess_notes.classifier import classify
from chess_notes.convert import convert_game, convert_games, convert_pgn_text, note_from_move
from chess_notes.moves import (
    UNPARSEABLE,
    ParsedGame,
    SanMove,
    Square,
    SquareMove,
    as_move_record,
)
from chess_notes.pgn import PGN_READERS, read_pgn
from chess_notes.renderer import CHROMATIC_TABLE, REST, RenderingOption, render

__all__ = [
    "CHROMATIC_TABLE",
    "PGN_READERS",
    "REST",
    "UNPARSEABLE",
    "ParsedGame",
    "RenderingOption",
    "SanMove",
    "Square",
    "SquareMove",
    "as_move_record",
    "classify",
    "convert_game",
    "convert_games",
    "convert_pgn_text",
    "note_from_move",
    "read_pgn",
    "render",
]
