"""Turning whole games into note sequences."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chess_notes.classifier import classify
from chess_notes.moves import UNPARSEABLE, ParsedGame
from chess_notes.pgn import PGN_READERS, read_pgn
from chess_notes.renderer import RenderingOption, render

_LOGGER = logging.getLogger(__name__)


def note_from_move(move, ply: int, option: RenderingOption | None = None) -> str:
    """Note for one *move* played at zero-based *ply*."""
    square = classify(move, ply)
    if square is UNPARSEABLE:
        _LOGGER.debug("Unparseable move %r at ply %d", move, ply)
    return render(square, option)


def moves_of(game):
    """Moves of a :class:`ParsedGame`, a ``{"moves": [...]}`` mapping or a move list."""
    if isinstance(game, ParsedGame):
        moves = game.moves
    elif isinstance(game, Mapping):
        moves = game.get("moves")
    else:
        moves = game
    return list(moves or [])


def convert_game(game, option: RenderingOption | None = None) -> list[str]:
    """One note per move of *game*, in move order."""
    return [note_from_move(move, ply, option) for ply, move in enumerate(moves_of(game))]


def convert_games(games, option: RenderingOption | None = None) -> list[list[str]]:
    """Note sequences for each of *games*, in game order."""
    return [convert_game(game, option) for game in games]


def convert_pgn_text(text: str, option: RenderingOption | None = None,
                     readers=PGN_READERS) -> list[list[str]]:
    """Note sequences for every game in PGN *text*.

    Text no reader can make sense of gives ``[]``, same as empty text.
    """
    return convert_games(read_pgn(text, readers), option)
