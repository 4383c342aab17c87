"""Permissive PGN grammar, used when python-chess rejects a game.

Unlike :mod:`chess.pgn` this grammar never checks legality: every SAN-looking
token is kept as raw text so the classifier can decide what it means.
"""

from __future__ import annotations

import logging

from parsita import Failure, ParserContext, lit, reg, rep
from parsita.util import constant

from chess_notes.moves import ParsedGame, SanMove

_LOGGER = logging.getLogger(__name__)


def format_value(quoted):
    return quoted[1:-1].replace('\\"', '"').replace("\\\\", "\\")


def format_tags(tags):
    return {name: value for name, value in tags}


def format_move(token):
    if token.startswith("0-0"):                 # zero castling, e.g. 0-0-0+
        token = token.replace("0", "O")
    return SanMove(token.rstrip("!?") or token)  # "e4!?" -> "e4", "??" stays


def format_movetext(elements):
    return [element for element in elements if element is not None]


def format_game(game):
    return ParsedGame(headers=game[0], moves=game[1], result=game[2])


class PgnGrammar(ParserContext, whitespace=r"(?:\s+|\{[^}]*\}|;[^\n]*)*"):
    # comments are whitespace to this grammar

    tag_name = reg(r"[A-Za-z0-9_]+")
    tag_value = reg(r'"(?:[^"\\]|\\.)*"') > format_value
    tag_pair = "[" >> tag_name & tag_value << "]"
    tags = rep(tag_pair) > format_tags

    move_number = reg(r"[0-9]+\.+") > constant(None)      # 12. or 12...
    nag = reg(r"\$[0-9]+") > constant(None)
    san = reg(r"0-0(?:-0)?[+#]*|(?![0-9*])[^\s{}()\[\];$]+") > format_move
    variation = "(" >> rep(element) << ")" > constant(None)
    element = move_number | nag | variation | san
    movetext = rep(element) > format_movetext

    outcome = lit("1-0", "0-1", "1/2-1/2", "*")
    game = tags & movetext & outcome > format_game
    games = rep(game)


def parse_games(text):
    """Parse *text* with :class:`PgnGrammar`; ``None`` when no game is found."""
    result = PgnGrammar.games.parse(text.strip())
    if isinstance(result, Failure):
        _LOGGER.debug("PGN grammar rejected input: %s", result.failure())
        return None
    return result.unwrap() or None
