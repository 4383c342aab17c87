"""Reading PGN text into games of move records."""

from __future__ import annotations

import io
import logging

import chess
import chess.pgn

from chess_notes.grammar import parse_games
from chess_notes.moves import ParsedGame, SanMove, SquareMove

_LOGGER = logging.getLogger(__name__)


def game_moves(game):
    """Move records for the mainline of a :class:`chess.pgn.Game`."""
    board = game.board()
    moves = []
    for move in game.mainline_moves():
        if not move:                            # null move "--"
            moves.append(SanMove("--"))
        elif board.is_castling(move):           # king-takes-rook in chess960, so keep the SAN
            moves.append(SanMove(board.san(move)))
        else:
            moves.append(SquareMove(chess.FILE_NAMES[chess.square_file(move.to_square)],
                                    chess.RANK_NAMES[chess.square_rank(move.to_square)]))
        board.push(move)
    return moves


class GameContentBuilder(chess.pgn.GameBuilder):
    """Builds a game and notes whether any tag, move or result was read."""

    def begin_game(self):
        self.found_content = False
        super().begin_game()

    def visit_header(self, tagname, tagvalue):
        self.found_content = True
        super().visit_header(tagname, tagvalue)

    def visit_move(self, board, move):
        self.found_content = True
        super().visit_move(board, move)

    def visit_result(self, result):
        self.found_content = True
        super().visit_result(result)

    def result(self):
        return super().result(), self.found_content


def read_games(text):
    """Read every game in *text* with python-chess.

    Returns ``None`` when no game was found or python-chess reported an
    error (illegal, ambiguous or unknown SAN) in any of them. Text python-chess
    skipped entirely (no tag, move or result) also counts as no game.
    """
    handle = io.StringIO(text)
    games = []
    while True:
        read = chess.pgn.read_game(handle, Visitor=GameContentBuilder)
        if read is None:
            break
        game, found_content = read
        if not found_content:
            _LOGGER.debug("python-chess found nothing game-like in game %d", len(games) + 1)
            return None
        if game.errors:
            _LOGGER.debug("python-chess rejected game %d: %s", len(games) + 1, game.errors[0])
            return None
        games.append(ParsedGame(headers=dict(game.headers),
                                moves=game_moves(game),
                                result=game.headers.get("Result", "*")))
    return games or None


# tried in order, first reader returning games wins
PGN_READERS = (read_games, parse_games)


def read_pgn(text, readers=PGN_READERS):
    """Games found in *text* by the first successful reader, else ``[]``."""
    for reader in readers:
        games = reader(text)
        if games is not None:
            return games
        _LOGGER.debug("%s found no games", getattr(reader, "__name__", reader))
    return []
