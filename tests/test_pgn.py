"""Tests for the python-chess reader and the reader fallback chain."""

from chess_notes.moves import ParsedGame, SanMove, SquareMove
from chess_notes.pgn import read_games, read_pgn

SAMPLE_PGN = """[Event "Test"]
[Site "?"]
[Date "2020.01.01"]
[Round "1"]
[White "A"]
[Black "B"]
[Result "*"]

1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. O-O Nf6 *
"""


class TestReadGames:
    def test_square_moves(self) -> None:
        (game,) = read_games(SAMPLE_PGN)
        assert game.moves[:3] == [SquareMove("e", "4"), SquareMove("e", "5"), SquareMove("f", "3")]
        assert game.headers["White"] == "A"
        assert game.result == "*"

    def test_castling_kept_as_san(self) -> None:
        (game,) = read_games(SAMPLE_PGN)
        assert game.moves[6] == SanMove("O-O")

    def test_empty_text(self) -> None:
        assert read_games("") is None

    def test_text_without_game_content(self) -> None:
        assert read_games("hello world") is None
        assert read_games("{just a comment}") is None

    def test_illegal_move_rejects_text(self) -> None:
        assert read_games("1. e4 e5 2. Ke5 Nc6 *") is None


class TestReadPgn:
    def test_primary_reader_wins(self) -> None:
        games = read_pgn(SAMPLE_PGN)
        assert isinstance(games[0].moves[0], SquareMove)

    def test_falls_back_to_grammar(self) -> None:
        (game,) = read_pgn("1. e4 e5 2. Ke5 Nc6 *")
        assert game.moves == [SanMove("e4"), SanMove("e5"), SanMove("Ke5"), SanMove("Nc6")]

    def test_both_readers_fail(self) -> None:
        assert read_pgn("") == []

    def test_custom_readers_in_order(self) -> None:
        calls = []

        def first(text: str) -> None:
            calls.append("first")
            return None

        def second(text: str) -> list[ParsedGame]:
            calls.append("second")
            return [ParsedGame(moves=[SanMove(text)])]

        def third(text: str) -> None:
            calls.append("third")
            return None

        games = read_pgn("e4", readers=(first, second, third))
        assert calls == ["first", "second"]
        assert games[0].moves == [SanMove("e4")]
