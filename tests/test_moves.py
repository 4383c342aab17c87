"""Tests for move records and their adapters."""

from chess_notes.moves import (
    UNPARSEABLE,
    SanMove,
    Square,
    SquareMove,
    as_move_record,
    square_from_coordinates,
)


class TestSquare:
    def test_str(self) -> None:
        assert str(Square("E", 4)) == "E4"

    def test_from_coordinates(self) -> None:
        assert square_from_coordinates("h", "8") == Square("H", 8)
        assert square_from_coordinates("B", 2) == Square("B", 2)

    def test_from_bad_coordinates(self) -> None:
        assert square_from_coordinates("", "1") is UNPARSEABLE
        assert square_from_coordinates("ab", "1") is UNPARSEABLE
        assert square_from_coordinates("a", "0") is UNPARSEABLE
        assert square_from_coordinates("a", "x") is UNPARSEABLE


class TestUnparseableSentinel:
    def test_singleton(self) -> None:
        assert type(UNPARSEABLE)() is UNPARSEABLE

    def test_falsy(self) -> None:
        assert not UNPARSEABLE


class TestAsMoveRecord:
    def test_records_pass_through(self) -> None:
        move = SquareMove("e", "4")
        assert as_move_record(move) is move

    def test_string(self) -> None:
        assert as_move_record("Nf3") == SanMove("Nf3")

    def test_flat_move_mapping(self) -> None:
        assert as_move_record({"move": "O-O", "comments": []}) == SanMove("O-O")

    def test_col_row_mapping(self) -> None:
        record = as_move_record({"notation": {"col": "e", "row": "4"}})
        assert record == SquareMove("e", "4")

    def test_nested_notation_mapping(self) -> None:
        record = as_move_record({"notation": {"notation": "Nxe5", "col": "", "row": ""}})
        assert record == SanMove("Nxe5")

    def test_empty_coordinates_fall_back_to_move(self) -> None:
        record = as_move_record({"notation": {"col": "", "row": "4"}, "move": "e4"})
        assert record == SanMove("e4")

    def test_unknown_shape(self) -> None:
        assert as_move_record(None) == SanMove("")
        assert as_move_record({"comments": []}) == SanMove("")
