"""Tests for Square, Piece and Move value types."""

import pytest

from chessrules.core.enums import Color, MoveKind, PieceType
from chessrules.core.move import Move, split_move_text
from chessrules.core.piece import Piece
from chessrules.core.types import A1, E2, E4, H8, ALL_SQUARES, Square, as_square


class TestSquare:
    def test_parse(self) -> None:
        assert Square.parse("e4") == Square(3, 4)
        assert Square.parse("a1") == A1
        assert Square.parse("h8") == H8

    def test_name_round_trip(self) -> None:
        for sq in ALL_SQUARES:
            assert Square.parse(sq.name) == sq

    @pytest.mark.parametrize("text", ["", "e", "e9", "i1", "E4", "e44", "4e"])
    def test_parse_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            Square.parse(text)

    @pytest.mark.parametrize("rank, file", [(-1, 0), (0, 8), (8, 8)])
    def test_out_of_range_raises(self, rank: int, file: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Square(rank, file)

    def test_offset(self) -> None:
        assert E2.offset(2, 0) == E4
        assert A1.offset(-1, 0) is None
        assert H8.offset(0, 1) is None

    def test_index(self) -> None:
        assert A1.index == 0
        assert H8.index == 63
        assert Square.from_index(E4.index) == E4

    def test_hashable_and_equal_by_value(self) -> None:
        assert {Square(1, 4), E2} == {E2}

    def test_as_square(self) -> None:
        assert as_square("e2") == E2
        assert as_square(E2) is E2

    def test_str(self) -> None:
        assert str(E4) == "e4"
        assert repr(E4) == "Square(e4)"


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(PieceType.KNIGHT, Color.WHITE)
        assert Piece.from_char("q") == Piece(PieceType.QUEEN, Color.BLACK)

    @pytest.mark.parametrize("char", ["x", "", "KK", "1"])
    def test_from_char_invalid(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_str(self) -> None:
        assert str(Piece(PieceType.KING, Color.WHITE)) == "K"
        assert str(Piece(PieceType.PAWN, Color.BLACK)) == "p"

    def test_symbol(self) -> None:
        assert Piece(PieceType.KING, Color.WHITE).symbol == "♔"
        assert Piece(PieceType.KNIGHT, Color.BLACK).symbol == "♞"
        assert Piece(PieceType.PAWN, Color.BLACK).symbol == "♟"


class TestMove:
    def test_text(self) -> None:
        assert Move(E2, E4).text == "e2e4"

    def test_default_kind(self) -> None:
        assert Move(E2, E4).kind == MoveKind.NORMAL
        assert not Move(E2, E4).is_castle

    def test_split_move_text(self) -> None:
        assert split_move_text("e2e4") == (E2, E4)

    @pytest.mark.parametrize("text", ["e2e", "e2e4q", "e2x4", ""])
    def test_split_move_text_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            split_move_text(text)
