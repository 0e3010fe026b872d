"""Tests for is_square_attacked."""

from chessrules.core.attacks import KNIGHT_TARGETS, is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import A1, Square


def board_with(**pieces: str) -> Board:
    board = Board()
    for name, char in pieces.items():
        board[Square.parse(name)] = Piece.from_char(char)
    return board


def attacked(board: Board, name: str, by: Color, **kwargs: bool) -> bool:
    return is_square_attacked(board, Square.parse(name), by, **kwargs)


class TestPawnAttacks:
    def test_white_pawn_attacks_forward_diagonals(self) -> None:
        board = board_with(e4="P")
        assert attacked(board, "d5", Color.WHITE)
        assert attacked(board, "f5", Color.WHITE)
        assert not attacked(board, "e5", Color.WHITE)
        assert not attacked(board, "d3", Color.WHITE)

    def test_black_pawn_attacks_downward(self) -> None:
        board = board_with(e5="p")
        assert attacked(board, "d4", Color.BLACK)
        assert attacked(board, "f4", Color.BLACK)
        assert not attacked(board, "d6", Color.BLACK)

    def test_pawn_color_matters(self) -> None:
        board = board_with(e4="P")
        assert not attacked(board, "d5", Color.BLACK)

    def test_edge_file(self) -> None:
        board = board_with(a2="P")
        assert attacked(board, "b3", Color.WHITE)


class TestKnightAttacks:
    def test_all_targets(self) -> None:
        board = board_with(d4="N")
        for name in ("b3", "b5", "c2", "c6", "e2", "e6", "f3", "f5"):
            assert attacked(board, name, Color.WHITE), name
        assert not attacked(board, "d5", Color.WHITE)

    def test_corner_has_two_targets(self) -> None:
        assert len(KNIGHT_TARGETS[A1.index]) == 2

    def test_knight_jumps_over_pieces(self) -> None:
        board = board_with(g1="N", f2="P", g2="P", h2="P")
        assert attacked(board, "f3", Color.WHITE)


class TestSlidingAttacks:
    def test_rook_file_and_rank(self) -> None:
        board = board_with(a1="r")
        assert attacked(board, "a8", Color.BLACK)
        assert attacked(board, "h1", Color.BLACK)
        assert not attacked(board, "b2", Color.BLACK)

    def test_bishop_diagonal_only(self) -> None:
        board = board_with(c1="b")
        assert attacked(board, "h6", Color.BLACK)
        assert not attacked(board, "c8", Color.BLACK)

    def test_queen_both(self) -> None:
        board = board_with(d1="Q")
        assert attacked(board, "d8", Color.WHITE)
        assert attacked(board, "h5", Color.WHITE)
        assert attacked(board, "a1", Color.WHITE)

    def test_blocked_by_any_piece(self) -> None:
        board = board_with(a1="R", a4="p")
        assert attacked(board, "a4", Color.WHITE)
        assert not attacked(board, "a5", Color.WHITE)

    def test_own_piece_blocks_too(self) -> None:
        board = board_with(a1="R", a4="P")
        assert not attacked(board, "a5", Color.WHITE)

    def test_wrong_slider_for_direction(self) -> None:
        board = board_with(a1="B", h1="R")
        assert not attacked(board, "a2", Color.WHITE)
        assert not attacked(board, "g2", Color.WHITE)
        assert attacked(board, "b2", Color.WHITE)
        assert attacked(board, "h2", Color.WHITE)


class TestKingAdjacency:
    def test_king_not_counted_by_default(self) -> None:
        board = board_with(e1="K")
        assert not attacked(board, "e2", Color.WHITE)

    def test_king_counted_when_enabled(self) -> None:
        board = board_with(e1="K")
        assert attacked(board, "e2", Color.WHITE, include_king=True)
        assert not attacked(board, "e3", Color.WHITE, include_king=True)
