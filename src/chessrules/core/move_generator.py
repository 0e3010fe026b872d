"""Pseudo-legal move generation and the self-check legality filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_square_attacked,
)
from chessrules.core.enums import CastlingRights, Color, MoveKind, PieceType
from chessrules.core.move import Move
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.piece import Piece
    from chessrules.core.position import Position


def pawn_start_rank(color: Color) -> int:
    return 1 if color == Color.WHITE else 6


def back_rank(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


def castle_rook_squares(move: Move) -> tuple[Square, Square]:
    """``(rook_from, rook_to)`` for a castling *move*.

    The rook starts in the corner on the king's rank and lands beside the
    king's destination, on the side it came from.
    """
    rank = move.start.rank
    if move.kind == MoveKind.CASTLE_KINGSIDE:
        return Square(rank, 7), Square(rank, move.end.file - 1)
    return Square(rank, 0), Square(rank, move.end.file + 1)


def en_passant_victim(move: Move) -> Square:
    """Square of the pawn removed by an en-passant *move*."""
    return Square(move.start.rank, move.end.file)


def _capturable(target: Piece | None, color: Color) -> bool:
    """An enemy piece other than the king; kings are never captured."""
    return (
        target is not None
        and target.color != color
        and target.piece_type != PieceType.KING
    )


class MoveGenerator:
    """Generates moves for a :class:`Position` without mutating it."""

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Move]:
        """Moves from *sq* that do not leave the mover's king attacked."""
        return [
            move
            for move in self.pseudo_legal_moves(sq)
            if not self.leaves_king_attacked(move)
        ]

    def all_legal_moves(self) -> list[Move]:
        """Union of :meth:`legal_moves` over every piece of the side to move."""
        moves: list[Move] = []
        for sq in self._board.occupied(self._pos.side_to_move):
            moves.extend(self.legal_moves(sq))
        return moves

    def pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Geometrically valid moves from *sq*, ignoring self-check."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Move] = []
        color = piece.color
        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            self._gen_pawn(sq, color, moves)
        elif piece_type == PieceType.KNIGHT:
            self._gen_steps(sq, color, KNIGHT_TARGETS[sq.index], moves)
        elif piece_type == PieceType.BISHOP:
            self._gen_sliding(sq, color, BISHOP_RAYS[sq.index], moves)
        elif piece_type == PieceType.ROOK:
            self._gen_sliding(sq, color, ROOK_RAYS[sq.index], moves)
        elif piece_type == PieceType.QUEEN:
            self._gen_sliding(sq, color, QUEEN_RAYS[sq.index], moves)
        else:
            self._gen_steps(sq, color, KING_TARGETS[sq.index], moves)
            if not self.is_in_check(color):
                self._gen_castling(sq, color, moves)
        return moves

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king (per the king cache) attacked by the opponent?"""
        return self._attacked(self._pos.king_square(color), color.opposite)

    def leaves_king_attacked(self, move: Move) -> bool:
        """Would *move* leave the mover's own king attacked?

        Only the placement grid is cloned. By default the clone relocates
        just the moving piece: an en-passant victim stays on the board and a
        castling rook stays in its corner. ``RuleOptions.full_simulation``
        applies both side effects too.
        """
        piece = self._board[move.start]
        if piece is None:
            raise ValueError(f"No piece on {move.start}")

        sim = self._board.copy()
        sim.relocate(move.start, move.end)
        if self._pos.options.full_simulation:
            if move.kind == MoveKind.EN_PASSANT:
                sim[en_passant_victim(move)] = None
            elif move.is_castle:
                sim.relocate(*castle_rook_squares(move))

        if piece.piece_type == PieceType.KING:
            king_sq = move.end
        else:
            king_sq = self._pos.king_square(piece.color)
        return is_square_attacked(
            sim,
            king_sq,
            piece.color.opposite,
            include_king=self._pos.options.king_adjacency_attacks,
        )

    def _attacked(self, sq: Square, by_color: Color) -> bool:
        return is_square_attacked(
            self._board,
            sq,
            by_color,
            include_king=self._pos.options.king_adjacency_attacks,
        )

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        forward = color.forward

        one_step = sq.offset(forward, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(Move(sq, one_step))
            if sq.rank == pawn_start_rank(color):
                two_step = sq.offset(2 * forward, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for d_file in (-1, 1):
            cap_sq = sq.offset(forward, d_file)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if _capturable(target, color):
                moves.append(Move(sq, cap_sq))

        ep = self._pos.en_passant
        if (
            ep is not None
            and sq.rank + forward == ep.rank
            and abs(sq.file - ep.file) == 1
        ):
            moves.append(Move(sq, ep, MoveKind.EN_PASSANT))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or _capturable(target, color):
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if _capturable(target, color):
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        opponent = color.opposite
        rank = back_rank(color)
        rights = self._pos.castling

        if rights & CastlingRights.kingside(color):
            f_sq, g_sq = Square(rank, 5), Square(rank, 6)
            if (
                board.is_empty(f_sq)
                and board.is_empty(g_sq)
                and not self._attacked(f_sq, opponent)
                and not self._attacked(g_sq, opponent)
            ):
                moves.append(Move(king_sq, g_sq, MoveKind.CASTLE_KINGSIDE))

        if rights & CastlingRights.queenside(color):
            b_sq, c_sq, d_sq = Square(rank, 1), Square(rank, 2), Square(rank, 3)
            if (
                board.is_empty(b_sq)
                and board.is_empty(c_sq)
                and board.is_empty(d_sq)
                and not self._attacked(c_sq, opponent)
                and not self._attacked(d_sq, opponent)
            ):
                moves.append(Move(king_sq, c_sq, MoveKind.CASTLE_QUEENSIDE))
