"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameStatus
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Terminal queries are always answered for the side to move. There is no
    draw detection beyond stalemate.
    """

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        if color is None:
            color = position.side_to_move
        return MoveGenerator(position).is_in_check(color)

    @staticmethod
    def has_legal_move(position: Position) -> bool:
        """Whether the side to move has at least one legal move."""
        gen = MoveGenerator(position)
        squares = position.board.occupied(position.side_to_move)
        return any(gen.legal_moves(sq) for sq in squares)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not Rules.has_legal_move(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not Rules.has_legal_move(position)

    @staticmethod
    def status(position: Position) -> GameStatus:
        """Summarise the position for the side to move."""
        if Rules.has_legal_move(position):
            return GameStatus.IN_PROGRESS
        if Rules.is_in_check(position):
            return GameStatus.CHECKMATE
        return GameStatus.STALEMATE
