"""Core domain layer: chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Position

    pos = Position.initial()
    pos.make_move("f2", "f3")
    pos.make_move("e7", "e5")
    pos.make_move("g2", "g4")
    pos.make_move("d8", "h4")
    assert pos.is_checkmate()
"""

from chessrules.core.attacks import is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    GameStatus,
    MoveKind,
    PieceType,
    Rejection,
)
from chessrules.core.move import Move, split_move_text
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.options import RuleOptions
from chessrules.core.piece import Piece
from chessrules.core.position import Position, PositionState
from chessrules.core.rules import Rules
from chessrules.core.types import ALL_SQUARES, Square, as_square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "MoveKind",
    "PieceType",
    "Rejection",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "as_square",
    "split_move_text",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "PositionState",
    "RuleOptions",
    "Rules",
    # Attack detection
    "is_square_attacked",
]
