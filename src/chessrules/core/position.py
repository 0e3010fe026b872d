"""Position: complete game state with move validation and execution."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

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
from chessrules.core.move_generator import (
    MoveGenerator,
    back_rank,
    castle_rook_squares,
    en_passant_victim,
    pawn_start_rank,
)
from chessrules.core.options import RuleOptions
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, as_square

_LOGGER = logging.getLogger(__name__)

# Rook home square -> the castling right it guards.
_ROOK_HOMES: dict[Square, CastlingRights] = {
    Square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    Square(0, 7): CastlingRights.WHITE_KINGSIDE,
    Square(7, 0): CastlingRights.BLACK_QUEENSIDE,
    Square(7, 7): CastlingRights.BLACK_KINGSIDE,
}


@dataclass(frozen=True, slots=True)
class PositionState:
    """Full-state snapshot, comparable with ``==``."""

    placement: tuple[Piece | None, ...]
    side_to_move: Color
    castling: CastlingRights
    en_passant: Square | None
    king_squares: tuple[Square, Square]
    move_log: tuple[Move, ...]


class Position:
    """Board placement + side to move + castling + en passant + move log.

    One instance per game. :meth:`make_move` is the only public mutator;
    every query is read-only.

    Raises:
        ValueError: the board does not hold exactly one king per color.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "options",
        "last_rejection",
        "_king_squares",
        "_move_log",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | str | None = None,
        options: RuleOptions | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling & _eligible_rights(self.board)
        ep = as_square(en_passant) if en_passant is not None else None
        self.en_passant = _eligible_en_passant(self.board, side_to_move, ep)
        self.options = options if options is not None else RuleOptions()
        self.last_rejection: Rejection | None = None
        self._king_squares: list[Square] = [
            self.board.find_king(Color.WHITE),
            self.board.find_king(Color.BLACK),
        ]
        self._move_log: list[Move] = []

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def initial(cls, options: RuleOptions | None = None) -> Position:
        """Standard starting position, White to move."""
        return cls(options=options)

    @classmethod
    def from_pieces(
        cls,
        pieces: Mapping[Square | str, Piece | str],
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | str | None = None,
        options: RuleOptions | None = None,
    ) -> Position:
        """Build a position from ``{square: piece}``, e.g. ``{"e1": "K"}``.

        Castling rights whose king or rook is not on its home square are
        dropped, as is an en-passant target no double push could have left.
        """
        board = Board()
        for sq, piece in pieces.items():
            if not isinstance(piece, Piece):
                piece = Piece.from_char(piece)
            board[as_square(sq)] = piece
        return cls(board, side_to_move, castling, en_passant, options)

    # ── Move requests ────────────────────────────────────────────────────

    def make_move(self, start: Square | str, end: Square | str) -> bool:
        """Validate and commit the move *start* → *end*.

        Returns ``True`` if the move was legal and has been applied. Any
        rejection returns ``False`` and leaves the position untouched; the
        reason is kept in :attr:`last_rejection` for diagnostics.
        """
        try:
            start_sq = as_square(start)
            end_sq = as_square(end)
        except (TypeError, ValueError):
            return self._reject(Rejection.OFF_BOARD, start, end)

        piece = self.board[start_sq]
        if piece is None:
            return self._reject(Rejection.EMPTY_START, start_sq, end_sq)
        if piece.color != self.side_to_move:
            return self._reject(Rejection.WRONG_COLOR, start_sq, end_sq)

        for move in MoveGenerator(self).legal_moves(start_sq):
            if move.end == end_sq:
                self._execute(move)
                self.last_rejection = None
                return True
        return self._reject(Rejection.ILLEGAL_DESTINATION, start_sq, end_sq)

    def make_move_text(self, text: str) -> bool:
        """Like :meth:`make_move` for a four-character move, e.g. ``'e2e4'``."""
        try:
            start, end = split_move_text(text)
        except (TypeError, ValueError):
            return self._reject(Rejection.OFF_BOARD, text, "")
        return self.make_move(start, end)

    def _reject(self, reason: Rejection, start: object, end: object) -> bool:
        self.last_rejection = reason
        _LOGGER.debug("Rejected move %s%s: %s", start, end, reason.name)
        return False

    # ── Execution ────────────────────────────────────────────────────────

    def _execute(self, move: Move) -> None:
        """Commit an already-validated *move*; no legality re-check."""
        board = self.board
        piece = board[move.start]
        assert piece is not None

        self._update_castling(move, piece)

        if move.is_castle:
            board.relocate(move.start, move.end)
            board.relocate(*castle_rook_squares(move))
        elif move.kind == MoveKind.EN_PASSANT:
            board.relocate(move.start, move.end)
            board[en_passant_victim(move)] = None
        else:
            board.relocate(move.start, move.end)

        if piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = move.end

        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.end.rank - move.start.rank) == 2
        ):
            self.en_passant = Square(
                (move.start.rank + move.end.rank) // 2, move.start.file
            )
        else:
            self.en_passant = None

        self._move_log.append(move)
        self.side_to_move = self.side_to_move.opposite
        _LOGGER.debug("Committed %s (%s)", move, move.kind.name)

    def _update_castling(self, move: Move, piece: Piece) -> None:
        rights = self.castling
        if piece.piece_type == PieceType.KING:
            rights &= ~CastlingRights.both(piece.color)
        if move.start in _ROOK_HOMES:
            rights &= ~_ROOK_HOMES[move.start]
        if self.options.revoke_rights_on_capture and move.end in _ROOK_HOMES:
            rights &= ~_ROOK_HOMES[move.end]
        self.castling = rights

    # ── Queries ──────────────────────────────────────────────────────────

    def king_square(self, color: Color) -> Square:
        """Cached square of *color*'s king."""
        return self._king_squares[int(color)]

    @property
    def move_log(self) -> tuple[Move, ...]:
        """Committed moves, oldest first."""
        return tuple(self._move_log)

    def legal_moves(self) -> list[Move]:
        """Every legal move for the side to move."""
        return MoveGenerator(self).all_legal_moves()

    def is_in_check(self, color: Color | None = None) -> bool:
        return Rules.is_in_check(self, color)

    def is_checkmate(self) -> bool:
        return Rules.is_checkmate(self)

    def is_stalemate(self) -> bool:
        return Rules.is_stalemate(self)

    def status(self) -> GameStatus:
        return Rules.status(self)

    # ── Utilities ────────────────────────────────────────────────────────

    def snapshot(self) -> PositionState:
        return PositionState(
            placement=self.board.placement(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            king_squares=(self._king_squares[0], self._king_squares[1]),
            move_log=self.move_log,
        )

    def copy(self) -> Position:
        """Independent copy, move log included."""
        pos = Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            options=self.options,
        )
        pos.castling = self.castling
        pos.en_passant = self.en_passant
        pos._king_squares = self._king_squares.copy()
        pos._move_log = self._move_log.copy()
        return pos

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"


def _eligible_rights(board: Board) -> CastlingRights:
    """Rights whose king and rook both stand on their home squares."""
    rights = CastlingRights.NONE
    for color in (Color.WHITE, Color.BLACK):
        rank = back_rank(color)
        if board[Square(rank, 4)] != Piece(PieceType.KING, color):
            continue
        rook = Piece(PieceType.ROOK, color)
        if board[Square(rank, 7)] == rook:
            rights |= CastlingRights.kingside(color)
        if board[Square(rank, 0)] == rook:
            rights |= CastlingRights.queenside(color)
    return rights


def _eligible_en_passant(
    board: Board, side_to_move: Color, target: Square | None
) -> Square | None:
    """*target* if the opponent's last move could have double-pushed over it."""
    if target is None or not board.is_empty(target):
        return None
    mover = side_to_move.opposite
    if target.rank != pawn_start_rank(mover) + mover.forward:
        return None
    pushed = Square(target.rank + mover.forward, target.file)
    if board[pushed] != Piece(PieceType.PAWN, mover):
        return None
    return target
