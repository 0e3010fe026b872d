"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-slot placement grid, at most one piece per square.

    The grid is a flat list so :meth:`copy` is a single list duplication;
    the legality filter relies on that to clone cheaply.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    def relocate(self, start: Square, end: Square) -> None:
        """Move whatever stands on *start* to *end*, replacing any occupant."""
        self._squares[end.index] = self._squares[start.index]
        self._squares[start.index] = None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color) -> Iterator[Square]:
        """Squares holding a piece of *color*, a1 first."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None and piece.color == color:
                yield sq

    def placement(self) -> tuple[Piece | None, ...]:
        """Immutable snapshot of all 64 slots, a1 first."""
        return tuple(self._squares)

    def find_king(self, color: Color) -> Square:
        """Scan for the single *color* king.

        Raises:
            ValueError: there is no king, or more than one.
        """
        king = Piece(PieceType.KING, color)
        found = [sq for sq in ALL_SQUARES if self._squares[sq.index] == king]
        if len(found) != 1:
            raise ValueError(f"Expected one {color.name} king, found {len(found)}")
        return found[0]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting placement."""
        b = cls()
        for file, piece_type in enumerate(_BACK_RANK):
            b[Square(0, file)] = Piece(piece_type, Color.WHITE)
            b[Square(1, file)] = Piece(PieceType.PAWN, Color.WHITE)
            b[Square(6, file)] = Piece(PieceType.PAWN, Color.BLACK)
            b[Square(7, file)] = Piece(piece_type, Color.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [str(p) if p else "." for p in self._squares[rank * 8 : rank * 8 + 8]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
