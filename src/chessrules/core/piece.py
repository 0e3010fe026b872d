"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPES_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

# White glyph code points; each black glyph sits six code points later.
_GLYPH_BASE = {
    PieceType.KING: 0x2654,
    PieceType.QUEEN: 0x2655,
    PieceType.ROOK: 0x2656,
    PieceType.BISHOP: 0x2657,
    PieceType.KNIGHT: 0x2658,
    PieceType.PAWN: 0x2659,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable ``(kind, color)`` pair."""

    piece_type: PieceType
    color: Color

    def __str__(self) -> str:
        """Diagram letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create a piece from its letter, e.g. ``'N'`` → white knight."""
        piece_type = _TYPES_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(piece_type, Color.WHITE if char.isupper() else Color.BLACK)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return chr(_GLYPH_BASE[self.piece_type] + 6 * int(self.color))

    def is_a(self, piece_type: PieceType, color: Color) -> bool:
        return self.piece_type == piece_type and self.color == color
