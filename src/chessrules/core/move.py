"""Move value object and the four-character move encoding."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveKind
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    start: Square
    end: Square
    kind: MoveKind = MoveKind.NORMAL

    def __str__(self) -> str:
        return f"{self.start.name}{self.end.name}"

    @property
    def text(self) -> str:
        """``<from><to>``, e.g. ``'e2e4'``."""
        return str(self)

    @property
    def is_castle(self) -> bool:
        return self.kind in (MoveKind.CASTLE_KINGSIDE, MoveKind.CASTLE_QUEENSIDE)


def split_move_text(text: str) -> tuple[Square, Square]:
    """Split ``'e2e4'`` into its start and end squares.

    Raises:
        ValueError: *text* is not two concatenated square names.
    """
    if len(text) != 4:
        raise ValueError(f"Invalid move text: {text!r}")
    return Square.parse(text[:2]), Square.parse(text[2:])
