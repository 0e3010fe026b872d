"""Square value type and coordinate helpers.

A square is a ``(rank, file)`` pair, both in ``0..7``. Rank 0 is White's
back rank and file 0 is the a-file, so ``Square(0, 4)`` is ``e1``.

Grid layout used by :class:`~chessrules.core.board.Board`::

    a1=0, b1=1, ..., h1=7
    a2=8, ...
    a8=56, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate; equality by ``(rank, file)``."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank < 8 and 0 <= self.file < 8):
            raise ValueError(f"Square out of range: ({self.rank}, {self.file})")

    # ── Conversion ───────────────────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse a square name, e.g. ``'e4'`` → ``Square(3, 4)``."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return _SQUARES[RANKS.index(name[1]) * 8 + FILES.index(name[0])]

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Square for a grid slot 0–63."""
        return _SQUARES[index]

    @property
    def name(self) -> str:
        return FILES[self.file] + RANKS[self.rank]

    @property
    def index(self) -> int:
        """Grid slot 0–63."""
        return self.rank * 8 + self.file

    def offset(self, d_rank: int, d_file: int) -> Square | None:
        """Neighbouring square, or ``None`` if it falls off the board."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if 0 <= rank < 8 and 0 <= file < 8:
            return _SQUARES[rank * 8 + file]
        return None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square({self.name})"


_SQUARES: tuple[Square, ...] = tuple(Square(i >> 3, i & 7) for i in range(64))

ALL_SQUARES: tuple[Square, ...] = _SQUARES


def as_square(value: Square | str) -> Square:
    """Coerce a square or its two-character name to a :class:`Square`."""
    if isinstance(value, Square):
        return value
    return Square.parse(value)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = _SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = _SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = _SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = _SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = _SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = _SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = _SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = _SQUARES[56:64]
