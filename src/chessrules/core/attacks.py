"""Attack detection: does a color attack a given square?"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.types import ALL_SQUARES, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# (d_rank, d_file) ray directions.
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_DIAGONAL_SLIDERS = frozenset((PieceType.BISHOP, PieceType.QUEEN))
_ORTHOGONAL_SLIDERS = frozenset((PieceType.ROOK, PieceType.QUEEN))


# -- Precomputed lookup tables ---------------------------------------------


def build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    """Per grid slot, the on-board squares one *offset* away."""
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        hops = (sq.offset(dr, df) for dr, df in offsets)
        targets.append(tuple(to_sq for to_sq in hops if to_sq is not None))
    return tuple(targets)


def build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    """Per grid slot, one outward ray per direction (nearest square first)."""
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, df in directions:
            ray: list[Square] = []
            cur = sq.offset(dr, df)
            while cur is not None:
                ray.append(cur)
                cur = cur.offset(dr, df)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


KNIGHT_TARGETS = build_targets(KNIGHT_OFFSETS)
KING_TARGETS = build_targets(KING_OFFSETS)
BISHOP_RAYS = build_rays(BISHOP_DIRS)
ROOK_RAYS = build_rays(ROOK_DIRS)
QUEEN_RAYS = build_rays(QUEEN_DIRS)


def _pawn_attackers(sq: Square, by_color: Color) -> tuple[Square, ...]:
    # A pawn of by_color attacks sq from one rank behind it (relative to
    # its own direction of travel), on either adjacent file.
    behind = -by_color.forward
    hops = (sq.offset(behind, -1), sq.offset(behind, 1))
    return tuple(h for h in hops if h is not None)


# -- Public API -------------------------------------------------------------


def is_square_attacked(
    board: Board,
    sq: Square,
    by_color: Color,
    *,
    include_king: bool = False,
) -> bool:
    """Is *sq* attacked by any piece of *by_color* on *board*?

    Pawn, knight and sliding attacks are always tested. An adjacent enemy
    king only counts when *include_king* is set.
    """
    for from_sq in _pawn_attackers(sq, by_color):
        piece = board[from_sq]
        if piece is not None and piece.is_a(PieceType.PAWN, by_color):
            return True

    for from_sq in KNIGHT_TARGETS[sq.index]:
        piece = board[from_sq]
        if piece is not None and piece.is_a(PieceType.KNIGHT, by_color):
            return True

    if _ray_attacked(board, BISHOP_RAYS[sq.index], by_color, _DIAGONAL_SLIDERS):
        return True
    if _ray_attacked(board, ROOK_RAYS[sq.index], by_color, _ORTHOGONAL_SLIDERS):
        return True

    if include_king:
        for from_sq in KING_TARGETS[sq.index]:
            piece = board[from_sq]
            if piece is not None and piece.is_a(PieceType.KING, by_color):
                return True

    return False


def _ray_attacked(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    sliders: frozenset[PieceType],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in sliders:
                return True
            break
    return False
