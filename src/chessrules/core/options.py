"""Rule options carried by each :class:`~chessrules.core.position.Position`.

The defaults reproduce the engine's historical behavior, including three
known simplifications. Each can be switched off independently:

``king_adjacency_attacks``
    Count an adjacent enemy king as attacking a square. Off by default;
    under legal play the kings can only become adjacent if a king is
    allowed to step next to the other one, which this flag prevents.
``full_simulation``
    When testing a move for self-check, also remove the pawn captured
    en passant and slide the castling rook on the simulated board.
``revoke_rights_on_capture``
    Clear a side's castling right when its rook is captured on the home
    square, not only when the rook leaves it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Immutable set of rule-engine switches."""

    king_adjacency_attacks: bool = False
    full_simulation: bool = False
    revoke_rights_on_capture: bool = False

    @classmethod
    def faithful(cls) -> RuleOptions:
        """Historical behavior (the defaults)."""
        return cls()

    @classmethod
    def strict(cls) -> RuleOptions:
        """All simplifications corrected."""
        return cls(
            king_adjacency_attacks=True,
            full_simulation=True,
            revoke_rights_on_capture=True,
        )
