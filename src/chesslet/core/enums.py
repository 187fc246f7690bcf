"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

_MATERIAL_VALUES: dict[int, int] = {1: 1, 2: 3, 3: 3, 4: 5, 5: 9, 6: 0}


class Side(IntEnum):
    """One of the two players. FIRST sits on rank 0, SECOND on rank 7."""

    FIRST = 0
    SECOND = 1

    @property
    def forward(self) -> int:
        """Rank delta of a single pawn advance."""
        return 1 if self is Side.FIRST else -1

    @property
    def home_rank(self) -> int:
        return 0 if self is Side.FIRST else 7

    @property
    def pawn_rank(self) -> int:
        """Rank the side's pawns start on."""
        return 1 if self is Side.FIRST else 6

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def material_value(self) -> int:
        """Points credited to the side that captures this kind."""
        return _MATERIAL_VALUES[self.value]

    @property
    def is_slider(self) -> bool:
        return self in (PieceKind.BISHOP, PieceKind.ROOK, PieceKind.QUEEN)

    def __str__(self) -> str:
        return self.name.lower()
