"""Coordinate value object and board geometry helpers.

Board layout (rank, file), both 0-7:
    rank 0 is Side.FIRST's home row and prints as "1",
    file 0 prints as "a".  Flattened index = rank * 8 + file.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
_FILES = "abcdefgh"
_RANKS = "12345678"


def on_board(rank: int, file: int) -> bool:
    """Whether (rank, file) lies inside the 8x8 grid."""
    return 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """Immutable (rank, file) board address.

    Out-of-range values are rejected at construction, so every existing
    ``Coordinate`` is a valid square.
    """

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not on_board(self.rank, self.file):
            raise ValueError(
                f"Coordinate out of range: rank={self.rank!r}, file={self.file!r}"
            )

    # ── Geometry ─────────────────────────────────────────────────────────

    def offset(self, d_rank: int, d_file: int) -> Coordinate | None:
        """Coordinate shifted by (d_rank, d_file), or None if off the board."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if not on_board(rank, file):
            return None
        return Coordinate(rank, file)

    @property
    def index(self) -> int:
        return self.rank * BOARD_SIZE + self.file

    # ── Notation ─────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Algebraic name, e.g. (0, 4) -> 'e1'."""
        return _FILES[self.file] + _RANKS[self.rank]

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse an algebraic name, e.g. 'e4' -> Coordinate(3, 4)."""
        text = name.strip().lower()
        if len(text) != 2 or text[0] not in _FILES or text[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(text[1]), _FILES.index(text[0]))

    def __str__(self) -> str:
        return self.name


ALL_COORDINATES: tuple[Coordinate, ...] = tuple(
    Coordinate(rank, file) for rank in range(BOARD_SIZE) for file in range(BOARD_SIZE)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_COORDINATES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_COORDINATES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_COORDINATES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_COORDINATES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_COORDINATES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_COORDINATES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_COORDINATES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_COORDINATES[56:64]
