"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.enums import PieceKind, Side

# Letters indexed by PieceKind value; FIRST pieces print in upper case.
_LETTERS = " PNBRQK"

# Unicode figurines run king..pawn from U+2654 (FIRST) and U+265A (SECOND).
_FIGURINE_START = {Side.FIRST: 0x2654, Side.SECOND: 0x265A}
_FIGURINE_ORDER = (
    PieceKind.KING,
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.PAWN,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """Occupant of a square: a kind and the side it belongs to.

    Kind and side always travel together; an empty square holds ``None``
    rather than a half-filled ``Piece``.
    """

    kind: PieceKind
    side: Side

    def __str__(self) -> str:
        """FEN letter (upper case = FIRST, lower case = SECOND)."""
        letter = _LETTERS[self.kind]
        return letter if self.side == Side.FIRST else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a FEN letter, e.g. 'n' -> second-side knight."""
        index = _LETTERS.find(char.upper()) if len(char) == 1 else -1
        if index < 1:
            raise ValueError(f"Invalid piece character: {char!r}")
        side = Side.FIRST if char.isupper() else Side.SECOND
        return cls(PieceKind(index), side)

    @property
    def symbol(self) -> str:
        """Unicode chess figurine, e.g. ♞."""
        return chr(_FIGURINE_START[self.side] + _FIGURINE_ORDER.index(self.kind))

    @property
    def material_value(self) -> int:
        return self.kind.material_value
