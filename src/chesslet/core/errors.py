"""Exception hierarchy for engine and session failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesslet.core.enums import PieceKind, Side
    from chesslet.core.piece import Piece
    from chesslet.core.types import Coordinate


class ChessletError(Exception):
    """Base class for every error raised by chesslet."""


class MoveError(ChessletError):
    """A requested move could not be generated or applied."""


class EmptyOriginError(MoveError):
    """Relocation requested from a square with no occupant."""

    def __init__(self, origin: Coordinate) -> None:
        super().__init__(f"No piece at the starting position {origin}")
        self.origin = origin


class CaptureInconsistentError(MoveError):
    """Destination occupant has no valid side.

    Signals a corrupted position or a caller bug; never retry it.
    """

    def __init__(self, destination: Coordinate, occupant: Piece) -> None:
        super().__init__(
            f"Cannot take piece on {destination}: occupant {occupant!r} has no side"
        )
        self.destination = destination
        self.occupant = occupant


class OriginMismatchError(MoveError):
    """Generator asked about a piece that is not on the origin square."""

    def __init__(
        self,
        origin: Coordinate,
        kind: PieceKind,
        side: Side,
        actual: Piece | None,
    ) -> None:
        found = "nothing" if actual is None else f"{actual.side} {actual.kind}"
        super().__init__(f"Expected {side} {kind} on {origin}, found {found}")
        self.origin = origin
        self.kind = kind
        self.side = side
        self.actual = actual


class IllegalMoveError(MoveError):
    """Destination is not reachable by the piece on the origin square."""

    def __init__(self, origin: Coordinate, destination: Coordinate) -> None:
        super().__init__(f"Illegal move {origin}{destination}")
        self.origin = origin
        self.destination = destination
