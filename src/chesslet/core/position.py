"""Position - piece placement on an 8x8 board plus capture scores."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from chesslet.core.enums import PieceKind, Side
from chesslet.core.errors import (
    CaptureInconsistentError,
    EmptyOriginError,
    IllegalMoveError,
)
from chesslet.core.piece import Piece
from chesslet.core.types import ALL_COORDINATES, BOARD_SIZE, Coordinate

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Position:
    """Board state and per-side capture scores.

    The position is the sole owner of square state.  It is built whole by
    one of the constructors and afterwards changes only through
    :meth:`relocate`.  Each side's score is the material value of every
    enemy piece that side has captured.
    """

    __slots__ = ("_squares", "_scores")

    def __init__(self, pieces: Mapping[Coordinate, Piece] | None = None) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._scores: dict[Side, int] = {Side.FIRST: 0, Side.SECOND: 0}
        if pieces is None:
            pieces = _initial_layout()
        for coord, piece in pieces.items():
            self._squares[coord.index] = piece

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        return cls()

    @classmethod
    def empty(cls) -> Position:
        return cls({})

    @classmethod
    def from_pieces(cls, pieces: Mapping[Coordinate, Piece]) -> Position:
        """Position holding exactly *pieces*; every other square is empty."""
        return cls(pieces)

    # -- Element access -----------------------------------------------------

    def occupant_at(self, coord: Coordinate) -> Piece | None:
        """Piece on *coord*, or None for an empty square."""
        return self._squares[coord.index]

    def is_empty(self, coord: Coordinate) -> bool:
        return self._squares[coord.index] is None

    def pieces(self, side: Side | None = None) -> Iterator[tuple[Coordinate, Piece]]:
        """Occupied squares in index order, optionally only *side*'s."""
        for coord in ALL_COORDINATES:
            piece = self._squares[coord.index]
            if piece is None:
                continue
            if side is None or piece.side == side:
                yield coord, piece

    # -- Scores -------------------------------------------------------------

    def score(self, side: Side) -> int:
        return self._scores[side]

    @property
    def scores(self) -> dict[Side, int]:
        """Copy of both accumulators."""
        return dict(self._scores)

    # -- Mutation -----------------------------------------------------------

    def relocate(self, origin: Coordinate, destination: Coordinate) -> Piece | None:
        """Move the piece on *origin* to *destination*, capturing if occupied.

        The captured piece's value is credited to the moving side.  No
        legality check is made here; callers validate with the move
        generator first.  A piece of the mover's own side on *destination*
        is removed without scoring.  On failure nothing is changed.

        Returns:
            The captured piece, or None for a quiet move.

        Raises:
            EmptyOriginError: *origin* holds no piece.
            IllegalMoveError: *origin* and *destination* are the same square.
            CaptureInconsistentError: the occupant of *destination* has no
                valid side.
        """
        mover = self._squares[origin.index]
        if mover is None:
            raise EmptyOriginError(origin)
        if origin == destination:
            raise IllegalMoveError(origin, destination)

        captured = self._squares[destination.index]
        if captured is not None:
            if not isinstance(captured.side, Side):
                raise CaptureInconsistentError(destination, captured)
            self._take(destination, mover.side)

        self._squares[destination.index] = mover
        self._squares[origin.index] = None
        return captured

    def _take(self, coord: Coordinate, capturer: Side) -> None:
        captured = self._squares[coord.index]
        assert captured is not None
        self._squares[coord.index] = None
        if captured.side == capturer:
            _LOGGER.warning("Own piece removed on %s without scoring", coord)
            return
        self._scores[capturer] += captured.material_value
        _LOGGER.info(
            "Piece taken on %s: %s %s (first %d, second %d)",
            coord,
            captured.side,
            captured.kind,
            self._scores[Side.FIRST],
            self._scores[Side.SECOND],
        )

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Position:
        pos = Position.empty()
        pos._squares = self._squares.copy()
        pos._scores = self._scores.copy()
        return pos

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._squares == other._squares and self._scores == other._scores

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._squares[rank * BOARD_SIZE + file]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def _initial_layout() -> dict[Coordinate, Piece]:
    layout: dict[Coordinate, Piece] = {}
    for side in Side:
        for file, kind in enumerate(_BACK_RANK):
            layout[Coordinate(side.home_rank, file)] = Piece(kind, side)
            layout[Coordinate(side.pawn_rank, file)] = Piece(PieceKind.PAWN, side)
    return layout
