"""Destination-square generation for a single piece."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslet.core.enums import PieceKind, Side
from chesslet.core.errors import OriginMismatchError
from chesslet.core.piece import Piece
from chesslet.core.types import ALL_COORDINATES, Coordinate

if TYPE_CHECKING:
    from chesslet.core.position import Position


# Offsets are (d_rank, d_file).
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

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

Rays = tuple[tuple[Coordinate, ...], ...]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Coordinate, tuple[Coordinate, ...]]:
    targets: dict[Coordinate, tuple[Coordinate, ...]] = {}
    for origin in ALL_COORDINATES:
        moves: list[Coordinate] = []
        for d_rank, d_file in offsets:
            to = origin.offset(d_rank, d_file)
            if to is not None:
                moves.append(to)
        targets[origin] = tuple(moves)
    return targets


def _build_rays(directions: tuple[tuple[int, int], ...]) -> dict[Coordinate, Rays]:
    rays_per_square: dict[Coordinate, Rays] = {}
    for origin in ALL_COORDINATES:
        square_rays: list[tuple[Coordinate, ...]] = []
        for d_rank, d_file in directions:
            ray: list[Coordinate] = []
            step = origin.offset(d_rank, d_file)
            while step is not None:
                ray.append(step)
                step = step.offset(d_rank, d_file)
            square_rays.append(tuple(ray))
        rays_per_square[origin] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_SLIDER_RAYS: dict[PieceKind, dict[Coordinate, Rays]] = {
    PieceKind.BISHOP: _build_rays(BISHOP_DIRS),
    PieceKind.ROOK: _build_rays(ROOK_DIRS),
    PieceKind.QUEEN: _build_rays(QUEEN_DIRS),
}


class MoveGenerator:
    """Computes destination squares against a read-only :class:`Position`.

    The generator never mutates the position.  Check, pins, castling,
    en passant and promotion are outside its rules; only piece geometry,
    board edges, blocking and captures are considered.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    # -- Public API ---------------------------------------------------------

    def destinations_for(
        self, kind: PieceKind, side: Side, origin: Coordinate
    ) -> frozenset[Coordinate]:
        """Squares a *side* *kind* standing on *origin* may move to.

        Precondition: the position holds ``(kind, side)`` on *origin*.  Use
        :func:`legal_destinations` with ``strict=True`` to enforce it.
        """
        if kind.is_slider:
            found = self._gen_sliding(origin, side, _SLIDER_RAYS[kind][origin])
        elif kind == PieceKind.PAWN:
            found = self._gen_pawn(origin, side)
        elif kind == PieceKind.KNIGHT:
            found = self._gen_step(origin, side, _KNIGHT_TARGETS[origin])
        else:
            found = self._gen_step(origin, side, _KING_TARGETS[origin])
        return frozenset(found)

    def destinations_from(self, origin: Coordinate) -> frozenset[Coordinate]:
        """Destinations of whatever stands on *origin* (empty set if nothing)."""
        piece = self._pos.occupant_at(origin)
        if piece is None:
            return frozenset()
        return self.destinations_for(piece.kind, piece.side, origin)

    def all_destinations(self, side: Side) -> dict[Coordinate, frozenset[Coordinate]]:
        """Destinations for every *side* piece that has at least one."""
        result: dict[Coordinate, frozenset[Coordinate]] = {}
        for origin, piece in self._pos.pieces(side):
            found = self.destinations_for(piece.kind, piece.side, origin)
            if found:
                result[origin] = found
        return result

    def is_legal(self, origin: Coordinate, destination: Coordinate) -> bool:
        return destination in self.destinations_from(origin)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, origin: Coordinate, side: Side) -> list[Coordinate]:
        pos = self._pos
        forward = side.forward
        moves: list[Coordinate] = []

        one_step = origin.offset(forward, 0)
        if one_step is not None and pos.is_empty(one_step):
            moves.append(one_step)
            # Double advance needs both the passed and the landing square empty.
            if origin.rank == side.pawn_rank:
                two_step = one_step.offset(forward, 0)
                if two_step is not None and pos.is_empty(two_step):
                    moves.append(two_step)

        for d_file in (-1, 1):
            cap = origin.offset(forward, d_file)
            if cap is None:
                continue
            target = pos.occupant_at(cap)
            if target is not None and target.side != side:
                moves.append(cap)
        return moves

    def _gen_step(
        self,
        origin: Coordinate,
        side: Side,
        targets: tuple[Coordinate, ...],
    ) -> list[Coordinate]:
        pos = self._pos
        moves: list[Coordinate] = []
        for to in targets:
            target = pos.occupant_at(to)
            if target is None or target.side != side:
                moves.append(to)
        return moves

    def _gen_sliding(self, origin: Coordinate, side: Side, rays: Rays) -> list[Coordinate]:
        pos = self._pos
        moves: list[Coordinate] = []
        for ray in rays:
            for to in ray:
                target = pos.occupant_at(to)
                if target is None:
                    moves.append(to)
                    continue
                if target.side != side:
                    moves.append(to)
                break
        return moves


def legal_destinations(
    kind: PieceKind,
    side: Side,
    origin: Coordinate,
    position: Position,
    *,
    strict: bool = False,
) -> frozenset[Coordinate]:
    """Destination squares for a *side* *kind* on *origin* in *position*.

    The result is unordered.  With ``strict=True`` the position must
    actually hold ``(kind, side)`` on *origin*, otherwise
    :class:`OriginMismatchError` is raised.
    """
    if strict:
        actual = position.occupant_at(origin)
        if actual != Piece(kind, side):
            raise OriginMismatchError(origin, kind, side, actual)
    return MoveGenerator(position).destinations_for(kind, side, origin)
