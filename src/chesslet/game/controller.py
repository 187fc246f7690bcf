"""GameSession: glue between a Position, the generator and a front end.

Emits events via simple callbacks so the console / tests can subscribe.
Whose turn it is is not tracked; either side may move at any time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslet.core.enums import Side
from chesslet.core.errors import EmptyOriginError, IllegalMoveError
from chesslet.core.move_generator import MoveGenerator, legal_destinations
from chesslet.core.notation import position_from_placement
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.types import Coordinate
from chesslet.game.settings import SessionSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Coordinate, Coordinate, "Piece | None"], None]
CaptureCallback = Callable[[Side, Piece, int], None]  # capturer, taken, new score


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Owns one :class:`Position` and applies validated moves to it."""

    __slots__ = ("_settings", "_position", "events")

    def __init__(
        self,
        settings: SessionSettings | None = None,
        position: Position | None = None,
    ) -> None:
        self._settings = settings if settings is not None else SessionSettings()
        self._position = position if position is not None else self._setup()
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def settings(self) -> SessionSettings:
        return self._settings

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._position = self._setup()
        _LOGGER.debug("New game from placement %s", self._settings.start_placement)

    def destinations(self, origin: Coordinate) -> frozenset[Coordinate]:
        """Destinations of the piece on *origin*.

        Raises:
            EmptyOriginError: *origin* holds no piece.
        """
        piece = self._position.occupant_at(origin)
        if piece is None:
            raise EmptyOriginError(origin)
        return legal_destinations(
            piece.kind,
            piece.side,
            origin,
            self._position,
            strict=self._settings.strict_origin,
        )

    def submit(self, origin: Coordinate, destination: Coordinate) -> Piece | None:
        """Apply the move *origin* -> *destination*.

        Returns the captured piece, if any.

        Raises:
            EmptyOriginError: *origin* holds no piece.
            IllegalMoveError: validation is on and the generator does not
                produce *destination* for the piece on *origin*.
            CaptureInconsistentError: the position is corrupt.
        """
        mover = self._position.occupant_at(origin)
        if mover is None:
            raise EmptyOriginError(origin)

        if self._settings.validate_moves and destination not in self.destinations(origin):
            _LOGGER.debug("Rejected %s%s for %s %s", origin, destination, mover.side, mover.kind)
            raise IllegalMoveError(origin, destination)

        captured = self._position.relocate(origin, destination)
        _LOGGER.debug("Moved %s %s %s%s", mover.side, mover.kind, origin, destination)

        self._emit_move(origin, destination, captured)
        if captured is not None and captured.side != mover.side:
            self._emit_capture(mover.side, captured)
        return captured

    def generator(self) -> MoveGenerator:
        return MoveGenerator(self._position)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _setup(self) -> Position:
        return position_from_placement(self._settings.start_placement)

    def _emit_move(
        self, origin: Coordinate, destination: Coordinate, captured: Piece | None
    ) -> None:
        for cb in self.events.on_move:
            cb(origin, destination, captured)

    def _emit_capture(self, capturer: Side, captured: Piece) -> None:
        score = self._position.score(capturer)
        for cb in self.events.on_capture:
            cb(capturer, captured, score)
