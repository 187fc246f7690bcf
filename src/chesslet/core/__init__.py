"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chesslet.core import Position, MoveGenerator, Coordinate

    pos = Position.initial()
    gen = MoveGenerator(pos)
    print(sorted(gen.destinations_from(Coordinate.parse("g1"))))
"""

from chesslet.core.enums import PieceKind, Side
from chesslet.core.errors import (
    CaptureInconsistentError,
    ChessletError,
    EmptyOriginError,
    IllegalMoveError,
    MoveError,
    OriginMismatchError,
)
from chesslet.core.move_generator import MoveGenerator, legal_destinations
from chesslet.core.notation import (
    STARTING_PLACEMENT,
    move_text,
    parse_move,
    position_from_placement,
    position_to_placement,
)
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.types import ALL_COORDINATES, Coordinate

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types
    "ALL_COORDINATES",
    "Coordinate",
    # Domain objects
    "MoveGenerator",
    "Piece",
    "Position",
    "legal_destinations",
    # Errors
    "CaptureInconsistentError",
    "ChessletError",
    "EmptyOriginError",
    "IllegalMoveError",
    "MoveError",
    "OriginMismatchError",
    # Notation
    "STARTING_PLACEMENT",
    "move_text",
    "parse_move",
    "position_from_placement",
    "position_to_placement",
]
