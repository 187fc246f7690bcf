"""Text notation: FEN piece placement and coordinate-pair moves."""

from __future__ import annotations

import re

from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.types import BOARD_SIZE, Coordinate

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_MOVE_RE = re.compile(r"^\s*([a-h][1-8])\s*[-\s]?\s*([a-h][1-8])\s*$", re.IGNORECASE)


def position_from_placement(placement: str) -> Position:
    """Parse the piece-placement field of a FEN string into a :class:`Position`.

    Ranks are listed from 8 down to 1; upper-case letters are
    ``Side.FIRST`` pieces.  Extra FEN fields after the first space are
    ignored.  Scores start at zero.
    """
    fields = placement.split()
    if not fields:
        raise ValueError("Empty placement")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    pieces: dict[Coordinate, Piece] = {}
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                pieces[Coordinate(rank, file)] = Piece.from_char(ch)
                file += 1
            if file > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if file != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")

    return Position.from_pieces(pieces)


def position_to_placement(pos: Position) -> str:
    """Serialise the board of *pos* as a FEN piece-placement field."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            piece = pos.occupant_at(Coordinate(rank, file))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def parse_move(text: str) -> tuple[Coordinate, Coordinate]:
    """Parse 'e2e4', 'e2-e4' or 'e2 e4' into (origin, destination)."""
    match = _MOVE_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid move text: {text!r}")
    return Coordinate.parse(match.group(1)), Coordinate.parse(match.group(2))


def move_text(origin: Coordinate, destination: Coordinate) -> str:
    return f"{origin.name}{destination.name}"
