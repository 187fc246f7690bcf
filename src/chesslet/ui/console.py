"""Rich-based rendering of a :class:`Position`."""

from __future__ import annotations

from collections.abc import Collection

from rich.table import Table
from rich.text import Text

from chesslet.core.enums import Side
from chesslet.core.position import Position
from chesslet.core.types import BOARD_SIZE, Coordinate

EMPTY_GLYPH = "."

_LIGHT_SQ = "grey85"
_DARK_SQ = "grey50"
_HIGHLIGHT = "yellow"
_FIRST_STYLE = "bold white"
_SECOND_STYLE = "bold black"


def _glyph(position: Position, coord: Coordinate, unicode_pieces: bool) -> str:
    piece = position.occupant_at(coord)
    if piece is None:
        return EMPTY_GLYPH
    return piece.symbol if unicode_pieces else str(piece)


def board_text(position: Position, *, unicode_pieces: bool = False) -> str:
    """Plain glyph grid, rank 8 first, one glyph per square."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        glyphs = [
            _glyph(position, Coordinate(rank, file), unicode_pieces)
            for file in range(BOARD_SIZE)
        ]
        rows.append(" ".join(glyphs))
    return "\n".join(rows)


def render_board(
    position: Position,
    *,
    unicode_pieces: bool = False,
    highlight: Collection[Coordinate] = (),
) -> Table:
    """Render the board as a Rich table with rank and file labels."""
    table = Table(show_header=False, show_edge=False, pad_edge=False,
                  box=None, padding=(0, 0))

    table.add_column(width=2, justify="right")
    for _ in range(BOARD_SIZE):
        table.add_column(width=3, justify="center")

    for rank in range(BOARD_SIZE - 1, -1, -1):
        row: list[Text] = [Text(f"{rank + 1} ", style="bold")]
        for file in range(BOARD_SIZE):
            coord = Coordinate(rank, file)
            is_light = (rank + file) % 2 == 1
            bg = _LIGHT_SQ if is_light else _DARK_SQ
            if coord in highlight:
                bg = _HIGHLIGHT

            piece = position.occupant_at(coord)
            glyph = _glyph(position, coord, unicode_pieces)
            if piece is None:
                glyph = " " if coord not in highlight else "·"
                style = f"on {bg}"
            else:
                fg = _FIRST_STYLE if piece.side == Side.FIRST else _SECOND_STYLE
                style = f"{fg} on {bg}"
            row.append(Text(f" {glyph} ", style=style))
        table.add_row(*row)

    file_labels = [Text("  ")]
    for f in range(BOARD_SIZE):
        file_labels.append(Text(f" {chr(ord('a') + f)} ", style="bold"))
    table.add_row(*file_labels)
    return table


def render_scores(position: Position) -> Text:
    """One-line score summary, e.g. 'First: 3  Second: 0'."""
    text = Text()
    text.append("First: ", style="bold")
    text.append(str(position.score(Side.FIRST)))
    text.append("  ")
    text.append("Second: ", style="bold")
    text.append(str(position.score(Side.SECOND)))
    return text
