"""Command-line entry point: an interactive two-player board."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Collection, Sequence

from rich.console import Console
from rich.text import Text

from chesslet.core.enums import Side
from chesslet.core.errors import (
    EmptyOriginError,
    IllegalMoveError,
    OriginMismatchError,
)
from chesslet.core.notation import move_text, parse_move
from chesslet.core.types import Coordinate
from chesslet.game.controller import GameSession
from chesslet.game.settings import SessionSettings
from chesslet.ui.console import board_text, render_board, render_scores

_LOGGER = logging.getLogger(__name__)

PROMPT = "Enter move (e.g. e2e4): "

HELP_TEXT = """\
Commands:
  e2e4          move the piece on e2 to e4 (also e2-e4, e2 e4)
  moves e2      show where the piece on e2 may go
  moves first   list every move for a side (first / second)
  new           start again from the opening placement
  help          show this text
  exit, quit    leave"""

# Failures the user can fix by typing something else.
_USER_ERRORS = (ValueError, EmptyOriginError, IllegalMoveError, OriginMismatchError)

ReadLine = Callable[[str], str]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesslet",
        description="Two-player chess board with move checking",
    )
    parser.add_argument(
        "--no-validate", action="store_true",
        help="Apply moves without checking them against the move generator",
    )
    parser.add_argument(
        "--strict-origin", action="store_true",
        help="Fail fast if a generator query does not match the board",
    )
    parser.add_argument(
        "--unicode", action="store_true",
        help="Draw pieces with Unicode figurines instead of letters",
    )
    parser.add_argument(
        "--no-scores", action="store_true",
        help="Hide the capture score line",
    )
    parser.add_argument(
        "--placement", default=None,
        help="FEN piece placement to start from (default: standard opening)",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> SessionSettings:
    settings = SessionSettings(
        validate_moves=not args.no_validate,
        strict_origin=args.strict_origin,
        unicode_pieces=args.unicode,
        show_scores=not args.no_scores,
        log_level=args.log_level,
    )
    if args.placement:
        settings.start_placement = args.placement
    return settings


def _show(
    console: Console,
    session: GameSession,
    highlight: Collection[Coordinate] = (),
) -> None:
    settings = session.settings
    if console.is_terminal:
        board = render_board(
            session.position,
            unicode_pieces=settings.unicode_pieces,
            highlight=highlight,
        )
    else:
        # Piped output: plain glyph grid, no colours or table padding.
        board = Text(board_text(session.position, unicode_pieces=settings.unicode_pieces))
    console.print(board)
    if settings.show_scores:
        console.print(render_scores(session.position))


def _list_side_moves(console: Console, session: GameSession, side: Side) -> None:
    found = session.generator().all_destinations(side)
    if not found:
        console.print(f"No moves for {side}")
        return
    for origin in sorted(found):
        targets = " ".join(sorted(c.name for c in found[origin]))
        console.print(f"{origin}: {targets}")


def _handle(console: Console, session: GameSession, line: str) -> None:
    """Execute one non-exit command line."""
    words = line.split()
    command = words[0].lower()

    if command == "help":
        console.print(Text(HELP_TEXT))
        return

    if command == "new":
        session.new_game()
        _show(console, session)
        return

    if command == "moves":
        if len(words) != 2:
            raise ValueError("Usage: moves <square|first|second>")
        arg = words[1].lower()
        if arg in ("first", "second"):
            _list_side_moves(console, session, Side[arg.upper()])
            return
        origin = Coordinate.parse(arg)
        targets = session.destinations(origin)
        _show(console, session, highlight=targets)
        names = " ".join(sorted(c.name for c in targets)) or "(none)"
        console.print(f"{origin}: {names}")
        return

    origin, destination = parse_move(line)
    captured = session.submit(origin, destination)
    _LOGGER.debug("Applied %s", move_text(origin, destination))
    if captured is not None:
        console.print(Text(f"Piece Taken! {captured.side} {captured.kind}", style="bold"))
    _show(console, session)


def run_session(
    session: GameSession,
    console: Console,
    read_line: ReadLine | None = None,
) -> int:
    """Read-move-apply loop.  Returns the process exit code.

    User mistakes are reported and the prompt repeats.  A
    :class:`~chesslet.core.errors.CaptureInconsistentError` is a defect and
    propagates to the caller.
    """
    read = read_line if read_line is not None else console.input
    _show(console, session)
    while True:
        try:
            line = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            return 0

        line = line.strip()
        if not line:
            continue
        if line.lower() in ("exit", "quit"):
            return 0

        try:
            _handle(console, session, line)
        except _USER_ERRORS as exc:
            _LOGGER.debug("Command %r failed: %s", line, exc)
            console.print(Text(str(exc), style="red"))


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the interactive chesslet board."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        session = GameSession(settings)
    except ValueError as exc:
        _LOGGER.error("Cannot start session: %s", exc)
        return 2
    return run_session(session, Console())


if __name__ == "__main__":
    sys.exit(main())
