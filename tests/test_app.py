"""Tests for the command-line driver."""

import io
from collections.abc import Iterator

import pytest
from rich.console import Console

from chesslet.app import (
    PROMPT,
    _handle,
    build_parser,
    main,
    run_session,
    settings_from_args,
)
from chesslet.core.enums import PieceKind, Side
from chesslet.core.errors import CaptureInconsistentError
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.types import D4, D5, E2, E4
from chesslet.game.controller import GameSession
from chesslet.game.settings import SessionSettings


def _script(*lines: str):
    """read_line stand-in that replays *lines* then signals EOF."""
    it: Iterator[str] = iter(lines)
    prompts: list[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    read.prompts = prompts  # type: ignore[attr-defined]
    return read


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestArguments:
    def test_defaults(self) -> None:
        settings = settings_from_args(build_parser().parse_args([]))
        assert settings == SessionSettings()

    def test_flags(self) -> None:
        args = build_parser().parse_args([
            "--no-validate", "--strict-origin", "--unicode", "--no-scores",
            "--placement", "8/8/8/8/8/8/8/8", "--log-level", "DEBUG",
        ])
        settings = settings_from_args(args)
        assert settings.validate_moves is False
        assert settings.strict_origin is True
        assert settings.unicode_pieces is True
        assert settings.show_scores is False
        assert settings.start_placement == "8/8/8/8/8/8/8/8"
        assert settings.log_level == "DEBUG"


class TestRunSession:
    def test_move_then_exit(self, console: Console) -> None:
        session = GameSession()
        read = _script("e2e4", "exit", "d2d4")
        assert run_session(session, console, read) == 0
        assert session.position.occupant_at(E4) == Piece(PieceKind.PAWN, Side.FIRST)
        assert session.position.is_empty(E2)
        # d2d4 was never read
        assert read.prompts == [PROMPT, PROMPT]

    def test_eof_ends_loop(self, console: Console) -> None:
        assert run_session(GameSession(), console, _script()) == 0

    def test_illegal_move_reported(self, console: Console) -> None:
        session = GameSession()
        run_session(session, console, _script("e2e5", "quit"))
        assert "Illegal move e2e5" in _output(console)
        assert session.position == Position.initial()

    def test_empty_origin_reported(self, console: Console) -> None:
        run_session(GameSession(), console, _script("e4e5"))
        assert "No piece at the starting position e4" in _output(console)

    def test_bad_text_reported(self, console: Console) -> None:
        run_session(GameSession(), console, _script("hello", ""))
        assert "Invalid move text" in _output(console)

    def test_capture_reported(self, console: Console) -> None:
        settings = SessionSettings(start_placement="8/8/8/3n4/3R4/8/8/8")
        session = GameSession(settings)
        run_session(session, console, _script("d4d5"))
        out = _output(console)
        assert "Piece Taken!" in out
        assert "First: 3" in out

    def test_scores_hidden(self, console: Console) -> None:
        session = GameSession(SessionSettings(show_scores=False))
        run_session(session, console, _script())
        assert "First:" not in _output(console)

    def test_moves_for_square(self, console: Console) -> None:
        run_session(GameSession(), console, _script("moves g1"))
        assert "g1: f3 h3" in _output(console)

    def test_moves_for_side(self, console: Console) -> None:
        run_session(GameSession(), console, _script("moves second"))
        out = _output(console)
        assert "b8: a6 c6" in out
        assert "e7: e5 e6" in out

    def test_moves_usage(self, console: Console) -> None:
        run_session(GameSession(), console, _script("moves"))
        assert "Usage: moves" in _output(console)

    def test_help(self, console: Console) -> None:
        run_session(GameSession(), console, _script("help"))
        assert "Commands:" in _output(console)

    def test_new_resets(self, console: Console) -> None:
        session = GameSession()
        run_session(session, console, _script("e2e4", "new"))
        assert session.position == Position.initial()

    def test_inconsistent_capture_propagates(self, console: Console) -> None:
        broken = Piece(PieceKind.KNIGHT, None)  # type: ignore[arg-type]
        pos = Position.from_pieces({D4: Piece(PieceKind.ROOK, Side.FIRST), D5: broken})
        session = GameSession(SessionSettings(validate_moves=False), position=pos)
        with pytest.raises(CaptureInconsistentError):
            _handle(console, session, "d4d5")
        assert pos.occupant_at(D5) == broken

    def test_same_square_reported_without_validation(self, console: Console) -> None:
        session = GameSession(SessionSettings(validate_moves=False))
        run_session(session, console, _script("e2e2"))
        assert "Illegal move e2e2" in _output(console)
        assert session.position == Position.initial()


class TestBoardOutput:
    def test_plain_grid_when_piped(self, console: Console) -> None:
        run_session(GameSession(), console, _script())
        out = _output(console)
        assert "r n b q k b n r" in out
        assert "R N B Q K B N R" in out

    def test_table_on_terminal(self) -> None:
        terminal = Console(
            file=io.StringIO(), width=100, color_system=None, force_terminal=True
        )
        run_session(GameSession(), terminal, _script())
        out = _output(terminal)
        assert "R N B Q K B N R" not in out
        for label in "abcdefgh":
            assert f" {label} " in out


class TestMain:
    def test_bad_placement_exit_code(self) -> None:
        assert main(["--placement", "nonsense"]) == 2
