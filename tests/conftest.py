"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from chesslet.core.position import Position


@pytest.fixture
def empty_position() -> Position:
    return Position.empty()


@pytest.fixture
def start_position() -> Position:
    return Position.initial()


@pytest.fixture
def console() -> Console:
    """Console writing plain text to an in-memory buffer."""
    return Console(file=io.StringIO(), width=100, color_system=None, force_terminal=False)
