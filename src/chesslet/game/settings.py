"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.notation import STARTING_PLACEMENT


@dataclass
class SessionSettings:
    """All user-configurable settings for a play session."""

    # Rules
    validate_moves: bool = True
    strict_origin: bool = False

    # Display
    unicode_pieces: bool = False
    show_scores: bool = True

    # Setup
    start_placement: str = STARTING_PLACEMENT

    # Diagnostics
    log_level: str = "WARNING"
