"""chesslet: a two-player chess board with per-piece move generation."""

__version__ = "0.1.0"
