"""Game management layer: session glue and settings.

Quick start::

    from chesslet.game import GameSession
    from chesslet.core import Coordinate

    session = GameSession()
    session.submit(Coordinate.parse("e2"), Coordinate.parse("e4"))
"""

from chesslet.game.controller import GameSession, SessionEvents
from chesslet.game.settings import SessionSettings

__all__ = [
    "GameSession",
    "SessionEvents",
    "SessionSettings",
]
