"""arcade_core.components
=======================

Aggregate import surface for the component dataclasses shared by the four
games. Components are frozen value objects with no behavior beyond simple
derived properties; systems and utilities transform them::

    from arcade_core.components import Board, Position, Session
"""

from .board import Board
from .cell import Cell, EMPTY, PICKUP, POWER_PICKUP, WALL, filled
from .ghost import Ghost
from .piece import ActivePiece, Piece, Shape
from .position import Position
from .rect import Rect
from .session import Session

__all__ = [
    "ActivePiece",
    "Board",
    "Cell",
    "EMPTY",
    "Ghost",
    "PICKUP",
    "POWER_PICKUP",
    "Piece",
    "Position",
    "Rect",
    "Session",
    "Shape",
    "WALL",
    "filled",
]
