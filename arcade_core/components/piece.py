"""Falling piece components for block-stacking.

``shape`` rows are tuples of 0/1 flags; a 1 marks a filled sub-cell. The
active piece is anchored by the position of its shape's top-left corner.
"""

from dataclasses import dataclass
from typing import Tuple

from arcade_core.components.position import Position


Shape = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class Piece:
    """Tetromino template.

    Attributes:
        name: One-letter name (I, O, T, S, Z, J, L).
        shape: Rows of 0/1 flags.
        color: Colour stamped into the board when the piece settles.
    """

    name: str
    shape: Shape
    color: str

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)


@dataclass(frozen=True)
class ActivePiece:
    """The piece currently falling and where it is."""

    piece: Piece
    position: Position
