"""The seven tetrominoes.

Shapes are given in their spawn orientation; colours are renderer hints
stamped into settled cells.
"""

import random
from typing import Dict, Tuple

from arcade_core.components import Piece


TETROMINOES: Tuple[Piece, ...] = (
    Piece("I", ((1, 1, 1, 1),), "cyan"),
    Piece("O", ((1, 1), (1, 1)), "yellow"),
    Piece("T", ((0, 1, 0), (1, 1, 1)), "purple"),
    Piece("S", ((0, 1, 1), (1, 1, 0)), "green"),
    Piece("Z", ((1, 1, 0), (0, 1, 1)), "red"),
    Piece("J", ((1, 0, 0), (1, 1, 1)), "blue"),
    Piece("L", ((0, 0, 1), (1, 1, 1)), "orange"),
)

PIECES_BY_NAME: Dict[str, Piece] = {piece.name: piece for piece in TETROMINOES}


def random_piece(rng: random.Random) -> Piece:
    """Uniform draw from the seven tetrominoes."""
    return rng.choice(TETROMINOES)
