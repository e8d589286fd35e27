"""Board component.

The board is stored row-major as a persistent vector of persistent vectors,
so ``cells[y][x]`` is the cell at ``Position(x, y)``. Rules for reading and
changing a board live in :mod:`arcade_core.utils.board`.
"""

from dataclasses import dataclass

from pyrsistent.typing import PVector

from arcade_core.components.cell import Cell


@dataclass(frozen=True)
class Board:
    """Rectangular grid of cells.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        cells: Rows of cells, top row first.
    """

    width: int
    height: int
    cells: PVector[PVector[Cell]]
