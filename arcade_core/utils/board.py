"""Board model rules.

Pure functions over :class:`arcade_core.components.Board`. Every mutation
returns a new board; the persistent row vectors share structure with the
previous board, so a single-cell change copies one row, not the grid.

Two families live here:

* Cell rules shared by the grid games (walkability with wraparound
  normalization, idempotent pickup consumption, pickup counting).
* Settled-material rules for block-stacking (piece footprint, ``commit`` of a
  landed piece and ``clear_completed_rows``).
"""

from typing import Collection, Dict, List, Mapping, Optional, Sequence, Tuple

from pyrsistent import pvector

from arcade_core.components import (
    ActivePiece,
    Board,
    Cell,
    EMPTY,
    Piece,
    Position,
    filled,
)
from arcade_core.types import CellTag


DEFAULT_PICKUP_POINTS: Dict[CellTag, int] = {
    CellTag.PICKUP: 10,
    CellTag.POWER_PICKUP: 50,
}


def board_from_rows(rows: Sequence[Sequence[Cell]]) -> Board:
    """Build a board from row-major cells; all rows must share one width."""
    if not rows:
        raise ValueError("Board needs at least one row")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("Board rows must all have the same width")
    return Board(
        width=width,
        height=len(rows),
        cells=pvector(pvector(row) for row in rows),
    )


def empty_board(width: int, height: int) -> Board:
    """Return a ``width`` x ``height`` board of ``EMPTY`` cells."""
    return board_from_rows([[EMPTY] * width for _ in range(height)])


def in_bounds(board: Board, pos: Position) -> bool:
    """Return True if ``pos`` lies within the board rectangle."""
    return 0 <= pos.x < board.width and 0 <= pos.y < board.height


def normalize(
    board: Board, pos: Position, wrap_x: bool = False, wrap_y: bool = False
) -> Position:
    """Reduce the wrapping axes of ``pos`` modulo the board size."""
    x = pos.x % board.width if wrap_x else pos.x
    y = pos.y % board.height if wrap_y else pos.y
    return Position(x, y)


def cell_at(board: Board, pos: Position) -> Cell:
    """Return the cell at ``pos``; raises ``IndexError`` when out of bounds."""
    if not in_bounds(board, pos):
        raise IndexError(f"Out of bounds: {(pos.x, pos.y)}")
    return board.cells[pos.y][pos.x]


def set_cell(board: Board, pos: Position, cell: Cell) -> Board:
    """Return a board with ``pos`` replaced by ``cell``."""
    row = board.cells[pos.y].set(pos.x, cell)
    return Board(board.width, board.height, board.cells.set(pos.y, row))


def is_walkable(
    board: Board, pos: Position, wrap_x: bool = False, wrap_y: bool = False
) -> bool:
    """Return True if an entity may stand on ``pos``.

    Wrapping axes are normalized first; a coordinate outside a non-wrapping
    axis, a ``WALL`` and settled ``FILLED`` material are not walkable.
    """
    pos = normalize(board, pos, wrap_x, wrap_y)
    if not in_bounds(board, pos):
        return False
    return not cell_at(board, pos).is_solid


def consume(
    board: Board,
    pos: Position,
    points: Mapping[CellTag, int] = DEFAULT_PICKUP_POINTS,
) -> Tuple[Board, int, bool]:
    """Clear a pickup at ``pos``.

    Returns:
        Tuple[Board, int, bool]: The updated board, the points scored and
        whether the pickup triggers evade-mode. A cell without a pickup is a
        no-op returning ``(board, 0, False)``, which makes consumption
        idempotent.
    """
    if not in_bounds(board, pos):
        return board, 0, False
    tag = cell_at(board, pos).tag
    if tag not in (CellTag.PICKUP, CellTag.POWER_PICKUP):
        return board, 0, False
    return set_cell(board, pos, EMPTY), points.get(tag, 0), tag == CellTag.POWER_PICKUP


def count_pickups(board: Board) -> int:
    """Number of cells still holding a pickup of either kind."""
    return sum(
        1
        for row in board.cells
        for cell in row
        if cell.tag in (CellTag.PICKUP, CellTag.POWER_PICKUP)
    )


def free_cells(board: Board, occupied: Collection[Position] = ()) -> List[Position]:
    """Return ``EMPTY`` cells not in ``occupied``, scanning rows top-down."""
    blocked = set(occupied)
    return [
        Position(x, y)
        for y, row in enumerate(board.cells)
        for x, cell in enumerate(row)
        if cell.tag == CellTag.EMPTY and Position(x, y) not in blocked
    ]


# Block-stacking


def piece_cells(piece: Piece, pos: Position) -> List[Position]:
    """Board coordinates of the filled sub-cells of ``piece`` anchored at ``pos``."""
    return [
        Position(pos.x + dx, pos.y + dy)
        for dy, row in enumerate(piece.shape)
        for dx, flag in enumerate(row)
        if flag
    ]


def piece_fits(board: Board, piece: Piece, pos: Position) -> bool:
    """Return True if ``piece`` at ``pos`` overlaps no wall, floor or settled cell.

    Sub-cells above the top edge are allowed so pieces can enter the board.
    """
    for cell_pos in piece_cells(piece, pos):
        if cell_pos.x < 0 or cell_pos.x >= board.width or cell_pos.y >= board.height:
            return False
        if cell_pos.y >= 0 and cell_at(board, cell_pos).tag != CellTag.EMPTY:
            return False
    return True


def rotate_clockwise(piece: Piece) -> Piece:
    """Return ``piece`` rotated a quarter turn clockwise."""
    rotated = tuple(
        tuple(row[i] for row in reversed(piece.shape)) for i in range(piece.width)
    )
    return Piece(name=piece.name, shape=rotated, color=piece.color)


def commit(board: Board, active: ActivePiece) -> Board:
    """Stamp the footprint of ``active`` into the board as ``FILLED`` cells.

    Sub-cells still above the top edge are discarded.
    """
    cell = filled(active.piece.color)
    for cell_pos in piece_cells(active.piece, active.position):
        if cell_pos.y >= 0:
            board = set_cell(board, cell_pos, cell)
    return board


def clear_completed_rows(board: Board) -> Tuple[Board, int]:
    """Remove every row with no ``EMPTY`` cell.

    Rows above a removed row shift down by the number of rows removed below
    them, and that many empty rows are inserted at the top.

    Returns:
        Tuple[Board, int]: The new board and the number of rows cleared.
    """
    kept = [
        row for row in board.cells if any(cell.tag == CellTag.EMPTY for cell in row)
    ]
    cleared = board.height - len(kept)
    if cleared == 0:
        return board, 0
    blank = pvector([EMPTY] * board.width)
    return Board(board.width, board.height, pvector([blank] * cleared + kept)), cleared


def find_cell(board: Board, tag: CellTag) -> Optional[Position]:
    """Return the first cell holding ``tag`` in row-major order, if any."""
    for y, row in enumerate(board.cells):
        for x, cell in enumerate(row):
            if cell.tag == tag:
                return Position(x, y)
    return None
