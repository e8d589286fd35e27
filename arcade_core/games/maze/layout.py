"""Canonical maze layout.

Legend: ``#`` wall, ``-`` agent-house door (solid), ``.`` dot, ``o`` power
pellet, space for an empty corridor. Row 14 is open at both ends: the
horizontal tunnel.
"""

from typing import Dict, Sequence

from arcade_core.components import Board, Cell, EMPTY, PICKUP, POWER_PICKUP, WALL
from arcade_core.utils.board import board_from_rows


MAZE_LAYOUT = (
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#o####.#####.##.#####.####o#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "     #.##### ## #####.#     ",
    "     #.##          ##.#     ",
    "     #.## ###--### ##.#     ",
    "######.## #      # ##.######",
    "      .   #      #   .      ",
    "######.## #      # ##.######",
    "     #.## ######## ##.#     ",
    "     #.##          ##.#     ",
    "     #.## ######## ##.#     ",
    "######.## ######## ##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#o..##.......  .......##..o#",
    "###.##.##.########.##.##.###",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
)

LEGEND: Dict[str, Cell] = {
    "#": WALL,
    "-": WALL,
    ".": PICKUP,
    "o": POWER_PICKUP,
    " ": EMPTY,
}


def parse_layout(rows: Sequence[str]) -> Board:
    """Build a board from legend rows; unknown characters raise ``ValueError``."""
    try:
        return board_from_rows([[LEGEND[char] for char in row] for row in rows])
    except KeyError as e:
        raise ValueError(f"Unknown maze layout character: {e.args[0]!r}") from e
