"""Grid-snake ``State`` snapshot.

The board only ever holds ``EMPTY`` cells and the single food ``PICKUP``;
the body is a persistent vector of positions, head first.
"""

import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from arcade_core.components import PICKUP, Board, Position, Session
from arcade_core.games.rules import new_seed, turn_rng
from arcade_core.games.snake.config import MODE_MOVE_POLICIES, SnakeConfig
from arcade_core.moves import MOVE_POLICY_REGISTRY
from arcade_core.types import CellTag, Direction, WrapRule
from arcade_core.utils.board import empty_board, find_cell, free_cells, set_cell


@dataclass(frozen=True)
class State:
    """Immutable grid-snake snapshot.

    Attributes:
        config: Game settings.
        board: Grid holding the food pickup.
        body: Segments, head first.
        heading: Direction of the last applied move.
        session: Score and run mode (one life).
        pending: Buffered direction intents, oldest first.
        turn: Ticks applied so far.
        seed: Base RNG seed.
    """

    config: SnakeConfig
    board: Board
    body: PVector[Position]
    heading: Direction
    session: Session
    pending: PVector[Direction] = pvector()
    turn: int = 0
    seed: int = 0

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def food(self) -> Optional[Position]:
        return find_cell(self.board, CellTag.PICKUP)

    @property
    def wrap(self) -> WrapRule:
        return MOVE_POLICY_REGISTRY[MODE_MOVE_POLICIES[self.config.mode]]


def place_food(
    board: Board, body: PVector[Position], rng: random.Random
) -> Tuple[Board, Optional[Position]]:
    """Put food on a random free cell; ``None`` when the snake fills the grid."""
    options = free_cells(board, body)
    if not options:
        return board, None
    pos = rng.choice(options)
    return set_cell(board, pos, PICKUP), pos


def new_game(config: Optional[SnakeConfig] = None, seed: Optional[int] = None) -> State:
    config = config or SnakeConfig()
    seed = new_seed(seed)
    body = pvector(config.body)
    board, _ = place_food(empty_board(config.width, config.height), body, turn_rng(seed, 0))
    return State(
        config=config,
        board=board,
        body=body,
        heading=config.heading,
        session=Session(lives=1),
        seed=seed,
    )


def snapshot(state: State) -> PMap[str, Any]:
    return pmap(
        {
            "game": "snake",
            "width": state.config.width,
            "height": state.config.height,
            "body": state.body,
            "heading": state.heading,
            "food": state.food,
            "mode": state.config.mode,
            "session": state.session,
        }
    )


def leaderboard_meta(state: State) -> Dict[str, Any]:
    return {"mode": str(state.config.mode).upper()}
