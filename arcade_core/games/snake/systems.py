"""Grid-snake systems."""

import logging
from dataclasses import replace

from pyrsistent import pvector

from arcade_core.games.rules import turn_rng
from arcade_core.games.snake.state import State, place_food
from arcade_core.moves import Blocked, CollidedWithEntity, Consumed, resolve_move
from arcade_core.scheduler import add_score, end_game
from arcade_core.types import CellTag, Direction
from arcade_core.utils.board import consume

logger = logging.getLogger(__name__)


def accepts_turn(heading: Direction, direction: Direction) -> bool:
    """A turn must change the heading and must not reverse it."""
    return direction != heading and direction != heading.opposite()


def steering_system(state: State) -> State:
    """Apply the oldest buffered intent, if it is still a valid turn."""
    if not state.pending:
        return state
    direction = state.pending[0]
    pending = state.pending.delete(0)
    if not accepts_turn(state.heading, direction):
        return replace(state, pending=pending)
    return replace(state, pending=pending, heading=direction)


def movement_system(state: State) -> State:
    """Advance the head one cell.

    The tail cell is vacated in the same tick unless the snake grows, and
    growth only happens on food, which never lies on the body; so the tail
    is never an obstacle.
    """
    occupants = {pos: "body" for pos in state.body[:-1]}
    outcome = resolve_move(
        state.board,
        state.head,
        state.heading,
        state.wrap,
        occupants=occupants,
        points={CellTag.PICKUP: state.config.food_points},
    )
    if isinstance(outcome, (Blocked, CollidedWithEntity)):
        logger.info("Snake crashed at length %d, score %d", len(state.body), state.session.score)
        return replace(state, session=end_game(state.session))

    if isinstance(outcome, Consumed):
        return eat_system(replace(state, body=pvector([outcome.position]) + state.body))

    body = pvector([outcome.position]) + state.body[:-1]
    return replace(state, body=body)


def eat_system(state: State) -> State:
    """Score the food under the head and respawn it on a free cell."""
    board, points, _ = consume(
        state.board, state.head, {CellTag.PICKUP: state.config.food_points}
    )
    session = add_score(state.session, points)
    board, food = place_food(board, state.body, turn_rng(state.seed, state.turn + 1))
    if food is None:
        logger.info("Snake filled the grid, score %d", session.score)
        session = end_game(session)
    return replace(state, board=board, session=session)
