"""Block-stacking systems.

A settle is the only event that changes the board: ``commit`` the piece,
clear completed rows once, score them, then spawn the previewed piece.
"""

import logging
from dataclasses import replace

from arcade_core.components import ActivePiece, Position
from arcade_core.games.rules import turn_rng
from arcade_core.games.stacker.pieces import random_piece
from arcade_core.games.stacker.state import State, spawn_position
from arcade_core.scheduler import add_score, end_game
from arcade_core.utils.board import clear_completed_rows, commit, piece_fits, rotate_clockwise

logger = logging.getLogger(__name__)


def shift_system(state: State, dx: int) -> State:
    """Move the active piece sideways; a collision leaves it in place."""
    active = state.active
    if active is None:
        return state
    target = Position(active.position.x + dx, active.position.y)
    if not piece_fits(state.board, active.piece, target):
        return state
    return replace(state, active=replace(active, position=target))


def rotate_system(state: State) -> State:
    """Rotate a quarter turn clockwise about the anchor, unless that collides."""
    active = state.active
    if active is None:
        return state
    rotated = rotate_clockwise(active.piece)
    if not piece_fits(state.board, rotated, active.position):
        return state
    return replace(state, active=replace(active, piece=rotated))


def drop_system(state: State) -> State:
    """Move the active piece down one row, settling it when that is blocked."""
    active = state.active
    if active is None:
        return state
    target = Position(active.position.x, active.position.y + 1)
    if piece_fits(state.board, active.piece, target):
        return replace(state, active=replace(active, position=target))
    return settle_system(state)


def settle_system(state: State) -> State:
    assert state.active is not None
    board = commit(state.board, state.active)
    board, cleared = clear_completed_rows(board)
    state = replace(state, board=board)
    if cleared:
        state = scoring_system(state, cleared)
    return spawn_system(state)


def scoring_system(state: State, cleared: int) -> State:
    """Score ``cleared`` rows at the current level, then update the level."""
    config = state.config
    session = add_score(state.session, config.line_points[cleared] * state.session.level)
    lines = state.lines + cleared
    level = lines // config.lines_per_level + 1
    if level != session.level:
        logger.info("Block-stacking level %d", level)
    session = replace(
        session,
        level=level,
        remaining=config.lines_per_level - lines % config.lines_per_level,
    )
    return replace(state, session=session, lines=lines)


def spawn_system(state: State) -> State:
    """Promote the preview piece; a spawn that collides ends the game."""
    piece = state.next_piece
    position = spawn_position(state.board, piece)
    next_piece = random_piece(turn_rng(state.seed, state.pieces))
    state = replace(state, next_piece=next_piece, pieces=state.pieces + 1)
    if not piece_fits(state.board, piece, position):
        logger.info("Block-stacking over with score %d", state.session.score)
        return replace(state, active=None, session=end_game(state.session))
    return replace(state, active=ActivePiece(piece, position))
