"""Block-stacking ``State`` snapshot."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from arcade_core.components import ActivePiece, Board, Piece, Position, Session
from arcade_core.games.rules import new_seed, turn_rng
from arcade_core.games.stacker.config import StackerConfig
from arcade_core.games.stacker.pieces import random_piece
from arcade_core.utils.board import empty_board, piece_cells


@dataclass(frozen=True)
class State:
    """Immutable block-stacking snapshot.

    Attributes:
        config: Game settings.
        board: Settled material.
        active: The falling piece (``None`` only after the game ended).
        next_piece: Preview of the piece spawned after the next settle.
        session: Score, level, lines to next level and run mode.
        lines: Total rows cleared.
        pieces: Pieces spawned so far; drives the RNG stream.
        turn: Gravity ticks applied so far.
        seed: Base RNG seed.
    """

    config: StackerConfig
    board: Board
    active: Optional[ActivePiece]
    next_piece: Piece
    session: Session
    lines: int = 0
    pieces: int = 0
    turn: int = 0
    seed: int = 0


def spawn_position(board: Board, piece: Piece) -> Position:
    """Top row, horizontally centred."""
    return Position(board.width // 2 - piece.width // 2, 0)


def new_game(config: Optional[StackerConfig] = None, seed: Optional[int] = None) -> State:
    config = config or StackerConfig()
    seed = new_seed(seed)
    board = empty_board(config.width, config.height)
    first = random_piece(turn_rng(seed, 0))
    return State(
        config=config,
        board=board,
        active=ActivePiece(first, spawn_position(board, first)),
        next_piece=random_piece(turn_rng(seed, 1)),
        session=Session(lives=1, remaining=config.lines_per_level),
        pieces=2,
        seed=seed,
    )


def snapshot(state: State) -> PMap[str, Any]:
    active = state.active
    return pmap(
        {
            "game": "stacker",
            "board": state.board,
            "active": active,
            "active_cells": tuple(piece_cells(active.piece, active.position)) if active else (),
            "next_piece": state.next_piece,
            "lines": state.lines,
            "session": state.session,
        }
    )


def leaderboard_meta(state: State) -> Dict[str, Any]:
    return {"lines": state.lines, "level": state.session.level}
