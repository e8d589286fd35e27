# tests/unit/test_moves.py

import pytest
from typing import Tuple

from arcade_core.components import Position, Rect
from arcade_core.games.maze.layout import parse_layout
from arcade_core.moves import (
    MOVE_POLICY_REGISTRY,
    Blocked,
    CollidedWithEntity,
    Consumed,
    Moved,
    outcome_position,
    rects_overlap,
    resolve_move,
    shapes_collide,
)
from arcade_core.types import CellTag, Direction
from tests.test_utils import make_open_board


TUNNEL_ROWS = (
    "#####",
    "     ",
    "#####",
)

OPEN_ROWS = (
    "   ",
    "   ",
    "   ",
)


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        ((2, 2), Direction.UP, (2, 1)),
        ((2, 2), Direction.DOWN, (2, 3)),
        ((2, 2), Direction.LEFT, (1, 2)),
        ((2, 2), Direction.RIGHT, (3, 2)),
    ],
)
def test_open_moves(
    start: Tuple[int, int], direction: Direction, expected: Tuple[int, int]
) -> None:
    board = make_open_board()
    outcome = resolve_move(board, Position(*start), direction)
    assert outcome == Moved(Position(*expected))


def test_wall_blocks_and_position_is_unchanged() -> None:
    board = make_open_board()
    start = Position(1, 1)
    outcome = resolve_move(board, start, Direction.LEFT)
    assert isinstance(outcome, Blocked)
    assert outcome_position(outcome, start) == start


def test_no_direction_is_blocked() -> None:
    assert isinstance(resolve_move(make_open_board(), Position(2, 2), None), Blocked)


@pytest.mark.parametrize(
    "policy, start, direction, expected",
    [
        ("tunnel", (0, 1), Direction.LEFT, (4, 1)),
        ("tunnel", (4, 1), Direction.RIGHT, (0, 1)),
        ("bounded", (0, 1), Direction.LEFT, None),
        ("bounded", (4, 1), Direction.RIGHT, None),
    ],
)
def test_horizontal_tunnel(policy, start, direction, expected) -> None:
    board = parse_layout(TUNNEL_ROWS)
    outcome = resolve_move(
        board, Position(*start), direction, MOVE_POLICY_REGISTRY[policy]
    )
    if expected is None:
        assert isinstance(outcome, Blocked)
    else:
        assert outcome == Moved(Position(*expected))


@pytest.mark.parametrize(
    "policy, expected",
    [
        ("tunnel", None),
        ("bounded", None),
        ("torus", (1, 2)),
        ("clamped", None),
    ],
)
def test_vertical_edge_policies(policy, expected) -> None:
    board = parse_layout(OPEN_ROWS)
    outcome = resolve_move(
        board, Position(1, 0), Direction.UP, MOVE_POLICY_REGISTRY[policy]
    )
    if expected is None:
        assert isinstance(outcome, Blocked)
    else:
        assert outcome == Moved(Position(*expected))


def test_pickups_are_reported_with_points() -> None:
    board = parse_layout(("#####", "#.o #", "#####"))
    pellet = resolve_move(board, Position(3, 1), Direction.LEFT)
    assert pellet == Consumed(Position(2, 1), points=50, power=True)

    plain = resolve_move(board, Position(2, 1), Direction.LEFT)
    assert plain == Consumed(Position(1, 1), points=10, power=False)


def test_custom_point_table() -> None:
    board = parse_layout(("####", "#. #", "####"))
    outcome = resolve_move(
        board, Position(2, 1), Direction.LEFT, points={CellTag.PICKUP: 7}
    )
    assert outcome == Consumed(Position(1, 1), points=7, power=False)


def test_occupied_destination_collides() -> None:
    board = make_open_board()
    outcome = resolve_move(
        board,
        Position(1, 1),
        Direction.RIGHT,
        occupants={Position(2, 1): "ghost-0"},
    )
    assert outcome == CollidedWithEntity(other="ghost-0", position=Position(2, 1))
    assert outcome_position(outcome, Position(1, 1)) == Position(2, 1)


def test_wall_takes_precedence_over_occupant() -> None:
    board = make_open_board()
    outcome = resolve_move(
        board,
        Position(1, 1),
        Direction.UP,
        occupants={Position(1, 0): "ghost-0"},
    )
    assert isinstance(outcome, Blocked)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10), True),
        (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10), False),
        (Rect(0, 0, 10, 10), Rect(0, 10, 10, 10), False),
        (Rect(0, 0, 10, 10), Rect(2, 2, 2, 2), True),
        (Rect(0, 0, 4, 10), Rect(100, 0, 40, 30), False),
    ],
)
def test_rects_overlap(a: Rect, b: Rect, expected: bool) -> None:
    assert rects_overlap(a, b) is expected
    assert rects_overlap(b, a) is expected


def test_shapes_collide_dispatches_on_shape() -> None:
    assert shapes_collide(Position(1, 1), Position(1, 1))
    assert not shapes_collide(Position(1, 1), Position(1, 2))
    assert shapes_collide(Position(3, 3), Rect(0, 0, 5, 5))
    assert shapes_collide(Rect(0, 0, 5, 5), Position(0, 0))
    assert not shapes_collide(Position(5, 0), Rect(0, 0, 5, 5))
