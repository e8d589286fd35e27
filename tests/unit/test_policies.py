import random

import pytest

from arcade_core.components import Ghost, Position
from arcade_core.games.maze.layout import MAZE_LAYOUT, parse_layout
from arcade_core.moves import MOVE_POLICY_REGISTRY
from arcade_core.policies import (
    AgentView,
    POLICY_REGISTRY,
    candidate_moves,
    decide,
    valid_directions,
)
from arcade_core.types import AgentRole, Direction
from arcade_core.utils.math import manhattan_distance, step_position
from tests.test_utils import make_open_board


class FixedRandom(random.Random):
    """``random()`` always returns ``value``; other draws stay seeded."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def make_ghost(
    role: AgentRole, pos: tuple[int, int], direction: Direction
) -> Ghost:
    return Ghost(
        role=role,
        position=Position(*pos),
        direction=direction,
    )


def make_view(
    player: tuple[int, int],
    facing: Direction = Direction.LEFT,
    board=None,
    evade: bool = False,
    rng: random.Random | None = None,
) -> AgentView:
    return AgentView(
        board=board if board is not None else make_open_board(),
        player_position=Position(*player),
        player_direction=facing,
        evade=evade,
        rng=rng or random.Random(0),
    )


def test_pursuer_minimizes_distance() -> None:
    ghost = make_ghost(AgentRole.PURSUER, (4, 4), Direction.LEFT)
    assert decide(ghost, make_view((4, 7))) == Direction.DOWN


def test_ties_break_in_enumeration_order() -> None:
    # UP and LEFT both end 3 cells from the player.
    ghost = make_ghost(AgentRole.PURSUER, (4, 4), Direction.LEFT)
    assert decide(ghost, make_view((2, 2))) == Direction.UP


def test_reversal_excluded_when_alternatives_exist() -> None:
    board = parse_layout(("#####", "#   #", "#####"))
    ghost = make_ghost(AgentRole.PURSUER, (2, 1), Direction.RIGHT)
    view = make_view((1, 1), board=board)
    assert valid_directions(ghost, view) == [Direction.RIGHT]
    assert decide(ghost, view) == Direction.RIGHT


def test_reversal_allowed_in_dead_end() -> None:
    board = parse_layout(("#####", "#   #", "#####"))
    ghost = make_ghost(AgentRole.PURSUER, (1, 1), Direction.LEFT)
    assert decide(ghost, make_view((3, 1), board=board)) == Direction.RIGHT


def test_boxed_in_agent_has_no_move() -> None:
    board = parse_layout(("###", "# #", "###"))
    ghost = make_ghost(AgentRole.PURSUER, (1, 1), Direction.UP)
    assert candidate_moves(ghost, make_view((1, 1), board=board)) == []
    assert decide(ghost, make_view((1, 1), board=board)) is None


def test_candidates_follow_the_tunnel() -> None:
    board = parse_layout(("#####", "     ", "#####"))
    ghost = make_ghost(AgentRole.PURSUER, (0, 1), Direction.LEFT)
    view = AgentView(
        board=board,
        player_position=Position(2, 1),
        player_direction=Direction.LEFT,
        wrap=MOVE_POLICY_REGISTRY["tunnel"],
    )
    assert candidate_moves(ghost, view) == [(Direction.LEFT, Position(4, 1))]


def test_ambusher_targets_ahead_of_player() -> None:
    ghost = make_ghost(AgentRole.AMBUSHER, (4, 4), Direction.UP)
    view = make_view((4, 6), facing=Direction.RIGHT)
    assert decide(ghost, view) == Direction.RIGHT
    pursuer = make_ghost(AgentRole.PURSUER, (4, 4), Direction.UP)
    assert decide(pursuer, view) == Direction.UP


@pytest.mark.parametrize(
    "player, expected",
    [
        ((7, 6), Direction.UP),  # distance 8: flee
        ((7, 7), Direction.RIGHT),  # distance 9: pursue
    ],
)
def test_threshold_flee(player, expected) -> None:
    ghost = make_ghost(AgentRole.THRESHOLD_FLEE, (1, 4), Direction.UP)
    assert decide(ghost, make_view(player)) == expected


def test_mixed_pursues_on_low_draw() -> None:
    ghost = make_ghost(AgentRole.MIXED, (4, 4), Direction.LEFT)
    view = make_view((4, 7), rng=FixedRandom(0.0))
    assert decide(ghost, view) == Direction.DOWN


def test_mixed_wanders_among_valid_directions() -> None:
    ghost = make_ghost(AgentRole.MIXED, (4, 4), Direction.LEFT)
    view = make_view((4, 7), rng=FixedRandom(0.99))
    for _ in range(20):
        assert decide(ghost, view) in valid_directions(ghost, view)


def test_mixed_is_reproducible_for_a_seed() -> None:
    ghost = make_ghost(AgentRole.MIXED, (4, 4), Direction.LEFT)
    first = [decide(ghost, make_view((4, 7), rng=random.Random(seed))) for seed in range(30)]
    second = [decide(ghost, make_view((4, 7), rng=random.Random(seed))) for seed in range(30)]
    assert first == second


@pytest.mark.parametrize("role", list(AgentRole))
def test_evade_overrides_every_role(role: AgentRole) -> None:
    ghost = make_ghost(role, (4, 4), Direction.LEFT)
    view = make_view((4, 7), evade=True, rng=FixedRandom(0.0))
    # Fleeing maximizes distance: UP and LEFT tie at 4, UP wins.
    assert decide(ghost, view) == Direction.UP


def test_every_role_has_a_policy() -> None:
    assert set(POLICY_REGISTRY) == set(AgentRole)


def test_pursuer_at_spawn_on_canonical_maze() -> None:
    board = parse_layout(MAZE_LAYOUT)
    ghost = make_ghost(AgentRole.PURSUER, (13, 11), Direction.LEFT)
    view = make_view((14, 23), board=board)
    # Walls around the house leave only LEFT: UP is wall, DOWN is the door,
    # RIGHT would reverse. The open-board case below has no such obstacles.
    assert valid_directions(ghost, view) == [Direction.LEFT]
    assert decide(ghost, view) == Direction.LEFT


def test_pursuer_closes_in_on_open_board() -> None:
    board = make_open_board(28, 31)
    ghost = make_ghost(AgentRole.PURSUER, (13, 11), Direction.LEFT)
    view = make_view((14, 23), board=board)
    distance = manhattan_distance(ghost.position, view.player_position)
    for _ in range(10):
        direction = decide(ghost, view)
        ghost = Ghost(
            role=ghost.role,
            position=step_position(ghost.position, direction),
            direction=direction,
        )
        closer = manhattan_distance(ghost.position, view.player_position)
        assert closer < distance
        distance = closer
    assert distance == 3
