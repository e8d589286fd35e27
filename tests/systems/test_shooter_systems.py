import pytest
from dataclasses import replace

from pyrsistent import pset, pvector

from arcade_core.actions import Action
from arcade_core.components import Rect
from arcade_core.games.shooter import Bullet
from arcade_core.games.shooter.systems import (
    alien_fire_system,
    alien_movement_system,
    bullet_movement_system,
    collision_system,
    fire_system,
    invasion_system,
    player_movement_system,
    wave_system,
)
from arcade_core.types import RunMode
from tests.test_utils import make_alien, make_shooter_state


def player_bullet(x: float, y: float) -> Bullet:
    return Bullet(rect=Rect(x, y, 4.0, 10.0), from_player=True)


def alien_bullet(x: float, y: float) -> Bullet:
    return Bullet(rect=Rect(x, y, 4.0, 10.0), from_player=False)


@pytest.mark.parametrize(
    "start, held, expected",
    [
        (400.0, {Action.LEFT}, 395.0),
        (400.0, {Action.RIGHT}, 405.0),
        (400.0, {Action.LEFT, Action.RIGHT}, 400.0),
        (2.0, {Action.LEFT}, 0.0),
        (748.0, {Action.RIGHT}, 750.0),
    ],
)
def test_player_moves_while_held(start: float, held, expected: float) -> None:
    state = make_shooter_state(player_x=start)
    state = replace(state, held=pset(held))
    assert player_movement_system(state).player.x == expected


def test_fire_launches_from_ship_centre() -> None:
    state = fire_system(make_shooter_state())
    assert len(state.bullets) == 1
    assert state.bullets[0] == player_bullet(423.0, 540.0)
    assert state.last_shot_ms == 0.0


def test_fire_cooldown_on_game_clock() -> None:
    state = fire_system(make_shooter_state())
    assert len(fire_system(replace(state, clock_ms=300.0)).bullets) == 1
    assert len(fire_system(replace(state, clock_ms=301.0)).bullets) == 2


def test_bullets_move_and_leave_the_field() -> None:
    state = make_shooter_state(aliens=[])
    state = replace(
        state,
        bullets=pvector(
            [
                player_bullet(10, 540),
                player_bullet(10, -5),
                alien_bullet(10, 100),
                alien_bullet(10, 598),
            ]
        ),
    )
    bullets = bullet_movement_system(state).bullets
    assert [bullet.rect.y for bullet in bullets] == [532.0, 103.0]


def test_formation_marches_sideways() -> None:
    state = make_shooter_state(aliens=[make_alien(100, 50)])
    new_state = alien_movement_system(state)
    assert new_state.aliens[0].rect.x == pytest.approx(100.1)
    assert new_state.aliens[0].rect.y == 50
    assert new_state.march == 1


@pytest.mark.parametrize("x, march", [(755.0, 1), (5.0, -1)])
def test_formation_drops_and_reverses_at_edge(x: float, march: int) -> None:
    state = make_shooter_state(aliens=[make_alien(x, 50)])
    state = replace(state, march=march)
    new_state = alien_movement_system(state)
    assert new_state.aliens[0].rect == Rect(x, 55.0, 40.0, 30.0)
    assert new_state.march == -march


def test_march_speed_grows_per_level() -> None:
    state = make_shooter_state()
    state = replace(state, session=replace(state.session, level=3))
    assert state.alien_speed == pytest.approx(0.14)


@pytest.mark.parametrize("level, interval", [(1, 3700), (5, 2500), (9, 1500), (12, 1500)])
def test_alien_fire_interval(level: int, interval: float) -> None:
    state = make_shooter_state()
    state = replace(state, session=replace(state.session, level=level))
    assert state.alien_fire_interval_ms == interval


def test_alien_fires_after_interval() -> None:
    state = make_shooter_state(aliens=[make_alien(100, 50)])
    assert alien_fire_system(replace(state, clock_ms=3700.0)).bullets == state.bullets
    fired = alien_fire_system(replace(state, clock_ms=3701.0))
    assert list(fired.bullets) == [alien_bullet(118.0, 80.0)]
    assert fired.alien_last_shot_ms == 3701.0


def test_player_bullet_kills_alien() -> None:
    state = make_shooter_state(aliens=[make_alien(100, 50, kind=0), make_alien(300, 50, kind=2)])
    state = replace(state, bullets=pvector([player_bullet(110, 70)]))
    new_state = collision_system(state)
    assert new_state.session.score == 30
    assert [alien.kind for alien in new_state.aliens] == [2]
    assert new_state.session.remaining == 1
    assert len(new_state.bullets) == 0


def test_hits_collected_before_applying() -> None:
    # One bullet overlapping two aliens kills both.
    aliens = [make_alien(100, 50, kind=1), make_alien(102, 50, kind=2)]
    state = make_shooter_state(aliens=aliens)
    state = replace(state, bullets=pvector([player_bullet(120, 60)]))
    new_state = collision_system(state)
    assert new_state.session.score == 30
    assert len(new_state.aliens) == 0


def test_alien_bullets_cost_lives() -> None:
    state = make_shooter_state(aliens=[make_alien(100, 50)])
    state = replace(
        state, bullets=pvector([alien_bullet(410, 545), alien_bullet(420, 560)])
    )
    new_state = collision_system(state)
    assert new_state.session.lives == 1
    assert len(new_state.bullets) == 0
    assert new_state.session.run_mode == RunMode.PLAYING


def test_last_life_ends_game() -> None:
    state = make_shooter_state(aliens=[make_alien(100, 50)], lives=1)
    state = replace(state, bullets=pvector([alien_bullet(410, 545)]))
    assert collision_system(state).session.run_mode == RunMode.GAME_OVER


def test_miss_changes_nothing() -> None:
    state = make_shooter_state(aliens=[make_alien(100, 50)])
    state = replace(state, bullets=pvector([player_bullet(500, 300)]))
    assert collision_system(state) is state


@pytest.mark.parametrize("y, over", [(489.0, False), (490.0, True)])
def test_invasion_line(y: float, over: bool) -> None:
    state = make_shooter_state(aliens=[make_alien(100, y)])
    new_state = invasion_system(state)
    assert (new_state.session.run_mode == RunMode.GAME_OVER) is over


def test_cleared_wave_advances_level() -> None:
    state = make_shooter_state(aliens=[])
    state = replace(state, bullets=pvector([alien_bullet(10, 10)]), march=-1, clock_ms=5000.0)
    new_state = wave_system(state)
    assert new_state.session.level == 2
    assert len(new_state.aliens) == 55
    assert new_state.session.remaining == 55
    assert len(new_state.bullets) == 0
    assert new_state.march == 1
    assert new_state.alien_last_shot_ms == 5000.0
