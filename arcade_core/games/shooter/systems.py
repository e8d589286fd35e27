"""Space-shooter systems.

Hits are resolved in two phases: every bullet is tested against the
positions at the start of the phase, then all kills, removals and life
losses are applied together. A bullet that overlaps two aliens kills both.
"""

import logging
from dataclasses import replace
from typing import List, Set

from pyrsistent import pvector

from arcade_core.actions import Action
from arcade_core.components import Rect
from arcade_core.games.rules import turn_rng
from arcade_core.games.shooter.state import Bullet, State, spawn_formation
from arcade_core.moves import rects_overlap
from arcade_core.scheduler import add_score, end_game, is_running, lose_life
from arcade_core.types import RunMode
from arcade_core.utils.math import clamp

logger = logging.getLogger(__name__)


def player_movement_system(state: State) -> State:
    """Move the ship while LEFT or RIGHT is held, clamped to the field."""
    config = state.config
    x = state.player.x
    if Action.LEFT in state.held:
        x -= config.player_speed
    if Action.RIGHT in state.held:
        x += config.player_speed
    x = clamp(x, 0.0, config.width - config.player_width)
    if x == state.player.x:
        return state
    return replace(state, player=replace(state.player, x=x))


def fire_system(state: State) -> State:
    """Launch a ship bullet unless the cooldown has not yet elapsed."""
    config = state.config
    if (
        state.last_shot_ms is not None
        and state.clock_ms - state.last_shot_ms <= config.fire_cooldown_ms
    ):
        return state
    bullet = Bullet(
        rect=Rect(
            state.player.x + config.player_width / 2 - config.bullet_width / 2,
            state.player.y - config.bullet_height,
            config.bullet_width,
            config.bullet_height,
        ),
        from_player=True,
    )
    return replace(
        state, bullets=state.bullets.append(bullet), last_shot_ms=state.clock_ms
    )


def bullet_movement_system(state: State) -> State:
    """Advance every bullet; those leaving the field are dropped."""
    config = state.config
    moved = []
    for bullet in state.bullets:
        dy = -config.player_bullet_speed if bullet.from_player else config.alien_bullet_speed
        rect = replace(bullet.rect, y=bullet.rect.y + dy)
        if -config.bullet_height < rect.y < config.height:
            moved.append(replace(bullet, rect=rect))
    return replace(state, bullets=pvector(moved))


def alien_movement_system(state: State) -> State:
    """March the formation sideways, or drop and reverse at an edge."""
    if not state.aliens:
        return state
    config = state.config
    leftmost = min(alien.rect.x for alien in state.aliens)
    rightmost = max(alien.rect.right for alien in state.aliens)
    at_edge = (state.march > 0 and rightmost >= config.width - config.edge_margin) or (
        state.march < 0 and leftmost <= config.edge_margin
    )
    if at_edge:
        dx, dy, march = 0.0, config.alien_drop, -state.march
    else:
        dx, dy, march = state.march * state.alien_speed, 0.0, state.march
    aliens = pvector(
        replace(
            alien,
            rect=replace(
                alien.rect,
                x=clamp(alien.rect.x + dx, 0.0, config.width - config.alien_width),
                y=alien.rect.y + dy,
            ),
        )
        for alien in state.aliens
    )
    return replace(state, aliens=aliens, march=march)


def alien_fire_system(state: State) -> State:
    """A random live alien fires once the alien fire interval has passed."""
    if not state.aliens:
        return state
    if state.clock_ms - state.alien_last_shot_ms <= state.alien_fire_interval_ms:
        return state
    config = state.config
    shooter = turn_rng(state.seed, state.turn).choice(state.aliens)
    bullet = Bullet(
        rect=Rect(
            shooter.rect.x + config.alien_width / 2 - config.bullet_width / 2,
            shooter.rect.bottom,
            config.bullet_width,
            config.bullet_height,
        ),
        from_player=False,
    )
    return replace(
        state, bullets=state.bullets.append(bullet), alien_last_shot_ms=state.clock_ms
    )


def hit_aliens(state: State, bullet: Rect) -> List[int]:
    """Indices of live aliens overlapped by ``bullet``."""
    return [i for i, alien in enumerate(state.aliens) if rects_overlap(bullet, alien.rect)]


def collision_system(state: State) -> State:
    """Collect every bullet hit, then apply them at once."""
    spent: Set[int] = set()
    killed: Set[int] = set()
    player_hits = 0
    for b_index, bullet in enumerate(state.bullets):
        if bullet.from_player:
            hits = hit_aliens(state, bullet.rect)
            if hits:
                killed.update(hits)
                spent.add(b_index)
        elif rects_overlap(bullet.rect, state.player):
            spent.add(b_index)
            player_hits += 1
    if not spent:
        return state

    session = state.session
    points = sum(state.config.alien_points[state.aliens[i].kind] for i in killed)
    session = add_score(session, points)
    for _ in range(player_hits):
        session = lose_life(session)
    aliens = pvector(a for i, a in enumerate(state.aliens) if i not in killed)
    bullets = pvector(b for i, b in enumerate(state.bullets) if i not in spent)
    session = replace(session, remaining=len(aliens))
    if player_hits:
        logger.debug("Ship hit %d time(s), %d lives left", player_hits, session.lives)
        if session.run_mode == RunMode.GAME_OVER:
            logger.info("Ship destroyed, score %d", session.score)
    return replace(state, aliens=aliens, bullets=bullets, session=session)


def invasion_system(state: State) -> State:
    """End the game once any alien's bottom reaches the line above the ship."""
    if not is_running(state.session):
        return state
    line = state.player.y - state.config.invasion_margin
    if any(alien.rect.bottom >= line for alien in state.aliens):
        logger.info("Aliens landed, score %d", state.session.score)
        return replace(state, session=end_game(state.session))
    return state


def wave_system(state: State) -> State:
    """Start the next level with a fresh formation once the wave is cleared."""
    if state.aliens:
        return state
    aliens = spawn_formation(state.config)
    session = replace(state.session, level=state.session.level + 1, remaining=len(aliens))
    logger.info("Space-shooter level %d", session.level)
    return replace(
        state,
        aliens=aliens,
        bullets=pvector(),
        march=1,
        session=session,
        alien_last_shot_ms=state.clock_ms,
    )

