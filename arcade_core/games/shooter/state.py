"""Space-shooter ``State`` snapshot.

Unlike the grid games every entity here is a :class:`Rect` in continuous
coordinates. Shot timing runs on ``clock_ms``, the game's own clock,
advanced by the runner each frame.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pyrsistent import pmap, pset, pvector
from pyrsistent.typing import PMap, PSet, PVector

from arcade_core.actions import Action
from arcade_core.components import Rect, Session
from arcade_core.games.rules import new_seed
from arcade_core.games.shooter.config import ShooterConfig


@dataclass(frozen=True)
class Alien:
    """One invader; ``kind`` indexes the points table."""

    rect: Rect
    kind: int


@dataclass(frozen=True)
class Bullet:
    rect: Rect
    from_player: bool


@dataclass(frozen=True)
class State:
    """Immutable space-shooter snapshot.

    Attributes:
        config: Game settings.
        player: Ship rectangle.
        aliens: Live aliens.
        bullets: Bullets in flight, both sides.
        march: Formation heading, ``1`` right or ``-1`` left.
        session: Score, lives, level, aliens left and run mode.
        held: Direction actions currently held down.
        clock_ms: Game clock.
        last_shot_ms: Clock reading of the last ship shot, if any.
        alien_last_shot_ms: Clock reading of the last alien shot (or wave start).
        turn: Ticks applied so far.
        seed: Base RNG seed.
    """

    config: ShooterConfig
    player: Rect
    aliens: PVector[Alien]
    bullets: PVector[Bullet]
    session: Session
    march: int = 1
    held: PSet[Action] = pset()
    clock_ms: float = 0.0
    last_shot_ms: Optional[float] = None
    alien_last_shot_ms: float = 0.0
    turn: int = 0
    seed: int = 0

    @property
    def alien_speed(self) -> float:
        return self.config.alien_speed + self.config.alien_speed_step * (self.session.level - 1)

    @property
    def alien_fire_interval_ms(self) -> float:
        config = self.config
        return max(
            config.alien_fire_base_ms - self.session.level * config.alien_fire_step_ms,
            config.alien_fire_min_ms,
        )


def spawn_formation(config: ShooterConfig) -> PVector[Alien]:
    """Full alien grid, row-major; type is ``row // 2``."""
    origin_x, origin_y = config.alien_origin
    spacing_x, spacing_y = config.alien_spacing
    return pvector(
        Alien(
            rect=Rect(
                origin_x + col * spacing_x,
                origin_y + row * spacing_y,
                config.alien_width,
                config.alien_height,
            ),
            kind=row // 2,
        )
        for row in range(config.alien_rows)
        for col in range(config.alien_cols)
    )


def new_game(config: Optional[ShooterConfig] = None, seed: Optional[int] = None) -> State:
    config = config or ShooterConfig()
    aliens = spawn_formation(config)
    return State(
        config=config,
        player=Rect(config.player_x, config.player_y, config.player_width, config.player_height),
        aliens=aliens,
        bullets=pvector(),
        session=Session(lives=config.lives, remaining=len(aliens)),
        seed=new_seed(seed),
    )


def snapshot(state: State) -> PMap[str, Any]:
    return pmap(
        {
            "game": "shooter",
            "width": state.config.width,
            "height": state.config.height,
            "player": state.player,
            "aliens": state.aliens,
            "bullets": state.bullets,
            "alien_speed": state.alien_speed,
            "alien_fire_interval_ms": state.alien_fire_interval_ms,
            "session": state.session,
        }
    )


def leaderboard_meta(state: State) -> Dict[str, Any]:
    return {"level": state.session.level}
