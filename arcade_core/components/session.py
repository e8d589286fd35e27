"""Session component.

Score, lives, level and progress of one running game. ``remaining`` is the
game's progress counter: dots left (maze-chase), aliens left
(space-shooter) or lines to the next level (block-stacking).
"""

from dataclasses import dataclass

from arcade_core.types import RunMode


@dataclass(frozen=True)
class Session:
    """Per-session counters.

    Attributes:
        score: Accumulated score; only ever increases within a session.
        lives: Lives left.
        level: Current level (1-based).
        remaining: Game-specific progress counter.
        run_mode: Whether the session is playing, paused or over.
    """

    score: int = 0
    lives: int = 1
    level: int = 1
    remaining: int = 0
    run_mode: RunMode = RunMode.PLAYING
