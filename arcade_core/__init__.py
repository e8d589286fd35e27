"""arcade_core
=============

Simulation core for four classic arcade games (grid-snake, block-stacking,
space-shooter and maze-chase).

Each game is a pure reducer over a frozen ``State`` snapshot whose stores are
persistent ``pyrsistent`` structures. A :class:`arcade_core.runner.GameRunner`
owns one snapshot at a time, gates the reducer behind a fixed tick cadence and
records finished sessions in a per-game leaderboard.

Typical use::

    from arcade_core.actions import Action
    from arcade_core.games import get_game
    from arcade_core.ledger import MemoryStore
    from arcade_core.runner import GameRunner

    runner = GameRunner(get_game("maze"), MemoryStore(), seed=7)
    runner.send(Action.LEFT)
    runner.frame(now_ms=150)
"""

import logging

logger = logging.getLogger("arcade_core")

# Handlers are configured by the embedding application.

__version__ = "0.1.0"
