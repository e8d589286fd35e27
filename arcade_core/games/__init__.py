"""Game registry.

Each game package exports a :class:`~arcade_core.games.rules.GameRules`
record as ``RULES``; the registry maps the game's name to it.
"""

from typing import Dict

from arcade_core.games.maze import RULES as MAZE_RULES
from arcade_core.games.rules import GameRules
from arcade_core.games.shooter import RULES as SHOOTER_RULES
from arcade_core.games.snake import RULES as SNAKE_RULES
from arcade_core.games.stacker import RULES as STACKER_RULES


GAME_REGISTRY: Dict[str, GameRules] = {
    rules.name: rules
    for rules in (SNAKE_RULES, STACKER_RULES, SHOOTER_RULES, MAZE_RULES)
}


def get_game(name: str) -> GameRules:
    """Look up a game by registry name.

    Raises:
        ValueError: If no game is registered under ``name``.
    """
    try:
        return GAME_REGISTRY[name]
    except KeyError:
        raise ValueError(f"Unknown game: {name}") from None


__all__ = ["GAME_REGISTRY", "GameRules", "get_game"]
