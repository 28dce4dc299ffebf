"""Factories for runtime entities."""

from .monster_factory import create_monster
from .player_factory import DEFAULT_MAX_HP, DEFAULT_PLAYER_NAME, create_default_player

__all__ = [
    "DEFAULT_MAX_HP",
    "DEFAULT_PLAYER_NAME",
    "create_default_player",
    "create_monster",
]
