"""Factory for the starting player."""
from __future__ import annotations

from delve.domain.entities import Player

DEFAULT_PLAYER_NAME = "Hero"
DEFAULT_MAX_HP = 100


def create_default_player(name: str = DEFAULT_PLAYER_NAME) -> Player:
    return Player(name=name, hp=DEFAULT_MAX_HP, max_hp=DEFAULT_MAX_HP)
