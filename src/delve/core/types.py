"""Shared type aliases for the core and domain layers."""
from typing import Literal

SessionPhase = Literal["map_choice", "combat", "level_up_choice", "game_over"]

__all__ = ["SessionPhase"]
