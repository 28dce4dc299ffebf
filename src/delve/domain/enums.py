"""Enumerations shared by the domain entities."""
from __future__ import annotations

from enum import Enum


class ItemType(Enum):
    """Which derived stat an artifact feeds into."""

    OFFENSE = "OFFENSE"
    DEFENSE = "DEFENSE"
    UTILITY = "UTILITY"


class NodeType(Enum):
    """Kind of encounter waiting at a map node."""

    MONSTER = "MONSTER"
    REST = "REST"
    TREASURE = "TREASURE"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Element(Enum):
    """Elemental tag used by the combat bonus table."""

    NONE = "NONE"
    FIRE = "FIRE"
    WATER = "WATER"
    EARTH = "EARTH"
    WIND = "WIND"


class Rarity(Enum):
    """Item quality tier; the value is the magnitude multiplier."""

    COMMON = 1.0
    RARE = 1.5
    EPIC = 2.5
    LEGENDARY = 4.0

    @property
    def multiplier(self) -> float:
        return self.value


__all__ = ["Element", "ItemType", "NodeType", "Rarity"]
