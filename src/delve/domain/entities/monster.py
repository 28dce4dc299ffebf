"""Monster runtime model."""
from __future__ import annotations

from dataclasses import dataclass

from delve.domain.enums import Element


@dataclass(frozen=True, slots=True)
class Monster:
    """Represents a spawned monster for the duration of one fight."""

    name: str
    level: int
    hp: int
    max_hp: int
    attack: int
    defense: int
    exp_reward: int
    gold_reward: int
    element: Element = Element.NONE

    @property
    def is_alive(self) -> bool:
        return self.hp > 0
