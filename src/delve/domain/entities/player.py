"""Player model and derived-stat formulas."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from delve.domain.enums import Element, ItemType

from .item import Item

BASE_ATTACK = 5
ATTACK_PER_LEVEL = 2
DEFENSE_PER_LEVEL = 1
EXP_PER_LEVEL = 100


@dataclass(frozen=True, slots=True)
class Player:
    """The hero carried across an entire play session."""

    name: str
    hp: int
    max_hp: int
    level: int = 1
    exp: int = 0
    gold: int = 0
    artifacts: Tuple[Item, ...] = ()

    def _artifact_total(self, item_type: ItemType) -> int:
        return sum(item.value for item in self.artifacts if item.type is item_type)

    @property
    def attack(self) -> int:
        return BASE_ATTACK + (self.level * ATTACK_PER_LEVEL) + self._artifact_total(ItemType.OFFENSE)

    @property
    def defense(self) -> int:
        return (self.level * DEFENSE_PER_LEVEL) + self._artifact_total(ItemType.DEFENSE)

    @property
    def bonus_max_hp(self) -> int:
        return self._artifact_total(ItemType.UTILITY)

    @property
    def total_max_hp(self) -> int:
        return self.max_hp + self.bonus_max_hp

    @property
    def next_level_exp(self) -> int:
        return self.level * EXP_PER_LEVEL

    @property
    def offensive_element(self) -> Element:
        """Element of the first owned artifact carrying one, of any item type."""
        for item in self.artifacts:
            if item.element is not Element.NONE:
                return item.element
        return Element.NONE

    @property
    def is_alive(self) -> bool:
        return self.hp > 0
