"""Monster archetypes and level scaling."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from delve.domain.entities import Monster
from delve.domain.enums import Element

# Linear, additive coefficients keyed on monster level.
HP_PER_LEVEL = 10
ATTACK_PER_LEVEL = 2
DEFENSE_PER_LEVEL = 1
EXP_PER_LEVEL = 5
GOLD_PER_LEVEL = 3


@dataclass(frozen=True, slots=True)
class MonsterArchetype:
    """Base stats for a monster before level scaling."""

    name: str
    base_hp: int
    base_attack: int
    base_defense: int
    exp_base: int
    gold_base: int
    element: Element


ARCHETYPES: Tuple[MonsterArchetype, ...] = (
    MonsterArchetype("Slime", 20, 5, 1, 20, 10, Element.EARTH),
    MonsterArchetype("Fire Bat", 15, 8, 0, 25, 12, Element.FIRE),
    MonsterArchetype("Water Snake", 25, 6, 2, 30, 15, Element.WATER),
    MonsterArchetype("Wind Wolf", 30, 10, 3, 50, 25, Element.WIND),
)


def monster_level_for(player_level: int, current_layer: int) -> int:
    return player_level + (max(0, current_layer) // 2)


def scale_monster(archetype: MonsterArchetype, *, level: int) -> Monster:
    hp = archetype.base_hp + (HP_PER_LEVEL * level)
    return Monster(
        name=f"{archetype.name} (Lv.{level})",
        level=level,
        hp=hp,
        max_hp=hp,
        attack=archetype.base_attack + (ATTACK_PER_LEVEL * level),
        defense=archetype.base_defense + (DEFENSE_PER_LEVEL * level),
        exp_reward=archetype.exp_base + (EXP_PER_LEVEL * level),
        gold_reward=archetype.gold_base + (GOLD_PER_LEVEL * level),
        element=archetype.element,
    )
