"""Reward generation for level-ups and treasure nodes."""
from __future__ import annotations

from typing import Dict, List, Tuple

from delve.core.rng import RNG
from delve.domain.entities import Item, Player
from delve.domain.enums import Element, ItemType, Rarity

OPTION_COUNT = 3
BONUS_MIN = 1
BONUS_MAX = 4

# Upper bound (inclusive) of a 0-99 roll for each rarity, checked in order.
RARITY_ROLL_CEILINGS: Tuple[Tuple[int, Rarity], ...] = (
    (5, Rarity.LEGENDARY),
    (20, Rarity.EPIC),
    (50, Rarity.RARE),
    (99, Rarity.COMMON),
)

MAGNITUDE_PER_LEVEL: Dict[ItemType, int] = {
    ItemType.OFFENSE: 3,
    ItemType.DEFENSE: 1,
    ItemType.UTILITY: 15,
}

ARTIFACT_NAMES: Dict[ItemType, Tuple[str, ...]] = {
    ItemType.OFFENSE: ("Power Gem", "Sharp Blade", "Cursed Skull"),
    ItemType.DEFENSE: ("Steel Plate", "Oak Shield", "Magic Barrier"),
    ItemType.UTILITY: ("Heart Stone", "Life Elixir", "Golden Apple"),
}

_ITEM_TYPES: Tuple[ItemType, ...] = tuple(ItemType)
_ELEMENTS: Tuple[Element, ...] = tuple(Element)


def rarity_for_roll(roll: int) -> Rarity:
    for ceiling, rarity in RARITY_ROLL_CEILINGS:
        if roll <= ceiling:
            return rarity
    return Rarity.COMMON


def base_magnitude(item_type: ItemType, level: int) -> int:
    return level * MAGNITUDE_PER_LEVEL[item_type]


def describe(item_type: ItemType, value: int) -> str:
    return f"Grants +{value} to {item_type.name}."


class RewardService:
    """Rolls the artifact choices offered on level-up or treasure."""

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    def generate_options(self, player: Player) -> List[Item]:
        return [self.roll_item(player.level) for _ in range(OPTION_COUNT)]

    def roll_item(self, level: int) -> Item:
        rarity = rarity_for_roll(self._rng.randint(0, 99))
        item_type = self._rng.choice(_ITEM_TYPES)
        value = int(base_magnitude(item_type, level) * rarity.multiplier) + self._rng.randint(BONUS_MIN, BONUS_MAX)
        flavor = self._rng.choice(ARTIFACT_NAMES[item_type])
        element = self._rng.choice(_ELEMENTS)
        return Item(
            name=f"{flavor} ({rarity.name})",
            type=item_type,
            value=value,
            rarity=rarity,
            element=element,
            description=describe(item_type, value),
        )
