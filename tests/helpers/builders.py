"""Shared builders and RNG doubles for the test suite."""
from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from delve.core.rng import RNG
from delve.domain.entities import Item, Monster
from delve.domain.enums import Element, ItemType, Rarity

T_co = TypeVar("T_co")


class ScriptedRNG(RNG):
    """RNG that replays scripted draws, then falls back to a seeded stream."""

    def __init__(self, ints: Iterable[int] = (), choices: Iterable[int] = (), seed: int = 0) -> None:
        super().__init__(seed)
        self._ints = list(ints)
        self._choices = list(choices)

    def randint(self, a: int, b: int) -> int:
        if not self._ints:
            return super().randint(a, b)
        value = self._ints.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value

    def choice(self, seq: Sequence[T_co]) -> T_co:
        if not self._choices:
            return super().choice(seq)
        return seq[self._choices.pop(0)]


def make_item(
    item_type: ItemType = ItemType.OFFENSE,
    value: int = 5,
    *,
    element: Element = Element.NONE,
    rarity: Rarity = Rarity.COMMON,
    name: str = "Test Gem",
) -> Item:
    return Item(
        name=name,
        type=item_type,
        value=value,
        rarity=rarity,
        element=element,
        description=f"Grants +{value} to {item_type.name}.",
    )


def make_monster(
    *,
    hp: int = 30,
    attack: int = 10,
    defense: int = 2,
    element: Element = Element.NONE,
    exp_reward: int = 20,
    gold_reward: int = 10,
    name: str = "Dummy (Lv.1)",
    level: int = 1,
) -> Monster:
    return Monster(
        name=name,
        level=level,
        hp=hp,
        max_hp=hp,
        attack=attack,
        defense=defense,
        exp_reward=exp_reward,
        gold_reward=gold_reward,
        element=element,
    )
