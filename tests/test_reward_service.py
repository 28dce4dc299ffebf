from __future__ import annotations

import pytest

from delve.core.rng import RNG
from delve.domain.entities import Player
from delve.domain.enums import Element, ItemType, Rarity
from delve.services.reward_service import ARTIFACT_NAMES, RewardService, rarity_for_roll
from tests.helpers.builders import ScriptedRNG


@pytest.mark.parametrize(
    ("roll", "rarity"),
    [
        (0, Rarity.LEGENDARY),
        (5, Rarity.LEGENDARY),
        (6, Rarity.EPIC),
        (20, Rarity.EPIC),
        (21, Rarity.RARE),
        (50, Rarity.RARE),
        (51, Rarity.COMMON),
        (99, Rarity.COMMON),
    ],
)
def test_rarity_roll_buckets(roll: int, rarity: Rarity) -> None:
    assert rarity_for_roll(roll) is rarity


def test_roll_item_builds_scaled_offense_item() -> None:
    rng = ScriptedRNG(ints=[0, 4], choices=[0, 1, 2])
    service = RewardService(rng)

    item = service.roll_item(level=2)

    assert item.type is ItemType.OFFENSE
    assert item.rarity is Rarity.LEGENDARY
    assert item.value == 28
    assert item.name == "Sharp Blade (LEGENDARY)"
    assert item.element is Element.WATER
    assert item.description == "Grants +28 to OFFENSE."


def test_roll_item_truncates_rarity_multiplier() -> None:
    rng = ScriptedRNG(ints=[30, 1], choices=[2, 0, 0])
    service = RewardService(rng)

    item = service.roll_item(level=1)

    assert item.type is ItemType.UTILITY
    assert item.rarity is Rarity.RARE
    assert item.value == 23
    assert item.name == "Heart Stone (RARE)"
    assert item.element is Element.NONE


def test_generate_options_returns_three_items_for_player_level() -> None:
    service = RewardService(RNG(17))
    player = Player(name="Hero", hp=100, max_hp=100, level=3)

    options = service.generate_options(player)

    assert len(options) == 3
    for item in options:
        flavor = item.name.rsplit(" (", 1)[0]
        assert flavor in ARTIFACT_NAMES[item.type]
        assert item.name.endswith(f"({item.rarity.name})")
        per_level = {ItemType.OFFENSE: 3, ItemType.DEFENSE: 1, ItemType.UTILITY: 15}[item.type]
        base = int(3 * per_level * item.rarity.multiplier)
        assert base + 1 <= item.value <= base + 4


def test_same_seed_yields_same_options() -> None:
    player = Player(name="Hero", hp=100, max_hp=100)

    assert RewardService(RNG(8)).generate_options(player) == RewardService(RNG(8)).generate_options(player)
