from __future__ import annotations

from delve.domain.entities import Player
from delve.domain.enums import ItemType
from delve.domain.progression import can_level_up, gain_rewards, heal, level_up
from tests.helpers.builders import make_item


def test_can_level_up_at_threshold() -> None:
    assert not can_level_up(Player(name="Hero", hp=100, max_hp=100, exp=99))
    assert can_level_up(Player(name="Hero", hp=100, max_hp=100, exp=100))
    assert not can_level_up(Player(name="Hero", hp=100, max_hp=100, level=2, exp=150))


def test_level_up_applies_arithmetic() -> None:
    player = Player(name="Hero", hp=35, max_hp=100, level=1, exp=130)

    leveled = level_up(player)

    assert leveled.level == 2
    assert leveled.exp == 30
    assert leveled.max_hp == 120
    assert leveled.hp == leveled.total_max_hp == 120


def test_level_up_restores_hp_including_artifact_bonus() -> None:
    player = Player(
        name="Hero",
        hp=10,
        max_hp=140,
        level=3,
        exp=450,
        artifacts=(make_item(ItemType.UTILITY, 25),),
    )

    leveled = level_up(player)

    assert leveled.level == 4
    assert leveled.exp == 150
    assert leveled.max_hp == 160
    assert leveled.hp == 185


def test_level_up_leaves_original_untouched() -> None:
    player = Player(name="Hero", hp=50, max_hp=100, exp=100)

    level_up(player)

    assert player.level == 1
    assert player.exp == 100


def test_gain_rewards_accumulates() -> None:
    player = gain_rewards(Player(name="Hero", hp=100, max_hp=100, exp=5, gold=2), exp=20, gold=11)

    assert player.exp == 25
    assert player.gold == 13


def test_heal_is_capped_at_total_max_hp() -> None:
    player = Player(name="Hero", hp=90, max_hp=100, artifacts=(make_item(ItemType.UTILITY, 5),))

    assert heal(player, 3).hp == 93
    assert heal(player, 40).hp == 105
