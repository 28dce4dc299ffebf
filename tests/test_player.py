from __future__ import annotations

from delve.domain.entities import Player
from delve.domain.enums import Element, ItemType
from tests.helpers.builders import make_item


def _make_player(**overrides) -> Player:
    values = {"name": "Hero", "hp": 100, "max_hp": 100}
    values.update(overrides)
    return Player(**values)


def test_fresh_player_derived_stats() -> None:
    player = _make_player()

    assert player.attack == 7
    assert player.defense == 1
    assert player.bonus_max_hp == 0
    assert player.total_max_hp == 100
    assert player.next_level_exp == 100
    assert player.offensive_element is Element.NONE


def test_artifacts_feed_matching_stats() -> None:
    player = _make_player(
        level=2,
        artifacts=(
            make_item(ItemType.OFFENSE, 3),
            make_item(ItemType.DEFENSE, 2),
            make_item(ItemType.UTILITY, 15),
            make_item(ItemType.OFFENSE, 4),
        ),
    )

    assert player.attack == 5 + 4 + 7
    assert player.defense == 2 + 2
    assert player.bonus_max_hp == 15
    assert player.total_max_hp == player.max_hp + 15
    assert player.next_level_exp == 200


def test_total_max_hp_is_max_hp_plus_utility_values() -> None:
    for utility_values in ([], [10], [5, 20, 1]):
        artifacts = tuple(make_item(ItemType.UTILITY, value) for value in utility_values)
        player = _make_player(max_hp=140, artifacts=artifacts)
        assert player.total_max_hp == 140 + sum(utility_values)


def test_offensive_element_uses_first_elemental_artifact_of_any_type() -> None:
    player = _make_player(
        artifacts=(
            make_item(ItemType.OFFENSE, 3),
            make_item(ItemType.UTILITY, 10, element=Element.WATER),
            make_item(ItemType.OFFENSE, 3, element=Element.FIRE),
        )
    )

    assert player.offensive_element is Element.WATER


def test_player_is_alive_only_above_zero_hp() -> None:
    assert _make_player(hp=1).is_alive
    assert not _make_player(hp=0).is_alive
    assert not _make_player(hp=-4).is_alive
