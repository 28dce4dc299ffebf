from __future__ import annotations

from delve.domain.entities import GameNode, Player
from delve.domain.enums import Element, ItemType, NodeType
from delve.presentation.cli.render import format_item, format_log, format_map, format_monster, format_options, format_player
from tests.helpers.builders import make_item, make_monster


def test_format_player_shows_derived_stats() -> None:
    player = Player(
        name="Hero",
        hp=80,
        max_hp=100,
        artifacts=(make_item(ItemType.UTILITY, 15, element=Element.WIND, name="Heart Stone (COMMON)"),),
    )

    lines = format_player(player)

    assert lines[0] == "Hero  Lv.1  HP 80/115"
    assert "ATK 7" in lines[1]
    assert "Element: WIND" in lines
    assert lines[-1] == "Artifacts: Heart Stone (COMMON)"


def test_format_monster_includes_element() -> None:
    lines = format_monster(make_monster(hp=12, element=Element.FIRE))

    assert lines[0] == "Dummy (Lv.1) [FIRE]  HP 12/12"


def test_format_map_marks_current_layer_and_completion() -> None:
    nodes = [
        GameNode("0_0", NodeType.MONSTER, 0, is_completed=True),
        GameNode("0_1", NodeType.REST, 0),
        GameNode("1_0", NodeType.TREASURE, 1),
    ]

    lines = format_map(nodes, current_layer=0)

    assert lines == [
        "> 0: [x] Monster  [ ] Rest",
        "  1: [ ] Treasure",
    ]


def test_format_options_and_log() -> None:
    assert format_options(["Attack", "Quit"]) == ["1. Attack", "2. Quit"]
    assert format_log(["a", "b"]) == ["- a", "- b"]


def test_format_item_includes_description() -> None:
    item = make_item(ItemType.DEFENSE, 3, name="Oak Shield (COMMON)")

    assert format_item(item) == "Oak Shield (COMMON) [NONE] - Grants +3 to DEFENSE."
