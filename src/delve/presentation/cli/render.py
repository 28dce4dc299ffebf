"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from delve.domain.entities import GameNode, Item, Monster, Player
from delve.domain.enums import Element
from delve.domain.state import SessionState


def format_player(player: Player) -> List[str]:
    lines = [
        f"{player.name}  Lv.{player.level}  HP {player.hp}/{player.total_max_hp}",
        f"ATK {player.attack}  DEF {player.defense}  EXP {player.exp}/{player.next_level_exp}  Gold {player.gold}",
    ]
    if player.offensive_element is not Element.NONE:
        lines.append(f"Element: {player.offensive_element.name}")
    if player.artifacts:
        lines.append("Artifacts: " + ", ".join(item.name for item in player.artifacts))
    return lines


def format_monster(monster: Monster) -> List[str]:
    return [
        f"{monster.name} [{monster.element.name}]  HP {monster.hp}/{monster.max_hp}",
        f"ATK {monster.attack}  DEF {monster.defense}",
    ]


def format_map(nodes: Sequence[GameNode], current_layer: int) -> List[str]:
    """One line per layer; the current layer is marked with '>'."""
    lines: List[str] = []
    layers = sorted({node.layer for node in nodes})
    for layer in layers:
        cells = []
        for node in nodes:
            if node.layer != layer:
                continue
            mark = "x" if node.is_completed else " "
            cells.append(f"[{mark}] {node.type.label}")
        marker = ">" if layer == current_layer else " "
        lines.append(f"{marker} {layer}: " + "  ".join(cells))
    return lines


def format_options(labels: Sequence[str]) -> List[str]:
    return [f"{idx}. {label}" for idx, label in enumerate(labels, start=1)]


def format_item(item: Item) -> str:
    return f"{item.name} [{item.element.name}] - {item.description}"


def format_log(log: Iterable[str]) -> List[str]:
    return [f"- {line}" for line in log]


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def render_state(state: SessionState, *, show_map: bool = False) -> None:
    render_heading("Hero")
    render_lines(format_player(state.player))
    if state.current_monster is not None:
        render_heading("Enemy")
        render_lines(format_monster(state.current_monster))
    if show_map:
        render_heading("Map")
        render_lines(format_map(state.nodes, state.current_layer))
    render_heading("Log")
    render_lines(format_log(state.log))
