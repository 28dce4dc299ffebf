"""Session state aggregate."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from delve.core.types import SessionPhase
from delve.domain.entities import GameNode, Item, Monster, Player

LOG_LIMIT = 10
WELCOME_MESSAGE = "Welcome to the Text Adventure!"


def append_log(log: Tuple[str, ...], *messages: str) -> Tuple[str, ...]:
    """Return the rolling log with messages appended, keeping the newest LOG_LIMIT entries."""
    return (log + messages)[-LOG_LIMIT:]


@dataclass(frozen=True, slots=True)
class SessionState:
    """Everything the presentation layer reads; replaced whole on each transition."""

    player: Player
    nodes: Tuple[GameNode, ...]
    current_layer: int = -1
    show_path_selection: bool = True
    current_monster: Monster | None = None
    level_up_options: Tuple[Item, ...] = ()
    is_game_over: bool = False
    log: Tuple[str, ...] = (WELCOME_MESSAGE,)

    @property
    def show_level_up_screen(self) -> bool:
        return bool(self.level_up_options)

    @property
    def phase(self) -> SessionPhase:
        if self.is_game_over:
            return "game_over"
        if self.level_up_options:
            return "level_up_choice"
        if self.current_monster is not None:
            return "combat"
        return "map_choice"

    def nodes_in_layer(self, layer: int) -> Tuple[GameNode, ...]:
        return tuple(node for node in self.nodes if node.layer == layer)

    def selectable_nodes(self) -> Tuple[GameNode, ...]:
        if not self.show_path_selection:
            return ()
        return self.nodes_in_layer(self.current_layer + 1)
