"""Map node model."""
from __future__ import annotations

from dataclasses import dataclass

from delve.domain.enums import NodeType


def make_node_id(layer: int, index: int) -> str:
    return f"{layer}_{index}"


@dataclass(frozen=True, slots=True)
class GameNode:
    """One step in the layered map."""

    id: str
    type: NodeType
    layer: int
    is_completed: bool = False
