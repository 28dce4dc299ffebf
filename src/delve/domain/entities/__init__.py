"""Runtime entity exports."""

from .item import Item
from .monster import Monster
from .node import GameNode, make_node_id
from .player import Player

__all__ = [
    "GameNode",
    "Item",
    "Monster",
    "Player",
    "make_node_id",
]
