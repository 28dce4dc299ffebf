"""Artifact item model."""
from __future__ import annotations

from dataclasses import dataclass

from delve.domain.enums import Element, ItemType, Rarity


@dataclass(frozen=True, slots=True)
class Item:
    """A permanent stat-granting artifact."""

    name: str
    type: ItemType
    value: int
    description: str
    rarity: Rarity = Rarity.COMMON
    element: Element = Element.NONE
