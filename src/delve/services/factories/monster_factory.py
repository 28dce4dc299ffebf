"""Factory for spawning monsters when a MONSTER node is entered."""
from __future__ import annotations

from typing import Sequence

from delve.core.rng import RNG
from delve.domain.entities import Monster
from delve.domain.monster_scaling import (
    ARCHETYPES,
    MonsterArchetype,
    monster_level_for,
    scale_monster,
)
from delve.services.errors import FactoryError


def create_monster(
    player_level: int,
    current_layer: int,
    rng: RNG,
    archetypes: Sequence[MonsterArchetype] = ARCHETYPES,
) -> Monster:
    """Pick an archetype uniformly and scale it to the layer-adjusted level."""
    if not archetypes:
        raise FactoryError("No monster archetypes available to spawn.")
    archetype = rng.choice(archetypes)
    level = monster_level_for(player_level, current_layer)
    return scale_monster(archetype, level=level)
