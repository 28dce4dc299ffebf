"""Layered map generation."""
from __future__ import annotations

from typing import List

from delve.core.rng import RNG
from delve.domain.entities import GameNode, make_node_id
from delve.domain.enums import NodeType

LAYER_COUNT = 10
BOSS_LAYER = LAYER_COUNT - 1
REST_INTERVAL = 3
MIN_NODES_PER_LAYER = 2
MAX_NODES_PER_LAYER = 3
MONSTER_CHANCE = 60


def node_type_for_layer(layer: int, rng: RNG) -> NodeType:
    if layer == BOSS_LAYER:
        return NodeType.MONSTER
    if layer > 0 and layer % REST_INTERVAL == 0:
        return NodeType.REST
    if rng.randint(0, 99) < MONSTER_CHANCE:
        return NodeType.MONSTER
    return NodeType.TREASURE


def generate_map(rng: RNG) -> List[GameNode]:
    """
    Build a fresh 10-layer map.

    Layer 9 holds a single boss MONSTER node; every other layer holds 2-3
    nodes. Edges are implicit: any node of layer L is reachable from layer L-1.
    """
    nodes: List[GameNode] = []
    for layer in range(LAYER_COUNT):
        if layer == BOSS_LAYER:
            count = 1
        else:
            count = rng.randint(MIN_NODES_PER_LAYER, MAX_NODES_PER_LAYER)
        for index in range(count):
            nodes.append(
                GameNode(
                    id=make_node_id(layer, index),
                    type=node_type_for_layer(layer, rng),
                    layer=layer,
                )
            )
    return nodes
