"""Serialization helpers for write-through session persistence."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence, Type, TypeVar

from delve.data.stores import KeyValueStore
from delve.domain.entities import GameNode, Item, Monster, Player
from delve.domain.enums import Element, ItemType, NodeType, Rarity
from delve.domain.map_layout import BOSS_LAYER
from delve.domain.state import SessionState
from delve.services.errors import SaveLoadError
from delve.services.reward_service import OPTION_COUNT

logger = logging.getLogger(__name__)

PLAYER_KEY = "player_save"
NODES_KEY = "nodes_save"
CURRENT_LAYER_KEY = "current_layer"
MONSTER_KEY = "monster_save"
LEVEL_UP_KEY = "level_up_save"

SavePayload = Dict[str, Any]
E = TypeVar("E", bound=Enum)


@dataclass(slots=True)
class SavedSession:
    """Decoded store contents; absent keys come back as None/empty."""

    player: Player | None = None
    nodes: List[GameNode] = field(default_factory=list)
    current_layer: int = -1
    monster: Monster | None = None
    level_up_options: List[Item] = field(default_factory=list)


class SaveService:
    """Converts session state to/from the string values held in a key-value store."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def save(self, state: SessionState) -> None:
        """Write every persisted key for the given state in a single store update."""
        monster_payload = self.serialize_monster(state.current_monster) if state.current_monster else None
        self._store.set_many(
            {
                PLAYER_KEY: self._dumps(self.serialize_player(state.player)),
                NODES_KEY: self._dumps(self.serialize_nodes(state.nodes)),
                CURRENT_LAYER_KEY: str(state.current_layer),
                MONSTER_KEY: self._dumps(monster_payload),
                LEVEL_UP_KEY: self._dumps([self.serialize_item(item) for item in state.level_up_options]),
            }
        )
        logger.debug("Saved session at layer %d", state.current_layer)

    def clear(self) -> None:
        self._store.clear()
        logger.debug("Cleared persisted session")

    # -----------------------
    # Loading
    # -----------------------
    def load(self) -> SavedSession:
        """Read the whole store; raises SaveLoadError on malformed data."""
        return SavedSession(
            player=self.load_player(),
            nodes=self.load_nodes(),
            current_layer=self.load_current_layer(),
            monster=self.load_monster(),
            level_up_options=self.load_level_up_options(),
        )

    def load_player(self) -> Player | None:
        raw = self._store.get(PLAYER_KEY)
        if raw is None:
            return None
        return self.deserialize_player(self._loads(raw, PLAYER_KEY))

    def load_nodes(self) -> List[GameNode]:
        raw = self._store.get(NODES_KEY)
        if raw is None:
            return []
        return self.deserialize_nodes(self._loads(raw, NODES_KEY))

    def load_current_layer(self) -> int:
        raw = self._store.get(CURRENT_LAYER_KEY)
        if raw is None:
            return -1
        try:
            layer = int(raw)
        except ValueError as exc:
            raise SaveLoadError(f"{CURRENT_LAYER_KEY} must be an integer.") from exc
        if not -1 <= layer <= BOSS_LAYER:
            raise SaveLoadError(f"{CURRENT_LAYER_KEY} out of range: {layer}")
        return layer

    def load_monster(self) -> Monster | None:
        raw = self._store.get(MONSTER_KEY)
        if raw is None:
            return None
        payload = self._loads(raw, MONSTER_KEY)
        if payload is None:
            return None
        return self.deserialize_monster(payload)

    def load_level_up_options(self) -> List[Item]:
        raw = self._store.get(LEVEL_UP_KEY)
        if raw is None:
            return []
        payload = self._loads(raw, LEVEL_UP_KEY)
        if not isinstance(payload, list):
            raise SaveLoadError(f"{LEVEL_UP_KEY} must be a list.")
        if len(payload) not in (0, OPTION_COUNT):
            raise SaveLoadError(f"{LEVEL_UP_KEY} must hold 0 or {OPTION_COUNT} options.")
        return [self.deserialize_item(entry, f"{LEVEL_UP_KEY}[{idx}]") for idx, entry in enumerate(payload)]

    # -----------------------
    # Entity codecs
    # -----------------------
    @classmethod
    def serialize_player(cls, player: Player) -> SavePayload:
        return {
            "name": player.name,
            "hp": player.hp,
            "max_hp": player.max_hp,
            "level": player.level,
            "exp": player.exp,
            "gold": player.gold,
            "artifacts": [cls.serialize_item(item) for item in player.artifacts],
        }

    @classmethod
    def deserialize_player(cls, payload: Any) -> Player:
        mapping = cls._require_dict(payload, "player")
        artifacts_raw = mapping.get("artifacts", [])
        if not isinstance(artifacts_raw, list):
            raise SaveLoadError("player.artifacts must be a list.")
        artifacts = tuple(
            cls.deserialize_item(entry, f"player.artifacts[{idx}]") for idx, entry in enumerate(artifacts_raw)
        )
        player = Player(
            name=cls._require_str(mapping.get("name"), "player.name"),
            hp=cls._require_int(mapping.get("hp"), "player.hp"),
            max_hp=cls._require_positive_int(mapping.get("max_hp"), "player.max_hp"),
            level=cls._require_positive_int(mapping.get("level"), "player.level"),
            exp=cls._require_non_negative_int(mapping.get("exp"), "player.exp"),
            gold=cls._require_non_negative_int(mapping.get("gold"), "player.gold"),
            artifacts=artifacts,
        )
        if player.hp <= 0:
            raise SaveLoadError("player.hp must be positive for a saved run.")
        if player.hp > player.total_max_hp:
            raise SaveLoadError("player.hp exceeds total max HP.")
        return player

    @staticmethod
    def serialize_item(item: Item) -> SavePayload:
        return {
            "name": item.name,
            "type": item.type.name,
            "value": item.value,
            "rarity": item.rarity.name,
            "element": item.element.name,
            "description": item.description,
        }

    @classmethod
    def deserialize_item(cls, payload: Any, context: str = "item") -> Item:
        mapping = cls._require_dict(payload, context)
        return Item(
            name=cls._require_str(mapping.get("name"), f"{context}.name"),
            type=cls._require_enum(ItemType, mapping.get("type"), f"{context}.type"),
            value=cls._require_int(mapping.get("value"), f"{context}.value"),
            rarity=cls._require_enum(Rarity, mapping.get("rarity", "COMMON"), f"{context}.rarity"),
            element=cls._require_enum(Element, mapping.get("element", "NONE"), f"{context}.element"),
            description=cls._require_str(mapping.get("description"), f"{context}.description"),
        )

    @staticmethod
    def serialize_nodes(nodes: Sequence[GameNode]) -> List[SavePayload]:
        return [
            {
                "id": node.id,
                "type": node.type.name,
                "layer": node.layer,
                "is_completed": node.is_completed,
            }
            for node in nodes
        ]

    @classmethod
    def deserialize_nodes(cls, payload: Any) -> List[GameNode]:
        if not isinstance(payload, list):
            raise SaveLoadError("nodes must be a list.")
        nodes: List[GameNode] = []
        seen_ids: set[str] = set()
        for idx, entry in enumerate(payload):
            context = f"nodes[{idx}]"
            mapping = cls._require_dict(entry, context)
            node = GameNode(
                id=cls._require_str(mapping.get("id"), f"{context}.id"),
                type=cls._require_enum(NodeType, mapping.get("type"), f"{context}.type"),
                layer=cls._require_int(mapping.get("layer"), f"{context}.layer"),
                is_completed=cls._require_bool(mapping.get("is_completed", False), f"{context}.is_completed"),
            )
            if not 0 <= node.layer <= BOSS_LAYER:
                raise SaveLoadError(f"{context}.layer out of range: {node.layer}")
            if node.id in seen_ids:
                raise SaveLoadError(f"Duplicate node id: {node.id}")
            seen_ids.add(node.id)
            nodes.append(node)
        return nodes

    @staticmethod
    def serialize_monster(monster: Monster) -> SavePayload:
        return {
            "name": monster.name,
            "level": monster.level,
            "hp": monster.hp,
            "max_hp": monster.max_hp,
            "attack": monster.attack,
            "defense": monster.defense,
            "exp_reward": monster.exp_reward,
            "gold_reward": monster.gold_reward,
            "element": monster.element.name,
        }

    @classmethod
    def deserialize_monster(cls, payload: Any) -> Monster:
        mapping = cls._require_dict(payload, "monster")
        monster = Monster(
            name=cls._require_str(mapping.get("name"), "monster.name"),
            level=cls._require_int(mapping.get("level"), "monster.level"),
            hp=cls._require_int(mapping.get("hp"), "monster.hp"),
            max_hp=cls._require_int(mapping.get("max_hp"), "monster.max_hp"),
            attack=cls._require_int(mapping.get("attack"), "monster.attack"),
            defense=cls._require_int(mapping.get("defense"), "monster.defense"),
            exp_reward=cls._require_int(mapping.get("exp_reward"), "monster.exp_reward"),
            gold_reward=cls._require_int(mapping.get("gold_reward"), "monster.gold_reward"),
            element=cls._require_enum(Element, mapping.get("element", "NONE"), "monster.element"),
        )
        if not monster.is_alive:
            raise SaveLoadError("monster.hp must be positive for an active fight.")
        return monster

    # -----------------------
    # Validation helpers
    # -----------------------
    @staticmethod
    def _dumps(payload: Any) -> str:
        return json.dumps(payload, sort_keys=True)

    @staticmethod
    def _loads(raw: str, key: str) -> Any:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SaveLoadError(f"Invalid JSON stored under {key}: {exc}") from exc

    @staticmethod
    def _require_dict(value: Any, context: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        return value

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_bool(value: Any, context: str) -> bool:
        if not isinstance(value, bool):
            raise SaveLoadError(f"{context} must be a boolean.")
        return value

    @staticmethod
    def _require_int(value: Any, context: str) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise SaveLoadError(f"{context} must be an integer.")
        return value

    @classmethod
    def _require_non_negative_int(cls, value: Any, context: str) -> int:
        value_int = cls._require_int(value, context)
        if value_int < 0:
            raise SaveLoadError(f"{context} must be a non-negative integer.")
        return value_int

    @classmethod
    def _require_positive_int(cls, value: Any, context: str) -> int:
        value_int = cls._require_int(value, context)
        if value_int < 1:
            raise SaveLoadError(f"{context} must be a positive integer.")
        return value_int

    @staticmethod
    def _require_enum(enum_type: Type[E], value: Any, context: str) -> E:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        try:
            return enum_type[value]
        except KeyError as exc:
            raise SaveLoadError(f"Invalid {context} value: {value}") from exc


__all__ = [
    "CURRENT_LAYER_KEY",
    "LEVEL_UP_KEY",
    "MONSTER_KEY",
    "NODES_KEY",
    "PLAYER_KEY",
    "SaveService",
    "SavedSession",
]
