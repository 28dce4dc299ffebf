"""UI-agnostic session controller that owns the game state machine."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List

from delve.core.rng import RNG
from delve.data.errors import DataLoadError
from delve.data.stores import KeyValueStore
from delve.domain.entities import GameNode, Item
from delve.domain.enums import NodeType
from delve.domain.map_layout import BOSS_LAYER, generate_map
from delve.domain.progression import can_level_up, heal, level_up
from delve.domain.state import SessionState, append_log
from delve.services.combat_service import (
    AttackResolvedEvent,
    CombatEvent,
    CombatService,
    MonsterAttackEvent,
    MonsterDefeatedEvent,
    PlayerDefeatedEvent,
    RewardsGainedEvent,
)
from delve.services.errors import SaveLoadError
from delve.services.factories import create_default_player, create_monster
from delve.services.reward_service import RewardService
from delve.services.save_service import SavedSession, SaveService

logger = logging.getLogger(__name__)

REST_HEAL_RATIO = 0.4

Listener = Callable[[SessionState], None]


class SessionController:
    """
    Single owner of the mutable session.

    Every public operation computes a complete new SessionState from the
    current snapshot, commits it in one assignment, writes it through to the
    store and then notifies subscribers. Illegal calls are silent no-ops.

    Non-responsibilities (handled by presentation layer):
    - Rendering state, prompting for input, formatting text
    """

    def __init__(
        self,
        save_service: SaveService,
        rng: RNG,
        *,
        combat_service: CombatService | None = None,
        reward_service: RewardService | None = None,
        state: SessionState | None = None,
    ) -> None:
        self._save_service = save_service
        self._rng = rng
        self._combat_service = combat_service or CombatService()
        self._reward_service = reward_service or RewardService(rng)
        self._listeners: List[Listener] = []
        self._state = state if state is not None else self._new_game_state()

    @classmethod
    def load(
        cls,
        store: KeyValueStore,
        rng: RNG | None = None,
        *,
        combat_service: CombatService | None = None,
        reward_service: RewardService | None = None,
    ) -> "SessionController":
        """Rebuild a controller from the store, falling back to a new game on bad data."""
        rng = rng or RNG()
        save_service = SaveService(store)
        try:
            saved = save_service.load()
        except (SaveLoadError, DataLoadError) as exc:
            logger.warning("Discarding unreadable save: %s", exc)
            save_service.clear()
            saved = SavedSession()
        controller = cls(
            save_service,
            rng,
            combat_service=combat_service,
            reward_service=reward_service,
            state=SessionState(player=create_default_player(), nodes=()),
        )
        controller._state = controller._state_from_save(saved)
        return controller

    # -----------------------
    # Observation
    # -----------------------
    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def log(self, message: str) -> None:
        self._commit(replace(self._state, log=append_log(self._state.log, message)), persist=False)

    # -----------------------
    # Player Actions
    # -----------------------
    def select_node(self, node: GameNode) -> None:
        state = self._state
        if state.is_game_over or state.level_up_options or state.current_monster is not None:
            return
        if not state.show_path_selection or node.layer != state.current_layer + 1:
            return
        target = next((candidate for candidate in state.nodes if candidate.id == node.id), None)
        if target is None or target.layer != node.layer:
            return

        state = replace(state, current_layer=target.layer, show_path_selection=False)
        logger.debug("Entered node %s (%s)", target.id, target.type.name)
        if target.type is NodeType.MONSTER:
            monster = create_monster(state.player.level, state.current_layer, self._rng)
            state = replace(
                state,
                current_monster=monster,
                log=append_log(state.log, f"A wild {monster.name} appears!"),
            )
        elif target.type is NodeType.REST:
            amount = int(state.player.total_max_hp * REST_HEAL_RATIO)
            state = replace(
                state,
                player=heal(state.player, amount),
                log=append_log(state.log, f"Rested. Healed {amount} HP."),
            )
            state = self._complete_node(state, target.id)
        else:
            state = replace(state, log=append_log(state.log, "Found a treasure!"))
            state = self._offer_rewards(state)
            state = self._complete_node(state, target.id)
        self._commit(state)

    def attack(self) -> None:
        state = self._state
        monster = state.current_monster
        if monster is None or state.is_game_over or state.level_up_options:
            return

        result = self._combat_service.resolve_attack(state.player, monster)
        state = replace(
            state,
            player=result.player,
            current_monster=result.monster,
            log=append_log(state.log, *self._describe(result.events)),
        )

        if result.player_defeated:
            logger.info("%s fell on layer %d", state.player.name, state.current_layer)
            self._save_service.clear()
            self._commit(replace(state, is_game_over=True), persist=False)
            return

        if result.monster_defeated:
            if can_level_up(state.player):
                state = self._offer_rewards(state)
            pending = next(
                (node for node in state.nodes if node.layer == state.current_layer and not node.is_completed),
                None,
            )
            if pending is not None:
                state = self._complete_node(state, pending.id)
        self._commit(state)

    def select_level_up_option(self, item: Item) -> None:
        state = self._state
        if state.is_game_over or item not in state.level_up_options:
            return

        player = replace(state.player, artifacts=state.player.artifacts + (item,))
        messages = [f"Obtained {item.name}."]
        if can_level_up(player):
            player = level_up(player)
            messages.append(f"Level up! Now level {player.level}.")
            logger.info("%s reached level %d", player.name, player.level)
        state = replace(
            state,
            player=player,
            level_up_options=(),
            log=append_log(state.log, *messages),
        )
        if can_level_up(player):
            state = self._offer_rewards(state)
        self._commit(state)

    def restart_game(self) -> None:
        logger.info("Restarting game")
        self._save_service.clear()
        self._commit(self._new_game_state(), persist=False)

    # -----------------------
    # Transitions
    # -----------------------
    def _new_game_state(self) -> SessionState:
        return self._with_new_map(SessionState(player=create_default_player(), nodes=()))

    def _with_new_map(self, state: SessionState) -> SessionState:
        nodes = tuple(generate_map(self._rng))
        logger.info("Generated map with %d nodes", len(nodes))
        return replace(state, nodes=nodes, current_layer=-1, show_path_selection=True)

    def _complete_node(self, state: SessionState, node_id: str) -> SessionState:
        nodes = tuple(replace(node, is_completed=True) if node.id == node_id else node for node in state.nodes)
        state = replace(state, nodes=nodes)
        if state.current_layer == BOSS_LAYER:
            state = replace(state, log=append_log(state.log, "Victory! Map cleared."))
            return self._with_new_map(state)
        return replace(state, show_path_selection=True)

    def _offer_rewards(self, state: SessionState) -> SessionState:
        options = tuple(self._reward_service.generate_options(state.player))
        return replace(state, level_up_options=options)

    def _state_from_save(self, saved: SavedSession) -> SessionState:
        player = saved.player or create_default_player()
        state = SessionState(player=player, nodes=(), level_up_options=tuple(saved.level_up_options))
        if not saved.nodes:
            return self._with_new_map(state)
        monster = saved.monster if saved.current_layer >= 0 else None
        return replace(
            state,
            nodes=tuple(saved.nodes),
            current_layer=saved.current_layer,
            current_monster=monster,
            show_path_selection=monster is None,
        )

    def _commit(self, state: SessionState, *, persist: bool = True) -> None:
        self._state = state
        if persist:
            self._save_service.save(state)
        for listener in list(self._listeners):
            listener(state)

    @staticmethod
    def _describe(events: List[CombatEvent]) -> List[str]:
        messages: List[str] = []
        for event in events:
            if isinstance(event, AttackResolvedEvent):
                messages.append(f"You hit {event.target_name} for {event.damage} damage.")
            elif isinstance(event, MonsterAttackEvent):
                messages.append(f"{event.monster_name} hits you for {event.damage} damage.")
            elif isinstance(event, MonsterDefeatedEvent):
                messages.append(f"{event.monster_name} defeated!")
            elif isinstance(event, RewardsGainedEvent):
                messages.append(f"Gained {event.exp} EXP and {event.gold} gold.")
            elif isinstance(event, PlayerDefeatedEvent):
                messages.append("You have been defeated...")
        return messages
