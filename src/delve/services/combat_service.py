"""Combat service resolving a single player attack."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List

from delve.domain.elements import element_multiplier, scale_by_element
from delve.domain.entities import Monster, Player
from delve.domain.progression import gain_rewards

logger = logging.getLogger(__name__)

MINIMUM_DAMAGE = 1


@dataclass(slots=True)
class CombatEvent:
    """Base combat event."""


@dataclass(slots=True)
class AttackResolvedEvent(CombatEvent):
    attacker_name: str
    target_name: str
    damage: int
    target_hp: int
    multiplier: float


@dataclass(slots=True)
class MonsterAttackEvent(CombatEvent):
    monster_name: str
    damage: int
    player_hp: int


@dataclass(slots=True)
class MonsterDefeatedEvent(CombatEvent):
    monster_name: str


@dataclass(slots=True)
class RewardsGainedEvent(CombatEvent):
    exp: int
    gold: int


@dataclass(slots=True)
class PlayerDefeatedEvent(CombatEvent):
    player_name: str


@dataclass(slots=True)
class CombatResult:
    """Outcome of one attack exchange."""

    player: Player
    monster: Monster | None
    events: List[CombatEvent]

    @property
    def monster_defeated(self) -> bool:
        return self.monster is None

    @property
    def player_defeated(self) -> bool:
        return not self.player.is_alive


def compute_player_damage(player: Player, monster: Monster) -> int:
    """Damage the player deals: attack scaled by element, minus defense, at least 1."""
    scaled = scale_by_element(player.attack, player.offensive_element, monster.element)
    return max(MINIMUM_DAMAGE, scaled - monster.defense)


def compute_monster_damage(monster: Monster, player: Player) -> int:
    return max(MINIMUM_DAMAGE, monster.attack - player.defense)


class CombatService:
    """Stateless resolver for the attack-then-retaliate exchange."""

    def resolve_attack(self, player: Player, monster: Monster) -> CombatResult:
        multiplier = element_multiplier(player.offensive_element, monster.element)
        damage = compute_player_damage(player, monster)
        wounded = replace(monster, hp=monster.hp - damage)
        events: List[CombatEvent] = [
            AttackResolvedEvent(
                attacker_name=player.name,
                target_name=monster.name,
                damage=damage,
                target_hp=wounded.hp,
                multiplier=multiplier,
            )
        ]
        logger.debug("%s hits %s for %d (x%.1f)", player.name, monster.name, damage, multiplier)

        if not wounded.is_alive:
            rewarded = gain_rewards(player, exp=monster.exp_reward, gold=monster.gold_reward)
            events.append(MonsterDefeatedEvent(monster_name=monster.name))
            events.append(RewardsGainedEvent(exp=monster.exp_reward, gold=monster.gold_reward))
            return CombatResult(player=rewarded, monster=None, events=events)

        retaliation = compute_monster_damage(wounded, player)
        hurt = replace(player, hp=player.hp - retaliation)
        events.append(MonsterAttackEvent(monster_name=wounded.name, damage=retaliation, player_hp=hurt.hp))
        logger.debug("%s retaliates for %d", wounded.name, retaliation)
        if not hurt.is_alive:
            events.append(PlayerDefeatedEvent(player_name=hurt.name))
        return CombatResult(player=hurt, monster=wounded, events=events)
