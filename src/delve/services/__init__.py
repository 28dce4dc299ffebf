"""Service layer exports."""

from .errors import FactoryError, SaveLoadError
from .combat_service import (
    AttackResolvedEvent,
    CombatEvent,
    CombatResult,
    CombatService,
    MonsterAttackEvent,
    MonsterDefeatedEvent,
    PlayerDefeatedEvent,
    RewardsGainedEvent,
)
from .reward_service import RewardService
from .save_service import SavedSession, SaveService
from .controllers import SessionController

__all__ = [
    "FactoryError",
    "SaveLoadError",
    "AttackResolvedEvent",
    "CombatEvent",
    "CombatResult",
    "CombatService",
    "MonsterAttackEvent",
    "MonsterDefeatedEvent",
    "PlayerDefeatedEvent",
    "RewardsGainedEvent",
    "RewardService",
    "SavedSession",
    "SaveService",
    "SessionController",
]
