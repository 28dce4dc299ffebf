"""Experience and level-up rules."""
from __future__ import annotations

from dataclasses import replace

from delve.domain.entities import Player
from delve.domain.entities.player import EXP_PER_LEVEL

HP_PER_LEVEL = 20


def can_level_up(player: Player) -> bool:
    return player.exp >= player.next_level_exp


def level_up(player: Player) -> Player:
    """
    Apply a single level-up and return the new player.

    The previous level's threshold is subtracted from exp, max HP grows by
    HP_PER_LEVEL and HP is refilled to the new total (artifact bonus included).
    """
    new_level = player.level + 1
    leveled = replace(
        player,
        level=new_level,
        exp=player.exp - (new_level - 1) * EXP_PER_LEVEL,
        max_hp=player.max_hp + HP_PER_LEVEL,
    )
    return replace(leveled, hp=leveled.total_max_hp)


def gain_rewards(player: Player, *, exp: int, gold: int) -> Player:
    return replace(player, exp=player.exp + exp, gold=player.gold + gold)


def heal(player: Player, amount: int) -> Player:
    """Restore HP without exceeding the total max HP."""
    return replace(player, hp=min(player.hp + amount, player.total_max_hp))
