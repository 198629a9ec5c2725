"""
Monster card effect processing.

Monster card effects are written from the monster's point of view:
TargetType.SELF is the acting enemy and TargetType.ENEMY is the player.
Damage runs through the same formula the player uses (Strength, Weak,
Vulnerable) and is absorbed by the player's block first.

Player health is not clamped here; defeat is detected by the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .executor import ResolvedEffect, report_unsupported
from ..calc.damage import apply_block_absorption, calculate_block, calculate_damage
from ..calc.status import apply_status_effect
from ..content.effects import EffectType, TargetType
from ..content.monsters import MonsterCard, MonsterEffect
from ..state.combat import Enemy, Player

logger = logging.getLogger(__name__)


@dataclass
class MonsterCardResult:
    """Snapshots after one monster card resolves."""
    player: Player
    enemy: Enemy


def _hit_player(result: MonsterCardResult, base_damage: int) -> None:
    damage = calculate_damage(base_damage, result.enemy, result.player)
    hp_loss, remaining_block = apply_block_absorption(damage, result.player.block)
    result.player.health -= hp_loss
    result.player.block = remaining_block
    logger.debug(
        f"{result.enemy.id} hits player for {damage} "
        f"({hp_loss} after block)"
    )


def _gain_block(result: MonsterCardResult, base_block: int) -> None:
    result.enemy.block += calculate_block(base_block, result.enemy)


def _apply_effect(effect: MonsterEffect, result: MonsterCardResult, card_id: str) -> None:
    if effect.type == EffectType.DAMAGE and effect.target == TargetType.ENEMY:
        _hit_player(result, effect.value)
        return

    if effect.type == EffectType.BLOCK and effect.target == TargetType.SELF:
        _gain_block(result, effect.value)
        return

    if effect.type == EffectType.APPLY_STATUS and effect.status_type is not None:
        if effect.target == TargetType.SELF:
            result.enemy = apply_status_effect(result.enemy, effect.status_type, effect.value)
            return
        if effect.target == TargetType.ENEMY:
            result.player = apply_status_effect(result.player, effect.status_type, effect.value)
            return

    if effect.type == EffectType.HEAL and effect.target == TargetType.SELF:
        enemy = result.enemy
        enemy.health = min(enemy.max_health, enemy.health + effect.value)
        return

    report_unsupported(
        f"monster card {card_id}",
        ResolvedEffect(
            type=effect.type,
            value=effect.value,
            target=effect.target,
            status_type=effect.status_type,
        ),
    )


def process_monster_card_effects(
    card: MonsterCard,
    player: Player,
    enemy: Enemy,
) -> MonsterCardResult:
    """
    Resolve one monster card against the player.

    Args:
        card: The card the enemy plays
        player: Current player snapshot (not modified)
        enemy: The acting enemy's snapshot (not modified)

    Returns:
        MonsterCardResult with new player and enemy snapshots
    """
    result = MonsterCardResult(player=player.copy(), enemy=enemy.copy())

    for effect in card.effects:
        _apply_effect(effect, result, card.id)

    # Flat fields only apply when no structured effect of that kind exists
    if card.damage and card.damage > 0 and not card.has_effect(EffectType.DAMAGE):
        _hit_player(result, card.damage)

    if card.block and card.block > 0 and not card.has_effect(EffectType.BLOCK):
        _gain_block(result, card.block)

    return result
