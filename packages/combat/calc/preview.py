"""
Damage/kill preview - read-only projection of what a card would do.

Used by targeting UI before a card is committed. Every number here comes
from calculate_damage, the same function the committing paths use, so the
preview and the resolved hit can never disagree.

Multi-hit cards (DAMAGE_MULTIPLIER_ENERGY) resolve modifiers once per hit
and only then multiply by the hit count.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

from .damage import calculate_damage
from ..content.cards import Card
from ..content.effects import DAMAGE_EFFECT_TYPES, EffectType, TargetType
from ..state.combat import Enemy, Player, StatusType

__all__ = [
    "CardDamageInfo",
    "EnemyDamagePreview",
    "CardPreview",
    "calculate_card_damage",
    "get_card_damage_info",
    "get_card_damage_preview",
    "get_card_display_damage",
]

PREVIEW_SINGLE = "single-target"
PREVIEW_MULTI = "multi-target"
PREVIEW_WHIRLWIND = "whirlwind"


@dataclass(frozen=True)
class CardDamageInfo:
    total_damage: int
    actual_damage: int  # After the target's current block
    is_vulnerable: bool
    would_kill: bool
    hits_count: int = 1


@dataclass(frozen=True)
class EnemyDamagePreview:
    enemy_id: str
    enemy_name: str
    info: CardDamageInfo


@dataclass(frozen=True)
class CardPreview:
    preview_type: str
    previews: List[EnemyDamagePreview] = field(default_factory=list)
    hits_count: Optional[int] = None


def _energy_hits(card: Card, player: Player) -> Optional[int]:
    if card.has_effect(EffectType.DAMAGE_MULTIPLIER_ENERGY):
        return player.energy
    return None


def calculate_card_damage(
    card: Card,
    player: Player,
    target: Enemy,
    is_first_attack: bool = False,
) -> int:
    """
    Total damage a card would deal to one target, before block.

    The first-attack bonus applies to the first damage instance only.
    The legacy flat damage field is used only when the card carries no
    structured damage effect.
    """
    total = 0
    first_pending = is_first_attack

    for effect in card.effects:
        if effect.type == EffectType.DAMAGE:
            total += calculate_damage(effect.value, player, target, first_pending)
            first_pending = False
        elif effect.type == EffectType.DAMAGE_MULTIPLIER_BLOCK:
            base = player.block * (effect.multiplier or 1)
            total += calculate_damage(base, player, target, first_pending)
            first_pending = False
        elif effect.type == EffectType.DAMAGE_MULTIPLIER_ENERGY:
            # Modifiers resolve per hit; the first-attack bonus rides on hit 0 only
            per_hit = calculate_damage(effect.value, player, target)
            total += per_hit * player.energy
            if first_pending and player.energy > 0:
                total += calculate_damage(effect.value, player, target, True) - per_hit
            first_pending = False

    has_structured = any(e.type in DAMAGE_EFFECT_TYPES for e in card.effects)
    if not has_structured and card.damage and card.damage > 0:
        total += calculate_damage(card.damage, player, target, first_pending)

    return total


def get_card_damage_info(
    card: Card,
    player: Player,
    target: Enemy,
    is_first_attack: bool = False,
) -> Optional[CardDamageInfo]:
    """Project a card against one target; None when there is nothing to show."""
    total = calculate_card_damage(card, player, target, is_first_attack)
    if total <= 0:
        return None

    actual = max(0, total - target.block)
    hits = _energy_hits(card, player)
    return CardDamageInfo(
        total_damage=total,
        actual_damage=actual,
        is_vulnerable=target.is_vulnerable,
        would_kill=actual >= target.health,
        hits_count=hits if hits is not None else 1,
    )


def get_card_damage_preview(
    card: Card,
    player: Player,
    enemies: List[Enemy],
    is_first_attack: bool = False,
) -> Optional[CardPreview]:
    """
    Preview a card against every enemy.

    Returns None for cards that deal no damage. Enemies the card would not
    damage are left out of the preview list.
    """
    if not card.deals_damage:
        return None

    previews = []
    for enemy in enemies:
        info = get_card_damage_info(card, player, enemy, is_first_attack)
        if info is not None:
            previews.append(EnemyDamagePreview(
                enemy_id=enemy.id, enemy_name=enemy.name, info=info,
            ))

    hits = _energy_hits(card, player)
    if hits is not None:
        return CardPreview(PREVIEW_WHIRLWIND, previews, hits_count=hits)
    if any(e.target == TargetType.ALL_ENEMIES for e in card.effects
           if e.type in DAMAGE_EFFECT_TYPES):
        return CardPreview(PREVIEW_MULTI, previews)
    return CardPreview(PREVIEW_SINGLE, previews)


def _without_vulnerable(enemy: Enemy) -> Enemy:
    return replace(enemy, status_effects=[
        e.copy() for e in enemy.status_effects if e.type != StatusType.VULNERABLE
    ])


def get_card_display_damage(card: Card, player: Player, enemies: List[Enemy]) -> int:
    """
    Damage printed on the card face.

    Conservative: computed against the first enemy with Vulnerable ignored,
    or the raw values when there are no enemies.
    """
    if not enemies:
        total = 0
        for effect in card.effects:
            if effect.type == EffectType.DAMAGE:
                total += effect.value
            elif effect.type == EffectType.DAMAGE_MULTIPLIER_BLOCK:
                total += player.block * (effect.multiplier or 1)
        if total == 0 and card.damage:
            total = card.damage
        return int(total)

    return calculate_card_damage(card, player, _without_vulnerable(enemies[0]))
