"""
Generic effect interpreter shared by power cards and relics.

Effects are resolved through a table keyed by (EffectType, TargetType).
Combinations missing from the table are not part of the contract: they
change nothing and are reported on this module's logger (WARNING, or DEBUG
when COMBAT_REPORT_UNSUPPORTED_EFFECTS is off).

Handlers mutate a TriggerResult that already holds copies of the caller's
snapshots, so the caller's objects are never touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from ..calc.status import apply_status_effect
from ..config import get_settings
from ..content.effects import EffectType, TargetType
from ..state.combat import Enemy, Player, StatusType

logger = logging.getLogger(__name__)

# Energy may exceed max energy by this much
ENERGY_OVERFLOW = 3


@dataclass
class TriggerResult:
    """Snapshots produced by one dispatch."""
    player: Player
    enemies: List[Enemy] = field(default_factory=list)

    @classmethod
    def from_snapshots(cls, player: Player, enemies: List[Enemy]) -> TriggerResult:
        return cls(player=player.copy(), enemies=[enemy.copy() for enemy in enemies])


@dataclass(frozen=True)
class ResolvedEffect:
    """An effect with every field filled in, ready for the interpreter."""
    type: EffectType
    value: int
    target: Optional[TargetType]
    status_type: Optional[StatusType] = None


EffectHandler = Callable[[ResolvedEffect, TriggerResult], bool]


# =============================================================================
# Handlers
# =============================================================================

def _gain_block(effect: ResolvedEffect, result: TriggerResult) -> bool:
    result.player.block = max(0, result.player.block + effect.value)
    return True


def _heal_player(effect: ResolvedEffect, result: TriggerResult) -> bool:
    player = result.player
    player.health = min(player.max_health, player.health + effect.value)
    return True


def _gain_energy(effect: ResolvedEffect, result: TriggerResult) -> bool:
    player = result.player
    player.energy = min(player.max_energy + ENERGY_OVERFLOW, player.energy + effect.value)
    return True


def _apply_status_to_player(effect: ResolvedEffect, result: TriggerResult) -> bool:
    if effect.status_type is None:
        return False
    result.player = apply_status_effect(result.player, effect.status_type, effect.value)
    return True


def _apply_status_to_all_enemies(effect: ResolvedEffect, result: TriggerResult) -> bool:
    if effect.status_type is None:
        return False
    result.enemies = [
        apply_status_effect(enemy, effect.status_type, effect.value)
        for enemy in result.enemies
    ]
    return True


def _damage_all_enemies(effect: ResolvedEffect, result: TriggerResult) -> bool:
    # Direct damage from powers and relics ignores block
    for enemy in result.enemies:
        enemy.health = max(0, enemy.health - effect.value)
    return True


def _draw_cards(effect: ResolvedEffect, result: TriggerResult) -> bool:
    # Drawing belongs to the draw-pile owner; nothing to change here
    logger.debug(f"Draw {effect.value} left to the caller")
    return True


EFFECT_HANDLERS: Dict[Tuple[EffectType, TargetType], EffectHandler] = {
    (EffectType.BLOCK, TargetType.SELF): _gain_block,
    (EffectType.HEAL, TargetType.SELF): _heal_player,
    (EffectType.GAIN_ENERGY, TargetType.SELF): _gain_energy,
    (EffectType.APPLY_STATUS, TargetType.SELF): _apply_status_to_player,
    (EffectType.APPLY_STATUS, TargetType.ALL_ENEMIES): _apply_status_to_all_enemies,
    (EffectType.DAMAGE, TargetType.ALL_ENEMIES): _damage_all_enemies,
    (EffectType.DRAW_CARDS, TargetType.SELF): _draw_cards,
}


# =============================================================================
# Execution
# =============================================================================

def report_unsupported(source: str, effect: ResolvedEffect) -> None:
    """Log an effect the interpreter ignored."""
    target = effect.target.value if effect.target else None
    message = (
        f"Ignoring unsupported effect from {source}: "
        f"{effect.type.value} -> {target}"
    )
    if effect.type == EffectType.APPLY_STATUS and effect.status_type is None:
        message += " (no status type)"
    if get_settings().report_unsupported_effects:
        logger.warning(message)
    else:
        logger.debug(message)


def apply_effect(effect: ResolvedEffect, result: TriggerResult, source: str = "") -> bool:
    """
    Apply one effect to the snapshots in result.

    Returns:
        True if the effect was applied, False if it was ignored.
    """
    handler = EFFECT_HANDLERS.get((effect.type, effect.target)) if effect.target else None
    if handler is not None and handler(effect, result):
        return True
    report_unsupported(source, effect)
    return False
