"""
Relic trigger processing.

Two tiers per relic effect:
1. An override registered in RELIC_REGISTRY for (trigger, relic id) runs
   instead of the data.
2. Otherwise the effect data is normalized (value and target defaults) and
   handed to the generic interpreter shared with power cards.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .executor import ResolvedEffect, TriggerResult, apply_effect
from ..content.effects import EffectType, TargetType, parse_target
from ..content.relics import RelicEffect, RelicTrigger
from ..registry import RELIC_REGISTRY, RelicContext, TriggerContext
from ..state.combat import Enemy, Player

logger = logging.getLogger(__name__)


# Target used when a relic effect leaves it out
DEFAULT_TARGETS: Dict[EffectType, TargetType] = {
    EffectType.BLOCK: TargetType.SELF,
    EffectType.HEAL: TargetType.SELF,
    EffectType.GAIN_ENERGY: TargetType.SELF,
    EffectType.DRAW_CARDS: TargetType.SELF,
    EffectType.APPLY_STATUS: TargetType.ALL_ENEMIES,
    EffectType.DAMAGE: TargetType.ALL_ENEMIES,
}


def _default_value(effect: RelicEffect) -> int:
    if effect.value is not None:
        return effect.value
    return 1 if effect.effect == EffectType.APPLY_STATUS else 0


def _resolve(effect: RelicEffect) -> ResolvedEffect:
    if effect.target is None:
        target = DEFAULT_TARGETS.get(effect.effect)
    else:
        target = parse_target(effect.target)
    return ResolvedEffect(
        type=effect.effect,
        value=_default_value(effect),
        target=target,
        status_type=effect.status_type,
    )


def process_relic_effects(
    trigger: RelicTrigger,
    player: Player,
    enemies: List[Enemy],
    context: Optional[TriggerContext] = None,
) -> TriggerResult:
    """
    Fire a trigger across the player's relics.

    Args:
        trigger: The instant that just happened
        player: Current player snapshot (not modified)
        enemies: Current enemy snapshots (not modified)
        context: Optional side channel; overrides may write to it in place

    Returns:
        TriggerResult with new player and enemy snapshots
    """
    result = TriggerResult.from_snapshots(player, enemies)

    for relic in player.relics:
        for effect in relic.effects:
            if effect.trigger != trigger:
                continue

            handler = RELIC_REGISTRY.get_handler(trigger, relic.id)
            if handler is not None:
                logger.debug(f"Relic override {relic.id} on {trigger.value}")
                handler(RelicContext(
                    result=result,
                    relic=relic,
                    effect=effect,
                    trigger_context=context,
                ))
                continue

            apply_effect(_resolve(effect), result, source=f"relic {relic.id}")

    return result
