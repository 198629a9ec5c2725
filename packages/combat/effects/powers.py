"""
Power card trigger processing.

Power cards resolve in the order the player acquired them, and each card's
effects in the order they are written, so later effects see the state left
by earlier ones.
"""

from __future__ import annotations

from typing import List

from .executor import ResolvedEffect, TriggerResult, apply_effect
from ..content.powers import PowerCardEffect, PowerTrigger
from ..state.combat import Enemy, Player


def _resolve(effect: PowerCardEffect) -> ResolvedEffect:
    return ResolvedEffect(
        type=effect.type,
        value=effect.value,
        target=effect.target,
        status_type=effect.status_type,
    )


def process_power_card_effects(
    trigger: PowerTrigger,
    player: Player,
    enemies: List[Enemy],
) -> TriggerResult:
    """
    Fire a trigger across the player's active power cards.

    Args:
        trigger: The instant that just happened
        player: Current player snapshot (not modified)
        enemies: Current enemy snapshots (not modified)

    Returns:
        TriggerResult with new player and enemy snapshots
    """
    result = TriggerResult.from_snapshots(player, enemies)

    for power_card in player.power_cards:
        for effect in power_card.effects:
            if effect.trigger == trigger:
                apply_effect(_resolve(effect), result, source=f"power card {power_card.id}")

    return result
