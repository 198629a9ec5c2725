"""
Power card definitions.

A power card stays in play for the rest of combat and re-evaluates its
effects whenever a matching PowerTrigger fires.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .effects import EffectType, TargetType
from ..state.combat import StatusType


class PowerTrigger(Enum):
    """Instants at which power card effects may fire."""
    TURN_START = "turn_start"
    TURN_END = "turn_end"
    COMBAT_START = "combat_start"
    CARD_PLAYED = "card_played"
    DAMAGE_TAKEN = "damage_taken"


@dataclass(frozen=True)
class PowerCardEffect:
    trigger: PowerTrigger
    type: EffectType
    value: int
    target: TargetType
    status_type: Optional[StatusType] = None


@dataclass(frozen=True)
class PowerCard:
    id: str
    name: str
    description: str
    effects: Tuple[PowerCardEffect, ...] = ()


# =============================================================================
# POWER CARD DEFINITIONS
# =============================================================================

METALLICIZE = PowerCard(
    id="metallicize",
    name="Metallicize",
    description="At the end of your turn, gain 3 Block.",
    effects=(
        PowerCardEffect(PowerTrigger.TURN_END, EffectType.BLOCK, 3, TargetType.SELF),
    ),
)

DEMON_FORM = PowerCard(
    id="demon_form",
    name="Demon Form",
    description="At the start of each turn, gain 2 Strength.",
    effects=(
        PowerCardEffect(PowerTrigger.TURN_START, EffectType.APPLY_STATUS, 2,
                        TargetType.SELF, StatusType.STRENGTH),
    ),
)

INFLAME = PowerCard(
    id="inflame",
    name="Inflame",
    description="Gain 2 Strength.",
    effects=(
        PowerCardEffect(PowerTrigger.COMBAT_START, EffectType.APPLY_STATUS, 2,
                        TargetType.SELF, StatusType.STRENGTH),
    ),
)


POWER_CARDS: Dict[str, PowerCard] = {
    METALLICIZE.id: METALLICIZE,
    DEMON_FORM.id: DEMON_FORM,
    INFLAME.id: INFLAME,
}


def get_power_card_definition(card_id: str) -> Optional[PowerCard]:
    """Get the persistent power definition for a played power card."""
    return POWER_CARDS.get(card_id)
