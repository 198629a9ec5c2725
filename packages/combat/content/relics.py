"""
Relic Definitions.

A relic is a permanent effect source: a container of RelicEffects keyed by
RelicTrigger. Most relics are fully described by their effect data and are
resolved by the generic effect interpreter. A few need logic the data
cannot express; those have handlers registered in registry/relics.py
under the relic id.

Relic effect fields are optional because relic data is authored loosely:
- value: defaults to 0 (1 for APPLY_STATUS)
- target: defaults per effect type, see effects/relics.py
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .effects import EffectType, TargetType
from ..state.combat import StatusType


class RelicRarity(Enum):
    STARTER = "starter"
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    BOSS = "boss"


class RelicTrigger(Enum):
    """Instants at which relic effects may fire."""
    COMBAT_START = "combat_start"
    TURN_START = "turn_start"
    TURN_END = "turn_end"
    CARD_PLAYED = "card_played"
    DAMAGE_TAKEN = "damage_taken"
    ENEMY_DEATH = "enemy_death"
    REST = "rest"


@dataclass(frozen=True)
class RelicEffect:
    trigger: RelicTrigger
    effect: EffectType
    value: Optional[int] = None
    status_type: Optional[StatusType] = None
    target: Union[TargetType, str, None] = None


@dataclass(frozen=True)
class Relic:
    id: str
    name: str
    description: str
    rarity: RelicRarity
    effects: Tuple[RelicEffect, ...] = ()

    def has_trigger(self, trigger: RelicTrigger) -> bool:
        return any(effect.trigger == trigger for effect in self.effects)


# Relic ids referenced by engine logic
AKABEKO = "akabeko"
BRONZE_SCALES = "bronze_scales"
CENTENNIAL_PUZZLE = "centennial_puzzle"


# =============================================================================
# STARTER RELICS
# =============================================================================

BURNING_BLOOD = Relic(
    id="burning_blood",
    name="Burning Blood",
    description="At the start of combat, heal 6 HP.",
    rarity=RelicRarity.STARTER,
    effects=(RelicEffect(RelicTrigger.COMBAT_START, EffectType.HEAL, 6),),
)


# =============================================================================
# COMMON RELICS
# =============================================================================

COMMON_RELICS = (
    Relic(
        id=AKABEKO,
        name="Akabeko",
        description="Your first Attack each combat deals 8 additional damage.",
        rarity=RelicRarity.COMMON,
        # Resolved inside calculate_damage via the first-attack flag
        effects=(RelicEffect(RelicTrigger.CARD_PLAYED, EffectType.DAMAGE, 8),),
    ),
    Relic(
        id="anchor",
        name="Anchor",
        description="Start each combat with 10 Block.",
        rarity=RelicRarity.COMMON,
        effects=(RelicEffect(RelicTrigger.COMBAT_START, EffectType.BLOCK, 10),),
    ),
    Relic(
        id="art_of_war",
        name="Art of War",
        description="If you do not play any Attacks during your turn, gain 1 Energy next turn.",
        rarity=RelicRarity.COMMON,
        effects=(RelicEffect(RelicTrigger.TURN_END, EffectType.GAIN_ENERGY, 1),),
    ),
    Relic(
        id="bag_of_marbles",
        name="Bag of Marbles",
        description="At the start of each combat, apply 1 Vulnerable to ALL enemies.",
        rarity=RelicRarity.COMMON,
        effects=(RelicEffect(RelicTrigger.COMBAT_START, EffectType.APPLY_STATUS, 1,
                             StatusType.VULNERABLE, TargetType.ALL_ENEMIES),),
    ),
    Relic(
        id="blood_vial",
        name="Blood Vial",
        description="At the start of each combat, heal 2 HP.",
        rarity=RelicRarity.COMMON,
        effects=(RelicEffect(RelicTrigger.COMBAT_START, EffectType.HEAL, 2),),
    ),
)


# =============================================================================
# UNCOMMON RELICS
# =============================================================================

UNCOMMON_RELICS = (
    Relic(
        id="blue_candle",
        name="Blue Candle",
        description="Whenever you take damage, gain 1 Energy next turn.",
        rarity=RelicRarity.UNCOMMON,
        effects=(RelicEffect(RelicTrigger.DAMAGE_TAKEN, EffectType.GAIN_ENERGY, 1),),
    ),
    Relic(
        id=BRONZE_SCALES,
        name="Bronze Scales",
        description="Whenever you take damage, deal 3 damage back.",
        rarity=RelicRarity.UNCOMMON,
        effects=(RelicEffect(RelicTrigger.DAMAGE_TAKEN, EffectType.DAMAGE, 3),),
    ),
    Relic(
        id=CENTENNIAL_PUZZLE,
        name="Centennial Puzzle",
        description="The first time you lose HP each combat, draw 3 cards.",
        rarity=RelicRarity.UNCOMMON,
        effects=(RelicEffect(RelicTrigger.DAMAGE_TAKEN, EffectType.DRAW_CARDS, 3),),
    ),
    Relic(
        id="horn_cleat",
        name="Horn Cleat",
        description="At the start of your 2nd turn, gain 14 Block.",
        rarity=RelicRarity.UNCOMMON,
        effects=(RelicEffect(RelicTrigger.TURN_START, EffectType.BLOCK, 14),),
    ),
)


# =============================================================================
# RARE RELICS
# =============================================================================

RARE_RELICS = (
    Relic(
        id="bird_faced_urn",
        name="Bird-Faced Urn",
        description="Whenever you play a Power card, heal 2 HP.",
        rarity=RelicRarity.RARE,
        effects=(RelicEffect(RelicTrigger.CARD_PLAYED, EffectType.HEAL, 2),),
    ),
    Relic(
        id="calipers",
        name="Calipers",
        description="At the start of your turn, lose 15 Block instead of all Block.",
        rarity=RelicRarity.RARE,
        effects=(RelicEffect(RelicTrigger.TURN_START, EffectType.BLOCK, -15),),
    ),
    Relic(
        id="dead_branch",
        name="Dead Branch",
        description="Whenever you Exhaust a card, add a random card to your hand.",
        rarity=RelicRarity.RARE,
        effects=(RelicEffect(RelicTrigger.CARD_PLAYED, EffectType.DRAW_CARDS, 1),),
    ),
)


# =============================================================================
# BOSS RELICS
# =============================================================================

BOSS_RELICS = (
    Relic(
        id="energy_core",
        name="Energy Core",
        description="Gain 1 Energy at the start of each turn.",
        rarity=RelicRarity.BOSS,
        effects=(RelicEffect(RelicTrigger.TURN_START, EffectType.GAIN_ENERGY, 1),),
    ),
    Relic(
        id="philosophers_stone",
        name="Philosopher's Stone",
        description="Gain 1 Energy at the start of each turn. ALL enemies start combat with 1 Strength.",
        rarity=RelicRarity.BOSS,
        effects=(
            RelicEffect(RelicTrigger.TURN_START, EffectType.GAIN_ENERGY, 1),
            # No target: APPLY_STATUS defaults to all enemies
            RelicEffect(RelicTrigger.COMBAT_START, EffectType.APPLY_STATUS, 1,
                        StatusType.STRENGTH),
        ),
    ),
)


ALL_RELICS: Dict[str, Relic] = {
    relic.id: relic
    for relic in (BURNING_BLOOD,) + COMMON_RELICS + UNCOMMON_RELICS + RARE_RELICS + BOSS_RELICS
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_all_relics() -> List[Relic]:
    return list(ALL_RELICS.values())


def get_relic(relic_id: str) -> Optional[Relic]:
    """Get a relic by id, or None if unknown."""
    return ALL_RELICS.get(relic_id)


def get_starter_relic() -> Relic:
    return BURNING_BLOOD


def get_relics_by_rarity(rarity: RelicRarity) -> List[Relic]:
    return [r for r in ALL_RELICS.values() if r.rarity == rarity]


def relic_has_trigger(relic: Relic, trigger: RelicTrigger) -> bool:
    """True if any of the relic's effects fire on this trigger."""
    return relic.has_trigger(trigger)
