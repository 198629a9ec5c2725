"""
Player card definitions used for damage previews.

Only the damage/block relevant subset of the card pool is defined here;
deck management lives outside the combat core.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .effects import DAMAGE_EFFECT_TYPES, EffectType, TargetType
from ..state.combat import StatusType


class CardType(Enum):
    ATTACK = "attack"
    SKILL = "skill"
    POWER = "power"


class CardRarity(Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"


@dataclass(frozen=True)
class CardEffect:
    """A single effect printed on a card."""
    type: EffectType
    value: int
    target: TargetType
    multiplier: Optional[float] = None
    status_type: Optional[StatusType] = None


@dataclass(frozen=True)
class Card:
    """A playable card.

    damage/block are the legacy flat fields; cards authored with structured
    effects leave them unset.
    """
    id: str
    base_id: str
    name: str
    cost: Union[int, str]  # "X" for cards that spend all energy
    type: CardType
    rarity: CardRarity
    description: str
    damage: Optional[int] = None
    block: Optional[int] = None
    effects: Tuple[CardEffect, ...] = ()
    upgraded: bool = False

    def has_effect(self, effect_type: EffectType) -> bool:
        return any(e.type == effect_type for e in self.effects)

    @property
    def deals_damage(self) -> bool:
        """True if any structured or legacy damage is present."""
        if any(e.type in DAMAGE_EFFECT_TYPES for e in self.effects):
            return True
        return bool(self.damage and self.damage > 0)


# =============================================================================
# CARD DEFINITIONS
# =============================================================================

STRIKE = Card(
    id="strike", base_id="strike", name="Strike", cost=1,
    type=CardType.ATTACK, rarity=CardRarity.COMMON,
    description="Deal 6 damage.",
    effects=(CardEffect(EffectType.DAMAGE, 6, TargetType.ENEMY),),
)

DEFEND = Card(
    id="defend", base_id="defend", name="Defend", cost=1,
    type=CardType.SKILL, rarity=CardRarity.COMMON,
    description="Gain 5 Block.",
    effects=(CardEffect(EffectType.BLOCK, 5, TargetType.SELF),),
)

BASH = Card(
    id="bash", base_id="bash", name="Bash", cost=2,
    type=CardType.ATTACK, rarity=CardRarity.COMMON,
    description="Deal 8 damage. Apply 2 Vulnerable.",
    effects=(
        CardEffect(EffectType.DAMAGE, 8, TargetType.ENEMY),
        CardEffect(EffectType.APPLY_STATUS, 2, TargetType.ENEMY,
                   status_type=StatusType.VULNERABLE),
    ),
)

IRON_WAVE = Card(
    id="iron_wave", base_id="iron_wave", name="Iron Wave", cost=1,
    type=CardType.ATTACK, rarity=CardRarity.COMMON,
    description="Gain 5 Block. Deal 5 damage.",
    damage=5, block=5,
)

TWIN_STRIKE = Card(
    id="twin_strike", base_id="twin_strike", name="Twin Strike", cost=1,
    type=CardType.ATTACK, rarity=CardRarity.COMMON,
    description="Deal 5 damage twice.",
    effects=(
        CardEffect(EffectType.DAMAGE, 5, TargetType.ENEMY),
        CardEffect(EffectType.DAMAGE, 5, TargetType.ENEMY),
    ),
)

CLEAVE = Card(
    id="cleave", base_id="cleave", name="Cleave", cost=1,
    type=CardType.ATTACK, rarity=CardRarity.COMMON,
    description="Deal 8 damage to ALL enemies.",
    effects=(CardEffect(EffectType.DAMAGE, 8, TargetType.ALL_ENEMIES),),
)

BODY_SLAM = Card(
    id="body_slam", base_id="body_slam", name="Body Slam", cost=1,
    type=CardType.ATTACK, rarity=CardRarity.COMMON,
    description="Deal damage equal to your current Block.",
    effects=(CardEffect(EffectType.DAMAGE_MULTIPLIER_BLOCK, 0, TargetType.ENEMY,
                        multiplier=1),),
)

WHIRLWIND = Card(
    id="whirlwind", base_id="whirlwind", name="Whirlwind", cost="X",
    type=CardType.ATTACK, rarity=CardRarity.RARE,
    description="Deal 5 damage to ALL enemies X times. (X = Energy)",
    effects=(CardEffect(EffectType.DAMAGE_MULTIPLIER_ENERGY, 5, TargetType.ALL_ENEMIES,
                        multiplier=1),),
)

INFLAME = Card(
    id="inflame", base_id="inflame", name="Inflame", cost=1,
    type=CardType.POWER, rarity=CardRarity.UNCOMMON,
    description="Gain 2 Strength.",
    effects=(CardEffect(EffectType.APPLY_STATUS, 2, TargetType.SELF,
                        status_type=StatusType.STRENGTH),),
)


ALL_CARDS: Dict[str, Card] = {
    card.base_id: card
    for card in (
        STRIKE, DEFEND, BASH, IRON_WAVE, TWIN_STRIKE,
        CLEAVE, BODY_SLAM, WHIRLWIND, INFLAME,
    )
}


def get_card(base_id: str) -> Optional[Card]:
    """Look up a card by its base id."""
    return ALL_CARDS.get(base_id)


def get_all_cards() -> List[Card]:
    return list(ALL_CARDS.values())
