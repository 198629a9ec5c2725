"""
Effect vocabulary shared by cards, power cards, relics and monster cards.

Every effect source is a container of effects; an effect names what happens
(EffectType), to whom (TargetType), and how much (value).
"""

from enum import Enum
from typing import Optional, Union


class EffectType(Enum):
    """What an effect does."""
    DAMAGE = "damage"
    DAMAGE_MULTIPLIER_BLOCK = "damage_multiplier_block"
    DAMAGE_MULTIPLIER_ENERGY = "damage_multiplier_energy"
    BLOCK = "block"
    HEAL = "heal"
    DRAW_CARDS = "draw_cards"
    GAIN_ENERGY = "gain_energy"
    LOSE_ENERGY = "lose_energy"
    APPLY_STATUS = "apply_status"
    ADD_CARD_TO_DISCARD = "add_card_to_discard"
    UPGRADE_CARD = "upgrade_card"


# Effect types that deal damage to a target when a card is played
DAMAGE_EFFECT_TYPES = frozenset({
    EffectType.DAMAGE,
    EffectType.DAMAGE_MULTIPLIER_BLOCK,
    EffectType.DAMAGE_MULTIPLIER_ENERGY,
})


class TargetType(Enum):
    """Who an effect lands on, from the effect owner's point of view.

    For a monster card ENEMY means the player.
    """
    SELF = "self"
    ENEMY = "enemy"
    ALL_ENEMIES = "all_enemies"


def parse_target(target: Union[TargetType, str, None]) -> Optional[TargetType]:
    """Accept TargetType members or authored strings like "ALL_ENEMIES"/"self"."""
    if target is None or isinstance(target, TargetType):
        return target
    key = str(target).strip().lower()
    for member in TargetType:
        if member.value == key:
            return member
    return None
