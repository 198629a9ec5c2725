"""
Content module - effect vocabulary and the cards, powers, relics and
monster cards built from it.
"""

from .effects import EffectType, TargetType, DAMAGE_EFFECT_TYPES, parse_target
from .cards import Card, CardEffect, CardType, CardRarity, ALL_CARDS, get_card, get_all_cards
from .powers import (
    PowerTrigger, PowerCard, PowerCardEffect, POWER_CARDS, get_power_card_definition,
)
from .relics import (
    Relic, RelicEffect, RelicRarity, RelicTrigger, ALL_RELICS,
    AKABEKO, BRONZE_SCALES, CENTENNIAL_PUZZLE,
    get_all_relics, get_relic, get_starter_relic, get_relics_by_rarity, relic_has_trigger,
)
from .monsters import MonsterCard, MonsterCardType, MonsterEffect, MONSTER_DECKS, get_monster_cards

__all__ = [
    # Effects
    "EffectType",
    "TargetType",
    "DAMAGE_EFFECT_TYPES",
    "parse_target",
    # Cards
    "Card",
    "CardEffect",
    "CardType",
    "CardRarity",
    "ALL_CARDS",
    "get_card",
    "get_all_cards",
    # Powers
    "PowerTrigger",
    "PowerCard",
    "PowerCardEffect",
    "POWER_CARDS",
    "get_power_card_definition",
    # Relics
    "Relic",
    "RelicEffect",
    "RelicRarity",
    "RelicTrigger",
    "ALL_RELICS",
    "AKABEKO",
    "BRONZE_SCALES",
    "CENTENNIAL_PUZZLE",
    "get_all_relics",
    "get_relic",
    "get_starter_relic",
    "get_relics_by_rarity",
    "relic_has_trigger",
    # Monsters
    "MonsterCard",
    "MonsterCardType",
    "MonsterEffect",
    "MONSTER_DECKS",
    "get_monster_cards",
]
