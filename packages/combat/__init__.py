"""
Combat Core

Combat-resolution rules for a turn-based card battler. Every operation takes
snapshots of the player and enemies and returns new, independent snapshots;
inputs are never modified.

Core subsystems:
- state: Player/Enemy snapshots, status effects, intents
- content: Cards, power cards, relics, monster cards
- calc: Status effect lifecycle, damage/block formulas, damage preview
- effects: Power card, relic and monster card processors
- registry: Relic override handlers
- config: Environment settings and logging setup

Usage:
    from packages.combat import (
        create_player, create_enemy, get_card, get_card_damage_preview,
        process_relic_effects, RelicTrigger, TriggerContext,
    )

    player = create_player(relics=[get_relic("centennial_puzzle")])
    enemies = [create_enemy("jaw_worm", 40)]
    preview = get_card_damage_preview(get_card("strike"), player, enemies)

    ctx = TriggerContext()
    result = process_relic_effects(RelicTrigger.DAMAGE_TAKEN, player, enemies, ctx)
    ctx.should_draw_cards  # 3
"""

__version__ = "0.1.0"

# Snapshots
from .state import (
    StatusType, StatusEffect, IntentType, EnemyIntent,
    EntityState, Player, Enemy, create_player, create_enemy,
)

# Content
from .content import (
    EffectType, TargetType, parse_target,
    Card, CardEffect, CardType, CardRarity, get_card, get_all_cards,
    PowerTrigger, PowerCard, PowerCardEffect, get_power_card_definition,
    Relic, RelicEffect, RelicRarity, RelicTrigger,
    get_relic, get_all_relics, get_starter_relic, relic_has_trigger,
    MonsterCard, MonsterCardType, MonsterEffect, get_monster_cards,
)

# Status effects and damage
from .calc import (
    apply_status_effect,
    remove_status_effect,
    process_status_effects,
    calculate_damage,
    calculate_block,
    apply_block_absorption,
    CardDamageInfo,
    CardPreview,
    get_card_damage_info,
    get_card_damage_preview,
    get_card_display_damage,
    DamageDebugger,
    damage_debugger,
)

# Processors
from .effects import (
    TriggerResult,
    MonsterCardResult,
    process_power_card_effects,
    process_relic_effects,
    process_monster_card_effects,
)
from .registry import TriggerContext, RelicContext, RELIC_REGISTRY, relic_trigger

# Configuration
from .config import CombatSettings, load_settings, get_settings, configure_logging

__all__ = [
    # State
    "StatusType", "StatusEffect", "IntentType", "EnemyIntent",
    "EntityState", "Player", "Enemy", "create_player", "create_enemy",
    # Content
    "EffectType", "TargetType", "parse_target",
    "Card", "CardEffect", "CardType", "CardRarity", "get_card", "get_all_cards",
    "PowerTrigger", "PowerCard", "PowerCardEffect", "get_power_card_definition",
    "Relic", "RelicEffect", "RelicRarity", "RelicTrigger",
    "get_relic", "get_all_relics", "get_starter_relic", "relic_has_trigger",
    "MonsterCard", "MonsterCardType", "MonsterEffect", "get_monster_cards",
    # Calc
    "apply_status_effect", "remove_status_effect", "process_status_effects",
    "calculate_damage", "calculate_block", "apply_block_absorption",
    "CardDamageInfo", "CardPreview",
    "get_card_damage_info", "get_card_damage_preview", "get_card_display_damage",
    "DamageDebugger", "damage_debugger",
    # Processors
    "TriggerResult", "MonsterCardResult",
    "process_power_card_effects", "process_relic_effects", "process_monster_card_effects",
    "TriggerContext", "RelicContext", "RELIC_REGISTRY", "relic_trigger",
    # Config
    "CombatSettings", "load_settings", "get_settings", "configure_logging",
]
