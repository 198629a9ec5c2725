"""
Trigger processors for the combat core.

- executor: generic (EffectType, TargetType) interpreter
- powers: power card triggers
- relics: relic triggers (override registry first, then the interpreter)
- monsters: monster card resolution against the player
"""

from .executor import (
    TriggerResult,
    ResolvedEffect,
    EFFECT_HANDLERS,
    ENERGY_OVERFLOW,
    apply_effect,
    report_unsupported,
)
from .powers import process_power_card_effects
from .relics import process_relic_effects, DEFAULT_TARGETS
from .monsters import MonsterCardResult, process_monster_card_effects

__all__ = [
    # Interpreter
    "TriggerResult",
    "ResolvedEffect",
    "EFFECT_HANDLERS",
    "ENERGY_OVERFLOW",
    "apply_effect",
    "report_unsupported",
    # Processors
    "process_power_card_effects",
    "process_relic_effects",
    "DEFAULT_TARGETS",
    "MonsterCardResult",
    "process_monster_card_effects",
]
