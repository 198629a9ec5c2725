"""
Calculation utilities for the combat core.

Contains:
- Status effect lifecycle (stacking, decay)
- Damage and block formulas (pure functions, no side effects)
- Damage/kill preview for pending cards
- Damage debugger (diagnostics)
"""

from .status import (
    apply_status_effect,
    remove_status_effect,
    get_status_effect_duration,
    process_status_effects,
    STACK_DECAY_TYPES,
    PERMANENT_TYPES,
    STATUS_DURATIONS,
)

from .damage import (
    calculate_damage,
    calculate_block,
    apply_block_absorption,
    # Constants
    WEAK_MULT,
    VULN_MULT,
    FIRST_ATTACK_BONUS,
)

from .preview import (
    CardDamageInfo,
    EnemyDamagePreview,
    CardPreview,
    calculate_card_damage,
    get_card_damage_info,
    get_card_damage_preview,
    get_card_display_damage,
)

from .debugger import DamageDebugger, DamageCalculationRecord, DamageDiscrepancy, damage_debugger

__all__ = [
    # Status effects
    "apply_status_effect",
    "remove_status_effect",
    "get_status_effect_duration",
    "process_status_effects",
    "STACK_DECAY_TYPES",
    "PERMANENT_TYPES",
    "STATUS_DURATIONS",
    # Damage calculation
    "calculate_damage",
    "calculate_block",
    "apply_block_absorption",
    # Constants
    "WEAK_MULT",
    "VULN_MULT",
    "FIRST_ATTACK_BONUS",
    # Preview
    "CardDamageInfo",
    "EnemyDamagePreview",
    "CardPreview",
    "calculate_card_damage",
    "get_card_damage_info",
    "get_card_damage_preview",
    "get_card_display_damage",
    # Diagnostics
    "DamageDebugger",
    "DamageCalculationRecord",
    "DamageDiscrepancy",
    "damage_debugger",
]
