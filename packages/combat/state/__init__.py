"""
State module - combatant snapshots consumed and produced by the processors.
"""

from .combat import (
    StatusType,
    StatusEffect,
    IntentType,
    EnemyIntent,
    EntityState,
    Player,
    Enemy,
    create_player,
    create_enemy,
)

__all__ = [
    "StatusType",
    "StatusEffect",
    "IntentType",
    "EnemyIntent",
    "EntityState",
    "Player",
    "Enemy",
    "create_player",
    "create_enemy",
]
