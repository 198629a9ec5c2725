"""
Status effect lifecycle - application, stacking and per-tick decay.

Two decay mechanisms exist and never both apply to one effect in one tick:

1. Stack decay: POISON, WEAK, VULNERABLE lose one stack per tick
   (POISON deals its stacks as damage first).
2. Duration decay: any other type carrying a duration loses one turn
   per tick. No shipped type uses it yet; STATUS_DURATIONS is where a
   future type would declare its starting duration.

STRENGTH and DEXTERITY persist for the whole combat. Any entry left at
zero or fewer stacks is dropped at the end of the tick.
"""

from __future__ import annotations

from typing import Dict, Optional, TypeVar

from ..state.combat import EntityState, StatusEffect, StatusType

__all__ = [
    "STACK_DECAY_TYPES",
    "PERMANENT_TYPES",
    "STATUS_DURATIONS",
    "apply_status_effect",
    "remove_status_effect",
    "get_status_effect_duration",
    "process_status_effects",
]

E = TypeVar("E", bound=EntityState)


# Types that lose one stack per tick
STACK_DECAY_TYPES = frozenset({
    StatusType.POISON,
    StatusType.WEAK,
    StatusType.VULNERABLE,
})

# Types that never decay during combat
PERMANENT_TYPES = frozenset({
    StatusType.STRENGTH,
    StatusType.DEXTERITY,
})

# Starting duration for duration-governed types; absent means None
STATUS_DURATIONS: Dict[StatusType, int] = {}


def get_status_effect_duration(status_type: StatusType) -> Optional[int]:
    """Starting duration for a newly applied effect, None if not turn-based."""
    return STATUS_DURATIONS.get(status_type)


def apply_status_effect(target: E, status_type: StatusType, stacks: int) -> E:
    """
    Apply stacks of a status to a holder, returning a new holder.

    An existing entry of the same type absorbs the stacks; otherwise a new
    entry is appended. Negative stacks are accepted and simply reduce the
    stored amount.
    """
    new_target = target.copy()
    existing = new_target.get_status(status_type)
    if existing is not None:
        existing.stacks += stacks
    else:
        new_target.status_effects.append(StatusEffect(
            type=status_type,
            stacks=stacks,
            duration=get_status_effect_duration(status_type),
        ))
    return new_target


def remove_status_effect(target: E, status_type: StatusType) -> E:
    """Return a new holder without any entry of the given type."""
    new_target = target.copy()
    new_target.status_effects = [
        effect for effect in new_target.status_effects if effect.type != status_type
    ]
    return new_target


def _is_expired(effect: StatusEffect) -> bool:
    # No entry survives a tick at zero or negative stacks, whatever its type
    if effect.stacks <= 0:
        return True
    if effect.type not in PERMANENT_TYPES and effect.duration is not None:
        return effect.duration <= 0
    return False


def process_status_effects(entity: E) -> E:
    """
    Run one decay tick over an entity's statuses, returning a new entity.

    Called once per entity at end of turn by the turn sequencer.
    """
    new_entity = entity.copy()

    for effect in new_entity.status_effects:
        if effect.type == StatusType.POISON:
            # Damage uses the stacks before decay
            new_entity.health = max(0, new_entity.health - max(0, effect.stacks))
            effect.stacks = max(0, effect.stacks - 1)
        elif effect.type in STACK_DECAY_TYPES:
            effect.stacks = max(0, effect.stacks - 1)
        elif effect.type in PERMANENT_TYPES:
            continue
        elif effect.duration is not None:
            effect.duration = max(0, effect.duration - 1)

    new_entity.status_effects = [
        effect for effect in new_entity.status_effects if not _is_expired(effect)
    ]
    return new_entity
