"""
Damage Calculator - Single source of truth for damage and block numbers.

Design principles:
1. Pure functions - no side effects, inputs are never modified
2. Fixed calculation order, floored at each multiplier step
3. Never raises on bad data - runs on every hit and must not stop combat

Core calculation order:
1. Base damage
2. Flat add (attacker Strength)
3. Attacker multiplier (Weak: 0.75), floored
4. Target multiplier (Vulnerable: 1.5), floored
5. First-attack relic bonus (Akabeko: +8)
6. Minimum 0
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Optional, Tuple

from ..content.relics import AKABEKO
from ..state.combat import EntityState, Player, StatusType

__all__ = [
    "calculate_damage",
    "calculate_block",
    "apply_block_absorption",
    # Constants
    "WEAK_MULT",
    "VULN_MULT",
    "FIRST_ATTACK_BONUS",
]

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Weak - reduces damage dealt by 25%
WEAK_MULT = 0.75

# Vulnerable - increases damage received by 50%
VULN_MULT = 1.50

# Akabeko - flat bonus on the first attack of each combat
FIRST_ATTACK_BONUS = 8


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _invalid_input_reason(
    base_damage: Any,
    attacker: Optional[EntityState],
    target: Optional[EntityState],
) -> Optional[str]:
    if not _is_finite_number(base_damage):
        return f"base damage is not a finite number: {base_damage!r}"
    if attacker is None or target is None:
        return "missing attacker or target"
    if getattr(attacker, "status_effects", None) is None:
        return "attacker has no status effect collection"
    if getattr(target, "status_effects", None) is None:
        return "target has no status effect collection"
    return None


def _overflow(base_damage: Any) -> int:
    logger.warning(f"Damage calculation skipped, {base_damage!r} overflowed; dealing 0")
    return 0


# =============================================================================
# OUTGOING DAMAGE CALCULATION
# =============================================================================

def calculate_damage(
    base_damage: float,
    attacker: Optional[EntityState],
    target: Optional[EntityState],
    is_first_attack: bool = False,
) -> int:
    """
    Calculate final damage for one hit.

    Args:
        base_damage: Damage printed on the card/effect
        attacker: Entity dealing the damage
        target: Entity receiving the damage
        is_first_attack: True for the player's first attack this combat

    Returns:
        Final damage as int (minimum 0). Invalid input yields 0 and a
        warning on this module's logger.
    """
    reason = _invalid_input_reason(base_damage, attacker, target)
    if reason is not None:
        logger.warning(f"Damage calculation skipped, {reason}; dealing 0")
        return 0

    # 1. Base damage
    damage = base_damage

    # 2. Flat add (Strength)
    damage += attacker.strength

    # 3. Attacker multiplier (Weak)
    if attacker.is_weak:
        damage = damage * WEAK_MULT
        if not math.isfinite(damage):
            return _overflow(base_damage)
        damage = math.floor(damage)

    # 4. Target multiplier (Vulnerable)
    if target.is_vulnerable:
        damage = damage * VULN_MULT
        if not math.isfinite(damage):
            return _overflow(base_damage)
        damage = math.floor(damage)

    # 5. First-attack relic bonus
    if is_first_attack and isinstance(attacker, Player) and attacker.has_relic(AKABEKO):
        damage += FIRST_ATTACK_BONUS

    # 6. Floor to int, minimum 0
    return max(0, math.floor(damage))


# =============================================================================
# BLOCK CALCULATION
# =============================================================================

def calculate_block(base_block: float, defender: EntityState) -> int:
    """
    Calculate final block for a block effect.

    Block = base + Dexterity, minimum 0.
    """
    block = base_block + defender.status_stacks(StatusType.DEXTERITY)
    return max(0, math.floor(block))


# =============================================================================
# INCOMING DAMAGE
# =============================================================================

def apply_block_absorption(damage: int, block: int) -> Tuple[int, int]:
    """
    Split a hit between block and health.

    Block absorbs up to its own size regardless of how much gets through.

    Returns:
        Tuple of (hp_loss, block_remaining)
    """
    hp_loss = max(0, damage - block)
    block_remaining = max(0, block - damage)
    return hp_loss, block_remaining
