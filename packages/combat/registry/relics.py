"""
Relic override implementations.

Only relics whose behaviour cannot be expressed as effect data live here.
Each handler replaces the generic interpreter for its (trigger, relic)
pair; every other relic effect stays data-driven.
"""

from __future__ import annotations

import logging

from . import relic_trigger, RelicContext
from ..content.relics import AKABEKO, BRONZE_SCALES, CENTENNIAL_PUZZLE, RelicTrigger

logger = logging.getLogger(__name__)

# Bronze Scales retaliation damage
REFLECT_DAMAGE = 3

# Centennial Puzzle draw count
PUZZLE_DRAW = 3


# =============================================================================
# DAMAGE_TAKEN Triggers
# =============================================================================

@relic_trigger(RelicTrigger.DAMAGE_TAKEN, relic=BRONZE_SCALES)
def bronze_scales_reflect(ctx: RelicContext) -> None:
    """Bronze Scales: Whenever you take damage, deal 3 damage to ALL enemies."""
    ctx.deal_damage_to_all_enemies(REFLECT_DAMAGE)


@relic_trigger(RelicTrigger.DAMAGE_TAKEN, relic=CENTENNIAL_PUZZLE)
def centennial_puzzle_draw(ctx: RelicContext) -> None:
    """Centennial Puzzle: Draw 3 cards when damaged; the caller does the drawing."""
    ctx.request_draw(PUZZLE_DRAW)


# =============================================================================
# CARD_PLAYED Triggers
# =============================================================================

@relic_trigger(RelicTrigger.CARD_PLAYED, relic=AKABEKO)
def akabeko_first_attack(ctx: RelicContext) -> None:
    """Akabeko: the +8 is added by calculate_damage on the first attack; no state change here."""
    logger.debug("Akabeko bonus resolves in calculate_damage")
