"""
Monster card definitions.

Each enemy plays one card per turn against the player. Effects are written
from the monster's point of view, so TargetType.ENEMY means the player.

Older cards also carry flat damage/block fields; the processor only falls
back to them when no structured effect of that kind is present.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .effects import EffectType, TargetType
from ..state.combat import StatusType


class MonsterCardType(Enum):
    ATTACK = "attack"
    DEFEND = "defend"
    BUFF = "buff"
    DEBUFF = "debuff"


@dataclass(frozen=True)
class MonsterEffect:
    type: EffectType
    value: int
    target: TargetType
    status_type: Optional[StatusType] = None


@dataclass(frozen=True)
class MonsterCard:
    id: str
    base_id: str
    name: str
    type: MonsterCardType
    description: str
    priority: int = 1
    damage: Optional[int] = None
    block: Optional[int] = None
    effects: Tuple[MonsterEffect, ...] = ()

    def has_effect(self, effect_type: EffectType) -> bool:
        return any(e.type == effect_type for e in self.effects)


def _attack(card_id: str, name: str, damage: int, priority: int) -> MonsterCard:
    return MonsterCard(
        id=card_id, base_id=card_id, name=name, type=MonsterCardType.ATTACK,
        description=f"Deal {damage} damage.", priority=priority, damage=damage,
        effects=(MonsterEffect(EffectType.DAMAGE, damage, TargetType.ENEMY),),
    )


# =============================================================================
# Cultist
# =============================================================================

CULTIST_CARDS = (
    _attack("dark_strike", "Dark Strike", 6, priority=3),
    MonsterCard(
        id="incantation", base_id="incantation", name="Incantation",
        type=MonsterCardType.BUFF, description="Gain 2 Strength.", priority=2,
        effects=(MonsterEffect(EffectType.APPLY_STATUS, 2, TargetType.SELF,
                               StatusType.STRENGTH),),
    ),
    _attack("ritual_dagger", "Ritual Dagger", 8, priority=4),
)


# =============================================================================
# Jaw Worm
# =============================================================================

JAW_WORM_CARDS = (
    _attack("chomp", "Chomp", 11, priority=4),
    MonsterCard(
        id="thrash", base_id="thrash", name="Thrash",
        type=MonsterCardType.ATTACK, description="Deal 7 damage. Gain 5 Block.",
        priority=3, damage=7, block=5,
        effects=(
            MonsterEffect(EffectType.DAMAGE, 7, TargetType.ENEMY),
            MonsterEffect(EffectType.BLOCK, 5, TargetType.SELF),
        ),
    ),
    MonsterCard(
        id="bellow", base_id="bellow", name="Bellow",
        type=MonsterCardType.BUFF, description="Gain 3 Strength and 6 Block.",
        priority=2,
        effects=(
            MonsterEffect(EffectType.APPLY_STATUS, 3, TargetType.SELF, StatusType.STRENGTH),
            MonsterEffect(EffectType.BLOCK, 6, TargetType.SELF),
        ),
    ),
)


# =============================================================================
# Louse
# =============================================================================

LOUSE_CARDS = (
    _attack("bite", "Bite", 5, priority=3),
    MonsterCard(
        id="grow", base_id="grow", name="Grow",
        type=MonsterCardType.BUFF, description="Gain 3 Strength.", priority=2,
        effects=(MonsterEffect(EffectType.APPLY_STATUS, 3, TargetType.SELF,
                               StatusType.STRENGTH),),
    ),
)


# =============================================================================
# Acid Slime
# =============================================================================

ACID_SLIME_CARDS = (
    MonsterCard(
        id="corrosive_spit", base_id="corrosive_spit", name="Corrosive Spit",
        type=MonsterCardType.DEBUFF, description="Apply 2 Weak.", priority=3,
        effects=(MonsterEffect(EffectType.APPLY_STATUS, 2, TargetType.ENEMY,
                               StatusType.WEAK),),
    ),
    _attack("tackle", "Tackle", 10, priority=4),
    MonsterCard(
        id="lick", base_id="lick", name="Lick",
        type=MonsterCardType.DEBUFF, description="Apply 1 Weak and 1 Vulnerable.",
        priority=2,
        effects=(
            MonsterEffect(EffectType.APPLY_STATUS, 1, TargetType.ENEMY, StatusType.WEAK),
            MonsterEffect(EffectType.APPLY_STATUS, 1, TargetType.ENEMY, StatusType.VULNERABLE),
        ),
    ),
)


MONSTER_DECKS: Dict[str, Tuple[MonsterCard, ...]] = {
    "cultist": CULTIST_CARDS,
    "jaw_worm": JAW_WORM_CARDS,
    "louse": LOUSE_CARDS,
    "acid_slime": ACID_SLIME_CARDS,
}


def get_monster_cards(enemy_id: str) -> List[MonsterCard]:
    """Monster deck for an enemy id (empty for unknown enemies)."""
    return list(MONSTER_DECKS.get(enemy_id, ()))
