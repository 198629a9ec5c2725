"""
Combat snapshots for the combat-resolution core.

Player and Enemy are value objects: every processor takes a snapshot,
copies it, and hands back the copy. Nothing a caller holds is mutated.

Optimized for:
1. Fast copying (every processing step copies)
2. Plain equality (dataclass __eq__ gives deep comparison)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..content.monsters import MonsterCard
    from ..content.powers import PowerCard
    from ..content.relics import Relic


# =============================================================================
# Status Effects
# =============================================================================


class StatusType(Enum):
    """Buffs and debuffs a combatant can hold."""
    POISON = "poison"
    WEAK = "weak"
    VULNERABLE = "vulnerable"
    STRENGTH = "strength"
    DEXTERITY = "dexterity"


@dataclass
class StatusEffect:
    """A stack of one status type on a holder.

    duration is None for effects that are not governed by elapsed turns.
    """

    type: StatusType
    stacks: int
    duration: Optional[int] = None

    def copy(self) -> StatusEffect:
        return StatusEffect(type=self.type, stacks=self.stacks, duration=self.duration)


# =============================================================================
# Entity States
# =============================================================================


class IntentType(Enum):
    """What an enemy has declared it will do next."""
    ATTACK = "attack"
    DEFEND = "defend"
    BUFF = "buff"
    DEBUFF = "debuff"
    UNKNOWN = "unknown"


@dataclass
class EnemyIntent:
    type: IntentType = IntentType.UNKNOWN
    value: Optional[int] = None


@dataclass
class EntityState:
    """Shared state for player and enemies."""

    health: int
    max_health: int
    block: int = 0
    # Insertion order is kept for display only
    status_effects: List[StatusEffect] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Status accessors
    # -------------------------------------------------------------------------

    def get_status(self, status_type: StatusType) -> Optional[StatusEffect]:
        for effect in self.status_effects or ():
            if effect.type == status_type:
                return effect
        return None

    def has_status(self, status_type: StatusType) -> bool:
        return self.get_status(status_type) is not None

    def status_stacks(self, status_type: StatusType) -> int:
        effect = self.get_status(status_type)
        return effect.stacks if effect else 0

    @property
    def strength(self) -> int:
        return self.status_stacks(StatusType.STRENGTH)

    @property
    def dexterity(self) -> int:
        return self.status_stacks(StatusType.DEXTERITY)

    @property
    def is_weak(self) -> bool:
        return self.has_status(StatusType.WEAK)

    @property
    def is_vulnerable(self) -> bool:
        return self.has_status(StatusType.VULNERABLE)

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    def _copy_statuses(self) -> Optional[List[StatusEffect]]:
        if self.status_effects is None:
            return None
        return [effect.copy() for effect in self.status_effects]

    def copy(self) -> EntityState:
        """Create a copy with its own status list."""
        return EntityState(
            health=self.health,
            max_health=self.max_health,
            block=self.block,
            status_effects=self._copy_statuses(),
        )


@dataclass
class Player(EntityState):
    """Player state in combat."""

    energy: int = 3
    max_energy: int = 3
    gold: int = 0
    # Relic and power card definitions are frozen, so list copies are enough
    relics: List[Relic] = field(default_factory=list)
    power_cards: List[PowerCard] = field(default_factory=list)

    def copy(self) -> Player:
        return Player(
            health=self.health,
            max_health=self.max_health,
            block=self.block,
            status_effects=self._copy_statuses(),
            energy=self.energy,
            max_energy=self.max_energy,
            gold=self.gold,
            relics=list(self.relics),
            power_cards=list(self.power_cards),
        )

    def has_relic(self, relic_id: str) -> bool:
        return any(relic.id == relic_id for relic in self.relics)


@dataclass
class Enemy(EntityState):
    """Enemy state in combat."""

    id: str = ""
    name: str = ""
    intent: EnemyIntent = field(default_factory=EnemyIntent)
    is_elite: bool = False
    is_boss: bool = False
    current_card: Optional[MonsterCard] = None

    def copy(self) -> Enemy:
        return Enemy(
            health=self.health,
            max_health=self.max_health,
            block=self.block,
            status_effects=self._copy_statuses(),
            id=self.id,
            name=self.name,
            intent=EnemyIntent(type=self.intent.type, value=self.intent.value),
            is_elite=self.is_elite,
            is_boss=self.is_boss,
            current_card=self.current_card,
        )


# =============================================================================
# Factory Functions
# =============================================================================


def create_player(
    health: int = 80,
    max_health: int = 80,
    energy: int = 3,
    max_energy: int = 3,
    block: int = 0,
    gold: int = 0,
    status_effects: Optional[List[StatusEffect]] = None,
    relics: Optional[List[Relic]] = None,
    power_cards: Optional[List[PowerCard]] = None,
) -> Player:
    """Create a player snapshot."""
    return Player(
        health=health,
        max_health=max_health,
        block=block,
        status_effects=list(status_effects or []),
        energy=energy,
        max_energy=max_energy,
        gold=gold,
        relics=list(relics or []),
        power_cards=list(power_cards or []),
    )


def create_enemy(
    id: str,
    health: int,
    max_health: Optional[int] = None,
    name: str = "",
    block: int = 0,
    status_effects: Optional[List[StatusEffect]] = None,
    intent: Optional[EnemyIntent] = None,
    current_card: Optional[MonsterCard] = None,
) -> Enemy:
    """Create an enemy snapshot."""
    return Enemy(
        health=health,
        max_health=max_health if max_health is not None else health,
        block=block,
        status_effects=list(status_effects or []),
        id=id,
        name=name or id,
        intent=intent or EnemyIntent(),
        current_card=current_card,
    )
