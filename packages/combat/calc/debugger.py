"""
Damage debugger - diagnostics sink for damage resolution.

The committing path reports what it calculated and what it actually
dealt; the debugger keeps a bounded history and flags any hit where the
health lost does not match calculated damage minus the target's block.

    from packages.combat.calc.debugger import damage_debugger

    damage_debugger.enable()
    damage_debugger.log_damage_calculation(card, player, enemy, 6, 9, 4)
    damage_debugger.summary()
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..config import get_settings
from ..state.combat import Enemy, Player, StatusEffect

logger = logging.getLogger(__name__)

BLOCK_APPLICATION_ERROR = "block_application_error"
MULTI_HIT_ERROR = "multi_hit_error"


@dataclass(frozen=True)
class DamageDiscrepancy:
    kind: str
    expected: int
    actual: int

    @property
    def difference(self) -> int:
        return abs(self.actual - self.expected)


@dataclass(frozen=True)
class DamageCalculationRecord:
    card_id: str
    card_name: str
    base_damage: float
    calculated_damage: int
    actual_damage_dealt: int
    damage_after_block: int
    target_name: str
    target_health: int
    target_block: int
    player_energy: int
    player_block: int
    player_statuses: Tuple[StatusEffect, ...]
    target_statuses: Tuple[StatusEffect, ...]
    is_first_attack: bool
    timestamp: float
    effect_type: Optional[str] = None
    discrepancy: Optional[DamageDiscrepancy] = None


class DamageDebugger:
    """Bounded log of damage calculations with discrepancy detection."""

    def __init__(self, enabled: Optional[bool] = None, max_logs: int = 1000):
        # None follows the COMBAT_DAMAGE_DEBUGGER setting
        self._enabled = enabled
        self.max_logs = max_logs
        self._logs: List[DamageCalculationRecord] = []

    @property
    def enabled(self) -> bool:
        if self._enabled is None:
            return get_settings().damage_debugger
        return self._enabled

    def enable(self) -> None:
        self._enabled = True
        logger.info("Damage debugger enabled")

    def disable(self) -> None:
        self._enabled = False
        logger.info("Damage debugger disabled")

    def _append(self, record: DamageCalculationRecord) -> None:
        self._logs.append(record)
        if len(self._logs) > self.max_logs:
            del self._logs[: len(self._logs) - self.max_logs]

    def log_damage_calculation(
        self,
        card: Any,
        player: Player,
        target: Enemy,
        base_damage: float,
        calculated_damage: int,
        actual_damage_dealt: int,
        is_first_attack: bool = False,
        effect_type: Optional[str] = None,
    ) -> Optional[DamageCalculationRecord]:
        """Record one resolved hit. target is the pre-hit snapshot."""
        if not self.enabled:
            return None

        damage_after_block = max(0, calculated_damage - target.block)
        discrepancy = None
        if actual_damage_dealt != damage_after_block:
            discrepancy = DamageDiscrepancy(
                kind=BLOCK_APPLICATION_ERROR,
                expected=damage_after_block,
                actual=actual_damage_dealt,
            )

        record = DamageCalculationRecord(
            card_id=card.id,
            card_name=card.name,
            base_damage=base_damage,
            calculated_damage=calculated_damage,
            actual_damage_dealt=actual_damage_dealt,
            damage_after_block=damage_after_block,
            target_name=target.name,
            target_health=target.health,
            target_block=target.block,
            player_energy=player.energy,
            player_block=player.block,
            player_statuses=tuple(e.copy() for e in player.status_effects),
            target_statuses=tuple(e.copy() for e in target.status_effects),
            is_first_attack=is_first_attack,
            timestamp=time.time(),
            effect_type=effect_type,
            discrepancy=discrepancy,
        )
        self._append(record)

        if discrepancy:
            logger.error(
                f"Damage discrepancy: {card.name} ({card.id}) -> {target.name}: "
                f"expected {discrepancy.expected}, dealt {discrepancy.actual} "
                f"(diff {discrepancy.difference})"
            )
        else:
            logger.debug(
                f"{card.name} -> {target.name}: {base_damage} base -> "
                f"{calculated_damage} calculated -> {damage_after_block} after block"
            )
        return record

    def log_multi_hit_damage(
        self,
        card: Any,
        results: Sequence[Tuple[Enemy, int]],
        hit_count: int,
        damage_per_hit: int,
    ) -> List[DamageDiscrepancy]:
        """Check (pre-hit target, damage dealt) pairs for a multi-hit card."""
        if not self.enabled:
            return []

        found = []
        expected_total = damage_per_hit * hit_count
        for target, dealt in results:
            expected = max(0, expected_total - target.block)
            if dealt != expected:
                discrepancy = DamageDiscrepancy(MULTI_HIT_ERROR, expected, dealt)
                found.append(discrepancy)
                logger.error(
                    f"Multi-hit discrepancy: {card.name} ({card.id}) -> {target.name}: "
                    f"{hit_count}x{damage_per_hit}, expected {expected}, dealt {dealt}"
                )
        return found

    def get_recent_logs(self, count: int = 10) -> List[DamageCalculationRecord]:
        return self._logs[-count:] if count > 0 else []

    def get_discrepancies(self) -> List[DamageCalculationRecord]:
        return [r for r in self._logs if r.discrepancy is not None]

    def clear_logs(self) -> None:
        self._logs = []

    def summary(self) -> Dict[str, Any]:
        total = len(self._logs)
        discrepancies = self.get_discrepancies()
        accuracy = None
        if total:
            accuracy = round((total - len(discrepancies)) / total * 100, 1)
        return {
            "total_calculations": total,
            "discrepancies": len(discrepancies),
            "accuracy": accuracy,
            "recent_discrepancies": discrepancies[-5:],
        }


damage_debugger = DamageDebugger()
