"""
Damage Debugger Tests

The debugger records resolved hits and flags any mismatch between the
calculated damage after block and the health actually lost.
"""

import logging

from packages.combat.calc.debugger import DamageDebugger
from packages.combat.config import reset_settings
from packages.combat.content.cards import get_card
from packages.combat.state.combat import create_enemy


class TestEnableDisable:
    """Test the enabled switch."""

    def test_follows_setting_by_default(self, monkeypatch):
        debugger = DamageDebugger()
        assert not debugger.enabled
        monkeypatch.setenv("COMBAT_DAMAGE_DEBUGGER", "true")
        reset_settings()
        assert debugger.enabled

    def test_disabled_records_nothing(self, player, jaw_worm):
        debugger = DamageDebugger(enabled=False)
        assert debugger.log_damage_calculation(get_card("strike"), player, jaw_worm, 6, 6, 6) is None
        assert debugger.summary()["total_calculations"] == 0

    def test_enable_toggle(self):
        debugger = DamageDebugger(enabled=False)
        debugger.enable()
        assert debugger.enabled
        debugger.disable()
        assert not debugger.enabled


class TestDiscrepancies:
    """Test discrepancy detection."""

    def test_correct_hit(self, player):
        debugger = DamageDebugger(enabled=True)
        target = create_enemy("e", 30, block=2)
        record = debugger.log_damage_calculation(get_card("strike"), player, target, 6, 6, 4)
        assert record.damage_after_block == 4
        assert record.discrepancy is None

    def test_block_ignored_is_flagged(self, player, caplog):
        debugger = DamageDebugger(enabled=True)
        target = create_enemy("e", 30, block=2)
        with caplog.at_level(logging.ERROR, logger="packages.combat.calc.debugger"):
            record = debugger.log_damage_calculation(get_card("strike"), player, target, 6, 6, 6)
        assert record.discrepancy.kind == "block_application_error"
        assert record.discrepancy.difference == 2
        assert "Damage discrepancy" in caplog.text
        assert debugger.get_discrepancies() == [record]

    def test_multi_hit(self, player, caplog):
        debugger = DamageDebugger(enabled=True)
        enemies = [create_enemy("a", 30), create_enemy("b", 30, block=5)]
        with caplog.at_level(logging.ERROR):
            found = debugger.log_multi_hit_damage(
                get_card("whirlwind"), [(enemies[0], 15), (enemies[1], 15)],
                hit_count=3, damage_per_hit=5,
            )
        assert len(found) == 1
        assert found[0].kind == "multi_hit_error"
        assert found[0].expected == 10


class TestHistory:
    """Test the bounded log and summary."""

    def test_max_logs(self, player, jaw_worm):
        debugger = DamageDebugger(enabled=True, max_logs=3)
        for base in range(5):
            debugger.log_damage_calculation(get_card("strike"), player, jaw_worm, base, base, base)
        assert [r.base_damage for r in debugger.get_recent_logs(10)] == [2, 3, 4]

    def test_summary(self, player, jaw_worm):
        debugger = DamageDebugger(enabled=True)
        strike = get_card("strike")
        debugger.log_damage_calculation(strike, player, jaw_worm, 6, 6, 6)
        debugger.log_damage_calculation(strike, player, jaw_worm, 6, 6, 6)
        debugger.log_damage_calculation(strike, player, jaw_worm, 6, 6, 3)
        summary = debugger.summary()
        assert summary["total_calculations"] == 3
        assert summary["discrepancies"] == 1
        assert summary["accuracy"] == 66.7
        debugger.clear_logs()
        assert debugger.summary()["accuracy"] is None

    def test_record_snapshots_statuses(self, player, vulnerable_enemy):
        debugger = DamageDebugger(enabled=True)
        record = debugger.log_damage_calculation(
            get_card("strike"), player, vulnerable_enemy, 6, 9, 9, effect_type="damage",
        )
        vulnerable_enemy.status_effects[0].stacks = 99
        assert record.target_statuses[0].stacks == 2
        assert record.effect_type == "damage"
