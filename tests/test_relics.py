"""
Relic Trigger Tests

Two-tier dispatch: registered overrides first, then the data-driven
interpreter with relic defaults (value, target, case-insensitive targets).
"""

import logging

import pytest

from packages.combat.content.effects import EffectType, TargetType
from packages.combat.content.relics import (
    Relic, RelicEffect, RelicRarity, RelicTrigger,
    get_all_relics, get_relic, get_relics_by_rarity, get_starter_relic, relic_has_trigger,
)
from packages.combat.effects.relics import process_relic_effects
from packages.combat.registry import (
    RELIC_REGISTRY, RelicContext, TriggerContext, relic_trigger,
)
from packages.combat.state.combat import StatusType, create_enemy, create_player


def _relic(*effects, relic_id="test_relic"):
    return Relic(id=relic_id, name="Test Relic", description="",
                 rarity=RelicRarity.COMMON, effects=tuple(effects))


class TestCatalog:
    """Test relic lookups."""

    def test_starter_relic(self):
        assert get_starter_relic().id == "burning_blood"

    def test_unknown_relic(self):
        assert get_relic("not_a_relic") is None

    def test_ids_unique(self):
        ids = [relic.id for relic in get_all_relics()]
        assert len(ids) == len(set(ids))

    def test_by_rarity(self):
        assert all(r.rarity == RelicRarity.BOSS for r in get_relics_by_rarity(RelicRarity.BOSS))

    def test_has_trigger(self):
        assert relic_has_trigger(get_relic("anchor"), RelicTrigger.COMBAT_START)
        assert not relic_has_trigger(get_relic("anchor"), RelicTrigger.TURN_END)


class TestCombatStartRelics:
    """Test data-driven relics on COMBAT_START."""

    def test_burning_blood_heals(self, make_player, jaw_worm):
        player = make_player(relics=["burning_blood"], health=70)
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, [jaw_worm])
        assert result.player.health == 76

    def test_heal_capped_at_max(self, make_player):
        player = make_player(relics=["burning_blood"], health=78)
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, [])
        assert result.player.health == 80

    def test_anchor_block(self, make_player):
        player = make_player(relics=["anchor"])
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, [])
        assert result.player.block == 10

    def test_bag_of_marbles(self, make_player, two_enemies):
        player = make_player(relics=["bag_of_marbles"])
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, two_enemies)
        assert all(e.status_stacks(StatusType.VULNERABLE) == 1 for e in result.enemies)
        assert not result.player.is_vulnerable

    def test_wrong_trigger_does_nothing(self, make_player, jaw_worm):
        player = make_player(relics=["anchor", "burning_blood"], health=70)
        result = process_relic_effects(RelicTrigger.TURN_END, player, [jaw_worm])
        assert result.player == player
        assert result.enemies == [jaw_worm]

    def test_relics_in_stored_order(self, make_player):
        player = make_player(relics=["blood_vial", "burning_blood"], health=73)
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, [])
        assert result.player.health == 80


class TestTurnRelics:
    """Test TURN_START/TURN_END relics."""

    def test_energy_core(self, make_player):
        player = make_player(relics=["energy_core"], energy=3)
        result = process_relic_effects(RelicTrigger.TURN_START, player, [])
        assert result.player.energy == 4

    def test_calipers_reduces_block(self, make_player):
        player = make_player(relics=["calipers"], block=20)
        result = process_relic_effects(RelicTrigger.TURN_START, player, [])
        assert result.player.block == 5

    def test_calipers_floors_block_at_zero(self, make_player):
        player = make_player(relics=["calipers"], block=10)
        result = process_relic_effects(RelicTrigger.TURN_START, player, [])
        assert result.player.block == 0

    def test_philosophers_stone_default_target(self, make_player, two_enemies):
        """APPLY_STATUS without a target lands on every enemy."""
        player = make_player(relics=["philosophers_stone"])
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, two_enemies)
        assert all(e.strength == 1 for e in result.enemies)
        assert result.player.strength == 0


class TestDamageTakenRelics:
    """Test DAMAGE_TAKEN relics, including the overrides."""

    def test_bronze_scales_hits_all_enemies(self, make_player):
        enemies = [create_enemy("a", 10, block=6), create_enemy("b", 2)]
        player = make_player(relics=["bronze_scales"])
        result = process_relic_effects(RelicTrigger.DAMAGE_TAKEN, player, enemies)
        assert [e.health for e in result.enemies] == [7, 0]
        assert result.enemies[0].block == 6

    def test_centennial_puzzle_requests_draw(self, make_player, jaw_worm):
        player = make_player(relics=["centennial_puzzle"])
        context = TriggerContext()
        result = process_relic_effects(RelicTrigger.DAMAGE_TAKEN, player, [jaw_worm], context)
        assert context.should_draw_cards == 3
        assert result.player == player

    def test_centennial_puzzle_without_context(self, make_player, jaw_worm):
        player = make_player(relics=["centennial_puzzle"])
        result = process_relic_effects(RelicTrigger.DAMAGE_TAKEN, player, [jaw_worm])
        assert result.player == player

    def test_blue_candle_energy(self, make_player):
        player = make_player(relics=["blue_candle"], energy=1)
        result = process_relic_effects(RelicTrigger.DAMAGE_TAKEN, player, [])
        assert result.player.energy == 2

    def test_mixed_relics(self, make_player, jaw_worm):
        player = make_player(relics=["blue_candle", "bronze_scales", "centennial_puzzle"],
                             energy=0)
        context = TriggerContext()
        result = process_relic_effects(RelicTrigger.DAMAGE_TAKEN, player, [jaw_worm], context)
        assert result.player.energy == 1
        assert result.enemies[0].health == 37
        assert context.should_draw_cards == 3


class TestCardPlayedRelics:
    """Test CARD_PLAYED relics."""

    def test_akabeko_deals_no_direct_damage(self, make_player, two_enemies):
        """The +8 comes from calculate_damage, never from the trigger."""
        player = make_player(relics=["akabeko"])
        result = process_relic_effects(RelicTrigger.CARD_PLAYED, player, two_enemies)
        assert result.enemies == two_enemies

    def test_bird_faced_urn(self, make_player):
        player = make_player(relics=["bird_faced_urn"], health=50)
        result = process_relic_effects(RelicTrigger.CARD_PLAYED, player, [])
        assert result.player.health == 52

    def test_dead_branch_draw_is_noop(self, make_player, jaw_worm, caplog):
        player = make_player(relics=["dead_branch"])
        with caplog.at_level(logging.WARNING):
            result = process_relic_effects(RelicTrigger.CARD_PLAYED, player, [jaw_worm])
        assert result.player == player
        assert "Ignoring unsupported effect" not in caplog.text


class TestRelicDefaults:
    """Test value/target defaults and target normalization."""

    @pytest.mark.parametrize("target", ["ALL_ENEMIES", "all_enemies", "All_Enemies"])
    def test_string_targets_case_insensitive(self, target, two_enemies):
        player = create_player(relics=[_relic(RelicEffect(
            RelicTrigger.COMBAT_START, EffectType.APPLY_STATUS, 2, StatusType.WEAK, target,
        ))])
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, two_enemies)
        assert all(e.status_stacks(StatusType.WEAK) == 2 for e in result.enemies)

    def test_self_string_target(self):
        player = create_player(relics=[_relic(RelicEffect(
            RelicTrigger.COMBAT_START, EffectType.BLOCK, 4, target="Self",
        ))])
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, [])
        assert result.player.block == 4

    def test_apply_status_value_defaults_to_one(self, jaw_worm):
        player = create_player(relics=[_relic(RelicEffect(
            RelicTrigger.COMBAT_START, EffectType.APPLY_STATUS, status_type=StatusType.WEAK,
        ))])
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, [jaw_worm])
        assert result.enemies[0].status_stacks(StatusType.WEAK) == 1

    def test_other_value_defaults_to_zero(self):
        player = create_player(block=3, relics=[_relic(RelicEffect(
            RelicTrigger.COMBAT_START, EffectType.BLOCK,
        ))])
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, [])
        assert result.player.block == 3

    def test_apply_status_to_self(self):
        player = create_player(relics=[_relic(RelicEffect(
            RelicTrigger.TURN_START, EffectType.APPLY_STATUS, 1, StatusType.DEXTERITY,
            TargetType.SELF,
        ))])
        result = process_relic_effects(RelicTrigger.TURN_START, player, [])
        assert result.player.dexterity == 1

    def test_unknown_target_reported(self, caplog, jaw_worm):
        player = create_player(relics=[_relic(RelicEffect(
            RelicTrigger.COMBAT_START, EffectType.BLOCK, 5, target="party",
        ))])
        with caplog.at_level(logging.WARNING):
            result = process_relic_effects(RelicTrigger.COMBAT_START, player, [jaw_worm])
        assert result.player == player
        assert "relic test_relic" in caplog.text

    def test_single_enemy_damage_unsupported(self, caplog, jaw_worm):
        player = create_player(relics=[_relic(RelicEffect(
            RelicTrigger.COMBAT_START, EffectType.DAMAGE, 5, target=TargetType.ENEMY,
        ))])
        with caplog.at_level(logging.WARNING):
            result = process_relic_effects(RelicTrigger.COMBAT_START, player, [jaw_worm])
        assert result.enemies == [jaw_worm]
        assert "damage -> enemy" in caplog.text


class TestRegistry:
    """Test the override registry itself."""

    def test_builtin_overrides_registered(self):
        assert RELIC_REGISTRY.get_handler(RelicTrigger.DAMAGE_TAKEN, "bronze_scales") is not None
        assert RELIC_REGISTRY.get_handler(RelicTrigger.DAMAGE_TAKEN, "centennial_puzzle") is not None
        assert RELIC_REGISTRY.get_handler(RelicTrigger.CARD_PLAYED, "akabeko") is not None
        assert RELIC_REGISTRY.get_handler(RelicTrigger.COMBAT_START, "anchor") is None

    def test_handler_keyed_by_trigger(self):
        """An override for one trigger does not leak into another."""
        assert RELIC_REGISTRY.get_handler(RelicTrigger.TURN_START, "bronze_scales") is None

    def test_override_replaces_data(self, monkeypatch):
        """A registered override runs instead of the relic's effect data."""
        monkeypatch.setattr(RELIC_REGISTRY, "_handlers", {
            hook: dict(by_id) for hook, by_id in RELIC_REGISTRY._handlers.items()
        })

        @relic_trigger(RelicTrigger.COMBAT_START, relic="test_relic")
        def double_block(ctx: RelicContext) -> None:
            ctx.player.block += ctx.effect.value * 2

        player = create_player(relics=[_relic(RelicEffect(
            RelicTrigger.COMBAT_START, EffectType.BLOCK, 5,
        ))])
        result = process_relic_effects(RelicTrigger.COMBAT_START, player, [])
        assert result.player.block == 10
        assert player.block == 0


class TestSnapshots:
    """Inputs are never mutated."""

    def test_inputs_untouched(self, make_player, two_enemies):
        player = make_player(relics=["bronze_scales", "bag_of_marbles", "anchor"])
        before_player = player.copy()
        before_enemies = [e.copy() for e in two_enemies]
        for trigger in RelicTrigger:
            process_relic_effects(trigger, player, two_enemies, TriggerContext())
        assert player == before_player
        assert two_enemies == before_enemies


class TestIndependentRelics:
    """Relics on the same trigger do not interfere."""

    def test_energy_and_block_on_turn_start(self, make_player):
        player = make_player(relics=["energy_core", "horn_cleat"], energy=3)
        result = process_relic_effects(RelicTrigger.TURN_START, player, [])
        assert result.player.energy == 4
        assert result.player.block == 14
