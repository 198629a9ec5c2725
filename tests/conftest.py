"""
Shared pytest fixtures for the combat core test suite.

This module provides reusable fixtures for:
- Player and enemy snapshots
- Relic and power card loadouts
- Isolated settings (COMBAT_* environment variables)
"""

import pytest
import sys

# Ensure project root is in path
import os
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)

from packages.combat.config import reset_settings
from packages.combat.content.powers import get_power_card_definition
from packages.combat.content.relics import get_relic
from packages.combat.state.combat import (
    StatusEffect, StatusType, create_enemy, create_player,
)


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Every test starts from default settings, unaffected by the shell or a .env file."""
    for name in list(os.environ):
        if name.startswith("COMBAT_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("packages.combat.config.load_dotenv", lambda *args, **kwargs: False)
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# Player State Fixtures
# =============================================================================


@pytest.fixture
def player():
    """Fresh player: 80/80 HP, 3 energy, no block, statuses or relics."""
    return create_player()


@pytest.fixture
def make_player():
    """Factory for players with relics and power cards given by id."""
    def _make(relics=(), power_cards=(), **kwargs):
        return create_player(
            relics=[get_relic(relic_id) for relic_id in relics],
            power_cards=[get_power_card_definition(card_id) for card_id in power_cards],
            **kwargs,
        )
    return _make


# =============================================================================
# Enemy State Fixtures
# =============================================================================


@pytest.fixture
def jaw_worm():
    """Jaw Worm at 40 HP."""
    return create_enemy("jaw_worm", 40, name="Jaw Worm")


@pytest.fixture
def two_enemies():
    """Two enemies for multi-target tests."""
    return [
        create_enemy("louse_1", 12, name="Louse"),
        create_enemy("louse_2", 15, name="Louse"),
    ]


@pytest.fixture
def vulnerable_enemy():
    """Enemy with 2 Vulnerable."""
    return create_enemy(
        "cultist", 48, name="Cultist",
        status_effects=[StatusEffect(StatusType.VULNERABLE, 2)],
    )
