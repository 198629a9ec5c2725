"""
Relic override registry.

Most relics are plain data and resolve through the generic effect
interpreter. A relic whose behaviour the data cannot express registers a
handler here, keyed by trigger and relic id; the relic processor consults
this table first and only falls through to the interpreter when no handler
exists.

Usage:
    from packages.combat.registry import relic_trigger, RelicContext

    @relic_trigger(RelicTrigger.DAMAGE_TAKEN, relic="bronze_scales")
    def bronze_scales_reflect(ctx: RelicContext) -> None:
        ctx.deal_damage_to_all_enemies(3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any, Callable, Dict, List, Optional, TYPE_CHECKING
)
import functools

from ..content.relics import Relic, RelicEffect, RelicTrigger

if TYPE_CHECKING:
    from ..effects.executor import TriggerResult
    from ..state.combat import Enemy, Player


# =============================================================================
# Context Classes - Passed to trigger handlers
# =============================================================================

@dataclass
class TriggerContext:
    """
    Side channel for obligations the core cannot fulfil itself.

    The caller passes one in, reads it once after the dispatch returns,
    and acts on it (e.g. draws should_draw_cards cards).
    """
    should_draw_cards: int = 0


@dataclass
class RelicContext:
    """Context for relic override handlers."""
    result: TriggerResult
    relic: Relic
    effect: RelicEffect
    trigger_context: Optional[TriggerContext] = None

    @property
    def player(self) -> Player:
        return self.result.player

    @property
    def enemies(self) -> List[Enemy]:
        return self.result.enemies

    @property
    def relic_id(self) -> str:
        return self.relic.id

    def deal_damage_to_all_enemies(self, amount: int) -> None:
        """Flat damage to every enemy, ignoring block. Health floors at 0."""
        for enemy in self.result.enemies:
            enemy.health = max(0, enemy.health - amount)

    def request_draw(self, count: int) -> None:
        """Ask the caller to draw cards once this dispatch returns."""
        if self.trigger_context is not None:
            self.trigger_context.should_draw_cards = count


# =============================================================================
# Registry Classes
# =============================================================================

class TriggerRegistry:
    """Registry of override handlers keyed by trigger and entity id."""

    def __init__(self, name: str):
        self.name = name
        # handlers[trigger][entity_id] = handler_func
        self._handlers: Dict[RelicTrigger, Dict[str, Callable]] = {}

    def register(self, hook: RelicTrigger, entity_id: str, handler: Callable) -> None:
        """Register a handler for a hook."""
        if hook not in self._handlers:
            self._handlers[hook] = {}
        self._handlers[hook][entity_id] = handler

    def get_handler(self, hook: RelicTrigger, entity_id: str) -> Optional[Callable]:
        """Get a specific handler."""
        return self._handlers.get(hook, {}).get(entity_id)


# Global registry
RELIC_REGISTRY = TriggerRegistry("relics")


# =============================================================================
# Decorators
# =============================================================================

def relic_trigger(hook: RelicTrigger, relic: str):
    """
    Decorator to register a relic override handler.

    Args:
        hook: Trigger the override applies to
        relic: Relic ID that this handler is for

    Usage:
        @relic_trigger(RelicTrigger.DAMAGE_TAKEN, relic="centennial_puzzle")
        def centennial_puzzle_draw(ctx: RelicContext) -> None:
            ctx.request_draw(3)
    """
    def decorator(func: Callable[[RelicContext], Any]) -> Callable:
        RELIC_REGISTRY.register(hook, relic, func)

        @functools.wraps(func)
        def wrapper(ctx: RelicContext) -> Any:
            return func(ctx)

        return wrapper
    return decorator


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Context classes
    "TriggerContext",
    "RelicContext",

    # Registry
    "TriggerRegistry",
    "RELIC_REGISTRY",

    # Decorators
    "relic_trigger",
]

# Import handlers to register them (decorators populate the registry)
from . import relics as _relics  # noqa: F401, E402
