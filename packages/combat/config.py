"""
Settings and logging setup for the combat core.

Settings come from the environment, optionally seeded from a .env file:

    COMBAT_LOG_LEVEL=DEBUG
    COMBAT_LOG_FILE=logs/combat.log
    COMBAT_REPORT_UNSUPPORTED_EFFECTS=false
    COMBAT_DAMAGE_DEBUGGER=true

The library never configures logging on import; callers that want output
call configure_logging().
"""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class CombatSettings:
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    # WARNING when true, DEBUG when false
    report_unsupported_effects: bool = True
    damage_debugger: bool = False


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    logger.warning(f"Ignoring {name}={raw!r}: expected a boolean, using {default}")
    return default


def _env_level(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in _LEVELS:
        logger.warning(f"Ignoring {name}={raw!r}: unknown log level, using {default}")
        return default
    return level


def load_settings(env_file: Union[str, Path, None] = None) -> CombatSettings:
    """Read settings from the environment after loading a .env file.

    Variables already present in the environment win over the .env file.
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()

    defaults = CombatSettings()
    return CombatSettings(
        log_level=_env_level("COMBAT_LOG_LEVEL", defaults.log_level),
        log_file=os.environ.get("COMBAT_LOG_FILE") or None,
        report_unsupported_effects=_env_bool(
            "COMBAT_REPORT_UNSUPPORTED_EFFECTS", defaults.report_unsupported_effects
        ),
        damage_debugger=_env_bool("COMBAT_DAMAGE_DEBUGGER", defaults.damage_debugger),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> CombatSettings:
    return load_settings()


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


def configure_logging(settings: Optional[CombatSettings] = None) -> None:
    """Configure root logging the way the project's entry points do."""
    settings = settings or get_settings()
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
