"""Configuration management for Digiroll.

Two config sections:
- selection: team size and default selection modifiers
- defaults: default data file locations for the CLI

Config resolution order (highest priority first):
1. Programmatic (DigirollConfig constructed in code)
2. Environment variables (DIGIROLL_TEAM_SIZE, DIGIROLL_ROSTER_PATH, etc.)
3. Config file (~/.config/digiroll/config.json, managed by `digiroll config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "digiroll"
CONFIG_FILE = CONFIG_DIR / "config.json"


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Parse a boolean from an env var or CLI string.

    Raises:
        ValueError: If the string is not a recognised boolean.
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class SelectionConfig:
    """Defaults for team selection.

    - team_size: creatures rolled per team
    - include_side_tracks: allow Armor/Hybrid creatures in range rolls
    - only_highest: restrict range rolls to the highest unlocked tier
    - shuffle_exhausted_pool: shuffle even when every eligible creature is
      returned (off keeps roster order)
    """

    team_size: int = 6
    include_side_tracks: bool = False
    only_highest: bool = False
    shuffle_exhausted_pool: bool = False


@dataclass
class DefaultsConfig:
    """Default data locations."""

    roster_path: str = "./data/digimon.json"
    evolution_graph_path: str = "./data/evolution-graph.json"


# =============================================================================
# Main config class
# =============================================================================


@dataclass
class DigirollConfig:
    """Top-level digiroll configuration.

    Examples:
        # Package use, no files needed
        config = DigirollConfig(selection=SelectionConfig(team_size=3))

        # CLI use, loads from ~/.config/digiroll/config.json
        config = DigirollConfig.load()
    """

    selection: SelectionConfig = field(default_factory=SelectionConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls) -> "DigirollConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError, ValueError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("DIGIROLL_TEAM_SIZE"):
            try:
                config.selection.team_size = coerce_field("team_size", val)
            except ValueError:
                logger.warning("Invalid DIGIROLL_TEAM_SIZE=%r, ignoring", val)
        for env_name, attr in (
            ("DIGIROLL_INCLUDE_SIDE_TRACKS", "include_side_tracks"),
            ("DIGIROLL_ONLY_HIGHEST", "only_highest"),
            ("DIGIROLL_SHUFFLE_EXHAUSTED_POOL", "shuffle_exhausted_pool"),
        ):
            if val := os.environ.get(env_name):
                try:
                    setattr(config.selection, attr, parse_bool(val))
                except ValueError:
                    logger.warning("Invalid %s=%r, ignoring", env_name, val)
        if val := os.environ.get("DIGIROLL_ROSTER_PATH"):
            config.defaults.roster_path = val
        if val := os.environ.get("DIGIROLL_EVOLUTION_GRAPH_PATH"):
            config.defaults.evolution_graph_path = val

        return config

    def save(self) -> None:
        """Save config to ~/.config/digiroll/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "selection": asdict(self.selection),
            "defaults": asdict(self.defaults),
        }


# =============================================================================
# Config dict application
# =============================================================================

BOOL_FIELDS = {"include_side_tracks", "only_highest", "shuffle_exhausted_pool"}
INT_FIELDS = {"team_size"}


def coerce_field(name: str, value: Any) -> Any:
    """Coerce a raw value to the type of the named config field.

    Raises:
        ValueError: If the value cannot be coerced, or ``team_size`` is
            negative.
    """
    if name in INT_FIELDS:
        try:
            number = int(value)
        except TypeError:
            raise ValueError(f"Invalid integer for {name}: {value!r}") from None
        if number < 0:
            raise ValueError(f"{name} must be non-negative, got {number}")
        return number
    if name in BOOL_FIELDS:
        return parse_bool(value) if isinstance(value, str) else bool(value)
    return value


def _apply_dict(config: DigirollConfig, data: Any) -> None:
    """Apply a dict of values onto a DigirollConfig.

    Every value is coerced before any is assigned, so a bad value leaves
    the config untouched.
    """
    if not isinstance(data, dict):
        raise ValueError(f"config must be a JSON object, got {type(data).__name__}")
    updates = []
    for section_name in ("selection", "defaults"):
        section = data.get(section_name)
        if not isinstance(section, dict):
            continue
        target = getattr(config, section_name)
        for k, v in section.items():
            if hasattr(target, k):
                updates.append((target, k, coerce_field(k, v)))
    for target, k, v in updates:
        setattr(target, k, v)


# =============================================================================
# Global config singleton
# =============================================================================

_config: DigirollConfig | None = None


def get_config() -> DigirollConfig:
    """Get the global DigirollConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = DigirollConfig.load()
    return _config


def configure(config: DigirollConfig) -> None:
    """Set the global DigirollConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
