"""CLI commands for Digiroll."""

from . import (
    roll,
    reroll,
    gate,
    path,
    config_cmd,
)

__all__ = [
    "roll",
    "reroll",
    "gate",
    "path",
    "config_cmd",
]
