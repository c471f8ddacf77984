"""All Pydantic models for Digiroll, organized by domain.

- roster.py: Tiers, creature records, unlock requirements, roster I/O
- selection.py: Selection request parameters
"""

from .roster import (
    Tier,
    STANDARD_TIERS,
    SIDE_TRACK_TIERS,
    UnlockRequirement,
    Creature,
    Roster,
    RosterError,
)
from .selection import SelectionRequest

__all__ = [
    "Tier",
    "STANDARD_TIERS",
    "SIDE_TRACK_TIERS",
    "UnlockRequirement",
    "Creature",
    "Roster",
    "RosterError",
    "SelectionRequest",
]
