"""Digiroll: deterministic team randomizer for random-evolution challenge runs."""

from .core.models import (
    Tier,
    UnlockRequirement,
    Creature,
    Roster,
    RosterError,
    SelectionRequest,
)
from .randomizer import (
    SeededRandom,
    RandomizerService,
    compose_seed,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "Tier",
    "UnlockRequirement",
    "Creature",
    "Roster",
    "RosterError",
    "SelectionRequest",
    "SeededRandom",
    "RandomizerService",
    "compose_seed",
]
