"""Deterministic team randomizer.

- rng.py: Seeded generator, bit-compatible with the web client
- tiers.py: Tier hierarchy and effective-tier resolution
- progression.py: Boss progression gating
- content.py: DLC / post-game filtering
- service.py: Selection and reroll operations
"""

from .rng import SeededRandom, hash_seed
from .tiers import (
    effective_tier,
    effective_generation,
    allowed_tier_set,
    generations_up_to,
)
from .progression import (
    VULCANUSMON_BOSS_ORDER,
    DEFAULT_SPECIAL_ITEM_BOSS_ORDER,
    min_boss_order,
    is_available,
    filter_by_boss_progression,
    availability_summary,
)
from .content import filter_by_content
from .service import RandomizerService, compose_seed, generate_seed

__all__ = [
    "SeededRandom",
    "hash_seed",
    "effective_tier",
    "effective_generation",
    "allowed_tier_set",
    "generations_up_to",
    "VULCANUSMON_BOSS_ORDER",
    "DEFAULT_SPECIAL_ITEM_BOSS_ORDER",
    "min_boss_order",
    "is_available",
    "filter_by_boss_progression",
    "availability_summary",
    "filter_by_content",
    "RandomizerService",
    "compose_seed",
    "generate_seed",
]
