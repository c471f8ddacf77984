"""Boss progression gating.

Some creatures need a special item (Digi-Eggs, Spirits) that the game only
hands out after a story milestone. A creature's gate is the minimum number
of boss defeats before it may be rolled; ``None`` means ungated.
"""

from types import MappingProxyType
from typing import Iterable

from pydantic import BaseModel

from ..core.models import Creature

# Most special items (Digi-Eggs, Spirits) unlock after this boss.
VULCANUSMON_BOSS_ORDER = 10

DEFAULT_SPECIAL_ITEM_BOSS_ORDER = VULCANUSMON_BOSS_ORDER

_EGG_VIRTUES = (
    "courage",
    "friendship",
    "love",
    "sincerity",
    "knowledge",
    "reliability",
    "hope",
    "light",
    "kindness",
    "miracles",
)

_SPIRIT_ELEMENTS = (
    "fire",
    "light",
    "ice",
    "wind",
    "thunder",
    "earth",
    "wood",
    "water",
    "steel",
    "darkness",
)

ITEM_BOSS_ORDER_MAP = MappingProxyType(
    {
        **{f"digi-egg of {v}": VULCANUSMON_BOSS_ORDER for v in _EGG_VIRTUES},
        **{f"human spirit of {e}": VULCANUSMON_BOSS_ORDER for e in _SPIRIT_ELEMENTS},
        **{f"beast spirit of {e}": VULCANUSMON_BOSS_ORDER for e in _SPIRIT_ELEMENTS},
    }
)

_SPECIAL_ITEM_FRAGMENTS = (
    "digi-egg",
    "digimental",
    "spirit",
    "crest",
    "tag",
    "d-arc",
    "scanner",
)

_BLANK_ITEM_NAMES = frozenset({"none", "n/a", "-", ""})


def normalize_item_name(item_name: str) -> str:
    return item_name.strip().lower()


def is_special_item(item_name: str) -> bool:
    """Whether an item name denotes a progression-gated special item.

    Known fragments are always special. Any other non-blank name that is not
    a placeholder ("none", "n/a", "-") is treated as special too.
    """
    key = normalize_item_name(item_name)
    if any(fragment in key for fragment in _SPECIAL_ITEM_FRAGMENTS):
        return True
    return key not in _BLANK_ITEM_NAMES


def boss_order_for_item(item_name: str) -> int | None:
    """Minimum boss order unlocking an item, or None if it gates nothing."""
    key = normalize_item_name(item_name)
    if key in _BLANK_ITEM_NAMES:
        return None

    if key in ITEM_BOSS_ORDER_MAP:
        return ITEM_BOSS_ORDER_MAP[key]

    # Partial names, e.g. "Digi-Egg of Courage (x1)" or "egg of hope"
    for pattern, boss_order in ITEM_BOSS_ORDER_MAP.items():
        if pattern in key or key in pattern:
            return boss_order

    if is_special_item(key):
        return DEFAULT_SPECIAL_ITEM_BOSS_ORDER
    return None


def min_boss_order(creature: Creature) -> int | None:
    """Minimum boss defeats required before ``creature`` may be selected.

    Resolution order: explicit ``min_boss_order`` on the requirements, then
    the required item, else ungated (None).
    """
    requirements = creature.evolution_requirements
    if requirements is None:
        return None
    if requirements.min_boss_order is not None:
        return requirements.min_boss_order
    if requirements.required_item:
        return boss_order_for_item(requirements.required_item)
    return None


def is_available(creature: Creature, current_boss_order: int | None) -> bool:
    """Whether a creature passes the gate at the given progression marker.

    A ``None`` marker disables gating entirely.
    """
    if current_boss_order is None:
        return True
    required = min_boss_order(creature)
    return required is None or current_boss_order >= required


def filter_by_boss_progression(
    creatures: Iterable[Creature], current_boss_order: int | None
) -> list[Creature]:
    """Creatures available at ``current_boss_order``, in roster order."""
    return [c for c in creatures if is_available(c, current_boss_order)]


class AvailabilitySummary(BaseModel):
    """How much of a roster is gated behind boss progression."""

    total: int
    with_requirements: int
    available_at_vulcanusmon: int


def availability_summary(creatures: Iterable[Creature]) -> AvailabilitySummary:
    total = 0
    with_requirements = 0
    available_at_vulcanusmon = 0
    for creature in creatures:
        total += 1
        required = min_boss_order(creature)
        if required is None:
            continue
        with_requirements += 1
        if required <= VULCANUSMON_BOSS_ORDER:
            available_at_vulcanusmon += 1
    return AvailabilitySummary(
        total=total,
        with_requirements=with_requirements,
        available_at_vulcanusmon=available_at_vulcanusmon,
    )
