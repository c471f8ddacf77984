"""Tier hierarchy and effective-tier resolution.

The seven standard tiers are totally ordered. Armor and Hybrid creatures sit
outside that order; each resolves to an effective standard tier through an
equivalence table, defaulting to Champion. A small override table pins
specific creatures (the Lucemon line) to an effective tier regardless of
their declared generation, because the game only makes them obtainable
later than their nominal tier suggests.

Power level mapping for the side-tracks follows agent rank requirements:
- Champion equivalent: early forms (Agent Rank 1-3)
- Ultimate equivalent: mid-tier forms (Agent Rank 4-6)
- Mega equivalent: late-game forms (Agent Rank 7+)
"""

from types import MappingProxyType

from ..core.models import Tier, STANDARD_TIERS, Creature

_TIER_INDEX = MappingProxyType({tier: i for i, tier in enumerate(STANDARD_TIERS)})

SIDE_TRACK_DEFAULT_TIER = Tier.CHAMPION

ARMOR_EQUIVALENTS = MappingProxyType(
    {
        "179": Tier.CHAMPION,  # Submarimon
        "180": Tier.CHAMPION,  # Shurimon
        "181": Tier.CHAMPION,  # Digmon
        "182": Tier.CHAMPION,  # Nefertimon
        "183": Tier.CHAMPION,  # Flamedramon
        "184": Tier.CHAMPION,  # Pegasusmon
        "185": Tier.CHAMPION,  # Halsemon
        "186": Tier.CHAMPION,  # Lighdramon
        "422": Tier.MEGA,  # Rapidmon (Armor)
        "423": Tier.MEGA,  # Magnamon
    }
)

HYBRID_EQUIVALENTS = MappingProxyType(
    {
        # Human Spirit forms
        "187": Tier.CHAMPION,  # Agunimon
        "188": Tier.CHAMPION,  # Lobomon
        "189": Tier.CHAMPION,  # Lanamon
        "190": Tier.CHAMPION,  # Kazemon
        "191": Tier.CHAMPION,  # Beetlemon
        "192": Tier.CHAMPION,  # Kumamon
        # Beast Spirit forms
        "193": Tier.CHAMPION,  # BurningGreymon
        "194": Tier.CHAMPION,  # KendoGarurumon
        "195": Tier.CHAMPION,  # Calmaramon
        "196": Tier.CHAMPION,  # Zephyrmon
        "197": Tier.CHAMPION,  # MetalKabuterimon
        # Fusion forms
        "305": Tier.ULTIMATE,  # Aldamon
        "306": Tier.ULTIMATE,  # Beowolfmon
        # Ancient Spirit forms
        "424": Tier.MEGA,  # EmperorGreymon
        "425": Tier.MEGA,  # MagnaGarurumon
        "426": Tier.MEGA,  # MagnaGarurumon (Detached)
    }
)

# Lucemon SM (447) is Mega + and needs no override.
NAMED_OVERRIDES = MappingProxyType(
    {
        "039": Tier.ULTIMATE,  # Lucemon, Rookie form obtainable at Ultimate
        "296": Tier.MEGA,  # Lucemon CM, Ultimate form obtainable at Mega
    }
)

_SIDE_TRACK_TABLES = MappingProxyType(
    {
        Tier.ARMOR: ARMOR_EQUIVALENTS,
        Tier.HYBRID: HYBRID_EQUIVALENTS,
    }
)


def tier_index(tier: Tier) -> int:
    """Position of a standard tier in the hierarchy.

    Raises:
        ValueError: If ``tier`` is a side-track tier.
    """
    try:
        return _TIER_INDEX[tier]
    except KeyError:
        raise ValueError(f"{tier.value!r} is not a standard tier") from None


def side_track_equivalent(number: str, generation: Tier) -> Tier | None:
    """Standard-tier equivalent for an overridden or side-track creature.

    Returns None for a standard-tier creature without an override.
    """
    if number in NAMED_OVERRIDES:
        return NAMED_OVERRIDES[number]
    table = _SIDE_TRACK_TABLES.get(generation)
    if table is None:
        return None
    return table.get(number, SIDE_TRACK_DEFAULT_TIER)


def effective_generation(creature: Creature) -> Tier:
    """Standard tier a creature is treated as for every eligibility check."""
    equivalent = side_track_equivalent(creature.number, creature.generation)
    return equivalent or creature.generation


def effective_tier(creature: Creature) -> int:
    """Index of the creature's effective tier in the standard hierarchy."""
    return _TIER_INDEX[effective_generation(creature)]


def generations_up_to(tier: Tier, include_side_tracks: bool = False) -> list[Tier]:
    """Every tier up to and including ``tier``.

    A side-track argument yields only itself; side-tracks have their own
    unlock conditions and never imply the standard tiers.
    """
    if tier.is_side_track:
        return [tier]
    standard = list(STANDARD_TIERS[: _TIER_INDEX[tier] + 1])
    if include_side_tracks:
        return standard + [Tier.ARMOR, Tier.HYBRID]
    return standard


def allowed_tier_set(
    max_tier: Tier,
    min_tier: Tier | None = None,
    only_highest: bool = False,
) -> frozenset[int]:
    """Standard-tier indices a range selection may draw from.

    ``only_highest`` wins over ``min_tier``. A ``min_tier`` above
    ``max_tier`` (or a side-track floor) falls back to the full range.

    Raises:
        ValueError: If ``max_tier`` is a side-track tier.
    """
    high = tier_index(max_tier)
    if only_highest:
        return frozenset({high})
    low = 0
    if min_tier is not None and not min_tier.is_side_track:
        candidate = _TIER_INDEX[min_tier]
        if candidate <= high:
            low = candidate
    return frozenset(range(low, high + 1))


def is_tier_eligible(
    creature: Creature,
    allowed: frozenset[int],
    include_side_tracks: bool = False,
) -> bool:
    """Whether a creature's effective tier falls inside ``allowed``."""
    if creature.generation.is_side_track and not include_side_tracks:
        return False
    return effective_tier(creature) in allowed
