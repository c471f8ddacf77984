"""Team selection and reroll operations.

Every operation builds an eligible pool from the roster (exclusions, tier
range, content flags, boss progression) and then samples it with the
service's seeded generator. Reroll primitives never reseed: given the same
seed and the same inputs they always return the same creatures. Only the
``spontaneous_*`` wrappers draw fresh entropy.

Seeds are composed by the caller so that repeating an action on the same
run reproduces it exactly:

    service = RandomizerService(compose_seed(run_seed, boss_order=3, reroll=2))
    replacement = service.reroll_slot(roster, Tier.CHAMPION, current_team)
"""

import logging
import secrets
from typing import Iterable, Sequence

from ..core.models import Creature, SelectionRequest, Tier
from .content import is_content_allowed
from .progression import filter_by_boss_progression, is_available
from .rng import SeededRandom
from .tiers import allowed_tier_set, is_tier_eligible, tier_index

logger = logging.getLogger(__name__)

_SEED_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_SEED_LENGTH = 26


def generate_seed() -> str:
    """Fresh random seed string from the system entropy source."""
    return "".join(secrets.choice(_SEED_ALPHABET) for _ in range(_SEED_LENGTH))


def compose_seed(
    base: str,
    boss_order: int | None = None,
    reroll: int | None = None,
    action: str = "reroll",
) -> str:
    """Build a reproducible seed for one logical action on a run.

    Examples:
        compose_seed("abc") -> "abc"
        compose_seed("abc", boss_order=3) -> "abc|boss=3"
        compose_seed("abc", boss_order=3, reroll=1) -> "abc|boss=3|reroll=1"
        compose_seed("abc", 3, 1, action="rerollall") -> "abc|boss=3|rerollall=1"
    """
    parts = [base]
    if boss_order is not None:
        parts.append(f"boss={boss_order}")
    if reroll is not None:
        parts.append(f"{action}={reroll}")
    return "|".join(parts)


class RandomizerService:
    """Seeded team selection over a creature roster.

    Args:
        seed: Seed string; a fresh one is generated when omitted.
        shuffle_exhausted_pool: Shuffle the pool even when the request asks
            for every eligible creature. Off by default, in which case an
            exhausted pool comes back in roster order.
    """

    def __init__(self, seed: str | None = None, *, shuffle_exhausted_pool: bool = False):
        self._seed = seed if seed is not None else generate_seed()
        self._rng = SeededRandom(self._seed)
        self.shuffle_exhausted_pool = shuffle_exhausted_pool

    @property
    def seed(self) -> str:
        return self._seed

    @property
    def rng(self) -> SeededRandom:
        return self._rng

    def set_seed(self, seed: str) -> None:
        """Install a new seed, fully replacing the generator state."""
        self._seed = seed
        self._rng = SeededRandom(seed)

    def generate_seed(self) -> str:
        return generate_seed()

    # ------------------------------------------------------------------
    # Pools
    # ------------------------------------------------------------------

    def eligible_pool(
        self, roster: Iterable[Creature], request: SelectionRequest
    ) -> list[Creature]:
        """Roster entries a request may draw from, in roster order."""
        if request.range_mode:
            allowed = allowed_tier_set(
                request.tier, request.min_tier, request.only_highest
            )

            def tier_ok(c: Creature) -> bool:
                return is_tier_eligible(c, allowed, request.include_side_tracks)

        elif request.tier.is_side_track:

            def tier_ok(c: Creature) -> bool:
                return c.generation == request.tier

        else:
            single = frozenset({tier_index(request.tier)})

            def tier_ok(c: Creature) -> bool:
                return is_tier_eligible(c, single, request.include_side_tracks)

        return [
            c
            for c in roster
            if c.number not in request.exclude
            and tier_ok(c)
            and is_content_allowed(c, request.include_dlc, request.include_post_game)
            and is_available(c, request.current_boss_order)
        ]

    def _take(self, pool: Sequence[Creature], count: int) -> list[Creature]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0 or not pool:
            return []
        if count >= len(pool):
            if self.shuffle_exhausted_pool:
                return self._rng.shuffle(pool)
            return list(pool)
        return self._rng.shuffle(pool)[:count]

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_request(
        self, roster: Iterable[Creature], request: SelectionRequest
    ) -> list[Creature]:
        """Select ``request.count`` creatures for a prepared request."""
        pool = self.eligible_pool(roster, request)
        logger.debug(
            "Selecting %d of %d eligible (tier=%s, range=%s, seed=%r)",
            request.count,
            len(pool),
            request.tier.value,
            request.range_mode,
            self._seed,
        )
        if request.count > len(pool):
            logger.info(
                "Requested %d creatures but only %d are eligible",
                request.count,
                len(pool),
            )
        return self._take(pool, request.count)

    def select(
        self,
        roster: Iterable[Creature],
        tier: Tier,
        count: int,
        exclude: Iterable[str] = (),
        *,
        include_side_tracks: bool = False,
        current_boss_order: int | None = None,
        include_dlc: bool = True,
        include_post_game: bool = True,
    ) -> list[Creature]:
        """Random creatures from a single tier.

        A side-track ``tier`` (Armor, Hybrid) selects on declared tier.
        """
        request = SelectionRequest(
            tier=tier,
            count=_check_count(count),
            exclude=_as_numbers(exclude),
            include_side_tracks=include_side_tracks,
            current_boss_order=current_boss_order,
            include_dlc=include_dlc,
            include_post_game=include_post_game,
        )
        return self.select_request(roster, request)

    def select_range(
        self,
        roster: Iterable[Creature],
        max_tier: Tier,
        count: int,
        exclude: Iterable[str] = (),
        *,
        only_highest: bool = False,
        min_tier: Tier | None = None,
        include_side_tracks: bool = False,
        current_boss_order: int | None = None,
        include_dlc: bool = True,
        include_post_game: bool = True,
    ) -> list[Creature]:
        """Random creatures from every tier up to and including ``max_tier``."""
        request = SelectionRequest(
            tier=max_tier,
            count=_check_count(count),
            exclude=_as_numbers(exclude),
            range_mode=True,
            only_highest=only_highest,
            min_tier=min_tier,
            include_side_tracks=include_side_tracks,
            current_boss_order=current_boss_order,
            include_dlc=include_dlc,
            include_post_game=include_post_game,
        )
        return self.select_request(roster, request)

    # ------------------------------------------------------------------
    # Rerolls
    # ------------------------------------------------------------------

    def reroll_slot(
        self,
        roster: Iterable[Creature],
        max_tier: Tier,
        current_team: Iterable[str],
        *,
        only_highest: bool = False,
        min_tier: Tier | None = None,
        include_side_tracks: bool = False,
        current_boss_order: int | None = None,
        include_dlc: bool = True,
        include_post_game: bool = True,
    ) -> Creature | None:
        """Replacement for one team slot that is not already on the team.

        Consumes exactly one draw when the pool is non-empty, none otherwise.
        """
        request = SelectionRequest(
            tier=max_tier,
            count=1,
            exclude=_as_numbers(current_team),
            range_mode=True,
            only_highest=only_highest,
            min_tier=min_tier,
            include_side_tracks=include_side_tracks,
            current_boss_order=current_boss_order,
            include_dlc=include_dlc,
            include_post_game=include_post_game,
        )
        pool = self.eligible_pool(roster, request)
        logger.debug("Rerolling slot from %d candidates (seed=%r)", len(pool), self._seed)
        return self._rng.pick_one(pool)

    def reroll(
        self,
        roster: Iterable[Creature],
        tier: Tier,
        count: int,
        current_team: Iterable[str] = (),
        **options,
    ) -> list[Creature]:
        """New single-tier team that shares no member with ``current_team``."""
        return self.select(roster, tier, count, current_team, **options)

    def reroll_range(
        self,
        roster: Iterable[Creature],
        max_tier: Tier,
        count: int,
        current_team: Iterable[str] = (),
        **options,
    ) -> list[Creature]:
        """New multi-tier team that shares no member with ``current_team``."""
        return self.select_range(roster, max_tier, count, current_team, **options)

    def spontaneous_reroll_slot(self, *args, **kwargs) -> Creature | None:
        """``reroll_slot`` under a freshly generated seed."""
        self.set_seed(generate_seed())
        return self.reroll_slot(*args, **kwargs)

    def spontaneous_reroll_range(self, *args, **kwargs) -> list[Creature]:
        """``reroll_range`` under a freshly generated seed."""
        self.set_seed(generate_seed())
        return self.reroll_range(*args, **kwargs)

    # ------------------------------------------------------------------
    # Progression
    # ------------------------------------------------------------------

    def filter_by_boss_progression(
        self, roster: Iterable[Creature], current_boss_order: int
    ) -> list[Creature]:
        return filter_by_boss_progression(roster, current_boss_order)


def _check_count(count: int) -> int:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return count


def _as_numbers(numbers: Iterable[str]) -> frozenset[str]:
    # A bare string is one creature number, not a sequence of characters.
    if isinstance(numbers, str):
        return frozenset({numbers})
    return frozenset(numbers)
