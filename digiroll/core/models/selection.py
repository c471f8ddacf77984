"""Selection request parameters."""

from pydantic import BaseModel, Field

from .roster import Tier


class SelectionRequest(BaseModel):
    """Parameters for one selection or reroll call.

    ``tier`` is the target tier for single-tier selection and the maximum
    tier in range mode. Constructed fresh per call; never persisted.
    """

    tier: Tier
    count: int = Field(default=6, ge=0)
    exclude: frozenset[str] = Field(default_factory=frozenset)
    range_mode: bool = Field(
        default=False, description="Select from every tier up to `tier`"
    )
    only_highest: bool = False
    min_tier: Tier | None = None
    include_side_tracks: bool = False
    current_boss_order: int | None = Field(default=None, ge=0)
    include_dlc: bool = True
    include_post_game: bool = True
