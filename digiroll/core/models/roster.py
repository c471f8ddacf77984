"""Roster models and file I/O for Digiroll.

A Roster is the flat, ordered creature dataset produced by the data
acquisition scripts. The randomizer only ever reads it; every record is
frozen once validated.

Roster files use the camelCase keys of the scraped data set
(``basePersonality``, ``evolutionRequirements``, ``minBossOrder``). Models
accept both the camelCase alias and the snake_case field name.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class RosterError(Exception):
    """Raised when a roster file cannot be read or fails validation."""

    pass


# =============================================================================
# Tiers
# =============================================================================


class Tier(str, Enum):
    """Evolution generation labels as they appear in the game."""

    IN_TRAINING_I = "In-Training I"
    IN_TRAINING_II = "In-Training II"
    ROOKIE = "Rookie"
    CHAMPION = "Champion"
    ULTIMATE = "Ultimate"
    MEGA = "Mega"
    MEGA_PLUS = "Mega +"
    ARMOR = "Armor"
    HYBRID = "Hybrid"

    @property
    def is_side_track(self) -> bool:
        return self in SIDE_TRACK_TIERS


# Lowest to highest. Side-track tiers are deliberately absent.
STANDARD_TIERS: tuple[Tier, ...] = (
    Tier.IN_TRAINING_I,
    Tier.IN_TRAINING_II,
    Tier.ROOKIE,
    Tier.CHAMPION,
    Tier.ULTIMATE,
    Tier.MEGA,
    Tier.MEGA_PLUS,
)

SIDE_TRACK_TIERS: frozenset[Tier] = frozenset({Tier.ARMOR, Tier.HYBRID})


# =============================================================================
# Creature records
# =============================================================================


class UnlockRequirement(BaseModel):
    """Digivolution conditions for a creature.

    Stat, rank and skill thresholds are carried through for display only;
    the randomizer reads ``required_item`` and ``min_boss_order``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    stats: dict[str, int] = Field(default_factory=dict)
    agent_rank: int | None = Field(default=None, alias="agentRank")
    agent_skills: dict[str, int] = Field(default_factory=dict, alias="agentSkills")
    required_item: str | None = Field(default=None, alias="requiredItem")
    min_boss_order: int | None = Field(default=None, ge=0, alias="minBossOrder")


class Creature(BaseModel):
    """A single roster entry."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    number: str = Field(description="Unique roster identifier, e.g. '001'")
    name: str
    generation: Tier
    attribute: str = ""
    type: str = ""
    base_personality: str = Field(default="", alias="basePersonality")
    icon_url: str = Field(default="", alias="iconUrl")
    details_url: str = Field(default="", alias="detailsUrl")
    is_dlc: bool = Field(default=False, alias="isDLC")
    is_post_game: bool = Field(default=False, alias="isPostGame")
    evolution_requirements: UnlockRequirement | None = Field(
        default=None, alias="evolutionRequirements"
    )


# =============================================================================
# Roster
# =============================================================================


class Roster(BaseModel):
    """Ordered creature collection with JSON/YAML loading."""

    creatures: list[Creature] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.creatures)

    def get(self, number: str) -> Creature | None:
        """Get a creature by number."""
        for creature in self.creatures:
            if creature.number == number:
                return creature
        return None

    def numbers(self) -> list[str]:
        return [c.number for c in self.creatures]

    @classmethod
    def from_data(cls, data: Any) -> "Roster":
        """Validate raw roster data.

        Accepts either a bare list of creature dicts (the scraped data set
        layout) or a mapping with a ``creatures`` key.
        """
        if isinstance(data, list):
            data = {"creatures": data}
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise RosterError(f"Invalid roster data: {e}") from e

    @classmethod
    def from_json(cls, path: Path | str) -> "Roster":
        """Load roster from a JSON file."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise
        except (json.JSONDecodeError, OSError) as e:
            raise RosterError(f"Failed to read roster {path}: {e}") from e
        return cls.from_data(data)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Roster":
        """Load roster from a YAML file."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise
        except (yaml.YAMLError, OSError) as e:
            raise RosterError(f"Failed to read roster {path}: {e}") from e
        return cls.from_data(data)

    @classmethod
    def load(cls, path: Path | str) -> "Roster":
        """Load roster, picking the parser from the file extension."""
        path = Path(path)
        if path.suffix.lower() in (".yaml", ".yml"):
            return cls.from_yaml(path)
        return cls.from_json(path)

    def to_json(self, path: Path | str) -> None:
        """Save roster as a JSON list using the data set's camelCase keys."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = [
            c.model_dump(mode="json", by_alias=True, exclude_none=True)
            for c in self.creatures
        ]
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
