"""Shared CLI plumbing: exit codes, rich/JSON output and roster helpers.

Every command writes through an ``Output``. Without ``--json`` messages and
tables go to the rich console as they happen; with ``--json`` they are
collected into one payload that ``finish()`` prints, so scripts can read a
roll as a single JSON document:

    {"status": "success", "seed": "run-1", "team": [...], "exit_code": 0}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr
from rich.console import Console
from rich.table import Table

from ..core.models import Creature, Roster, RosterError, Tier
from ..randomizer.progression import min_boss_order
from ..randomizer.tiers import effective_generation


class ExitCode:
    """Process exit codes shared by all commands."""

    SUCCESS = 0
    VALIDATION_ERROR = 1  # bad option value
    FILE_NOT_FOUND = 3
    ROSTER_ERROR = 4  # unreadable or invalid roster
    GRAPH_ERROR = 5  # unreadable or invalid evolution graph


_MARKERS = {
    "success": "[green]✓[/green]",
    "warning": "[yellow]⚠[/yellow]",
    "error": "[red]✗[/red]",
}


class Output(BaseModel):
    """Routes command output to the rich console or a JSON payload."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    json_mode: bool = False

    _payload: dict[str, Any] = PrivateAttr(
        default_factory=lambda: {"status": "success", "warnings": [], "errors": []}
    )
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    @property
    def exit_code(self) -> int:
        return self._exit_code

    def _emit(self, kind: str, message: str, suggestion: str | None = None) -> None:
        if self.json_mode:
            entry: dict[str, Any] = {"message": message}
            if suggestion:
                entry["suggestion"] = suggestion
            self._payload[f"{kind}s"].append(entry)
            return
        self.console.print(f"{_MARKERS[kind]} {message}")
        if suggestion:
            self.console.print(f"  [dim]→ {suggestion}[/dim]")

    def success(self, message: str, **data: Any) -> None:
        """Report success; keyword data only appears in JSON mode."""
        if self.json_mode:
            self._payload.update(data)
        else:
            self.console.print(f"{_MARKERS['success']} {message}")

    def warning(self, message: str, *, suggestion: str | None = None) -> None:
        self._emit("warning", message, suggestion)

    def error(
        self,
        message: str,
        *,
        suggestion: str | None = None,
        exit_code: int = ExitCode.VALIDATION_ERROR,
    ) -> None:
        """Report a failure. The last error's code becomes the exit code."""
        self._exit_code = exit_code
        self._payload["status"] = "error"
        self._emit("error", message, suggestion)

    def text(self, message: str) -> None:
        if not self.json_mode:
            self.console.print(message)

    def blank(self) -> None:
        self.text("")

    def table(
        self,
        title: str,
        columns: list[str],
        rows: list[list[str]],
        *,
        data_key: str | None = None,
    ) -> None:
        """Render rows as a rich table, or store them as a list of dicts.

        The JSON key is ``data_key`` or the lower-cased, underscored title.
        """
        if self.json_mode:
            key = data_key or "_".join(title.lower().split())
            self._payload[key] = [dict(zip(columns, row)) for row in rows]
            return
        rendered = Table(*columns, title=title, header_style="bold")
        for row in rows:
            rendered.add_row(*row)
        self.console.print(rendered)

    def set_data(self, key: str, value: Any) -> None:
        self._payload[key] = value

    def finish(self) -> int:
        """Print the JSON payload (JSON mode only) and return the exit code."""
        if self.json_mode:
            self._payload["exit_code"] = self._exit_code
            print(json.dumps(self._payload, indent=2, default=str))
        return self._exit_code


# =============================================================================
# Shared command helpers
# =============================================================================

_TIER_ALIASES: dict[str, Tier] = {}
for _tier in Tier:
    for _alias in (_tier.value, _tier.name, _tier.name.replace("_", "-")):
        _TIER_ALIASES[_alias.lower()] = _tier
_TIER_ALIASES["mega+"] = Tier.MEGA_PLUS


def parse_tier(value: str) -> Tier:
    """Parse a tier from its label or enum name, case-insensitively.

    Accepts "Mega +", "mega-plus", "MEGA_PLUS", "mega+" and so on.

    Raises:
        ValueError: If the value names no tier.
    """
    tier = _TIER_ALIASES.get(value.strip().lower())
    if tier is None:
        valid = ", ".join(t.value for t in Tier)
        raise ValueError(f"Unknown tier {value!r}. Valid tiers: {valid}")
    return tier


def split_numbers(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma-separated creature numbers."""
    numbers: list[str] = []
    for value in values or []:
        numbers.extend(part.strip() for part in value.split(",") if part.strip())
    return numbers


def load_roster(path: Path, out: Output) -> Roster | None:
    """Load a roster, reporting failures through ``out``."""
    try:
        return Roster.load(path)
    except FileNotFoundError:
        out.error(f"Roster not found: {path}", exit_code=ExitCode.FILE_NOT_FOUND)
    except RosterError as e:
        out.error(str(e), exit_code=ExitCode.ROSTER_ERROR)
    return None


def creature_rows(creatures: list[Creature]) -> list[list[str]]:
    """Table rows for a team listing."""
    rows = []
    for slot, creature in enumerate(creatures, start=1):
        gate = min_boss_order(creature)
        rows.append(
            [
                str(slot),
                creature.number,
                creature.name,
                creature.generation.value,
                effective_generation(creature).value,
                "-" if gate is None else str(gate),
            ]
        )
    return rows


TEAM_COLUMNS = ["Slot", "Number", "Name", "Generation", "Effective", "Min Boss"]
