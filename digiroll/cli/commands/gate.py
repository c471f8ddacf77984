"""Gate command for inspecting boss progression requirements."""

from pathlib import Path

import typer

from ...config import get_config
from ...randomizer import availability_summary, is_available, min_boss_order
from ..app import app, console, get_json_mode
from ..utils import Output, load_roster


@app.command("gate")
def gate_command(
    roster_path: Path | None = typer.Argument(
        None,
        help="Roster JSON/YAML file (defaults to defaults.roster_path)",
        show_default=False,
    ),
    boss: int | None = typer.Option(
        None, "--boss", "-b", min=0, help="Show availability at this boss order"
    ),
):
    """
    Show which creatures are gated behind boss progression.

    Examples:
        digiroll gate data/digimon.json
        digiroll gate data/digimon.json --boss 9
    """
    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    roster = load_roster(roster_path or Path(config.defaults.roster_path), out)
    if roster is None:
        raise typer.Exit(out.finish())

    summary = availability_summary(roster.creatures)
    out.success(
        f"{summary.with_requirements} of {summary.total} creatures are gated "
        f"({summary.available_at_vulcanusmon} unlock by Vulcanusmon)",
        summary=summary.model_dump(),
    )

    rows = []
    for creature in roster.creatures:
        required = min_boss_order(creature)
        if required is None:
            continue
        row = [creature.number, creature.name, creature.generation.value, str(required)]
        if boss is not None:
            row.append("yes" if is_available(creature, boss) else "no")
        rows.append(row)

    columns = ["Number", "Name", "Generation", "Min Boss"]
    if boss is not None:
        columns.append(f"Available @ {boss}")
    out.table("Gated Creatures", columns, rows, data_key="gated")
    raise typer.Exit(out.finish())
