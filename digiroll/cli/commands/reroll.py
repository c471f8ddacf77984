"""Reroll command for replacing one slot or the whole team."""

from pathlib import Path

import typer

from ...config import get_config
from ...randomizer import RandomizerService, compose_seed
from ..app import app, console, get_json_mode
from ..utils import (
    Output,
    TEAM_COLUMNS,
    creature_rows,
    load_roster,
    parse_tier,
    split_numbers,
)


@app.command("reroll")
def reroll_command(
    roster_path: Path | None = typer.Argument(
        None,
        help="Roster JSON/YAML file (defaults to defaults.roster_path)",
        show_default=False,
    ),
    max_tier: str = typer.Option(
        ..., "--max-tier", "-t", help="Highest unlocked tier"
    ),
    team: list[str] | None = typer.Option(
        None, "--team", help="Current team numbers (repeat or comma-separate)"
    ),
    slot: bool = typer.Option(
        False, "--slot", help="Replace a single slot instead of the whole team"
    ),
    count: int | None = typer.Option(
        None, "--count", "-n", min=0, help="Team size for a full reroll"
    ),
    min_tier: str | None = typer.Option(None, "--min-tier", help="Lowest tier to include"),
    only_highest: bool = typer.Option(
        False, "--only-highest", help="Only roll the highest tier"
    ),
    side_tracks: bool = typer.Option(
        False, "--side-tracks", help="Include Armor/Hybrid at their equivalent tier"
    ),
    boss: int | None = typer.Option(
        None, "--boss", "-b", min=0, help="Bosses defeated so far (enables gating)"
    ),
    seed: str | None = typer.Option(
        None,
        "--seed",
        "-s",
        help="Base run seed; combined with --boss and --reroll-count",
    ),
    reroll_count: int = typer.Option(
        0, "--reroll-count", "-k", min=0, help="How many rerolls this checkpoint has used"
    ),
):
    """
    Reroll one team slot or the whole team.

    With --seed the reroll is reproducible: the effective seed is
    "<seed>|boss=<n>|reroll=<k>" (or "rerollall=<k>" for a full team).
    Without --seed a fresh seed is drawn.

    Examples:
        digiroll reroll data/digimon.json -t Champion --team 001,002,003 --slot -s run-1 -b 4 -k 0
        digiroll reroll data/digimon.json -t Mega --team 001,002 -n 6 -s run-1 -b 9 -k 2
    """
    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    try:
        ceiling = parse_tier(max_tier)
        floor = parse_tier(min_tier) if min_tier else None
        if ceiling.is_side_track:
            raise ValueError(f"--max-tier needs a standard tier, got {ceiling.value!r}")
    except ValueError as e:
        out.error(str(e))
        raise typer.Exit(out.finish())

    roster = load_roster(roster_path or Path(config.defaults.roster_path), out)
    if roster is None:
        raise typer.Exit(out.finish())

    current_team = split_numbers(team)
    service = RandomizerService(
        shuffle_exhausted_pool=config.selection.shuffle_exhausted_pool
    )
    options = dict(
        only_highest=only_highest or config.selection.only_highest,
        min_tier=floor,
        include_side_tracks=side_tracks or config.selection.include_side_tracks,
        current_boss_order=boss,
    )

    if slot:
        if seed is not None:
            service.set_seed(compose_seed(seed, boss, reroll_count))
            pick = service.reroll_slot(roster.creatures, ceiling, current_team, **options)
        else:
            pick = service.spontaneous_reroll_slot(
                roster.creatures, ceiling, current_team, **options
            )
        new_team = [pick] if pick is not None else []
        if pick is None:
            out.warning("No eligible replacement outside the current team")
        else:
            out.success(
                f"Rerolled slot: [bold]{pick.name}[/bold] (seed: {service.seed})",
                seed=service.seed,
            )
    else:
        team_size = config.selection.team_size if count is None else count
        try:
            if seed is not None:
                service.set_seed(compose_seed(seed, boss, reroll_count, action="rerollall"))
                new_team = service.reroll_range(
                    roster.creatures, ceiling, team_size, current_team, **options
                )
            else:
                new_team = service.spontaneous_reroll_range(
                    roster.creatures, ceiling, team_size, current_team, **options
                )
        except ValueError as e:
            out.error(str(e), suggestion="Check selection.team_size and --count")
            raise typer.Exit(out.finish())
        out.success(
            f"Rerolled {len(new_team)} of {team_size} (seed: {service.seed})",
            seed=service.seed,
            requested=team_size,
            rolled=len(new_team),
        )
        if len(new_team) < team_size:
            out.warning(f"Only {len(new_team)} eligible creature(s) outside the current team")

    out.table("Team", TEAM_COLUMNS, creature_rows(new_team))
    raise typer.Exit(out.finish())
