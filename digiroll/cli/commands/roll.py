"""Roll command for selecting a fresh team."""

from pathlib import Path

import typer

from ...config import get_config
from ...randomizer import RandomizerService
from ..app import app, console, get_json_mode
from ..utils import (
    Output,
    TEAM_COLUMNS,
    creature_rows,
    load_roster,
    parse_tier,
    split_numbers,
)


@app.command("roll")
def roll_command(
    roster_path: Path | None = typer.Argument(
        None,
        help="Roster JSON/YAML file (defaults to defaults.roster_path)",
        show_default=False,
    ),
    tier: str = typer.Option(
        ..., "--tier", "-t", help="Target tier, or the maximum tier with --range"
    ),
    count: int | None = typer.Option(
        None, "--count", "-n", min=0, help="Team size (defaults to selection.team_size)"
    ),
    range_mode: bool = typer.Option(
        False, "--range", "-r", help="Roll from every tier up to --tier"
    ),
    min_tier: str | None = typer.Option(
        None, "--min-tier", help="Lowest tier to include with --range"
    ),
    only_highest: bool = typer.Option(
        False, "--only-highest", help="With --range, only roll the highest tier"
    ),
    side_tracks: bool = typer.Option(
        False, "--side-tracks", help="Include Armor/Hybrid at their equivalent tier"
    ),
    boss: int | None = typer.Option(
        None, "--boss", "-b", min=0, help="Bosses defeated so far (enables gating)"
    ),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", "-x", help="Creature numbers to leave out (repeat or comma-separate)"
    ),
    no_dlc: bool = typer.Option(False, "--no-dlc", help="Leave out DLC creatures"),
    no_post_game: bool = typer.Option(
        False, "--no-post-game", help="Leave out post-game creatures"
    ),
    seed: str | None = typer.Option(
        None, "--seed", "-s", help="Seed string (random if omitted)"
    ),
):
    """
    Roll a random team from a roster.

    The same seed and options always produce the same team.

    EXIT CODES:
        0 = Success (including a short or empty team)
        1 = Invalid option value
        3 = Roster file not found
        4 = Invalid roster file

    Examples:
        digiroll roll data/digimon.json -t Rookie -s run-1
        digiroll roll data/digimon.json -t Champion --range --side-tracks -b 10
        digiroll roll -t Mega --range --only-highest -n 3
    """
    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    try:
        target = parse_tier(tier)
        floor = parse_tier(min_tier) if min_tier else None
        if range_mode and target.is_side_track:
            raise ValueError(f"--range needs a standard tier, got {target.value!r}")
    except ValueError as e:
        out.error(str(e))
        raise typer.Exit(out.finish())

    roster = load_roster(roster_path or Path(config.defaults.roster_path), out)
    if roster is None:
        raise typer.Exit(out.finish())

    team_size = config.selection.team_size if count is None else count
    service = RandomizerService(
        seed, shuffle_exhausted_pool=config.selection.shuffle_exhausted_pool
    )
    options = dict(
        include_side_tracks=side_tracks or config.selection.include_side_tracks,
        current_boss_order=boss,
        include_dlc=not no_dlc,
        include_post_game=not no_post_game,
    )

    try:
        if range_mode:
            team = service.select_range(
                roster.creatures,
                target,
                team_size,
                split_numbers(exclude),
                only_highest=only_highest or config.selection.only_highest,
                min_tier=floor,
                **options,
            )
        else:
            team = service.select(
                roster.creatures, target, team_size, split_numbers(exclude), **options
            )
    except ValueError as e:
        out.error(str(e), suggestion="Check selection.team_size and --count")
        raise typer.Exit(out.finish())

    out.success(
        f"Rolled {len(team)} of {team_size} from {len(roster)} creatures "
        f"(seed: [bold]{service.seed}[/bold])",
        seed=service.seed,
        requested=team_size,
        rolled=len(team),
    )
    if len(team) < team_size:
        out.warning(
            f"Only {len(team)} eligible creature(s) for this roll",
            suggestion="Widen the tier range, add --side-tracks or raise --boss",
        )
    out.table("Team", TEAM_COLUMNS, creature_rows(team))
    raise typer.Exit(out.finish())
