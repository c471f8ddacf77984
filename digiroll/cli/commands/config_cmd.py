"""Config command for viewing and managing digiroll configuration."""

import typer

from ..app import app, console
from ...config import (
    get_config,
    reset_config,
    coerce_field,
    CONFIG_FILE,
)


VALID_KEYS = {
    "selection.team_size",
    "selection.include_side_tracks",
    "selection.only_highest",
    "selection.shuffle_exhausted_pool",
    "defaults.roster_path",
    "defaults.evolution_graph_path",
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. selection.team_size, defaults.roster_path)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify digiroll configuration.

    Examples:
        digiroll config show
        digiroll config set selection.team_size 4
        digiroll config set selection.include_side_tracks true
        digiroll config reset
    """
    actions = {
        "show": _show_config,
        "set": lambda: _set_config(key, value),
        "reset": _reset_config,
    }
    handler = actions.get(action)
    if handler is None:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print(f"Valid actions: {', '.join(actions)}")
        raise typer.Exit(1)
    handler()


def _print_keys() -> None:
    console.print()
    console.print("Available keys:")
    for k in sorted(VALID_KEYS):
        console.print(f"  {k}")


def _show_config():
    """Display current resolved configuration, one block per section."""
    sections = get_config().to_dict()

    console.print()
    console.print("[bold]Digiroll Configuration[/bold]")
    console.print("─" * 40)

    for section, values in sections.items():
        width = max(len(name) for name in values)
        console.print()
        console.print(f"[bold cyan]{section.title()}[/bold cyan]")
        for name, current in values.items():
            console.print(f"  {name.ljust(width)} = {current}")

    console.print()
    where = CONFIG_FILE if CONFIG_FILE.exists() else f"[dim]not created yet[/dim] ({CONFIG_FILE})"
    console.print(f"Config file: {where}")
    console.print()


def _set_config(key: str | None, value: str | None):
    """Validate, coerce and persist a single key."""
    if not key or value is None:
        console.print("[red]Usage:[/red] digiroll config set <key> <value>")
        _print_keys()
        raise typer.Exit(1)
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        _print_keys()
        raise typer.Exit(1)

    config = get_config()
    section, field_name = key.split(".", 1)
    try:
        setattr(getattr(config, section), field_name, coerce_field(field_name, value))
    except ValueError:
        console.print(f"[red]Invalid value for {key}:[/red] {value}")
        raise typer.Exit(1)

    config.save()
    reset_config()  # next get_config() reloads from disk

    console.print(f"[green]✓[/green] {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Delete the config file so defaults apply again."""
    if not CONFIG_FILE.exists():
        console.print("Config already at defaults (no config file exists)")
        return
    CONFIG_FILE.unlink()
    reset_config()
    console.print("[green]✓[/green] Config reset to defaults")
    console.print(f"  Removed {CONFIG_FILE}")
