"""Path command for shortest evolution routes."""

from pathlib import Path

import typer

from ...config import get_config
from ...evolution import find_shortest_paths, format_path, load_evolution_graph
from ..app import app, console, get_json_mode
from ..utils import Output, ExitCode


@app.command("path")
def path_command(
    source: str = typer.Argument(..., help="Starting creature name"),
    target: str = typer.Argument(..., help="Target creature name"),
    graph_path: Path | None = typer.Option(
        None,
        "--graph",
        "-g",
        help="Evolution graph JSON (defaults to defaults.evolution_graph_path)",
    ),
):
    """
    Show every shortest evolution path between two creatures.

    → digivolve, ← de-digivolve.

    Examples:
        digiroll path Agumon WarGreymon
        digiroll path Dracmon Gazimon -g data/evolution-graph.json
    """
    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    path = graph_path or Path(config.defaults.evolution_graph_path)
    try:
        graph = load_evolution_graph(path)
    except FileNotFoundError:
        out.error(f"Evolution graph not found: {path}", exit_code=ExitCode.FILE_NOT_FOUND)
        raise typer.Exit(out.finish())
    except ValueError as e:
        out.error(str(e), exit_code=ExitCode.GRAPH_ERROR)
        raise typer.Exit(out.finish())

    paths = find_shortest_paths(source, target, graph)
    if not paths:
        out.warning(f"No evolution path from {source.strip()} to {target.strip()}")
        out.set_data("paths", [])
        raise typer.Exit(out.finish())

    steps = paths[0].length
    out.success(
        f"{len(paths)} shortest path(s), {steps} step(s)",
        steps=steps,
        paths=[format_path(p) for p in paths],
    )
    for p in paths:
        out.text(f"  {format_path(p)}")
    raise typer.Exit(out.finish())
