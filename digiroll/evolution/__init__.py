"""Evolution graph queries ("how many steps from A to B")."""

from .pathfinding import (
    EvolutionStep,
    EvolutionPath,
    EvolutionData,
    EvolutionGraph,
    find_shortest_paths,
    format_path,
    available_creatures,
    validate_evolution_graph,
    load_evolution_graph,
    parse_evolution_graph,
)

__all__ = [
    "EvolutionStep",
    "EvolutionPath",
    "EvolutionData",
    "EvolutionGraph",
    "find_shortest_paths",
    "format_path",
    "available_creatures",
    "validate_evolution_graph",
    "load_evolution_graph",
    "parse_evolution_graph",
]
