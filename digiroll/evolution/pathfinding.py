"""Shortest evolution paths between two creatures.

The graph is undirected for travel purposes: a creature can digivolve
("up") into anything in ``evolves_to`` and de-digivolve ("down") into
anything in ``evolves_from``. BFS returns every path of minimal length.
"""

import json
import logging
from collections import deque
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class EvolutionStep(BaseModel):
    from_: str = Field(alias="from")
    to: str
    direction: Literal["up", "down"]

    model_config = ConfigDict(populate_by_name=True)


class EvolutionPath(BaseModel):
    steps: list[EvolutionStep] = Field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.steps)


class EvolutionData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    evolves_from: list[str] = Field(default_factory=list, alias="evolvesFrom")
    evolves_to: list[str] = Field(default_factory=list, alias="evolvesTo")


EvolutionGraph = dict[str, EvolutionData]


def parse_evolution_graph(data: dict[str, Any]) -> EvolutionGraph:
    """Validate a raw name -> {evolvesFrom, evolvesTo} mapping."""
    return {name: EvolutionData.model_validate(entry) for name, entry in data.items()}


def load_evolution_graph(path: Path | str) -> EvolutionGraph:
    """Load an evolution graph from a JSON file.

    Raises:
        ValueError: If the file is not a valid graph mapping.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid evolution graph JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Evolution graph in {path} must be a JSON object")
    try:
        return parse_evolution_graph(data)
    except ValidationError as e:
        raise ValueError(f"Invalid evolution graph in {path}: {e}") from e


def _neighbors(name: str, graph: EvolutionGraph) -> list[tuple[str, str]]:
    data = graph.get(name)
    if data is None:
        return []
    neighbors = [(target, "up") for target in data.evolves_to if target in graph]
    neighbors.extend(
        (source, "down") for source in data.evolves_from if source in graph
    )
    return neighbors


def find_shortest_paths(
    source: str, target: str, graph: EvolutionGraph
) -> list[EvolutionPath]:
    """All shortest evolution paths from ``source`` to ``target``.

    Returns:
        One empty path when source equals target, an empty list when either
        name is unknown or no path exists, otherwise every minimal path.
    """
    source = source.strip()
    target = target.strip()

    if source == target:
        return [EvolutionPath()]

    if source not in graph:
        logger.warning("Source %r not found in evolution graph", source)
        return []
    if target not in graph:
        logger.warning("Target %r not found in evolution graph", target)
        return []

    queue: deque[tuple[str, list[EvolutionStep], frozenset[str]]] = deque(
        [(source, [], frozenset({source}))]
    )
    results: list[EvolutionPath] = []
    min_length: int | None = None

    while queue:
        current, path, visited = queue.popleft()
        if min_length is not None and len(path) >= min_length:
            continue

        for name, direction in _neighbors(current, graph):
            if name in visited:
                continue
            new_path = path + [EvolutionStep(from_=current, to=name, direction=direction)]

            if name == target:
                if min_length is None or len(new_path) < min_length:
                    min_length = len(new_path)
                    results = [EvolutionPath(steps=new_path)]
                elif len(new_path) == min_length:
                    results.append(EvolutionPath(steps=new_path))
            elif min_length is None or len(new_path) < min_length:
                queue.append((name, new_path, visited | {name}))

    return results


def format_path(path: EvolutionPath) -> str:
    """Render a path as ``"A → B ← C"`` (→ evolve, ← de-evolve)."""
    if not path.steps:
        return "Already at destination"
    parts = [path.steps[0].from_]
    for step in path.steps:
        arrow = "→" if step.direction == "up" else "←"
        parts.append(f"{arrow} {step.to}")
    return " ".join(parts)


def available_creatures(graph: EvolutionGraph) -> list[str]:
    return sorted(graph)


def validate_evolution_graph(graph: EvolutionGraph) -> list[str]:
    """Warnings for dangling or one-directional edges."""
    warnings: list[str] = []
    for name, data in graph.items():
        for target in data.evolves_to:
            if target not in graph:
                warnings.append(
                    f"{name} evolvesTo \"{target}\" which doesn't exist in graph"
                )
            elif name not in graph[target].evolves_from:
                warnings.append(
                    f"{name} evolvesTo {target}, but {target} doesn't evolvesFrom {name}"
                )
        for source in data.evolves_from:
            if source not in graph:
                warnings.append(
                    f"{name} evolvesFrom \"{source}\" which doesn't exist in graph"
                )
            elif name not in graph[source].evolves_to:
                warnings.append(
                    f"{name} evolvesFrom {source}, but {source} doesn't evolvesTo {name}"
                )
    return warnings
