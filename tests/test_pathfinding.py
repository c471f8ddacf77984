"""Tests for evolution pathfinding."""

import json

import pytest

from digiroll.evolution import (
    available_creatures,
    find_shortest_paths,
    format_path,
    load_evolution_graph,
    parse_evolution_graph,
    validate_evolution_graph,
)
from digiroll.evolution.pathfinding import EvolutionPath

RAW_GRAPH = {
    "Koromon": {"evolvesFrom": [], "evolvesTo": ["Agumon", "Gabumon"]},
    "Tsunomon": {"evolvesFrom": [], "evolvesTo": ["Agumon", "Gabumon"]},
    "Agumon": {"evolvesFrom": ["Koromon", "Tsunomon"], "evolvesTo": ["Greymon"]},
    "Gabumon": {"evolvesFrom": ["Koromon", "Tsunomon"], "evolvesTo": ["Garurumon"]},
    "Greymon": {"evolvesFrom": ["Agumon"], "evolvesTo": []},
    "Garurumon": {"evolvesFrom": ["Gabumon"], "evolvesTo": []},
    "Loner": {"evolvesFrom": [], "evolvesTo": []},
}


@pytest.fixture
def graph():
    return parse_evolution_graph(RAW_GRAPH)


class TestFindShortestPaths:
    """Tests for BFS path search."""

    def test_same_source_and_target(self, graph):
        paths = find_shortest_paths("Agumon", "Agumon", graph)
        assert len(paths) == 1
        assert paths[0].length == 0

    def test_single_step_up(self, graph):
        paths = find_shortest_paths("Koromon", "Agumon", graph)
        assert len(paths) == 1
        step = paths[0].steps[0]
        assert (step.from_, step.to, step.direction) == ("Koromon", "Agumon", "up")

    def test_single_step_down(self, graph):
        paths = find_shortest_paths("Greymon", "Agumon", graph)
        assert len(paths) == 1
        assert paths[0].steps[0].direction == "down"

    def test_all_shortest_paths(self, graph):
        paths = find_shortest_paths("Agumon", "Gabumon", graph)
        assert len(paths) == 2
        assert all(p.length == 2 for p in paths)
        middles = {p.steps[0].to for p in paths}
        assert middles == {"Koromon", "Tsunomon"}

    def test_longer_route(self, graph):
        paths = find_shortest_paths("Greymon", "Garurumon", graph)
        assert len(paths) == 2
        assert all(p.length == 4 for p in paths)
        directions = [s.direction for s in paths[0].steps]
        assert directions == ["down", "down", "up", "up"]

    def test_names_trimmed(self, graph):
        paths = find_shortest_paths("  Koromon ", "Agumon\n", graph)
        assert len(paths) == 1

    def test_unknown_source(self, graph, caplog):
        assert find_shortest_paths("Missingmon", "Agumon", graph) == []
        assert "Missingmon" in caplog.text

    def test_unknown_target(self, graph):
        assert find_shortest_paths("Agumon", "Missingmon", graph) == []

    def test_unreachable(self, graph):
        assert find_shortest_paths("Agumon", "Loner", graph) == []


class TestFormatPath:
    def test_empty(self):
        assert format_path(EvolutionPath()) == "Already at destination"

    def test_mixed_directions(self, graph):
        paths = find_shortest_paths("Agumon", "Gabumon", graph)
        formatted = sorted(format_path(p) for p in paths)
        assert formatted == [
            "Agumon ← Koromon → Gabumon",
            "Agumon ← Tsunomon → Gabumon",
        ]


class TestGraphHelpers:
    def test_available_creatures_sorted(self, graph):
        names = available_creatures(graph)
        assert names == sorted(RAW_GRAPH)

    def test_consistent_graph_has_no_warnings(self, graph):
        assert validate_evolution_graph(graph) == []

    def test_dangling_edge(self):
        broken = parse_evolution_graph(
            {"Agumon": {"evolvesFrom": [], "evolvesTo": ["Ghostmon"]}}
        )
        warnings = validate_evolution_graph(broken)
        assert warnings == ['Agumon evolvesTo "Ghostmon" which doesn\'t exist in graph']

    def test_one_directional_edge(self):
        broken = parse_evolution_graph(
            {
                "Agumon": {"evolvesFrom": [], "evolvesTo": ["Greymon"]},
                "Greymon": {"evolvesFrom": [], "evolvesTo": []},
            }
        )
        warnings = validate_evolution_graph(broken)
        assert warnings == [
            "Agumon evolvesTo Greymon, but Greymon doesn't evolvesFrom Agumon"
        ]


class TestLoadEvolutionGraph:
    def test_load(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(RAW_GRAPH))
        graph = load_evolution_graph(path)
        assert graph["Agumon"].evolves_to == ["Greymon"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_evolution_graph(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid evolution graph JSON"):
            load_evolution_graph(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text("[]")
        with pytest.raises(ValueError, match="must be a JSON object"):
            load_evolution_graph(path)
