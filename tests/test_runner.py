"""
Unit tests for run_algorithm, the result wire shape and run metrics.
"""

import dataclasses
import logging
import math

import pytest

from graph import Edge, EngineError, Graph, Node, UnknownNodeReference
from algorithms import MissingTarget, UnknownAlgorithm, algorithm_keys
from engine import AlgorithmRequest, AlgorithmResult, execute, run_algorithm, summarize


class TestValidation:
    """Bad requests fail before any step is recorded."""

    def test_unknown_algorithm(self, cycle_graph):
        with pytest.raises(UnknownAlgorithm) as exc_info:
            run_algorithm("bellman-ford", cycle_graph, "A")
        assert "bellman-ford" in str(exc_info.value)

    def test_astar_without_target(self, cycle_graph):
        with pytest.raises(MissingTarget):
            run_algorithm("astar", cycle_graph, "A")

    def test_unknown_start(self, cycle_graph):
        with pytest.raises(UnknownNodeReference) as exc_info:
            run_algorithm("bfs", cycle_graph, "Q")
        assert exc_info.value.node_id == "Q"

    def test_unknown_target(self, cycle_graph):
        with pytest.raises(UnknownNodeReference):
            run_algorithm("dijkstra", cycle_graph, "A", "Q")

    def test_edge_to_missing_node(self, graph_factory):
        g = graph_factory(["A", "B"], [("A", "B"), ("A", "Q")])
        with pytest.raises(UnknownNodeReference) as exc_info:
            run_algorithm("bfs", g, "A")
        assert "Edge 'e1' references unknown node 'Q'" in str(exc_info.value)

    @pytest.mark.parametrize("exc", [UnknownAlgorithm, MissingTarget, UnknownNodeReference])
    def test_single_error_base(self, exc):
        assert issubclass(exc, EngineError)


class TestRun:
    """Result contents and trace properties."""

    def test_result_fields(self, cycle_graph):
        result = run_algorithm("dijkstra", cycle_graph, "A", "D")
        assert result.algorithm == "dijkstra"
        assert result.start_node == "A"
        assert result.target_node == "D"
        assert result.time_complexity == "O(V² + E)"
        assert result.space_complexity == "O(V)"
        assert result.execution_time >= 0
        assert result.path == ("A", "E", "D")

    @pytest.mark.parametrize("algorithm", algorithm_keys())
    def test_deterministic(self, algorithm, sample_graph):
        """Two runs on the same input give identical traces."""
        first = run_algorithm(algorithm, sample_graph, "A", "D")
        second = run_algorithm(algorithm, sample_graph, "A", "D")
        assert first.steps == second.steps

    @pytest.mark.parametrize("algorithm", algorithm_keys())
    def test_step_numbers_are_contiguous(self, algorithm, sample_graph):
        result = run_algorithm(algorithm, sample_graph, "A", "C")
        assert [s.step_number for s in result.steps] == list(range(len(result.steps)))

    @pytest.mark.parametrize("algorithm", algorithm_keys())
    def test_visited_never_shrinks(self, algorithm, weighted_graph):
        result = run_algorithm(algorithm, weighted_graph, "A", "F")
        for before, after in zip(result.steps, result.steps[1:]):
            assert set(before.visited) <= set(after.visited)

    def test_steps_are_frozen(self, cycle_graph):
        step = run_algorithm("bfs", cycle_graph, "A").steps[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.description = "changed"

    def test_steps_share_no_containers(self, cycle_graph):
        steps = run_algorithm("dijkstra", cycle_graph, "A").steps
        assert steps[0].distances is not steps[1].distances
        assert math.isinf(steps[0].distances["B"])
        assert steps[1].distances["B"] == 1

    def test_distances_are_read_only(self, cycle_graph):
        """A recorded distance map cannot be rewritten by a holder of the result."""
        result = run_algorithm("dijkstra", cycle_graph, "A")
        with pytest.raises(TypeError):
            result.steps[0].distances["A"] = 99
        assert result.steps[0].distances["A"] == 0

    def test_restored_distances_are_read_only(self, cycle_graph):
        result = AlgorithmResult.from_dict(run_algorithm("astar", cycle_graph, "A", "D").to_dict())
        with pytest.raises(TypeError):
            result.final_step.distances["D"] = 0

    def test_negative_weights_logged(self, graph_factory, caplog):
        g = graph_factory(["A", "B"], [("A", "B", -2)])
        with caplog.at_level(logging.WARNING, logger="engine.runner"):
            run_algorithm("dijkstra", g, "A")
        assert "negative edge weights" in caplog.text

    def test_graph_left_untouched(self):
        nodes = [Node("A"), Node("B")]
        edges = [Edge("A", "B", 0, edge_id="ab")]
        g = Graph("g", nodes, edges)
        run_algorithm("dijkstra", g, "A", "B")
        assert g.edges[0].weight == 0
        assert [n.id for n in nodes] == ["A", "B"]

    def test_astar_uses_node_positions(self, grid_graph):
        result = run_algorithm("astar", grid_graph, "0_0", "2_2")
        assert result.path[0] == "0_0" and result.path[-1] == "2_2"

    def test_execute_request(self, cycle_graph):
        req = AlgorithmRequest("bfs", cycle_graph, "A", "C")
        assert execute(req).steps == run_algorithm("bfs", cycle_graph, "A", "C").steps


class TestWireShape:
    """AlgorithmRequest / AlgorithmResult dictionaries."""

    def test_request_from_dict(self, sample_graph):
        req = AlgorithmRequest.from_dict({
            "algorithm": "bfs",
            "graph": sample_graph.to_dict(),
            "startNodeId": "A",
            "targetNodeId": "",
        })
        assert req.target_node_id is None
        assert req.graph.node_ids() == ["A", "B", "C", "D", "E"]

    def test_result_keys(self, cycle_graph):
        data = run_algorithm("dijkstra", cycle_graph, "A", "D").to_dict()
        assert set(data) == {
            "algorithm", "startNode", "targetNode", "steps",
            "executionTime", "timeComplexity", "spaceComplexity",
        }
        first = data["steps"][0]
        assert first["step"] == 0
        assert first["current"] == "A"
        assert first["distances"]["B"] is None
        assert "queue" not in first and "stack" not in first

    def test_no_target_key_without_target(self, cycle_graph):
        assert "targetNode" not in run_algorithm("bfs", cycle_graph, "A").to_dict()

    def test_result_restores_infinity(self, weighted_graph):
        result = run_algorithm("dijkstra", weighted_graph, "A")
        restored = AlgorithmResult.from_dict(result.to_dict())
        assert math.isinf(restored.final_step.distances["G"])
        assert restored.steps == result.steps


class TestMetrics:
    """summarize() over finished results."""

    def test_dijkstra_cycle(self, cycle_graph):
        m = summarize(run_algorithm("dijkstra", cycle_graph, "A", "D"), cycle_graph)
        assert m.path_found
        assert m.path == ["A", "E", "D"]
        assert m.path_length == 2
        assert m.path_cost == 2
        assert m.nodes_visited == 5
        assert m.total_steps == 10

    def test_weighted_cost(self, weighted_graph):
        """A→F is A-C-B-D-E-F: 2 + 1 + 5 + 2 + 3."""
        m = summarize(run_algorithm("dijkstra", weighted_graph, "A", "F"), weighted_graph)
        assert m.path_cost == 13

    def test_no_path(self, disconnected_graph):
        m = summarize(run_algorithm("bfs", disconnected_graph, "A", "Z"), disconnected_graph)
        assert not m.path_found
        assert m.path_length == 0
        assert m.path_cost == 0
        assert m.nodes_visited == 3
        assert m.target_node == "Z"
