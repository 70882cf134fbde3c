"""
Unit tests for the graph data layer and the adjacency projection.
"""

import pytest

from graph import (
    Edge,
    Graph,
    Node,
    Representation,
    UnknownNodeReference,
    build_adjacency,
    build_adjacency_matrix,
    matrix_to_edges,
)


class TestBuildAdjacency:
    """Adjacency projection construction."""

    def test_every_node_gets_a_list(self, disconnected_graph):
        """Isolated nodes still appear, with an empty neighbour list."""
        adj = build_adjacency(disconnected_graph.nodes, disconnected_graph.edges)
        assert list(adj) == ["A", "B", "C", "X", "Y", "Z"]
        assert adj["Z"] == []

    def test_edges_are_bidirectional(self, cycle_graph):
        """An edge lands in both endpoint lists."""
        adj = build_adjacency(cycle_graph.nodes, cycle_graph.edges)
        assert [n.node_id for n in adj["A"]] == ["B", "E"]
        assert [n.node_id for n in adj["B"]] == ["A", "C"]

    @pytest.mark.parametrize(
        "fixture", ["cycle_graph", "sample_graph", "disconnected_graph", "weighted_graph", "grid_graph"]
    )
    def test_symmetry(self, fixture, request):
        """b in adj[a] iff a in adj[b], with the same weight."""
        g = request.getfixturevalue(fixture)
        adj = build_adjacency(g.nodes, g.edges)
        for a, neighbours in adj.items():
            for b, w in neighbours:
                assert (a, w) in [(n.node_id, n.weight) for n in adj[b]]

    def test_missing_weight_defaults_to_one(self, graph_factory):
        g = graph_factory(["A", "B"], [("A", "B")])
        adj = build_adjacency(g.nodes, g.edges)
        assert adj["A"][0].weight == 1

    def test_zero_weight_treated_as_one(self, graph_factory):
        """A declared 0 is promoted to the default weight."""
        g = graph_factory(["A", "B"], [("A", "B", 0)])
        adj = build_adjacency(g.nodes, g.edges)
        assert adj["A"][0].weight == 1
        assert adj["B"][0].weight == 1

    def test_zero_weight_kept_when_disabled(self, graph_factory):
        g = graph_factory(["A", "B"], [("A", "B", 0)])
        adj = build_adjacency(g.nodes, g.edges, zero_weight_as_default=False)
        assert adj["A"][0].weight == 0

    def test_declared_weight_kept(self, graph_factory):
        g = graph_factory(["A", "B"], [("A", "B", 2.5)])
        adj = build_adjacency(g.nodes, g.edges)
        assert adj["B"][0].weight == 2.5

    def test_unknown_node_reference(self, graph_factory):
        """An edge to a node that does not exist fails the build."""
        g = graph_factory(["A", "B"], [("A", "B"), ("B", "Q")])
        with pytest.raises(UnknownNodeReference) as exc_info:
            build_adjacency(g.nodes, g.edges)
        assert exc_info.value.node_id == "Q"
        assert exc_info.value.edge_id == "e1"

    def test_does_not_touch_edges(self, graph_factory):
        g = graph_factory(["A", "B"], [("A", "B", 0)])
        build_adjacency(g.nodes, g.edges)
        assert g.edges[0].weight == 0


class TestAdjacencyMatrix:
    """Matrix representation and its inverse."""

    def test_sample_matrix(self, sample_graph):
        m = build_adjacency_matrix(sample_graph.nodes, sample_graph.edges)
        assert m == [
            [0, 1, 0, 0, 1],
            [1, 0, 1, 1, 0],
            [0, 1, 0, 0, 0],
            [0, 1, 0, 0, 1],
            [1, 0, 0, 1, 0],
        ]

    def test_matrix_to_edges(self, weighted_graph):
        m = build_adjacency_matrix(weighted_graph.nodes, weighted_graph.edges)
        edges = matrix_to_edges(m, weighted_graph.nodes)
        pairs = {(frozenset((e.source, e.target)), e.weight) for e in edges}
        expected = {(frozenset((e.source, e.target)), e.weight) for e in weighted_graph.edges}
        assert pairs == expected

    def test_matrix_unknown_node(self, graph_factory):
        g = graph_factory(["A"], [("A", "B")])
        with pytest.raises(UnknownNodeReference):
            build_adjacency_matrix(g.nodes, g.edges)


class TestGraphModel:
    """Node / Edge / Graph behaviour."""

    def test_graph_copies_caller_lists(self):
        nodes = [Node("A"), Node("B")]
        edges = [Edge("A", "B")]
        g = Graph("g", nodes, edges)
        nodes.append(Node("C"))
        edges.clear()
        assert g.node_ids() == ["A", "B"]
        assert g.edge_count() == 1

    def test_zero_coordinate_is_a_position(self):
        assert Node("A", x=0, y=0).position == (0, 0)
        assert Node("A", x=5).position is None

    def test_edge_connects_either_order(self):
        e = Edge("A", "B")
        assert e.connects("B", "A")
        assert not e.connects("A", "Z")

    @pytest.mark.parametrize("data", [
        {"id": "A", "x": "150", "y": 100},
        {"id": "A", "x": 150, "y": [100]},
        {"id": "A", "x": True, "y": 100},
    ])
    def test_node_rejects_non_numeric_coordinates(self, data):
        with pytest.raises(ValueError):
            Node.from_dict(data)

    @pytest.mark.parametrize("weight", ["5", {"w": 5}, False])
    def test_edge_rejects_non_numeric_weight(self, weight):
        with pytest.raises(ValueError):
            Edge.from_dict({"source": "A", "target": "B", "weight": weight})

    def test_numeric_fields_accepted(self):
        assert Node.from_dict({"id": "A", "x": 0, "y": 2.5}).position == (0, 2.5)
        assert Edge.from_dict({"source": "A", "target": "B", "weight": 3}).weight == 3
        assert Edge.from_dict({"source": "A", "target": "B"}).weight is None

    def test_get_edge_between(self, sample_graph):
        assert sample_graph.get_edge_between("A", "E").id == "E-A"
        assert sample_graph.get_edge_between("A", "C") is None

    def test_wire_shape(self, sample_graph):
        data = sample_graph.to_dict()
        assert data["representation"] == "adjacencyList"
        assert data["nodes"][0] == {"id": "A", "label": "A", "x": 150, "y": 100}
        restored = Graph.from_dict(data)
        assert restored.node_ids() == sample_graph.node_ids()
        assert restored.representation is Representation.ADJACENCY_LIST

    def test_negative_edge_detection(self, graph_factory):
        assert graph_factory(["A", "B"], [("A", "B", -2)]).has_negative_edges()
        assert not graph_factory(["A", "B"], [("A", "B")]).has_negative_edges()
