"""
Pytest configuration and shared fixtures.

Graphs here are small and hand-built so expected traces can be worked
out on paper.
"""

import pytest

from graph import Edge, Graph, Node
from main import create_app


def make_graph(node_ids, edges, positions=None, name="test graph"):
    """
    Build a Graph from plain data.

    edges: iterable of (a, b) or (a, b, weight)
    positions: optional {node_id: (x, y)}
    """
    positions = positions or {}
    nodes = []
    for nid in node_ids:
        x, y = positions.get(nid, (None, None))
        nodes.append(Node(nid, nid, x, y))
    edge_objs = []
    for i, e in enumerate(edges):
        a, b = e[0], e[1]
        w = e[2] if len(e) > 2 else None
        edge_objs.append(Edge(a, b, weight=w, edge_id=f"e{i}"))
    return Graph(name=name, nodes=nodes, edges=edge_objs)


@pytest.fixture
def cycle_graph() -> Graph:
    """5-node cycle A-B-C-D-E-A, unit weights."""
    return make_graph(
        ["A", "B", "C", "D", "E"],
        [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "A")],
    )


@pytest.fixture
def sample_graph() -> Graph:
    return Graph.sample()


@pytest.fixture
def disconnected_graph() -> Graph:
    """Components {A, B, C}, {X, Y} and the isolated node Z."""
    return make_graph(
        ["A", "B", "C", "X", "Y", "Z"],
        [("A", "B"), ("B", "C"), ("X", "Y")],
    )


@pytest.fixture
def weighted_graph() -> Graph:
    """Six connected weighted nodes plus the isolated node G."""
    return make_graph(
        ["A", "B", "C", "D", "E", "F", "G"],
        [
            ("A", "B", 4), ("A", "C", 2), ("B", "C", 1),
            ("B", "D", 5), ("C", "D", 8), ("C", "E", 10),
            ("D", "E", 2), ("D", "F", 6), ("E", "F", 3),
        ],
    )


@pytest.fixture
def grid_graph() -> Graph:
    """
    3×3 grid, nodes "r_c" at (10c, 10r).  Every edge weighs at least the
    Manhattan distance between its endpoints, so the A* heuristic is
    admissible (and consistent).
    """
    ids, positions, edges = [], {}, []
    for r in range(3):
        for c in range(3):
            nid = f"{r}_{c}"
            ids.append(nid)
            positions[nid] = (10 * c, 10 * r)
    for r in range(3):
        for c in range(3):
            k = r * 3 + c
            if c < 2:
                edges.append((f"{r}_{c}", f"{r}_{c + 1}", 10 + (k * 7) % 11))
            if r < 2:
                edges.append((f"{r}_{c}", f"{r + 1}_{c}", 10 + (k * 5) % 13))
    return make_graph(ids, edges, positions)


@pytest.fixture
def client():
    app = create_app({"TESTING": True})
    with app.test_client() as c:
        yield c


@pytest.fixture
def graph_factory():
    """make_graph, for tests that need a one-off graph."""
    return make_graph
