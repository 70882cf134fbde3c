"""
graph.py — Graph Description
=============================
The value the editor hands to the engine: a name, an ordered node list,
an ordered edge list and a display-representation tag.

Responsibilities:
  1. Hold nodes & edges in caller order      (order picks default start/target)
  2. Lookup helpers                          (has_node, get_edge_between, …)
  3. Serialisation round-trip                (to_dict / from_dict, wire keys)
  4. The demo graph the editor opens with    (sample)

Design decisions:
  - Nodes and edges are copied into tuples on construction.  The engine
    never writes to them and never holds on to the caller's own lists.
  - `representation` is purely a rendering hint; no algorithm reads it.
  - A node-id index is kept alongside the tuple for O(1) lookup.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple
import uuid

from graph.node import Node
from graph.edge import Edge


class Representation(Enum):
    ADJACENCY_LIST   = "adjacencyList"
    ADJACENCY_MATRIX = "adjacencyMatrix"


class Graph:
    """
    Attributes:
        id             : Unique identifier.
        name           : Display name.
        description    : Optional free text.
        nodes          : Tuple of Node, in editor order.
        edges          : Tuple of Edge, in editor order.
        representation : Representation tag (display only).
    """

    def __init__(
        self,
        name: str = "Untitled graph",
        nodes: Iterable[Node] = (),
        edges: Iterable[Edge] = (),
        description: Optional[str] = None,
        representation: Representation = Representation.ADJACENCY_LIST,
        graph_id: Optional[str] = None,
    ):
        self.id:             str                 = graph_id or str(uuid.uuid4())
        self.name:           str                 = name
        self.description:    Optional[str]       = description
        self.nodes:          Tuple[Node, ...]    = tuple(nodes)
        self.edges:          Tuple[Edge, ...]    = tuple(edges)
        self.representation: Representation      = Representation(representation)
        self._index:         Dict[str, Node]     = {n.id: n for n in self.nodes}

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def has_node(self, node_id: str) -> bool:
        return node_id in self._index

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b, in either direction."""
        for e in self.edges:
            if e.connects(a, b):
                return e
        return None

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight is not None and e.weight < 0 for e in self.edges)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        data = {
            "id":             self.id,
            "name":           self.name,
            "nodes":          [n.to_dict() for n in self.nodes],
            "edges":          [e.to_dict() for e in self.edges],
            "representation": self.representation.value,
        }
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        return cls(
            name=data.get("name", "Untitled graph"),
            nodes=[Node.from_dict(nd) for nd in data.get("nodes", [])],
            edges=[Edge.from_dict(ed) for ed in data.get("edges", [])],
            description=data.get("description"),
            representation=Representation(data.get("representation", "adjacencyList")),
            graph_id=data.get("id"),
        )

    # ==================================================================
    # DEMO GRAPH
    # ==================================================================
    @classmethod
    def sample(cls) -> "Graph":
        """
        The five-node graph the editor opens with:

            A ─ B ─ C
            │    \\
            E ─── D
        """
        nodes = [
            Node("A", "A", 150, 100),
            Node("B", "B", 250, 200),
            Node("C", "C", 350, 100),
            Node("D", "D", 350, 300),
            Node("E", "E", 150, 300),
        ]
        edges = [
            Edge("A", "B", 1, edge_id="A-B"),
            Edge("B", "C", 1, edge_id="B-C"),
            Edge("B", "D", 1, edge_id="B-D"),
            Edge("D", "E", 1, edge_id="D-E"),
            Edge("E", "A", 1, edge_id="E-A"),
        ]
        return cls(
            name="Sample Graph",
            nodes=nodes,
            edges=edges,
            description="A simple undirected graph with 5 nodes",
        )

    def __repr__(self) -> str:
        return f"Graph(name={self.name!r}, nodes={self.node_count()}, edges={self.edge_count()})"
