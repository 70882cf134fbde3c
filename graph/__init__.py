"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge, Representation
    from graph import build_adjacency, Neighbour, Adjacency
    from graph import EngineError, UnknownNodeReference
"""

from graph.errors    import EngineError, UnknownNodeReference
from graph.node      import Node
from graph.edge      import Edge
from graph.graph     import Graph, Representation
from graph.adjacency import (
    Adjacency,
    Neighbour,
    build_adjacency,
    build_adjacency_matrix,
    matrix_to_edges,
)

__all__ = [
    "Node",      "Edge",
    "Graph",     "Representation",
    "Adjacency", "Neighbour",
    "build_adjacency", "build_adjacency_matrix", "matrix_to_edges",
    "EngineError", "UnknownNodeReference",
]
