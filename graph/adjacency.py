"""
adjacency.py — Adjacency Projection
====================================
Turns a node / edge list into the neighbour lookup every algorithm reads:

    { node_id: [Neighbour(node_id, weight), …] }

Built fresh for every run and thrown away afterwards.  Every edge is
written in both directions, so `b in adj[a]` ⇔ `a in adj[b]`.

Also provides the adjacency-MATRIX view used when a graph's
representation tag is "adjacencyMatrix", and its inverse.
"""

import logging
from typing import Dict, List, NamedTuple, Optional, Sequence

import config
from graph.node import Node
from graph.edge import Edge
from graph.errors import UnknownNodeReference

logger = logging.getLogger(__name__)


class Neighbour(NamedTuple):
    node_id: str
    weight:  float


Adjacency = Dict[str, List[Neighbour]]


def build_adjacency(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    zero_weight_as_default: Optional[bool] = None,
) -> Adjacency:
    """
    Build the adjacency projection.

    Args:
        nodes                  : Graph nodes; key order of the result follows this order.
        edges                  : Graph edges; each one lands in BOTH endpoint lists.
        zero_weight_as_default : Treat a declared weight of 0 as the default
                                 weight.  None → config.ZERO_WEIGHT_AS_DEFAULT.

    Raises:
        UnknownNodeReference – an edge names a node id not in `nodes`.
    """
    if zero_weight_as_default is None:
        zero_weight_as_default = config.ZERO_WEIGHT_AS_DEFAULT

    adj: Adjacency = {n.id: [] for n in nodes}

    for edge in edges:
        for endpoint in (edge.source, edge.target):
            if endpoint not in adj:
                raise UnknownNodeReference(endpoint, edge_id=edge.id)

        if edge.weight == 0 and zero_weight_as_default:
            logger.warning(
                f"Edge '{edge.id}' declares weight 0; using default weight {config.DEFAULT_EDGE_WEIGHT}"
            )

        w = edge.resolved_weight(zero_as_default=zero_weight_as_default)
        adj[edge.source].append(Neighbour(edge.target, w))
        adj[edge.target].append(Neighbour(edge.source, w))

    logger.debug(f"Built adjacency for {len(adj)} nodes / {len(edges)} edges")
    return adj


def build_adjacency_matrix(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    zero_weight_as_default: Optional[bool] = None,
) -> List[List[float]]:
    """
    Symmetric |V|×|V| weight matrix, rows/columns in node order.
    0 means "no edge".  Weights resolve exactly as in build_adjacency.
    """
    if zero_weight_as_default is None:
        zero_weight_as_default = config.ZERO_WEIGHT_AS_DEFAULT

    index = {n.id: i for i, n in enumerate(nodes)}
    matrix = [[0] * len(nodes) for _ in nodes]

    for edge in edges:
        for endpoint in (edge.source, edge.target):
            if endpoint not in index:
                raise UnknownNodeReference(endpoint, edge_id=edge.id)
        i, j = index[edge.source], index[edge.target]
        w = edge.resolved_weight(zero_as_default=zero_weight_as_default)
        matrix[i][j] = w
        matrix[j][i] = w

    return matrix


def matrix_to_edges(matrix: Sequence[Sequence[float]], nodes: Sequence[Node]) -> List[Edge]:
    """
    Inverse of build_adjacency_matrix: one Edge per positive cell in the
    upper triangle (the matrix is assumed symmetric).
    """
    edges: List[Edge] = []
    for i, row in enumerate(matrix):
        for j, val in enumerate(row):
            if j > i and val > 0:
                edges.append(Edge(nodes[i].id, nodes[j].id, weight=val))
    return edges
