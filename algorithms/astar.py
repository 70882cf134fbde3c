"""
astar.py — A* Search
=====================
Generator-based A* guided by a Manhattan-distance heuristic:

    h(n) = |Δx| + |Δy|      between n and the target's canvas coordinates

If either node is unplaced (x or y is None) h falls back to a constant 1.
That keeps the search running on graphs drawn without coordinates, but
it gives up A*'s speed advantage and, on such graphs, the optimality
guarantee.  With admissible coordinates (h never exceeds the true
remaining cost) the path found is a shortest path.

A coordinate of 0 is a real coordinate: a node on an axis (x == 0 or
y == 0) still gets its Manhattan estimate.  A falsy-coordinate check
(`not x`) would map such nodes to the constant and change every trace
that passes through them.

Yields a Step at:
  1. Start       →  g(source) = 0, f(source) = h(source)
  2. Update      →  each neighbour newly discovered or reached more cheaply
  3. Advance     →  the next open node with the lowest f
  4. Target      →  target selected, path reconstructed
  5. Exhausted   →  open set empty, "No path found"

The open set is scanned linearly for the lowest f, first-in-order winning
ties (same rule as Dijkstra).  Step distances carry the g-scores.
"""

import math
from typing import Dict, Generator, Mapping, Optional, Tuple

from graph import Adjacency
from algorithms.errors import MissingTarget
from algorithms.step import Step, StepBuilder, fmt_cost, reconstruct_path

Position = Optional[Tuple[float, float]]

UNPLACED_ESTIMATE = 1


# ---------------------------------------------------------------------------
# Heuristic
# ---------------------------------------------------------------------------
def manhattan(a: Position, b: Position) -> float:
    """|Δx| + |Δy|, or UNPLACED_ESTIMATE when either point is unknown."""
    if a is None or b is None:
        return UNPLACED_ESTIMATE
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(
    adjacency: Adjacency,
    source: str,
    target: Optional[str] = None,
    positions: Optional[Mapping[str, Position]] = None,
) -> Generator[Step, None, None]:
    """
    Args:
        adjacency : Adjacency projection of the graph.
        source    : Start node id.
        target    : Goal node id (required).
        positions : {node_id: (x, y) or None} for the heuristic.

    Raises:
        MissingTarget – target is None.
    """
    if target is None:
        raise MissingTarget("astar")

    positions = positions or {}
    goal      = positions.get(target)

    def h(node_id: str) -> float:
        return manhattan(positions.get(node_id), goal)

    sb = StepBuilder()

    g_score:  Dict[str, float]          = {nid: math.inf for nid in adjacency}
    f_score:  Dict[str, float]          = {nid: math.inf for nid in adjacency}
    previous: Dict[str, Optional[str]]  = {nid: None for nid in adjacency}
    open_set: Dict[str, None]           = {source: None}     # insertion-ordered set
    closed:   Dict[str, None]           = {}
    g_score[source] = 0
    f_score[source] = h(source)

    yield sb.build(
        current=source, visited=closed, distances=g_score,
        description=f"Starting A* search from node {source} to target {target}",
    )

    reached = False
    while open_set:
        node = _lowest_f(open_set, f_score)
        if node is None:
            break

        if node == target:
            reached = True
            yield sb.build(
                current=node, visited=closed, distances=g_score,
                path=reconstruct_path(previous, target),
                description=(
                    f"Target node {target} reached! Path found with cost {fmt_cost(g_score[node])}"
                ),
            )
            break

        del open_set[node]
        closed[node] = None

        for nbr, weight in adjacency[node]:
            if nbr in closed:
                continue

            tentative = g_score[node] + weight
            if nbr not in open_set:
                open_set[nbr] = None
            elif tentative >= g_score[nbr]:
                continue

            previous[nbr] = node
            g_score[nbr]  = tentative
            f_score[nbr]  = tentative + h(nbr)
            yield sb.build(
                current=node, visited=closed, distances=g_score,
                description=(
                    f"Updated node {nbr} with g-score: {fmt_cost(g_score[nbr])}, "
                    f"f-score: {fmt_cost(f_score[nbr])}"
                ),
            )

        nxt = _lowest_f(open_set, f_score)
        if nxt is not None:
            yield sb.build(
                current=nxt, visited=closed, distances=g_score,
                description=f"Moving to node {nxt} with f-score {fmt_cost(f_score[nxt])}",
            )

    if not reached:
        yield sb.build(
            current=None, visited=closed, distances=g_score,
            description=f"No path found from {source} to {target}",
        )


def _lowest_f(open_set: Dict[str, None], f_score: Dict[str, float]) -> Optional[str]:
    best, best_f = None, math.inf
    for nid in open_set:
        if f_score[nid] < best_f:
            best, best_f = nid, f_score[nid]
    return best
