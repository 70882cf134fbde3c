"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra with a linear min-distance scan.

Yields a Step at:
  1. Start       →  every distance ∞ except source = 0
  2. Relaxation  →  each neighbour whose distance improved
  3. Advance     →  the next node the scan will settle
  4. Target      →  target selected, path reconstructed
  5. Exhausted   →  no reachable node left with a target still unreached

Selection rule: scan the unvisited nodes in node order and keep the FIRST
one with the strictly smallest distance.  Unvisited is an insertion-ordered
dict, so ties always break the same way and traces are reproducible.
A heap would be faster on big graphs, but it must keep that tie-break.

Once a node leaves `unvisited` its distance is final.

Correctness note: Dijkstra requires non-negative weights.
"""

import math
from typing import Dict, Generator, Optional

from graph import Adjacency
from algorithms.step import Step, StepBuilder, fmt_cost, reconstruct_path


def dijkstra(
    adjacency: Adjacency,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    sb = StepBuilder()

    dist:      Dict[str, float]          = {nid: math.inf for nid in adjacency}
    previous:  Dict[str, Optional[str]]  = {nid: None for nid in adjacency}
    unvisited: Dict[str, None]           = dict.fromkeys(adjacency)
    dist[source] = 0

    def settled():
        return [nid for nid in adjacency if nid not in unvisited]

    yield sb.build(
        current=source, visited=[], distances=dist,
        description=f"Starting Dijkstra's algorithm from node {source}",
    )

    reached = False
    while unvisited:
        node = _closest(unvisited, dist)
        if node is None:
            break                       # everything left is unreachable

        del unvisited[node]

        if target is not None and node == target:
            reached = True
            yield sb.build(
                current=node, visited=settled(), distances=dist,
                path=reconstruct_path(previous, target),
                description=(
                    f"Target node {target} reached with shortest distance {fmt_cost(dist[node])}"
                ),
            )
            break

        for nbr, weight in adjacency[node]:
            if nbr not in unvisited:
                continue
            new_dist = dist[node] + weight
            if new_dist < dist[nbr]:
                dist[nbr]     = new_dist
                previous[nbr] = node
                yield sb.build(
                    current=node, visited=settled(), distances=dist,
                    description=f"Updated distance to node {nbr} to {fmt_cost(new_dist)}",
                )

        nxt = _closest(unvisited, dist)
        if nxt is not None:
            yield sb.build(
                current=nxt, visited=settled(), distances=dist,
                description=f"Moving to node {nxt} with current distance {fmt_cost(dist[nxt])}",
            )

    if target is not None and not reached:
        yield sb.build(
            current=None, visited=settled(), distances=dist,
            description=f"No path found from {source} to {target}",
        )


def _closest(unvisited: Dict[str, None], dist: Dict[str, float]) -> Optional[str]:
    """First unvisited node with the strictly smallest finite distance, or None."""
    best, best_d = None, math.inf
    for nid in unvisited:
        if dist[nid] < best_d:
            best, best_d = nid, dist[nid]
    return best
