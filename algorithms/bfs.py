"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over an adjacency projection.  Yields a Step at:
  1. Start       →  source queued and already marked visited
  2. Discovery   →  each unseen neighbour is marked visited and enqueued
  3. Advance     →  the next node at the head of the queue
  4. Target      →  target dequeued (checked BEFORE its neighbours are expanded)
  5. Exhausted   →  queue empty with a target still unreached

Nodes are marked visited on DISCOVERY, not on dequeue, so nothing is ever
queued twice and the visited set may contain queued-but-unprocessed nodes.

BFS here reports reachability and visit order only; it does not build a path.
"""

from collections import deque
from typing import Generator, Optional

from graph import Adjacency
from algorithms.step import Step, StepBuilder


def bfs(
    adjacency: Adjacency,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:
    """
    Args:
        adjacency : Adjacency projection of the graph.
        source    : Starting node id.
        target    : Optional goal node id.  None → traverse the whole component.
    """

    sb      = StepBuilder()
    queue   = deque([source])
    visited = {source}
    order   = [source]                  # visited set in discovery order

    yield sb.build(
        current=source, visited=order, queue=queue,
        description=f"Starting BFS from node {source}",
    )

    reached = False
    while queue:
        node = queue.popleft()

        if target is not None and node == target:
            reached = True
            yield sb.build(
                current=node, visited=order, queue=queue,
                description=f"Target node {target} reached!",
            )
            break

        for nbr, _ in adjacency[node]:
            if nbr in visited:
                continue
            visited.add(nbr)
            order.append(nbr)
            queue.append(nbr)
            yield sb.build(
                current=node, visited=order, queue=queue,
                description=f"Visiting node {node}, discovered neighbor {nbr}",
            )

        if queue:
            yield sb.build(
                current=queue[0], visited=order, queue=queue,
                description=f"Moving to next node in queue: {queue[0]}",
            )

    if target is not None and not reached:
        yield sb.build(
            current=None, visited=order, queue=queue,
            description=f"No path found from {source} to {target}",
        )

