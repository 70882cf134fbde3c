"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a Step at:
  1. Start       →  source pushed onto the stack
  2. Visit       →  a node popped for the first time
  3. Push        →  each unvisited neighbour pushed
  4. Target      →  target visited
  5. Exhausted   →  stack empty with a target still unreached

Nodes are marked visited on POP, not on push, so a node may sit on the
stack more than once; later copies are popped and dropped silently.
Neighbours are pushed in reverse adjacency order so they come back off
the stack in natural left-to-right order.
"""

from typing import Generator, Optional

from graph import Adjacency
from algorithms.step import Step, StepBuilder


def dfs(
    adjacency: Adjacency,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:
    """
    Iterative DFS.  No path is reconstructed; the trace records the
    visit order and the stack at every event.
    """

    sb      = StepBuilder()
    stack   = [source]
    visited = set()
    order   = []                        # visited set in visit order

    yield sb.build(
        current=source, visited=order, stack=stack,
        description=f"Starting DFS from node {source}",
    )

    reached = False
    while stack:
        node = stack.pop()
        if node in visited:
            continue

        visited.add(node)
        order.append(node)
        yield sb.build(
            current=node, visited=order, stack=stack,
            description=f"Visiting node {node}",
        )

        if target is not None and node == target:
            reached = True
            yield sb.build(
                current=node, visited=order, stack=stack,
                description=f"Target node {target} reached!",
            )
            break

        for nbr, _ in reversed(adjacency[node]):
            if nbr not in visited:
                stack.append(nbr)
                yield sb.build(
                    current=node, visited=order, stack=stack,
                    description=f"Adding neighbor {nbr} to stack",
                )

    if target is not None and not reached:
        yield sb.build(
            current=None, visited=order, stack=stack,
            description=f"No path found from {source} to {target}",
        )
