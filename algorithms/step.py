"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of one observable state change:

    • Which node the algorithm is looking at
    • The visited / closed set at that instant
    • The frontier at that instant (queue, stack or distance map)
    • The reconstructed path, once the target is reached
    • A plain-English description of what just changed

Design decisions:
  - Step is a frozen dataclass.  The trace is an append-only log:
    nothing is ever edited after it is recorded.
  - Sequences are stored as tuples and the distance map as a read-only
    MappingProxyType over a fresh dict, all copied at build time, so no
    Step shares a container with the runner's live working state (or
    with any other Step), and no holder of a Step can write to it.
  - Only the frontier field matching the algorithm is set; the others
    stay None.  That is how the renderer knows which panel to draw.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number  : 0-based index of this step in the run.
        current_node : ID of the node being processed right now (or None).
        visited      : Node ids visited / closed so far.
        queue        : BFS queue contents, front first.
        stack        : DFS stack contents, bottom first.
        distances    : Dijkstra distance map / A* g-scores (inf = unreached).
        path         : Reconstructed start→target path (only once reached).
        description  : Human-readable account of what changed.
    """

    step_number:  int                           = 0
    current_node: Optional[str]                 = None
    visited:      Tuple[str, ...]               = ()
    queue:        Optional[Tuple[str, ...]]     = None
    stack:        Optional[Tuple[str, ...]]     = None
    distances:    Optional[Mapping[str, float]] = None
    path:         Optional[Tuple[str, ...]]     = None
    description:  str                           = ""

    # ------------------------------------------------------------------
    # Serialisation — wire shape shared with the editor
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {
            "step":        self.step_number,
            "visited":     list(self.visited),
            "current":     self.current_node,
            "description": self.description,
        }
        if self.queue is not None:
            data["queue"] = list(self.queue)
        if self.stack is not None:
            data["stack"] = list(self.stack)
        if self.distances is not None:
            # JSON has no Infinity: unreached nodes go out as null
            data["distances"] = {
                n: (None if math.isinf(d) else d) for n, d in self.distances.items()
            }
        if self.path is not None:
            data["path"] = list(self.path)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Step":
        distances = data.get("distances")
        if distances is not None:
            distances = MappingProxyType(
                {n: (math.inf if d is None else d) for n, d in distances.items()}
            )
        return cls(
            step_number=data["step"],
            current_node=data.get("current"),
            visited=tuple(data.get("visited", ())),
            queue=_opt_tuple(data.get("queue")),
            stack=_opt_tuple(data.get("stack")),
            distances=distances,
            path=_opt_tuple(data.get("path")),
            description=data.get("description", ""),
        )


def _opt_tuple(items: Optional[Iterable[str]]) -> Optional[Tuple[str, ...]]:
    return None if items is None else tuple(items)


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to count steps or copy state
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Per-run scratch-pad that numbers steps and snapshots live state.

    Usage inside an algorithm generator:
        sb = StepBuilder()
        yield sb.build(current="A", visited=visited, queue=queue,
                       description="Starting BFS from node A")

    Every container argument is copied, so the runner may keep mutating
    its own sets / lists / dicts after the Step is yielded.
    """

    def __init__(self):
        self.step_no: int = 0

    def build(
        self,
        current: Optional[str],
        visited: Iterable[str],
        description: str,
        queue: Optional[Iterable[str]] = None,
        stack: Optional[Iterable[str]] = None,
        distances: Optional[Mapping[str, float]] = None,
        path: Optional[Iterable[str]] = None,
    ) -> Step:
        step = Step(
            step_number=self.step_no,
            current_node=current,
            visited=tuple(visited),
            queue=_opt_tuple(queue),
            stack=_opt_tuple(stack),
            distances=None if distances is None else MappingProxyType(dict(distances)),
            path=_opt_tuple(path),
            description=description,
        )
        self.step_no += 1
        return step


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------
def reconstruct_path(previous: Mapping[str, Optional[str]], target: str) -> Tuple[str, ...]:
    """Walk predecessors back from `target` until None, return start→target order."""
    path = []
    cur: Optional[str] = target
    while cur is not None:
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return tuple(path)


def fmt_cost(value: float) -> str:
    """Render a distance for step descriptions: 3.0 → '3', 2.5 → '2.5', inf → '∞'."""
    if math.isinf(value):
        return "∞"
    return f"{value:g}"
