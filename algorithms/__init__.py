"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, frontier, requires_target, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and the HTTP adapter
both consume it, so adding an algorithm is: write the generator, add
one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from algorithms.bfs      import bfs      as _bfs
from algorithms.dfs      import dfs      as _dfs
from algorithms.dijkstra import dijkstra as _dijkstra
from algorithms.astar    import astar    as _astar
from algorithms.errors   import MissingTarget, UnknownAlgorithm
from algorithms.step     import Step, StepBuilder


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # the generator function
    frontier:         str                    # Step field holding the frontier: queue / stack / distances
    requires_target:  bool = False           # refuse to run without a target?
    has_heuristic:    bool = False           # needs node positions?
    complexity_time:  str  = ""              # static label, e.g. "O(V + E)"
    complexity_space: str  = ""              # static label, e.g. "O(V)"
    description:      str  = ""              # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":             self.key,
            "label":           self.label,
            "frontier":        self.frontier,
            "requiresTarget":  self.requires_target,
            "timeComplexity":  self.complexity_time,
            "spaceComplexity": self.complexity_space,
            "description":     self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, frontier="queue",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Reports reachability and visit order.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, frontier="stack",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, frontier="distances",
        complexity_time="O(V² + E)", complexity_space="O(V)",
        description="Settles the closest unvisited node each round. Optimal for non-negative weights.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=_astar, frontier="distances",
        requires_target=True, has_heuristic=True,
        complexity_time="O(E log V)", complexity_space="O(V)",
        description="Dijkstra guided by a Manhattan-distance heuristic. Needs a target.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithm_keys() -> List[str]:
    return list(REGISTRY)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithm_keys",
    "Step",
    "StepBuilder",
    "MissingTarget",
    "UnknownAlgorithm",
]
