"""
runner.py — Run an Algorithm to Completion
============================================
The one entry point collaborators call.  Validates the request, builds
the adjacency projection, drains the algorithm generator into a trace
and packages everything into an immutable AlgorithmResult.

Usage:
    result = run_algorithm("dijkstra", graph, "A", "D")
    result.steps[-1].path            # ('A', 'B', 'C', 'D')
    summarize(result, graph)         # the metrics card

Wall-clock timing happens here, around the generator, never inside the
algorithms, so traces are identical from run to run.

Nothing is shared between calls: every run builds its own projection
and its own Steps, so a caller can keep replaying an old result while a
new run is in progress.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from graph import Graph, UnknownNodeReference, build_adjacency
from algorithms import get_algorithm, MissingTarget, UnknownAlgorithm
from algorithms.step import Step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request / Result
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgorithmRequest:
    algorithm:      str
    graph:          Graph
    start_node_id:  str
    target_node_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlgorithmRequest":
        """Parse the wire shape {algorithm, graph, startNodeId, targetNodeId?}."""
        return cls(
            algorithm=data["algorithm"],
            graph=Graph.from_dict(data["graph"]),
            start_node_id=data["startNodeId"],
            target_node_id=data.get("targetNodeId") or None,
        )


@dataclass(frozen=True)
class AlgorithmResult:
    """
    Attributes:
        algorithm        : Registry key that produced the trace.
        start_node       : Start node id.
        target_node      : Target node id, or None.
        steps            : The full trace, in order.
        execution_time   : Wall-clock milliseconds spent draining the generator.
        time_complexity  : Static label from the registry.
        space_complexity : Static label from the registry.
    """

    algorithm:        str
    start_node:       str
    target_node:      Optional[str]
    steps:            Tuple[Step, ...]
    execution_time:   float
    time_complexity:  str
    space_complexity: str

    @property
    def final_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None

    @property
    def path(self) -> Optional[Tuple[str, ...]]:
        """Reconstructed path of the final step, if the run produced one."""
        last = self.final_step
        return last.path if last else None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "algorithm":       self.algorithm,
            "startNode":       self.start_node,
            "steps":           [s.to_dict() for s in self.steps],
            "executionTime":   self.execution_time,
            "timeComplexity":  self.time_complexity,
            "spaceComplexity": self.space_complexity,
        }
        if self.target_node is not None:
            data["targetNode"] = self.target_node
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlgorithmResult":
        return cls(
            algorithm=data["algorithm"],
            start_node=data["startNode"],
            target_node=data.get("targetNode"),
            steps=tuple(Step.from_dict(s) for s in data.get("steps", [])),
            execution_time=data.get("executionTime", 0.0),
            time_complexity=data.get("timeComplexity", ""),
            space_complexity=data.get("spaceComplexity", ""),
        )


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def run_algorithm(
    algorithm: str,
    graph: Graph,
    start_node_id: str,
    target_node_id: Optional[str] = None,
) -> AlgorithmResult:
    """
    Run `algorithm` on `graph` and return the complete trace.

    Raises (before any step is recorded):
        UnknownAlgorithm      – tag not in the registry.
        MissingTarget         – algorithm needs a target and none was given.
        UnknownNodeReference  – an edge, the start or the target names a missing node.
    """
    info = get_algorithm(algorithm)
    if info is None:
        raise UnknownAlgorithm(algorithm)
    if info.requires_target and target_node_id is None:
        raise MissingTarget(info.key)

    for node_id in (start_node_id, target_node_id):
        if node_id is not None and not graph.has_node(node_id):
            raise UnknownNodeReference(node_id)

    if graph.has_negative_edges():
        logger.warning(f"{graph.name!r} has negative edge weights; {info.key} results are undefined")

    adjacency = build_adjacency(graph.nodes, graph.edges)

    # build kwargs based on what the algo accepts
    kwargs: Dict[str, Any] = {}
    if info.has_heuristic:
        kwargs["positions"] = {n.id: n.position for n in graph.nodes}

    started = time.perf_counter()
    steps = tuple(info.fn(adjacency, start_node_id, target_node_id, **kwargs))
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.info(
        f"Ran {info.key} on {graph.node_count()} nodes / {graph.edge_count()} edges"
        + f" from '{start_node_id}'"
        + (f" to '{target_node_id}'" if target_node_id else "")
        + f": {len(steps)} steps in {elapsed_ms:.2f} ms"
    )

    return AlgorithmResult(
        algorithm=info.key,
        start_node=start_node_id,
        target_node=target_node_id,
        steps=steps,
        execution_time=round(elapsed_ms, 3),
        time_complexity=info.complexity_time,
        space_complexity=info.complexity_space,
    )


def execute(request: AlgorithmRequest) -> AlgorithmResult:
    """Run an AlgorithmRequest (the boundary-facing form of run_algorithm)."""
    return run_algorithm(
        request.algorithm,
        request.graph,
        request.start_node_id,
        request.target_node_id,
    )

