"""
metrics.py — Run Analytics
===========================
Turns a completed AlgorithmResult into the numbers the metrics panel
shows: how many steps, how many nodes were visited, whether a path was
found and what it costs.

    metrics = summarize(result, graph)
    metrics.path_cost        # sum of resolved edge weights along the path

Reads the result only; never re-runs anything.
"""

from dataclasses import dataclass, field
from typing import List

import config
from graph import Graph
from engine.runner import AlgorithmResult


@dataclass
class RunMetrics:
    algorithm:        str         = ""
    start_node:       str         = ""
    target_node:      str         = ""
    total_steps:      int         = 0          # number of Steps in the trace
    nodes_visited:    int         = 0          # size of the final visited set
    path_found:       bool        = False
    path:             List[str]   = field(default_factory=list)
    path_length:      int         = 0          # number of edges on the final path
    path_cost:        float       = 0.0        # total weight of the final path
    execution_time:   float       = 0.0        # ms, as measured by the runner
    time_complexity:  str         = ""
    space_complexity: str         = ""


def summarize(result: AlgorithmResult, graph: Graph) -> RunMetrics:
    """Compute RunMetrics for `result`, which must have been run on `graph`."""
    last = result.final_step
    path = list(result.path or ())

    # path cost: sum edge weights along the path, resolved the same way the run saw them
    path_cost = 0.0
    for a, b in zip(path, path[1:]):
        e = graph.get_edge_between(a, b)
        if e:
            path_cost += e.resolved_weight(zero_as_default=config.ZERO_WEIGHT_AS_DEFAULT)

    return RunMetrics(
        algorithm=result.algorithm,
        start_node=result.start_node,
        target_node=result.target_node or "",
        total_steps=len(result.steps),
        nodes_visited=len(last.visited) if last else 0,
        path_found=bool(path),
        path=path,
        path_length=len(path) - 1 if len(path) > 1 else 0,
        path_cost=path_cost,
        execution_time=result.execution_time,
        time_complexity=result.time_complexity,
        space_complexity=result.space_complexity,
    )
