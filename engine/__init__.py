"""
engine/
-------
Execution & replay layer.

    from engine import run_algorithm, execute, Stepper, summarize
"""

from engine.runner  import AlgorithmRequest, AlgorithmResult, execute, run_algorithm
from engine.stepper import Stepper
from engine.metrics import RunMetrics, summarize

__all__ = [
    "AlgorithmRequest",
    "AlgorithmResult",
    "execute",
    "run_algorithm",
    "Stepper",
    "RunMetrics",
    "summarize",
]
