"""
errors.py — Engine Error Base
==============================
All caller-input failures raised by the engine derive from EngineError,
so a boundary (the Flask adapter, a CLI, a test) can catch one type.

The graph layer owns the base class because it is the lowest layer;
algorithm-level errors live in algorithms/errors.py.
"""

from typing import Optional


class EngineError(Exception):
    """Base class for every error the engine raises on bad input."""


class UnknownNodeReference(EngineError):
    """An edge (or a run request) names a node id the graph does not have."""

    def __init__(self, node_id: str, edge_id: Optional[str] = None):
        self.node_id = node_id
        self.edge_id = edge_id
        if edge_id is not None:
            msg = f"Edge '{edge_id}' references unknown node '{node_id}'"
        else:
            msg = f"Unknown node '{node_id}'"
        super().__init__(msg)
