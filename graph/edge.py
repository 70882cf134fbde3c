"""
edge.py — Graph Edge
====================
Connects two nodes.  Every edge is undirected: `source` and `target` are
just the two endpoint labels in the order the editor drew them, and the
engine treats (a, b) and (b, a) as the same connection.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - `weight` is stored exactly as declared (possibly None).  The effective
    weight is resolved once, in `resolved_weight`, so the quirk around a
    declared 0 lives in one place.
"""

from typing import Optional
import uuid

import config
from graph.node import optional_number


class Edge:
    """
    Attributes:
        id      : Unique identifier.
        source  : ID of one endpoint.
        target  : ID of the other endpoint.
        weight  : Declared numeric cost, or None.
        label   : Optional display label.
    """

    __slots__ = ("id", "source", "target", "weight", "label")

    def __init__(
        self,
        source: str,
        target: str,
        weight: Optional[float] = None,
        label: Optional[str] = None,
        edge_id: Optional[str] = None,
    ):
        self.id:     str             = edge_id or str(uuid.uuid4())[:8]
        self.source: str             = source
        self.target: str             = target
        self.weight: Optional[float] = weight
        self.label:  Optional[str]   = label

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def resolved_weight(self, zero_as_default: bool = True) -> float:
        """
        Weight the algorithms actually use.

        Missing weight → DEFAULT_EDGE_WEIGHT.  A declared 0 also becomes
        DEFAULT_EDGE_WEIGHT unless `zero_as_default` is False.
        """
        if self.weight is None:
            return config.DEFAULT_EDGE_WEIGHT
        if self.weight == 0 and zero_as_default:
            return config.DEFAULT_EDGE_WEIGHT
        return self.weight

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a ↔ node_b, in either order."""
        return {self.source, self.target} == {node_a, node_b}

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
        }
        if self.weight is not None:
            data["weight"] = self.weight
        if self.label is not None:
            data["label"] = self.label
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=optional_number(data, "weight"),
            label=data.get("label"),
            edge_id=data.get("id"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
