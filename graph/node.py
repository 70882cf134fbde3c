from numbers import Real
from typing import Optional, Tuple
import uuid


def optional_number(data: dict, key: str) -> Optional[float]:
    """data[key] as a real number, or None when absent.  Raises ValueError otherwise."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    return value


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    A vertex as the editor hands it to the engine.  The engine only ever
    reads nodes; it never assigns to them.

    Attributes:
        id     : Unique identifier (uuid string by default, or user-supplied).
        label  : Human-readable name shown on the canvas.
        x, y   : Optional canvas coordinates.  Only A* reads them (heuristic).
        color  : Optional display colour, carried through untouched.
    """

    __slots__ = ("id", "label", "x", "y", "color")

    def __init__(
        self,
        node_id: Optional[str] = None,
        label: Optional[str] = None,
        x: Optional[float] = None,
        y: Optional[float] = None,
        color: Optional[str] = None,
    ):
        self.id: str                = node_id or str(uuid.uuid4())[:8]
        self.label: str             = label or self.id
        self.x: Optional[float]     = x
        self.y: Optional[float]     = y
        self.color: Optional[str]   = color

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None

    @property
    def position(self) -> Optional[Tuple[float, float]]:
        """(x, y) when both coordinates are set, else None."""
        if not self.has_position:
            return None
        return (self.x, self.y)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {"id": self.id, "label": self.label}
        if self.x is not None:
            data["x"] = self.x
        if self.y is not None:
            data["y"] = self.y
        if self.color is not None:
            data["color"] = self.color
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            node_id=data["id"],
            label=data.get("label"),
            x=optional_number(data, "x"),
            y=optional_number(data, "y"),
            color=data.get("color"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        pos = f"({self.x},{self.y})" if self.has_position else "unplaced"
        return f"Node(id={self.id}, label={self.label}, pos={pos})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
