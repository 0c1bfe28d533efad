"""
node.py — Graph Node
====================
Identity plus a cosmetic 2-D position.  No algorithm in the graph family
reads the position; it only travels with the node so the presentation
layer can draw it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GraphNode:
    """
    Attributes:
        id   : Unique identifier (any string; "A", "0", "n7", …).
        x, y : Canvas coordinates (caller decides units).
    """

    id: str
    x:  float = 0.0
    y:  float = 0.0

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "GraphNode":
        return cls(id=str(data["id"]), x=float(data.get("x", 0.0)), y=float(data.get("y", 0.0)))

    def __repr__(self) -> str:
        return f"GraphNode({self.id}, pos=({self.x:.1f},{self.y:.1f}))"
