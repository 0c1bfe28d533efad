"""
edge.py — Graph Edge
====================
Unordered connection between two nodes with a positive weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT node references.
    This keeps edges serialisable and lets them sit inside Step snapshots.
  - Edges are frozen values.  Two parallel edges with the same endpoints
    and weight compare equal, so algorithms that must tell them apart
    track edges by their position in `Graph.edges`, not by value.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GraphEdge:
    """
    Attributes:
        source : ID of one endpoint.
        target : ID of the other endpoint.
        weight : Positive cost.
    """

    source: str
    target: str
    weight: float = 1

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a ↔ node_b (either orientation)."""
        return {self.source, self.target} == {node_a, node_b}

    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    def touches(self, node_id: str) -> bool:
        return node_id == self.source or node_id == self.target

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "GraphEdge":
        return cls(
            source=str(data["source"]),
            target=str(data["target"]),
            weight=data.get("weight", 1),
        )

    def __repr__(self) -> str:
        return f"GraphEdge({self.source} ↔ {self.target}, w={self.weight})"
