"""
graph.py — Weighted Undirected Graph
=====================================
Read-only input for the graph family (Kruskal, Prim, Floyd–Warshall).

Responsibilities:
  1. Validation on construction             (dangling edges, duplicate ids, weights)
  2. Adjacency queries                      (neighbours, edges_of, …)
  3. Import from adjacency-list text        (text → graph)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes & edges are kept in INPUT ORDER (tuples).  Prim starts from the
    first node, Kruskal's stable sort and Floyd–Warshall's loop order all
    depend on it.
  - A separate adjacency dict `_adj[node_id] → [edge_index, …]` is built
    once so neighbour queries are O(degree), not O(E).
  - A malformed graph is rejected here, before any algorithm runs, so the
    algorithms can treat every edge endpoint as a known node.
"""

import math
from numbers import Real
from typing import Dict, Iterable, List, Optional, Set, Tuple

from graph.edge import GraphEdge
from graph.node import GraphNode


class InvalidGraphError(ValueError):
    """Raised for graphs whose edges or nodes break the input contract."""


class Graph:
    """
    Attributes:
        nodes : Tuple of GraphNode, input order.
        edges : Tuple of GraphEdge, input order.
        _index: {node_id: GraphNode}
        _adj  : {node_id: [edge_index, …]}
    """

    def __init__(self, nodes: Iterable[GraphNode] = (), edges: Iterable[GraphEdge] = ()):
        self.nodes: Tuple[GraphNode, ...] = tuple(nodes)
        self.edges: Tuple[GraphEdge, ...] = tuple(edges)
        self._index: Dict[str, GraphNode] = {}
        self._adj:   Dict[str, List[int]] = {}
        self._validate_and_index()

    def _validate_and_index(self) -> None:
        for node in self.nodes:
            if node.id in self._index:
                raise InvalidGraphError(f"duplicate node id {node.id!r}")
            self._index[node.id] = node
            self._adj[node.id] = []

        for i, edge in enumerate(self.edges):
            for end in (edge.source, edge.target):
                if end not in self._index:
                    raise InvalidGraphError(f"edge {i} references unknown node {end!r}")
            w = edge.weight
            if isinstance(w, bool) or not isinstance(w, Real) or not math.isfinite(w) or w <= 0:
                raise InvalidGraphError(f"edge {i} ({edge.source}-{edge.target}) has invalid weight {w!r}")
            self._adj[edge.source].append(i)
            if edge.target != edge.source:
                self._adj[edge.target].append(i)

    # ==================================================================
    # QUERIES
    # ==================================================================
    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return self._index.get(node_id)

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def edges_of(self, node_id: str) -> List[GraphEdge]:
        """Every edge incident to node_id, in input order."""
        return [self.edges[i] for i in self._adj.get(node_id, [])]

    def edge_indices_of(self, node_id: str) -> List[int]:
        return list(self._adj.get(node_id, []))

    def neighbours(self, node_id: str) -> List[Tuple[str, GraphEdge]]:
        """Return [(neighbour_id, edge)] for every incident edge."""
        return [(self.edges[i].other_end(node_id), self.edges[i]) for i in self._adj.get(node_id, [])]

    def get_edge_between(self, a: str, b: str) -> Optional[GraphEdge]:
        """Lightest edge connecting a and b, if any."""
        best = None
        for i in self._adj.get(a, []):
            e = self.edges[i]
            if e.connects(a, b) and (best is None or e.weight < best.weight):
                best = e
        return best

    def degree(self, node_id: str) -> int:
        return len(self._adj.get(node_id, []))

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    @staticmethod
    def total_weight(edges: Iterable[GraphEdge]) -> float:
        return sum(e.weight for e in edges)

    def is_empty(self) -> bool:
        return not self.nodes

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        try:
            nodes = [GraphNode.from_dict(nd) for nd in data.get("nodes", [])]
            edges = [GraphEdge.from_dict(ed) for ed in data.get("edges", [])]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidGraphError(f"malformed graph payload: {e}") from e
        return cls(nodes, edges)

    # ---------- Import from Adjacency List (text) ----------
    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A connects to B, C, D  (weight 1)
            A: B(3) C(7)        → A–B weight 3, A–C weight 7
            0 -> 1(5), 2(3)     → alternate arrow syntax, comma-separated

        The graph is undirected, so "A: B" and "B: A" describe the same
        edge and only the first one is kept.  Nodes are laid out in a circle.
        """
        adjacency: Dict[str, List[Tuple[str, float]]] = {}

        for lineno, line in enumerate(text.strip().splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            for sep in (":", "→", "->"):
                if sep in line:
                    src, rest = (p.strip() for p in line.split(sep, 1))
                    break
            else:
                raise InvalidGraphError(f"line {lineno}: expected 'node: neighbours', got {line!r}")

            adjacency.setdefault(src, [])
            for token in rest.replace(",", " ").split():
                if "(" in token and token.endswith(")"):
                    tgt, w_str = token[:-1].split("(", 1)
                    try:
                        w = float(w_str)
                    except ValueError as e:
                        raise InvalidGraphError(f"line {lineno}: bad weight in {token!r}") from e
                    if w.is_integer():
                        w = int(w)
                else:
                    tgt, w = token, 1
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, w))

        labels = list(adjacency.keys())
        n = len(labels)
        cx, cy = canvas_w / 2, canvas_h / 2
        radius = min(canvas_w, canvas_h) * 0.35
        nodes = [
            GraphNode(
                id=label,
                x=cx + radius * math.cos(2 * math.pi * i / n),
                y=cy + radius * math.sin(2 * math.pi * i / n),
            )
            for i, label in enumerate(labels)
        ]

        seen: Set[frozenset] = set()
        edges: List[GraphEdge] = []
        for src, targets in adjacency.items():
            for tgt, w in targets:
                key = frozenset([src, tgt])
                if key in seen:
                    continue
                seen.add(key)
                edges.append(GraphEdge(src, tgt, w))

        return cls(nodes, edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)})"
