"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Grows one tree from the first node in input order.

    frontier = edges with exactly one endpoint inside the tree
    repeat:
        pick the lightest frontier edge whose far end is outside the tree
        (ties → the edge that joined the frontier first)
        add far end + edge to the tree
        GraphStep: every tree node so far, the edge just added, MST snapshot
        push the new node's edges that lead outside the tree

Stops when no eligible edge is left.  On a disconnected graph that is a
spanning tree of the first node's component only, not an error.

The frontier holds edge INDICES so parallel edges with identical
endpoints and weight stay distinct.
"""

from typing import Dict, Iterator, List, Set

from algorithms.step import GraphStep
from graph import Graph, GraphEdge


def prim(graph: Graph) -> Iterator[GraphStep]:
    if graph.is_empty():
        return

    root = graph.nodes[0].id
    in_tree: Dict[str, None] = {root: None}        # insertion-ordered set
    mst:      List[GraphEdge] = []
    frontier: List[int]       = []
    queued:   Set[int]        = set()

    def push_edges_of(node_id: str) -> None:
        for idx in graph.edge_indices_of(node_id):
            far = graph.edges[idx].other_end(node_id)
            if idx not in queued and far not in in_tree:
                queued.add(idx)
                frontier.append(idx)

    push_edges_of(root)

    while frontier:
        best_pos = None
        for pos, idx in enumerate(frontier):
            e = graph.edges[idx]
            if (e.source in in_tree) == (e.target in in_tree):
                continue
            if best_pos is None or e.weight < graph.edges[frontier[best_pos]].weight:
                best_pos = pos
        if best_pos is None:
            break

        edge = graph.edges[frontier.pop(best_pos)]
        new_node = edge.target if edge.source in in_tree else edge.source
        in_tree[new_node] = None
        mst.append(edge)

        yield GraphStep(
            visited_nodes=tuple(in_tree),
            visited_edges=(edge,),
            mst=tuple(mst),
        )

        push_edges_of(new_node)
