"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Edges are considered in ascending weight order (Python's sort is stable,
so equal weights keep input order).  For each edge:

    1. GraphStep "considered": the edge + its endpoints, MST so far
    2. if the endpoints are in different components:
         union them, append the edge, GraphStep "accepted" with the new MST

A connected graph ends with |V| - 1 MST edges; a disconnected one with a
spanning forest.
"""

from typing import Iterator, List

from algorithms.graphs.disjoint_set import DisjointSet
from algorithms.step import GraphStep
from graph import Graph, GraphEdge


def kruskal(graph: Graph) -> Iterator[GraphStep]:
    components = DisjointSet(graph.node_ids())
    mst: List[GraphEdge] = []

    for edge in sorted(graph.edges, key=lambda e: e.weight):
        endpoints = (edge.source, edge.target)

        yield GraphStep(visited_nodes=endpoints, visited_edges=(edge,), mst=tuple(mst))

        if components.union(edge.source, edge.target):
            mst.append(edge)
            yield GraphStep(visited_nodes=endpoints, visited_edges=(edge,), mst=tuple(mst))
