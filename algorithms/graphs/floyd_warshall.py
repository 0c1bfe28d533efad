"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The signature "matrix algorithm".

    dist[i][i] = 0, dist[i][j] = lightest i–j edge weight, else ∞
    for k in nodes:          ← "intermediate" node
        for i in nodes:
            for j in nodes:
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]

Nodes are iterated in input order.  A GraphStep is yielded ONLY when a
relaxation strictly improves a distance: visited_nodes = (i, j, k) and
`distances` = a read-only snapshot of the whole table keyed by
(i, j).  A graph whose edges already form a complete metric therefore
produces an empty trace.
"""

import math
from typing import Dict, Iterator

from algorithms.step import GraphStep, NodePair, distance_snapshot
from graph import Graph


def initial_distances(graph: Graph) -> Dict[NodePair, float]:
    ids = graph.node_ids()
    dist: Dict[NodePair, float] = {(i, j): (0 if i == j else math.inf) for i in ids for j in ids}
    for e in graph.edges:
        if e.source == e.target:
            continue
        if e.weight < dist[(e.source, e.target)]:
            dist[(e.source, e.target)] = e.weight
            dist[(e.target, e.source)] = e.weight
    return dist


def floyd_warshall(graph: Graph) -> Iterator[GraphStep]:
    ids  = graph.node_ids()
    dist = initial_distances(graph)

    for k in ids:
        for i in ids:
            d_ik = dist[(i, k)]
            if math.isinf(d_ik):
                continue
            for j in ids:
                through_k = d_ik + dist[(k, j)]
                if through_k < dist[(i, j)]:
                    dist[(i, j)] = through_k
                    yield GraphStep(
                        visited_nodes=(i, j, k),
                        visited_edges=(),
                        distances=distance_snapshot(dist),
                    )
