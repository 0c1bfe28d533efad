"""
algorithms/graphs — Weighted-graph family
==========================================

    from algorithms.graphs import run

    steps = run(graph, "kruskal")
    steps[-1].mst          # final MST edges

Generators take  (graph) → Iterator[GraphStep].  Graph validation happens
when the Graph is built, so a malformed graph never reaches them.
"""

import logging
from enum import Enum
from typing import Dict, List, Union

from algorithms.graphs.floyd_warshall import floyd_warshall
from algorithms.graphs.kruskal import kruskal
from algorithms.graphs.prim import prim
from algorithms.registry import AlgoInfo, check_exhaustive, resolve
from algorithms.step import GraphStep
from graph import Graph

logger = logging.getLogger(__name__)

FAMILY = "graph"


class GraphAlgorithm(str, Enum):
    KRUSKAL        = "kruskal"
    PRIM           = "prim"
    FLOYD_WARSHALL = "floyd-warshall"


REGISTRY: Dict[GraphAlgorithm, AlgoInfo] = {

    GraphAlgorithm.KRUSKAL: AlgoInfo(
        key="kruskal", family=FAMILY, label="Kruskal's MST", fn=kruskal,
        tags=["mst", "greedy", "union-find"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Takes edges lightest-first, skipping any that would close a cycle.",
    ),

    GraphAlgorithm.PRIM: AlgoInfo(
        key="prim", family=FAMILY, label="Prim's MST", fn=prim,
        tags=["mst", "greedy"],
        complexity_time="O(V · E)", complexity_space="O(V + E)",
        description="Grows one tree by repeatedly adding the lightest edge leaving it.",
    ),

    GraphAlgorithm.FLOYD_WARSHALL: AlgoInfo(
        key="floyd-warshall", family=FAMILY, label="Floyd–Warshall", fn=floyd_warshall,
        tags=["all-pairs", "shortest-path", "dynamic-programming"],
        complexity_time="O(V³)", complexity_space="O(V²)",
        description="All-pairs shortest paths. Watch the distance table tighten.",
    ),
}

check_exhaustive(GraphAlgorithm, REGISTRY)


def get_algorithm(name: Union[str, GraphAlgorithm]) -> AlgoInfo:
    return REGISTRY[resolve(GraphAlgorithm, name)]


def run(graph: Graph, algorithm: Union[str, GraphAlgorithm]) -> List[GraphStep]:
    """Run one graph algorithm to completion and return its full trace."""
    info  = get_algorithm(algorithm)
    steps = list(info.fn(graph))
    logger.debug(
        "graph %s on %d node(s) / %d edge(s): %d step(s)",
        info.key, graph.node_count(), graph.edge_count(), len(steps),
    )
    return steps


__all__ = [
    "GraphAlgorithm",
    "REGISTRY",
    "get_algorithm",
    "run",
]
