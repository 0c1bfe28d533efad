"""
algorithms/pathfinding — Grid search family
============================================

    from algorithms.pathfinding import run, PathfindingAlgorithm

    steps = run(grid, "astar")          # or PathfindingAlgorithm.ASTAR

Every generator here has the signature  (grid) → Iterator[PathStep]  and
returns immediately (empty trace) unless the grid has exactly one start
and one end.
"""

import logging
from enum import Enum
from typing import Dict, List, Union

from algorithms.pathfinding.astar import astar
from algorithms.pathfinding.bellman_ford import bellman_ford
from algorithms.pathfinding.bfs import bfs
from algorithms.pathfinding.bidirectional_bfs import bidirectional_bfs
from algorithms.pathfinding.dfs import dfs
from algorithms.pathfinding.dijkstra import dijkstra
from algorithms.pathfinding.greedy_bfs import greedy_best_first
from algorithms.pathfinding.jump_point import jump_point_search
from algorithms.registry import AlgoInfo, check_exhaustive, resolve
from algorithms.step import PathStep
from grid import Grid

logger = logging.getLogger(__name__)

FAMILY = "pathfinding"


class PathfindingAlgorithm(str, Enum):
    BFS               = "bfs"
    DFS               = "dfs"
    DIJKSTRA          = "dijkstra"
    ASTAR             = "astar"
    GREEDY_BEST_FIRST = "greedy-best-first"
    BIDIRECTIONAL     = "bidirectional"
    JUMP_POINT_SEARCH = "jump-point-search"
    BELLMAN_FORD      = "bellman-ford"


REGISTRY: Dict[PathfindingAlgorithm, AlgoInfo] = {

    PathfindingAlgorithm.BFS: AlgoInfo(
        key="bfs", family=FAMILY, label="Breadth-First Search", fn=bfs,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Finds the shortest path by hop count.",
    ),

    PathfindingAlgorithm.DFS: AlgoInfo(
        key="dfs", family=FAMILY, label="Depth-First Search", fn=dfs,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee the shortest path.",
    ),

    PathfindingAlgorithm.DIJKSTRA: AlgoInfo(
        key="dijkstra", family=FAMILY, label="Dijkstra's Algorithm", fn=dijkstra,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Always extracts the closest unvisited cell. Optimal for non-negative costs.",
    ),

    PathfindingAlgorithm.ASTAR: AlgoInfo(
        key="astar", family=FAMILY, label="A* Search", fn=astar,
        tags=["weighted", "shortest-path", "heuristic"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Dijkstra guided by the Manhattan heuristic. Optimal when h is admissible.",
    ),

    PathfindingAlgorithm.GREEDY_BEST_FIRST: AlgoInfo(
        key="greedy-best-first", family=FAMILY, label="Greedy Best-First Search", fn=greedy_best_first,
        tags=["heuristic", "suboptimal"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Pure heuristic: fast but NOT optimal. Compare with A* to see the difference.",
    ),

    PathfindingAlgorithm.BIDIRECTIONAL: AlgoInfo(
        key="bidirectional", family=FAMILY, label="Bidirectional BFS", fn=bidirectional_bfs,
        tags=["unweighted", "shortest-path", "bidirectional"],
        complexity_time="O(b^(d/2))", complexity_space="O(b^(d/2))",
        description="Two frontiers from start and end meet in the middle.",
    ),

    PathfindingAlgorithm.JUMP_POINT_SEARCH: AlgoInfo(
        key="jump-point-search", family=FAMILY, label="Jump-Point Search", fn=jump_point_search,
        tags=["heuristic", "shortest-path", "8-connected"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="A* on an 8-connected grid that jumps over symmetric free cells.",
    ),

    PathfindingAlgorithm.BELLMAN_FORD: AlgoInfo(
        key="bellman-ford", family=FAMILY, label="Bellman–Ford", fn=bellman_ford,
        tags=["weighted", "shortest-path", "negative-edges"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Relaxes every edge |V|-1 times. Emits a single step with the final path.",
    ),
}

check_exhaustive(PathfindingAlgorithm, REGISTRY)


def get_algorithm(name: Union[str, PathfindingAlgorithm]) -> AlgoInfo:
    return REGISTRY[resolve(PathfindingAlgorithm, name)]


def run(grid: Grid, algorithm: Union[str, PathfindingAlgorithm]) -> List[PathStep]:
    """Run one search to completion and return its full trace."""
    info  = get_algorithm(algorithm)
    steps = list(info.fn(grid))
    logger.debug("pathfinding %s on %dx%d grid: %d step(s)", info.key, grid.rows, grid.cols, len(steps))
    return steps


__all__ = [
    "PathfindingAlgorithm",
    "REGISTRY",
    "get_algorithm",
    "run",
]
