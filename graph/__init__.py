"""
graph/
-----
Graph-family input layer.  Public API:

    from graph import Graph, GraphNode, GraphEdge
    from graph import InvalidGraphError
"""

from graph.node  import GraphNode
from graph.edge  import GraphEdge
from graph.graph import Graph, InvalidGraphError

__all__ = [
    "GraphNode",
    "GraphEdge",
    "Graph",     "InvalidGraphError",
]
