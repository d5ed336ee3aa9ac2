"""
Average DAG Depth.

Mean BFS depth over every transaction reachable from the root.
Unreachable transactions (orphans, disconnected components) are left out
of both the sum and the count.

Time Complexity: O(V + E)
Memory: O(V)
"""

import networkx as nx

from core.graph.traversal import bfs_depths


def compute_average_depth(G: nx.MultiDiGraph) -> float:
    """Return mean depth of reachable nodes, 0.0 if nothing is reachable."""
    total_depth = 0
    num_nodes = 0

    for _, depth in bfs_depths(G):
        total_depth += depth
        num_nodes += 1

    if num_nodes == 0:
        return 0.0
    return total_depth / num_nodes
