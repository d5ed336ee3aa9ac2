"""
Breadth-first depth discovery from the root transaction.

Depth of the root is 0. A node takes the depth of its first dequeue;
later copies in the frontier are skipped, so only one depth per node is
reported. Nodes not reachable from the root are never visited.

Time Complexity: O(V + E) over the reachable subgraph
Memory: O(V)
"""

from collections import deque
from typing import List, Set, Tuple

import networkx as nx

from app.config import ROOT_TRANSACTION_ID


def bfs_depths(
    G: nx.MultiDiGraph, root: int = ROOT_TRANSACTION_ID
) -> List[Tuple[int, int]]:
    """
    Visit nodes breadth-first from root.

    Returns:
        [(node, depth), ...] in visit order. Empty if root is not in G.
    """
    if root not in G:
        return []

    visited: Set[int] = set()
    order: List[Tuple[int, int]] = []
    queue = deque([(root, 0)])

    while queue:
        node, depth = queue.popleft()
        if node in visited:
            continue
        visited.add(node)
        order.append((node, depth))

        for child in G.successors(node):
            if child not in visited:
                queue.append((child, depth + 1))

    return order
