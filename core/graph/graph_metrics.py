"""
Graph Metrics — summary statistics for the transaction DAG.

Time Complexity: O(V + E)
Memory: O(V)
"""

from typing import Any, Dict, List

import networkx as nx

from core.graph.traversal import bfs_depths
from core.ingestion.records import TransactionRecord, iter_with_ids


def compute_depth_distribution(G: nx.MultiDiGraph) -> Dict[int, int]:
    """Return {bfs_depth: reachable node count}."""
    distribution: Dict[int, int] = {}
    for _, depth in bfs_depths(G):
        distribution[depth] = distribution.get(depth, 0) + 1
    return distribution


def compute_graph_summary(
    G: nx.MultiDiGraph, records: List[TransactionRecord]
) -> Dict[str, Any]:
    """Return basic graph-level metrics."""
    total = len(records)
    distribution = compute_depth_distribution(G)
    reachable = sum(distribution.values())

    root_candidates = [
        tx_id
        for tx_id, rec in iter_with_ids(records)
        if rec.left_parent == 0 and rec.right_parent == 0
    ]
    tips = [tx_id for tx_id in range(1, total + 1) if G.out_degree(tx_id) == 0]

    return {
        "total_transactions": total,
        "total_edges": G.number_of_edges(),
        "root_candidates": len(root_candidates),
        "tips": len(tips),
        "reachable_from_root": reachable,
        "unreachable_transactions": total - reachable,
        "max_depth": max(distribution) if distribution else 0,
        "depth_distribution": {str(d): c for d, c in sorted(distribution.items())},
    }
