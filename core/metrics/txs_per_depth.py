"""
Average Transactions Per Depth (excluding depth 0).

Walks the DAG breadth-first from the root. For every visited node at BFS
depth d, the number of transactions whose *timestamp* equals d is added
to an accumulator keyed by d. A depth shared by k nodes therefore
accumulates k times that count.

Result: sum of accumulated totals over all depths except 0, divided by
the number of distinct non-zero depths discovered.

Time Complexity: O(V + E + n) with one timestamp scan per distinct depth
Memory: O(V + D) where D = distinct depths
"""

from typing import Dict, List

import networkx as nx
import pandas as pd

from core.graph.traversal import bfs_depths
from core.ingestion.records import TransactionRecord, records_to_frame


def count_transactions_at_depth(df: pd.DataFrame, depth: int) -> int:
    """Number of records whose timestamp equals depth."""
    return int((df["timestamp"] == depth).sum())


def accumulate_depth_transactions(
    G: nx.MultiDiGraph, records: List[TransactionRecord]
) -> Dict[int, int]:
    """
    Build the {depth: accumulated transaction count} map.

    The count for a depth is added once per node visited at that depth.
    """
    if not records:
        return {}

    df = records_to_frame(records)
    counts_by_depth: Dict[int, int] = {}

    depth_txs: Dict[int, int] = {}
    for _, depth in bfs_depths(G):
        if depth not in counts_by_depth:
            counts_by_depth[depth] = count_transactions_at_depth(df, depth)
        tx_count = counts_by_depth[depth]
        depth_txs[depth] = depth_txs.get(depth, 0) + tx_count

    return depth_txs


def compute_average_txs_per_depth(
    G: nx.MultiDiGraph, records: List[TransactionRecord]
) -> float:
    """Return the average accumulated count over non-zero depths, else 0.0."""
    depth_txs = accumulate_depth_transactions(G, records)

    if len(depth_txs) < 2:
        return 0.0

    non_zero_total = sum(total for d, total in depth_txs.items() if d != 0)
    return non_zero_total / (len(depth_txs) - 1)
