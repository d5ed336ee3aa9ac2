"""
Average In-References.

Counts incoming edges per transaction and averages over all n records.
Only edges whose parent id falls inside 1..n are counted; references to
ids beyond the database are ignored. A parent listed twice by the same
record counts twice.

Time Complexity: O(n + E)
Memory: O(n)
"""

from typing import List

import networkx as nx
import numpy as np

from core.graph.graph_builder import get_children
from core.ingestion.records import TransactionRecord


def compute_in_reference_counts(
    G: nx.MultiDiGraph, records: List[TransactionRecord]
) -> np.ndarray:
    """
    Per-transaction in-reference counts.

    Returns:
        int array of length n; entry i belongs to transaction id i + 1.
    """
    n = len(records)
    counts = np.zeros(n, dtype=np.int64)

    for parent_id in range(1, n + 1):
        for child_id in get_children(G, parent_id):
            counts[child_id - 1] += 1

    return counts


def compute_average_in_references(
    G: nx.MultiDiGraph, records: List[TransactionRecord]
) -> float:
    """Return mean in-reference count, 0.0 for an empty database."""
    if not records:
        return 0.0
    counts = compute_in_reference_counts(G, records)
    return float(counts.sum()) / len(records)
