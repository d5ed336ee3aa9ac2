"""
Graph Builder — constructs the forward adjacency of the transaction DAG.

Nodes are transaction ids. Edges point from a parent to the transaction
that references it, so successors of a node are its children.

Uses MultiDiGraph so a record naming the same parent twice keeps both edges.

Time Complexity: O(n) where n = number of records
Memory: O(n)
"""

from typing import Dict, List

import networkx as nx

from core.ingestion.records import TransactionRecord, iter_with_ids


def build_graph(records: List[TransactionRecord]) -> nx.MultiDiGraph:
    """
    Build a MultiDiGraph from transaction records.

    Every record id becomes a node carrying its fields as attributes.
    Edges are added in input order, left parent before right parent.
    Parent ids of 0 add no edge. The returned graph is frozen.
    """
    G = nx.MultiDiGraph()

    for tx_id, rec in iter_with_ids(records):
        G.add_node(
            tx_id,
            left_parent=rec.left_parent,
            right_parent=rec.right_parent,
            timestamp=rec.timestamp,
        )

    for tx_id, rec in iter_with_ids(records):
        if rec.left_parent > 0:
            G.add_edge(rec.left_parent, tx_id)
        if rec.right_parent > 0:
            G.add_edge(rec.right_parent, tx_id)

    return nx.freeze(G)


def get_children(G: nx.MultiDiGraph, node: int) -> List[int]:
    """Ordered child ids of a node, one entry per edge. O(out-degree)."""
    if node not in G:
        return []
    return [v for _, v in G.out_edges(node)]


def adjacency_mapping(G: nx.MultiDiGraph) -> Dict[int, List[int]]:
    """Return {parent_id: [child_id, ...]} for every node with children."""
    mapping: Dict[int, List[int]] = {}
    for node in G.nodes():
        children = get_children(G, node)
        if children:
            mapping[node] = children
    return mapping
