"""
Processing Pipeline — DAG Statistics Orchestrator.

Coordinates the complete pipeline:
   1. Build the forward adjacency graph
   2. Average depth
   3. Average transactions per depth (excluding depth 0)
   4. Average in-references
   5. Graph summary

The three metrics are independent read-only passes over the same records
and graph.

Performance: O(n + E) per metric, except transactions-per-depth which
scans timestamps once per distinct depth.
Memory: O(V + E) for graph.
"""

import contextlib
import logging
import time
from typing import Any, Dict, List

from core.graph.graph_builder import build_graph
from core.graph.graph_metrics import compute_graph_summary
from core.ingestion.records import TransactionRecord
from core.metrics.average_depth import compute_average_depth
from core.metrics.in_references import compute_average_in_references
from core.metrics.txs_per_depth import compute_average_txs_per_depth

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def log_timer(label: str):
    start = time.time()
    yield
    elapsed = time.time() - start
    logger.info("Module [%s] took %.4f seconds", label, elapsed)


class ProcessingService:
    """Orchestrates the transaction DAG statistics pipeline."""

    def process(self, records: List[TransactionRecord]) -> Dict[str, Any]:
        """
        Run the full pipeline on parsed transaction records.

        Returns:
            dict with average_depth, average_txs_per_depth,
            average_in_references and summary.
        """
        t_start = time.time()

        # 1. Build graph
        with log_timer("graph_builder"):
            G = build_graph(records)
        logger.info(
            "Graph built: %d transactions, %d edges",
            len(records), G.number_of_edges(),
        )

        # 2. Average depth
        with log_timer("average_depth"):
            average_depth = compute_average_depth(G)

        # 3. Average transactions per depth
        with log_timer("average_txs_per_depth"):
            average_txs_per_depth = compute_average_txs_per_depth(G, records)

        # 4. Average in-references
        with log_timer("average_in_references"):
            average_in_references = compute_average_in_references(G, records)

        # 5. Summary
        with log_timer("graph_summary"):
            summary = compute_graph_summary(G, records)

        summary["processing_time_seconds"] = round(time.time() - t_start, 4)

        return {
            "average_depth": average_depth,
            "average_txs_per_depth": average_txs_per_depth,
            "average_in_references": average_in_references,
            "summary": summary,
        }
