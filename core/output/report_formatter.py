"""
Report Formatter.

Two renderings of a processing result:

Text (console):
    Node 1: Left: 0, Right: 0, Timestamp: 0
    ...

    > AVG DAG DEPTH: 1.20
    > AVG TXS PER DEPTH (excluding depth 0): 4.00
    > AVG REF: 0.800

JSON:
{
    "transactions": [...],
    "metrics": {...},
    "summary": {...}
}

Time Complexity: O(n)
Memory: O(n)
"""

from typing import Any, Dict, List

from app.config import DEPTH_DECIMALS, IN_REFERENCE_DECIMALS, TXS_PER_DEPTH_DECIMALS
from core.ingestion.records import TransactionRecord, iter_with_ids


def format_transaction_lines(records: List[TransactionRecord]) -> List[str]:
    """One listing line per transaction, in id order."""
    return [
        f"Node {tx_id}: Left: {rec.left_parent}, Right: {rec.right_parent}, "
        f"Timestamp: {rec.timestamp}"
        for tx_id, rec in iter_with_ids(records)
    ]


def format_metric_lines(result: Dict[str, Any]) -> List[str]:
    return [
        f"> AVG DAG DEPTH: {result['average_depth']:.{DEPTH_DECIMALS}f}",
        "> AVG TXS PER DEPTH (excluding depth 0): "
        f"{result['average_txs_per_depth']:.{TXS_PER_DEPTH_DECIMALS}f}",
        f"> AVG REF: {result['average_in_references']:.{IN_REFERENCE_DECIMALS}f}",
    ]


def format_text_report(records: List[TransactionRecord], result: Dict[str, Any]) -> str:
    """Render the console report."""
    lines = format_transaction_lines(records)
    lines.append("")
    lines.extend(format_metric_lines(result))
    return "\n".join(lines)


def format_output(records: List[TransactionRecord], result: Dict[str, Any]) -> Dict[str, Any]:
    """Build the JSON-compatible output dict."""
    transactions = [
        {
            "transaction_id": tx_id,
            "left_parent": rec.left_parent,
            "right_parent": rec.right_parent,
            "timestamp": rec.timestamp,
        }
        for tx_id, rec in iter_with_ids(records)
    ]

    metrics = {
        "average_depth": round(float(result["average_depth"]), DEPTH_DECIMALS),
        "average_txs_per_depth": round(
            float(result["average_txs_per_depth"]), TXS_PER_DEPTH_DECIMALS
        ),
        "average_in_references": round(
            float(result["average_in_references"]), IN_REFERENCE_DECIMALS
        ),
    }

    return {
        "transactions": transactions,
        "metrics": metrics,
        "summary": dict(result.get("summary", {})),
    }
