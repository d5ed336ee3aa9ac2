"""
Run statistics tracker.

Keeps the outcome of the most recent upload in memory for the /metrics
endpoint. Nothing is persisted between process restarts.
"""

from typing import Any, Dict


class MetricsTracker:
    """Tracks DAG statistics runs served by the API."""

    def __init__(self):
        self._total_runs: int = 0
        self._total_transactions: int = 0
        self._last_run: Dict[str, Any] | None = None

    def record(self, report: Dict[str, Any]) -> None:
        """Record the metrics and summary of a finished run."""
        self._total_runs += 1
        summary = report.get("summary", {})
        self._total_transactions += int(summary.get("total_transactions", 0))
        self._last_run = {
            "metrics": dict(report.get("metrics", {})),
            "summary": dict(summary),
        }

    def get_metrics(self) -> Dict[str, Any]:
        """Return the latest metrics."""
        if self._last_run is None:
            return {"status": "no_processing_yet", "total_runs": 0}
        return {
            "status": "ready",
            "total_runs": self._total_runs,
            "total_transactions_processed": self._total_transactions,
            "last_run": self._last_run,
        }
