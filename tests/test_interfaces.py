"""
Tests for the command-line entry point and the HTTP API.
"""

import json
import os
import sys

# Ensure project root is on sys.path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient

from api import routes
from app.cli import main
from app.main import app
from utils.metrics import MetricsTracker

DATABASE_TEXT = "5\n0 0 0\n1 0 1\n1 0 1\n2 0 2\n3 0 2\n"


def _write_database(tmp_path, text=DATABASE_TEXT):
    path = tmp_path / "database.txt"
    path.write_text(text)
    return str(path)


# ── CLI Tests ─────────────────────────────────────────────────────────


class TestCli:
    def test_text_report(self, tmp_path, capsys):
        assert main([_write_database(tmp_path)]) == 0
        out = capsys.readouterr().out
        assert "Node 1: Left: 0, Right: 0, Timestamp: 0" in out
        assert "> AVG DAG DEPTH: 1.20" in out
        assert "> AVG TXS PER DEPTH (excluding depth 0): 4.00" in out
        assert "> AVG REF: 0.800" in out

    def test_json_report(self, tmp_path, capsys):
        assert main([_write_database(tmp_path), "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["metrics"]["average_depth"] == 1.2
        assert len(payload["transactions"]) == 5

    def test_malformed_line_prints_nothing(self, tmp_path, capsys):
        path = _write_database(tmp_path, "2\n0 0 0\n1 x 1\n")
        assert main([path]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "line 3" in captured.err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_not_utf8(self, tmp_path, capsys):
        path = tmp_path / "database.txt"
        path.write_bytes(b"\xff\xfe")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error" in captured.err

    def test_empty_database(self, tmp_path, capsys):
        assert main([_write_database(tmp_path, "0\n")]) == 0
        out = capsys.readouterr().out
        assert "> AVG DAG DEPTH: 0.00" in out
        assert "> AVG REF: 0.000" in out

    def test_usage_without_arguments(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code != 0

    def test_usage_with_extra_arguments(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([_write_database(tmp_path), "other.txt"])
        assert exc.value.code != 0


# ── Run Statistics Tests ──────────────────────────────────────────────


class TestMetricsTracker:
    def test_initial_state(self):
        assert MetricsTracker().get_metrics() == {"status": "no_processing_yet", "total_runs": 0}

    def test_record(self):
        tracker = MetricsTracker()
        report = {"metrics": {"average_depth": 1.2}, "summary": {"total_transactions": 5}}
        tracker.record(report)
        tracker.record(report)
        metrics = tracker.get_metrics()
        assert metrics["status"] == "ready"
        assert metrics["total_runs"] == 2
        assert metrics["total_transactions_processed"] == 10
        assert metrics["last_run"]["metrics"]["average_depth"] == 1.2


# ── API Tests ─────────────────────────────────────────────────────────


class TestApi:
    client = TestClient(app)

    def _upload(self, text):
        return self.client.post(
            "/upload",
            files={"file": ("database.txt", text.encode("utf-8"), "text/plain")},
        )

    def test_health(self):
        response = self.client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_upload(self):
        response = self._upload(DATABASE_TEXT)
        assert response.status_code == 200
        body = response.json()
        assert body["metrics"] == {
            "average_depth": 1.2,
            "average_txs_per_depth": 4.0,
            "average_in_references": 0.8,
        }
        assert body["summary"]["reachable_from_root"] == 5

        metrics = self.client.get("/metrics").json()
        assert metrics["status"] == "ready"
        assert metrics["last_run"]["metrics"]["average_depth"] == 1.2

    def test_upload_malformed(self):
        response = self._upload("1\n0 0\n")
        assert response.status_code == 400
        assert "line 2" in response.json()["detail"]

    def test_upload_splits_only_on_newlines(self):
        response = self._upload("1\n0 0 0\x1c1 0 1\n")
        assert response.status_code == 400
        assert "line 2" in response.json()["detail"]

    def test_upload_crlf_matches_cli(self):
        response = self._upload(DATABASE_TEXT.replace("\n", "\r\n"))
        assert response.status_code == 200
        assert response.json()["metrics"]["average_txs_per_depth"] == 4.0

    def test_upload_over_transaction_limit(self, monkeypatch):
        monkeypatch.setattr(routes, "MAX_TRANSACTIONS", 1)
        response = self._upload("2\n0 0 0\n1 0 1\n")
        assert response.status_code == 400
        assert "exceeds 1 transactions" in response.json()["detail"]

    def test_upload_not_utf8(self):
        response = self.client.post(
            "/upload",
            files={"file": ("database.txt", b"\xff\xfe\x00", "application/octet-stream")},
        )
        assert response.status_code == 400
