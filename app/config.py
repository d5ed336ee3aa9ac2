"""
Configuration for the Transaction DAG Statistics Engine.

All tunables live here as module-level constants. Values that make sense
to change per deployment are read from the environment.
"""

import os

# ── Graph ─────────────────────────────────────────────────────────────

# Traversal origin; the first data line of a database is always the root.
ROOT_TRANSACTION_ID = 1

# ── Report precision ──────────────────────────────────────────────────

DEPTH_DECIMALS = int(os.getenv("DEPTH_DECIMALS", "2"))
TXS_PER_DEPTH_DECIMALS = int(os.getenv("TXS_PER_DEPTH_DECIMALS", "2"))
IN_REFERENCE_DECIMALS = int(os.getenv("IN_REFERENCE_DECIMALS", "3"))

# ── Limits ────────────────────────────────────────────────────────────

# Upper bound on records accepted by the /upload endpoint
MAX_TRANSACTIONS = int(os.getenv("MAX_TRANSACTIONS", "1000000"))

# ── Runtime ───────────────────────────────────────────────────────────

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
API_VERSION = "1.0.0"
