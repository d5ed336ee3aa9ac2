"""
Transaction records and their tabular form.

A record carries its two parent references and its timestamp label.
Its id is implicit: the 1-based position in the database.

Time Complexity: O(n) for conversions
Memory: O(n)
"""

from typing import Iterable, List, NamedTuple

import pandas as pd

COLUMNS = ["transaction_id", "left_parent", "right_parent", "timestamp"]


class TransactionRecord(NamedTuple):
    """One data line of a transaction database. 0 means "no parent"."""

    left_parent: int
    right_parent: int
    timestamp: int


def iter_with_ids(records: Iterable[TransactionRecord]):
    """Yield (transaction_id, record) pairs with 1-based ids."""
    return enumerate(records, start=1)


def records_to_frame(records: List[TransactionRecord]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per record, in input order.

    Returns:
        DataFrame with int64 columns [transaction_id, left_parent, right_parent, timestamp]
    """
    rows = [
        (tx_id, rec.left_parent, rec.right_parent, rec.timestamp)
        for tx_id, rec in iter_with_ids(records)
    ]
    return pd.DataFrame(rows, columns=COLUMNS).astype("int64")


def serialize_records(records: List[TransactionRecord]) -> str:
    """Render records back to database text, header line included."""
    lines = [str(len(records))]
    lines.extend(
        f"{rec.left_parent} {rec.right_parent} {rec.timestamp}" for rec in records
    )
    return "\n".join(lines) + "\n"
