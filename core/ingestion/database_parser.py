"""
Database Parser — reads a line-oriented transaction database.

Format:
    line 1       header (conventionally the node count; ignored)
    lines 2..N   "<left_parent> <right_parent> <timestamp>"

The first malformed line aborts parsing with FormatError. Open/read
failures propagate as OSError.

Time Complexity: O(n) where n = number of lines
Memory: O(n)
"""

import logging
from typing import Iterable, List

from core.ingestion.records import TransactionRecord
from utils.validators import validate_tokens

logger = logging.getLogger(__name__)


class FormatError(ValueError):
    """A database line does not hold exactly three non-negative integers."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"Invalid input format in line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason


def parse_lines(lines: Iterable[str]) -> List[TransactionRecord]:
    """
    Parse database lines into records, skipping the header.

    Args:
        lines: iterable of text lines (trailing newlines allowed)

    Returns:
        Records in input order; record i has transaction id i + 1.
    """
    records: List[TransactionRecord] = []

    for line_index, line in enumerate(lines):
        if line_index == 0:
            continue

        tokens = line.split()
        error = validate_tokens(tokens)
        if error:
            raise FormatError(line_index + 1, error)

        left, right, timestamp = (int(t) for t in tokens)
        records.append(TransactionRecord(left, right, timestamp))

    logger.debug("Parsed %d transaction records", len(records))
    return records


def parse_database(path: str) -> List[TransactionRecord]:
    """Read and parse a database file."""
    with open(path, "r", encoding="utf-8") as fh:
        return parse_lines(fh)
