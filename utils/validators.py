"""
Database line validation.

Ensures each data line of a transaction database carries exactly three
non-negative base-10 integers: left parent, right parent, timestamp.

Time Complexity: O(1) per line
Memory: O(1)
"""

import re
from typing import List

FIELDS_PER_LINE = 3

FIELD_NAMES = [
    "left_parent",
    "right_parent",
    "timestamp",
]

# ASCII digits only, optional leading plus
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def validate_tokens(tokens: List[str]) -> str | None:
    """
    Validate the whitespace-split tokens of one data line.
    Returns error message if invalid, None if valid.

    Checks:
        1. Exactly three tokens
        2. Every token is an unsigned base-10 integer in ASCII digits
    """
    if len(tokens) != FIELDS_PER_LINE:
        return f"expected {FIELDS_PER_LINE} fields, found {len(tokens)}"

    for name, token in zip(FIELD_NAMES, tokens):
        if _UNSIGNED_INT.fullmatch(token):
            continue
        if token.startswith("-"):
            return f"field '{name}' must be non-negative: {token!r}"
        return f"field '{name}' is not an integer: {token!r}"

    return None
