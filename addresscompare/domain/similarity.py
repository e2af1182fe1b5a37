# addresscompare/domain/similarity.py
from __future__ import annotations

import math

# Fixed on purpose: not exposed through Settings.
MATCH_THRESHOLD: float = 90.0


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance (insert/delete/substitute all cost 1).

    Keeps one rolling row sized by the shorter string instead of the
    full (len(a)+1) x (len(b)+1) table.
    """
    if len(a) < len(b):
        a, b = b, a

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        curr = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                curr.append(prev[j - 1])
            else:
                curr.append(1 + min(prev[j - 1], curr[j - 1], prev[j]))
        prev = curr

    return prev[-1]


def round_percentage(value: float) -> float:
    """Two decimals, half rounds up (66.665 -> 66.67)."""
    return math.floor(value * 100 + 0.5) / 100


def similarity_percentage(a: str, b: str) -> float:
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 100.0

    distance = edit_distance(a, b)
    return round_percentage((max_len - distance) / max_len * 100)


def is_match(percentage: float) -> bool:
    return percentage >= MATCH_THRESHOLD
