# addresscompare/domain/types.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComparisonResult:
    match: bool
    match_percentage: float
    details: str


def describe(match: bool, percentage: float) -> str:
    verdict = "considered matching" if match else "different"
    # 100.0 -> "100", 73.33 -> "73.33"
    return f"Addresses are {verdict} with {percentage:g}% similarity"
