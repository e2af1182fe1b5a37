# addresscompare/service_layer/comparison.py
from __future__ import annotations

import logging

from ..domain.normalize import normalize_address
from ..domain.similarity import is_match, similarity_percentage
from ..domain.types import ComparisonResult, describe

log = logging.getLogger(__name__)


def compare_addresses(address1: str, address2: str) -> ComparisonResult:
    """
    Normalize both addresses, score them and build the user-facing result.
    Pure: no I/O besides a debug log line, safe to call from any request.
    """
    a = normalize_address(address1)
    b = normalize_address(address2)

    percentage = similarity_percentage(a, b)
    match = is_match(percentage)

    log.debug(
        "compared addresses normalized_len=(%d, %d) similarity=%.2f match=%s",
        len(a),
        len(b),
        percentage,
        match,
    )

    return ComparisonResult(
        match=match,
        match_percentage=percentage,
        details=describe(match, percentage),
    )
