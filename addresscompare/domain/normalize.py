# addresscompare/domain/normalize.py
from __future__ import annotations

import re

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_address(raw: str) -> str:
    """
    Canonical form used for comparison:
      "123  Main St., Apt #4" -> "123 main st apt 4"
    """
    s = raw.lower()
    s = _NON_WORD.sub("", s)
    s = _WHITESPACE.sub(" ", s)
    return s.strip()
