"""
Leading-numeric-prefix parsing for exported duration cells.

Fitness exports are loose about units and separators ("30min", "1,200",
" 45 "). The tolerant parse reads the longest valid decimal number at the
start of the cell and ignores whatever follows:

    >>> parse_numeric_prefix("30min")
    NumericPrefix(value=30.0, consumed=2, ok=True)
    >>> parse_numeric_prefix("1,200").value
    1.0
    >>> parse_numeric_prefix("abc").ok
    False

``consumed`` counts leading whitespace too, so a strict caller can check
whether the number spans the whole cell.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class NumericPrefix(NamedTuple):
    value: Optional[float]
    consumed: int
    ok: bool


def parse_numeric_prefix(text: str) -> NumericPrefix:
    """Parse the longest numeric prefix of ``text``."""
    match = _PREFIX_RE.match(text)
    if not match:
        return NumericPrefix(None, 0, False)
    return NumericPrefix(float(match.group(1)), match.end(), True)


def parse_strict_number(text: str) -> NumericPrefix:
    """
    Full-string variant: the number must cover the whole cell,
    ignoring surrounding whitespace.
    """
    parsed = parse_numeric_prefix(text)
    if not parsed.ok or text[parsed.consumed:].strip():
        return NumericPrefix(None, parsed.consumed, False)
    return parsed
