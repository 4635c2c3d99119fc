"""Numeric token parsing shared by the builder and the solve boundary."""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

Number = Union[int, float]

# Plain ASCII decimal notation with an optional exponent. Rejects Python-only
# forms such as digit separators ("1_0") and non-ASCII digits.
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_number(value: Any) -> Optional[Number]:
    """Parse ``value`` as a finite number, preferring ``int``.

    Numbers pass through; anything else is stringified and stripped, then must
    be plain ASCII decimal notation. Returns None for booleans, non-numeric
    text, NaN and infinities.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None

    text = str(value).strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        pass
    number = float(text)
    return number if math.isfinite(number) else None


def as_node_id(value: Any) -> Optional[int]:
    """Return ``value`` as an integral node id, or None if it is not one."""
    number = parse_number(value)
    if isinstance(number, float):
        return int(number) if number.is_integer() else None
    return number
