from __future__ import annotations

import re
from typing import Optional


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value) -> Optional[int]:
    """Parse the leading base-10 integer of a string, like JavaScript's parseInt.

    '42' -> 42, ' 7 open roles' -> 7, '1,000' -> 1, 'n/a' -> None.
    """
    if value is None:
        return None
    m = _LEADING_INT.match(str(value))
    if not m:
        return None
    return int(m.group(1))


def parse_count(value) -> int:
    """Leading integer as a non-negative count; 0 when missing or unparseable."""
    parsed = parse_leading_int(value)
    if parsed is None or parsed < 0:
        return 0
    return parsed
