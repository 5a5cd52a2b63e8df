"""
Query-string helpers shared by the routers.
"""
import re
from typing import Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_param(raw: Optional[str], default: int) -> int:
    """
    Lenient integer parsing for limit/days parameters.

    A leading integer prefix is honored ("5abc" -> 5). Missing, non-numeric,
    zero or negative values fall back to the default.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    value = int(match.group(1))
    return value if value > 0 else default
