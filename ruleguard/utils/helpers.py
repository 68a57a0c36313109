"""
Common utility functions used alongside rule evaluation.

These helpers return False instead of raising, so they can be used inline
in the same early-return style as stop().
"""

import json
import math
import time
from datetime import date, datetime, timezone
from numbers import Real
from typing import Any, Sequence, Union

from ..rules.structural import is_complex, is_simple


def safe_dumps(value: Any, **kwargs) -> Union[str, bool]:
    """
    Serialize value to JSON, returning False if it cannot be serialized.

    Args:
        value: Value to serialize
        **kwargs: Passed through to json.dumps

    Returns:
        JSON string or False

    Examples:
        >>> safe_dumps({"a": 1})
        '{"a": 1}'
        >>> safe_dumps({1, 2})
        False
    """
    try:
        return json.dumps(value, **kwargs)
    except (TypeError, ValueError):
        return False


def safe_loads(text: Any, **kwargs) -> Any:
    """
    Parse JSON text, returning False if it is not valid JSON.

    A successfully parsed literal false is indistinguishable from failure;
    check the input first if that matters.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        return False
    try:
        return json.loads(text, **kwargs)
    except ValueError:
        return False


def last(seq: Sequence, n: int = 1) -> Any:
    """
    Return the nth element counting from the end (1 is the last element).

    Returns None when seq is shorter than n or n is not positive.
    """
    if n < 1 or len(seq) < n:
        return None
    return seq[-n]


def timestamp(value: Any = None) -> Union[int, bool]:
    """
    Milliseconds since the Unix epoch.

    Args:
        value: None for now, a datetime (naive values are taken as UTC),
            a date, an ISO 8601 string, or a number of milliseconds

    Returns:
        Integer milliseconds, or False if value cannot be interpreted
    """
    if value is None:
        return time.time_ns() // 1_000_000
    if isinstance(value, bool):
        return False
    if isinstance(value, Real):
        return int(value) if math.isfinite(value) else False
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return False
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp() * 1000)
    if isinstance(value, date):
        return int(datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp() * 1000)
    return False


__all__ = [
    "safe_dumps",
    "safe_loads",
    "is_simple",
    "is_complex",
    "last",
    "timestamp",
]
