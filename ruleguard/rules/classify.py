"""
Value classification.

Maps any Python value to exactly one Kind. Detection is structural (ABCs and
duck-typed attributes), so sequences, compiled patterns and dates produced by
other libraries classify the same way as the builtin ones.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from .types import UNDEFINED, Kind


def _classify_number(value: numbers.Real | Decimal) -> Kind:
    """Split a real number into integer/float/nan/infinity."""
    if isinstance(value, numbers.Integral):
        return Kind.INTEGER
    # Signaling Decimal NaNs raise on comparison
    if isinstance(value, Decimal) and value.is_nan():
        return Kind.NAN
    if value != value:
        return Kind.NAN
    if math.isinf(value):
        return Kind.INFINITY
    if value == math.floor(value):
        return Kind.INTEGER
    return Kind.FLOAT


def _is_regex(value: Any) -> bool:
    return (
        hasattr(value, "pattern")
        and hasattr(value, "flags")
        and callable(getattr(value, "search", None))
    )


def _is_date(value: Any) -> bool:
    return callable(getattr(value, "isoformat", None)) and callable(
        getattr(value, "timetuple", None)
    )


def classify(value: Any, distinguish_arguments: bool = False) -> Kind:
    """
    Determine the Kind of a value.

    Args:
        value: Any Python value
        distinguish_arguments: If True, tuples (the shape of ``*args``) are
            reported as ``arguments`` instead of ``array``

    Returns:
        The value's Kind

    Examples:
        >>> classify(3)
        <Kind.INTEGER: 'integer'>
        >>> classify(3.5)
        <Kind.FLOAT: 'float'>
        >>> classify([1, 2])
        <Kind.ARRAY: 'array'>
        >>> classify((1, 2), distinguish_arguments=True)
        <Kind.ARGUMENTS: 'arguments'>
    """
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    # bool is an Integral, so it has to be checked first
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (numbers.Real, Decimal)):
        return _classify_number(value)
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, Mapping):
        return Kind.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        if distinguish_arguments and isinstance(value, tuple):
            return Kind.ARGUMENTS
        return Kind.ARRAY
    if _is_regex(value):
        return Kind.REGEX
    if _is_date(value):
        return Kind.DATE
    if callable(value):
        return Kind.FUNCTION
    return Kind.OBJECT
