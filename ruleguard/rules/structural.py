"""
Structural helpers: cycle-safe deep copy and deep equality.

copy() exists only so diagnostics can be rendered safely; validation
decisions never depend on it. equal() backs the equal/not_equal tests.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import Any

from .classify import classify
from .types import COMPLEX_KINDS, CYCLE_MARKER, UNDEFINED, Kind


def is_complex(value: Any) -> bool:
    """Check if value can hold other values (array, arguments, object)."""
    return classify(value, distinguish_arguments=True) in COMPLEX_KINDS


def is_simple(value: Any) -> bool:
    """Check if value is neither composite nor undefined."""
    return value is not UNDEFINED and not is_complex(value)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def _entries(value: Any) -> dict | None:
    """
    Return the key -> child mapping of a composite value.

    Sequence indices count as keys. Returns None for objects that cannot be
    decomposed (no mapping interface, no __dict__ and no __slots__).
    """
    if isinstance(value, Mapping):
        return dict(value.items())
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return dict(enumerate(value))
    if hasattr(value, "__dict__"):
        return dict(vars(value))
    slots = _slot_names(type(value))
    if slots:
        return {name: getattr(value, name) for name in slots if hasattr(value, name)}
    return None


def iter_values(value: Any) -> list:
    """
    Items a multi-operator iterates over.

    Sequences and sets yield their items and mappings their values;
    anything else is treated as a single item.
    """
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, Set):
        return list(value)
    if classify(value, distinguish_arguments=True) in (Kind.ARRAY, Kind.ARGUMENTS):
        return list(value)
    return [value]


def is_empty(value: Any) -> bool:
    """Check if value is undefined or an empty sequence, set or mapping."""
    if value is UNDEFINED:
        return True
    if isinstance(value, (Mapping, Set)):
        return len(value) == 0
    if classify(value, distinguish_arguments=True) in (Kind.ARRAY, Kind.ARGUMENTS):
        return len(value) == 0
    return False


# =============================================================================
# Copy
# =============================================================================

def _copy(value: Any, ancestors: set[int]) -> Any:
    kind = classify(value, distinguish_arguments=True)
    if kind not in COMPLEX_KINDS:
        return value

    entries = _entries(value)
    if entries is None:
        # Sets only hold hashable items; other opaque objects get a placeholder
        if isinstance(value, frozenset):
            return frozenset(list(value))
        if isinstance(value, Set):
            return set(value)
        return f"<{type(value).__name__}>"

    ancestors.add(id(value))
    try:
        array_shaped = kind in (Kind.ARRAY, Kind.ARGUMENTS)
        result: list | dict = [] if array_shaped else {}
        for key, child in entries.items():
            if id(child) in ancestors and is_complex(child):
                item = CYCLE_MARKER
            else:
                item = _copy(child, ancestors)
            if array_shaped:
                result.append(item)
            else:
                result[key] = item
        return result
    finally:
        ancestors.discard(id(value))


def copy(value: Any) -> Any:
    """
    Deep-copy a value, replacing reference cycles with CYCLE_MARKER.

    Sequences become lists, mappings become dicts and other objects with a
    __dict__ or __slots__ become a dict of their attributes. Sets are copied
    shallowly (frozensets stay frozen). Objects that cannot be decomposed
    are replaced by a "<TypeName>" placeholder. Non-composite values are
    returned unchanged.

    Args:
        value: Any value, possibly self-referencing

    Returns:
        A structure that shares no composite with the input

    Example:
        >>> a = [1, 2]
        >>> a.append(a)
        >>> copy(a)
        [1, 2, '[Circular]']
    """
    return _copy(value, set())


# =============================================================================
# Equality
# =============================================================================

def equal(a: Any, b: Any) -> bool:
    """
    Deep structural equality.

    Values of different kinds are never equal (so 1 and True differ).
    Composites must have the same keys and recursively equal values; key
    order does not matter. Self-referencing inputs are not supported and
    may raise RecursionError.
    """
    kind = classify(a)
    if kind != classify(b):
        return False
    if kind not in COMPLEX_KINDS:
        return bool(a == b)

    entries_a = _entries(a)
    entries_b = _entries(b)
    if entries_a is None or entries_b is None:
        return bool(a == b)
    if entries_a.keys() != entries_b.keys():
        return False
    return all(equal(entries_a[key], entries_b[key]) for key in entries_a)
