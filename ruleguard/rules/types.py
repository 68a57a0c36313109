"""
Rule evaluation type definitions.

Enums, sentinels and dataclasses shared by the classifier, the test
functions, the rule validator and the evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any, Callable, Sequence, Union


class _Undefined:
    """
    Marker for an absent value.

    Python has no native "undefined", so a single instance of this class
    stands in for it. It is falsy and compares equal only to itself.
    """

    _instance: "_Undefined | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

# Substituted for a composite that already appears on the current copy path
CYCLE_MARKER = "[Circular]"


class Kind(str, Enum):
    """
    Classification bucket of a runtime value.

    Members compare equal to their string values, so rules can be written
    with plain strings: ``["age", age, "integer"]``.
    """

    INTEGER = "integer"
    FLOAT = "float"
    NAN = "nan"
    INFINITY = "infinity"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    ARRAY = "array"
    OBJECT = "object"
    ARGUMENTS = "arguments"
    FUNCTION = "function"
    REGEX = "regex"
    DATE = "date"

    def __str__(self) -> str:
        return self.value


# Kinds that may hold other values (and therefore participate in cycles)
COMPLEX_KINDS: frozenset[Kind] = frozenset({Kind.ARRAY, Kind.OBJECT, Kind.ARGUMENTS})


class MultiOperator(str, Enum):
    """Modifiers that make a simple rule iterate over compare and/or to."""

    EACH = "each"
    ONE_OF = "oneOf"
    EACH_OF = "eachOf"

    def __str__(self) -> str:
        return self.value


MULTI_OPERATORS: frozenset[str] = frozenset(m.value for m in MultiOperator)


def multi_value(element: str) -> str:
    """Plain string form of a multi-operator (Enum members hash by name)."""
    return element.value if isinstance(element, MultiOperator) else element


class ReasonCode(IntEnum):
    """
    Reason codes for rule evaluation outcomes.

    Every evaluation returns a ReasonCode to explain why it succeeded or failed.
    These are machine-readable for logging/debugging.
    """

    # Success
    OK = 0  # Rule (or subtree) passed

    # Construction / configuration errors
    INVALID_RULE = auto()  # Rule shape rejected by validate_rule
    INVALID_REPORT = auto()  # report argument is not None, True or a callable

    # Validation failures (NOT an error - the value simply did not pass)
    FALSE_RULE = auto()  # Literal False rule (already reported by whoever computed it)
    TEST_FAILED = auto()  # A simple rule's test function returned a diagnostic
    EMPTY_CANDIDATES = auto()  # oneOf/eachOf with nothing to match against

    # Limits
    MAX_DEPTH_EXCEEDED = auto()  # Rule nesting deeper than engine.max_depth


# A diagnostic is an ordered list of message strings interleaved with raw values
Diagnostic = list
Names = Union[str, Sequence[str]]
TestFunction = Callable[..., Union[bool, list]]
Rule = Any


@dataclass(frozen=True)
class EvalResult:
    """
    Result of evaluating a rule (or a subtree of one).

    Contains:
    - ok: Whether the rule passed
    - reason: Why it evaluated this way
    - diagnostic: Fragments explaining the failure (empty on success)
    """

    ok: bool
    reason: ReasonCode
    diagnostic: list = field(default_factory=list)

    @classmethod
    def success(cls) -> "EvalResult":
        """Create a passing result."""
        return cls(ok=True, reason=ReasonCode.OK)

    @classmethod
    def failure(cls, reason: ReasonCode, diagnostic: list) -> "EvalResult":
        """Create a failure result (rule not met or rule malformed)."""
        return cls(ok=False, reason=reason, diagnostic=list(diagnostic))

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "ok": self.ok,
            "reason": self.reason.name,
            "diagnostic": self.diagnostic,
        }
