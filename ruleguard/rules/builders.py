"""
Rule builders.

Small constructors that spell out the common rule shapes by name. They
return plain rule data, so the result can be mixed freely with literal
rules:

    stop("create_user", [
        is_string("name", name),
        is_in_range("age", age, {"min": 0}),
        optional("email", email, matches("email", email, EMAIL_RE)),
    ])
"""

from __future__ import annotations

from typing import Any

from .builtin_tests import equal_test, match_test, not_equal_test, range_test
from .types import UNDEFINED, Kind, MultiOperator, Names, Rule, TestFunction


# =============================================================================
# Type rules
# =============================================================================

def is_type(name: Names, value: Any, kind: Kind | str) -> list:
    return [name, value, str(kind)]


def is_string(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.STRING)


def is_integer(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.INTEGER)


def is_float(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.FLOAT)


def is_array(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.ARRAY)


def is_object(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.OBJECT)


def is_function(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.FUNCTION)


def is_boolean(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.BOOLEAN)


def is_undefined(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.UNDEFINED)


def is_null(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.NULL)


def is_regex(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.REGEX)


def is_date(name: Names, value: Any) -> list:
    return is_type(name, value, Kind.DATE)


# =============================================================================
# Multi-operator rules
# =============================================================================

def _multi_rule(name: Names, value: Any, to: Any, multi: MultiOperator, test: TestFunction | None) -> list:
    rule = [name, value, to, multi.value]
    if test is not None:
        rule.append(test)
    return rule


def is_one_of(name: Names, value: Any, options: Any, test: TestFunction | None = None) -> list:
    """value must pass against at least one of options (type test unless given)."""
    return _multi_rule(name, value, options, MultiOperator.ONE_OF, test)


def is_each(name: Names, value: Any, to: Any, test: TestFunction | None = None) -> list:
    """Every item of value must pass against to."""
    return _multi_rule(name, value, to, MultiOperator.EACH, test)


def is_each_of(name: Names, value: Any, options: Any, test: TestFunction | None = None) -> list:
    """Every item of value must pass against at least one of options."""
    return _multi_rule(name, value, options, MultiOperator.EACH_OF, test)


# =============================================================================
# Test rules
# =============================================================================

def equals(name: Names, value: Any, expected: Any) -> list:
    return [name, value, expected, equal_test]


def not_equals(name: Names, value: Any, unexpected: Any) -> list:
    return [name, value, unexpected, not_equal_test]


def is_in_range(name: Names, value: Any, bounds: dict) -> list:
    """bounds uses the keys min, max, less and more."""
    return [name, value, bounds, range_test]


def matches(name: Names, value: Any, pattern: Any) -> list:
    return [name, value, pattern, match_test]


# =============================================================================
# Conditional rules
# =============================================================================

def optional(name: Names, value: Any, rule: Rule) -> list:
    """
    Apply rule only when value is present.

    Builds a guard rule, so nothing inside rule is evaluated (or called, for
    function rules) when value is UNDEFINED. None counts as present.
    """
    return [value is not UNDEFINED, [rule]]
