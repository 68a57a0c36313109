"""
Rule shape validation.

Pre-flight check run by the evaluator before each rule is evaluated. Only
the shape of the current rule is inspected: containers are accepted as-is
because the evaluator validates each member when it recurses into it.
"""

from __future__ import annotations

from typing import Any

from .classify import classify
from .types import MULTI_OPERATORS, Kind, multi_value

RULE_KINDS = (Kind.FUNCTION, Kind.BOOLEAN, Kind.ARRAY)
SIMPLE_RULE_MIN_LENGTH = 3
SIMPLE_RULE_MAX_LENGTH = 5


def is_names(value: Any) -> bool:
    """
    Check if value is a Names value: a label or a (label, qualifier) pair.

    This is what distinguishes a simple rule (names first) from a list of
    rules or a guard rule.
    """
    if isinstance(value, str):
        return True
    return (
        classify(value) == Kind.ARRAY
        and len(value) == 2
        and isinstance(value[0], str)
        and isinstance(value[1], str)
    )


def validate_rule(rule: Any) -> bool | list:
    """
    Validate the shape of a single rule.

    Args:
        rule: Boolean, zero-argument function, or list/tuple

    Returns:
        True if the shape is valid, otherwise a diagnostic
    """
    kind = classify(rule)
    if kind not in RULE_KINDS:
        return [
            "each rule must be either a function, a boolean or an array, but instead is",
            rule, "with type", kind,
        ]
    if kind != Kind.ARRAY:
        return True

    # Lists of rules and guard rules
    if len(rule) == 0 or not is_names(rule[0]):
        return True

    if not SIMPLE_RULE_MIN_LENGTH <= len(rule) <= SIMPLE_RULE_MAX_LENGTH:
        return [
            "simple rule must have a length between 3 and 5, but instead has length",
            len(rule), "and is", rule,
        ]

    seen_multi = False
    seen_test = False
    for index in range(SIMPLE_RULE_MIN_LENGTH, len(rule)):
        element = rule[index]
        if isinstance(element, str):
            if multi_value(element) not in MULTI_OPERATORS:
                return [
                    "element #", index,
                    'of simple rule must be a multi operator ("each", "oneOf" or "eachOf") '
                    "or a test function, but instead is",
                    element, "in rule", rule,
                ]
            if seen_multi:
                return ["simple rule has two multi operators, the second at element #", index, "in rule", rule]
            seen_multi = True
        elif classify(element) == Kind.FUNCTION:
            if seen_test:
                return ["simple rule has two test functions, the second at element #", index, "in rule", rule]
            seen_test = True
        else:
            return [
                "element #", index,
                "of simple rule must be a multi operator or a test function, but instead is",
                element, "with type", classify(element),
            ]
    return True
