"""
Simple rule evaluation and multi-operators.

Handles the leaves of a rule tree: [names, compare, to, multi?, test?].

- none:   test(compare, to) once
- each:   every item of compare passes against to (AND, short-circuit)
- oneOf:  compare passes against some item of to (OR, short-circuit)
- eachOf: every item of compare passes against some item of to
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..builtin_tests import type_test
from ..structural import is_empty, iter_values
from ..types import (
    UNDEFINED,
    EvalResult,
    MultiOperator,
    ReasonCode,
    TestFunction,
    multi_value,
)


@dataclass(frozen=True)
class SimpleRule:
    """
    A resolved simple rule.

    Attributes:
        names: (label, qualifier); qualifier is "" when not given
        compare: The value under validation
        to: What compare is tested against
        multi: Multi-operator string, or None
        test: Test function (defaults to the type test)
    """
    names: tuple[str, str]
    compare: Any
    to: Any
    multi: str | None
    test: TestFunction

    @classmethod
    def from_rule(cls, rule: Any) -> "SimpleRule":
        """Resolve names, multi and test from a validated rule list."""
        names = rule[0]
        if isinstance(names, str):
            names = (names, "")
        multi = None
        test = type_test
        for element in rule[3:5]:
            if isinstance(element, str):
                multi = multi_value(element)
            elif callable(element):
                test = element
        return cls(
            names=(names[0], names[1]),
            compare=rule[1],
            to=rule[2],
            multi=multi,
            test=test,
        )


def _failure(result: Any, rule: SimpleRule, label: str) -> EvalResult:
    """Wrap a test function's non-True answer into a failure result."""
    if isinstance(result, list) and result:
        return EvalResult.failure(ReasonCode.TEST_FAILED, result)
    # Hand-written test functions may answer with a bare False or an empty list
    diagnostic = [rule.names[0]]
    if label:
        diagnostic.extend(["passed to", label])
    diagnostic.extend(["did not pass test", rule.test, "with value", rule.compare])
    return EvalResult.failure(ReasonCode.TEST_FAILED, diagnostic)


def _empty_candidates(rule: SimpleRule, label: str) -> EvalResult:
    diagnostic = [rule.names[0]]
    if label:
        diagnostic.extend(["passed to", label])
    diagnostic.extend([
        "is checked with multi operator", rule.multi,
        "which requires a non-empty to value, but instead to is", rule.to,
    ])
    return EvalResult.failure(ReasonCode.EMPTY_CANDIDATES, diagnostic)


def eval_single(rule: SimpleRule, label: str) -> EvalResult:
    """Evaluate a simple rule without a multi-operator."""
    result = rule.test(label, rule.names, rule.compare, rule.to)
    if result is True:
        return EvalResult.success()
    return _failure(result, rule, label)


def eval_each(rule: SimpleRule, label: str) -> EvalResult:
    """
    Evaluate 'each' with short-circuit.

    Returns the first failing item's diagnostic.
    """
    for item in iter_values(rule.compare):
        result = rule.test(label, rule.names, item, rule.to, rule.compare)
        if result is not True:
            return _failure(result, rule, label)
    return EvalResult.success()


def _match_any(rule: SimpleRule, label: str, compare: Any, each_value: Any) -> Any:
    """Test compare against every candidate; True on first pass, else the last diagnostic."""
    result: Any = False
    for candidate in iter_values(rule.to):
        result = rule.test(label, rule.names, compare, candidate, each_value, rule.to)
        if result is True:
            return True
    return result


def eval_one_of(rule: SimpleRule, label: str) -> EvalResult:
    """
    Evaluate 'oneOf' (OR) with short-circuit.

    Every candidate is tried before concluding failure; the last
    candidate's diagnostic is reported.
    """
    result = _match_any(rule, label, rule.compare, UNDEFINED)
    if result is True:
        return EvalResult.success()
    return _failure(result, rule, label)


def eval_each_of(rule: SimpleRule, label: str) -> EvalResult:
    """Evaluate 'eachOf': AND over compare items of OR over candidates."""
    for item in iter_values(rule.compare):
        result = _match_any(rule, label, item, rule.compare)
        if result is not True:
            return _failure(result, rule, label)
    return EvalResult.success()


MULTI_DISPATCH = {
    None: eval_single,
    MultiOperator.EACH.value: eval_each,
    MultiOperator.ONE_OF.value: eval_one_of,
    MultiOperator.EACH_OF.value: eval_each_of,
}


def eval_simple(rule: SimpleRule, label: str) -> EvalResult:
    """
    Evaluate a resolved simple rule.

    Empty compare values make each/eachOf pass vacuously; empty candidate
    sets make oneOf/eachOf fail, since nothing can match.
    """
    if rule.multi in (MultiOperator.EACH, MultiOperator.EACH_OF) and is_empty(rule.compare):
        return EvalResult.success()
    if rule.multi in (MultiOperator.ONE_OF, MultiOperator.EACH_OF) and is_empty(rule.to):
        return _empty_candidates(rule, label)
    return MULTI_DISPATCH[rule.multi](rule, label)
