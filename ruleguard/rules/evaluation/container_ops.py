"""
Container rules.

Handles list rules (AND with short-circuit) and guard rules
([condition, rules], evaluated only when condition is True).
"""

from __future__ import annotations

from typing import Any

from ..classify import classify
from ..types import EvalResult, Kind
from .protocols import RuleEvaluatorProtocol


def is_guard(rule: Any) -> bool:
    """Check if rule has the [condition: bool, rules: list] shape."""
    return (
        len(rule) == 2
        and isinstance(rule[0], bool)
        and classify(rule[1]) == Kind.ARRAY
    )


def eval_list(
    rule: Any,
    label: str,
    prod: bool,
    depth: int,
    evaluator: RuleEvaluatorProtocol,
) -> EvalResult:
    """
    Evaluate a list of rules (AND) with short-circuit.

    Returns the first failing member's result; later members are not
    evaluated.
    """
    for member in rule:
        result = evaluator.evaluate_rule(member, label, prod, depth + 1)
        if not result.ok:
            return result  # Short-circuit: first failure wins
    return EvalResult.success()


def eval_guard(
    rule: Any,
    label: str,
    prod: bool,
    depth: int,
    evaluator: RuleEvaluatorProtocol,
) -> EvalResult:
    """
    Evaluate a guard rule.

    A False condition passes without looking at the guarded rules at all,
    so function rules inside it are never called.
    """
    condition, rules = rule
    if not condition:
        return EvalResult.success()
    return evaluator.evaluate_rule(rules, label, prod, depth + 1)
