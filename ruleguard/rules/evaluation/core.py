"""
Rule tree evaluator.

Walks a rule tree, dispatching on the shape of each node:

- True / False: literal outcome
- function: called with no arguments, its result is evaluated
- []: passes
- [bool, [...]]: guard rule, the list is evaluated only if the bool is True
- [names, compare, to, multi?, test?]: simple rule
- [rule, rule, ...]: every rule must pass (short-circuit)

Usage:
    evaluator = RuleEvaluator()
    if evaluator.stop("create_user", [
        ["name", name, "string"],
        ["age", age, "integer"],
        [["age", "years"], age, {"min": 0, "max": 150}, test.range],
    ]):
        return False
"""

from __future__ import annotations

from typing import Any

from ...config import get_config
from ...utils.logger import get_logger
from ..classify import classify
from ..diagnostics import get_default_channel, render_diagnostic
from ..types import UNDEFINED, EvalResult, Kind, ReasonCode, Rule
from ..validator import is_names, validate_rule
from .container_ops import eval_guard, eval_list, is_guard
from .multi_ops import SimpleRule, eval_simple
from .protocols import DiagnosticChannel

EVALUATE_LABEL = "ruleguard.evaluate"


def _split_arguments(args: tuple, report: Any, prod: Any) -> tuple[str, Rule, Any, Any]:
    """
    Resolve the (label?, rule, report?, prod?) call forms.

    A rule can never be a string, so a leading string is always the label.
    A missing rule is evaluated as UNDEFINED, which fails validation.
    """
    if args and isinstance(args[0], str):
        label, rest = args[0], args[1:]
    else:
        label, rest = "", args
    if not rest:
        rest = (UNDEFINED,)
    if len(rest) > 3:
        raise TypeError(
            "evaluate() expects ([label,] rule[, report[, prod]]), "
            f"got {len(args)} positional arguments"
        )
    if len(rest) > 1:
        if report is not UNDEFINED:
            raise TypeError("evaluate() got multiple values for argument 'report'")
        report = rest[1]
    if len(rest) > 2:
        if prod is not None:
            raise TypeError("evaluate() got multiple values for argument 'prod'")
        prod = rest[2]
    if report is UNDEFINED:
        report = None
    return label, rest[0], report, prod


class RuleEvaluator:
    """
    Evaluates rule trees and reports failures.

    Re-entrant and stateless apart from its diagnostic channel, so one
    instance can be shared.

    Attributes:
        channel: Where failures go when no report argument is given
            (defaults to the process-wide console channel)
        max_depth: Maximum rule nesting depth (defaults to Config.engine.max_depth)
    """

    def __init__(
        self,
        channel: DiagnosticChannel | None = None,
        max_depth: int | None = None,
    ):
        self._channel = channel
        self._max_depth = max_depth

    @property
    def channel(self) -> DiagnosticChannel:
        return self._channel if self._channel is not None else get_default_channel()

    @property
    def max_depth(self) -> int:
        if self._max_depth is not None:
            return self._max_depth
        return get_config().engine.max_depth

    # -------------------------------------------------------------------------
    # Public entry points
    # -------------------------------------------------------------------------

    def evaluate(self, *args: Any, report: Any = UNDEFINED, prod: bool | None = None) -> bool | str:
        """
        Evaluate a rule tree.

        Call forms:
            evaluate(rule, report=None, prod=None)
            evaluate(label, rule, report=None, prod=None)

        Args:
            label: Name of the calling function, used in diagnostics
            rule: The rule tree
            report: None prints failures and returns False; True returns the
                diagnostic text instead; a callable receives the text and
                False is returned
            prod: Skip rule-shape and report validation (defaults to
                Config.engine.prod)

        Returns:
            True if every rule passed, otherwise False (or the diagnostic
            string when report is True)
        """
        label, rule, report, prod = _split_arguments(args, report, prod)
        if prod is None:
            prod = get_config().engine.prod

        if not prod and not (report is None or report is True or callable(report)):
            diagnostic = [
                "report argument must be absent, True or a function, but instead is",
                report, "with type", classify(report),
            ]
            get_logger().warning(f"[RULE:{ReasonCode.INVALID_REPORT.name}] {render_diagnostic(diagnostic)}")
            return self.channel.render(label or EVALUATE_LABEL, diagnostic)

        result = self.evaluate_rule(rule, label, prod, 0)
        if result.ok:
            return True
        return self._report(label, result, report)

    def stop(self, *args: Any, report: Any = UNDEFINED, prod: bool | None = None) -> bool:
        """Inverse of evaluate(): True means validation failed."""
        return self.evaluate(*args, report=report, prod=prod) is not True

    # -------------------------------------------------------------------------
    # Recursion
    # -------------------------------------------------------------------------

    def evaluate_rule(self, rule: Rule, label: str, prod: bool, depth: int) -> EvalResult:
        """
        Evaluate one node of a rule tree.

        Args:
            rule: The node
            label: Caller label for diagnostics
            prod: If True, skip shape validation
            depth: Current nesting depth

        Returns:
            EvalResult with ok=True/False and reason code
        """
        if depth > self.max_depth:
            return EvalResult.failure(ReasonCode.MAX_DEPTH_EXCEEDED, [
                "rule nesting exceeds the maximum depth of", self.max_depth,
                "(set RULEGUARD_MAX_DEPTH to raise it)",
            ])

        if not prod:
            validation = validate_rule(rule)
            if validation is not True:
                return EvalResult.failure(ReasonCode.INVALID_RULE, validation)

        if isinstance(rule, bool):
            return EvalResult.success() if rule else EvalResult.failure(ReasonCode.FALSE_RULE, [])

        kind = classify(rule)
        if kind == Kind.FUNCTION:
            return self.evaluate_rule(rule(), label, prod, depth + 1)
        if kind != Kind.ARRAY:
            # Only reachable in prod mode, where shapes are not validated
            return EvalResult.failure(ReasonCode.INVALID_RULE, validate_rule(rule))
        if len(rule) == 0:
            return EvalResult.success()
        if is_guard(rule):
            return eval_guard(rule, label, prod, depth, self)
        if not is_names(rule[0]):
            return eval_list(rule, label, prod, depth, self)
        return eval_simple(SimpleRule.from_rule(rule), label)

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def _report(self, label: str, result: EvalResult, report: Any) -> bool | str:
        # A literal False was computed (and reported) by someone else
        if not result.diagnostic:
            return False

        message = render_diagnostic(result.diagnostic)
        get_logger().rule_failure(label, result.reason.name, message)
        if report is True:
            return message
        if callable(report):
            report(message)
            return False
        return self.channel.render(label or EVALUATE_LABEL, result.diagnostic)


_default_evaluator: RuleEvaluator | None = None


def get_evaluator() -> RuleEvaluator:
    """Get or create the shared evaluator (uses the default channel)."""
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = RuleEvaluator()
    return _default_evaluator


def evaluate(*args: Any, report: Any = UNDEFINED, prod: bool | None = None) -> bool | str:
    """
    Evaluate a rule tree with the shared evaluator.

    See RuleEvaluator.evaluate for the call forms.
    """
    return get_evaluator().evaluate(*args, report=report, prod=prod)


def stop(*args: Any, report: Any = UNDEFINED, prod: bool | None = None) -> bool:
    """
    Inverse of evaluate(), for early returns.

    Example:
        if stop("create_user", ["age", age, "integer"]):
            return False
    """
    return get_evaluator().stop(*args, report=report, prod=prod)
