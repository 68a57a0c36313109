"""
Shared protocols for rule evaluation.

Provides Protocol classes to avoid circular imports between evaluation modules.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..types import EvalResult


class DiagnosticChannel(Protocol):
    """Sink for rendered failures. render() must return False."""

    def render(self, label: str, fragments: Any) -> bool: ...


class RuleEvaluatorProtocol(Protocol):
    """Protocol for the rule evaluator to avoid circular imports."""

    def evaluate_rule(self, rule: Any, label: str, prod: bool, depth: int) -> EvalResult: ...
