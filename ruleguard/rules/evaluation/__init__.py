"""
Rule tree evaluation.

Structure:
- core.py: RuleEvaluator, evaluate() / stop() entry points
- container_ops.py: list rules and guard rules
- multi_ops.py: simple rules and the each / oneOf / eachOf operators
- protocols.py: protocols shared by the above (avoids circular imports)
"""

from .core import RuleEvaluator, evaluate, stop, get_evaluator, EVALUATE_LABEL
from .multi_ops import SimpleRule
from .protocols import DiagnosticChannel, RuleEvaluatorProtocol

__all__ = [
    "RuleEvaluator",
    "evaluate",
    "stop",
    "get_evaluator",
    "EVALUATE_LABEL",
    "SimpleRule",
    "DiagnosticChannel",
    "RuleEvaluatorProtocol",
]
