"""
Rule evaluation module.

Design principles:
- Rules are plain data (lists, booleans, zero-argument functions)
- Every failure carries a diagnostic naming the value, the caller and the expectation
- ReasonCode for every evaluation outcome
- Shape validation can be switched off (prod) once rules are trusted
"""

from .types import (
    UNDEFINED,
    CYCLE_MARKER,
    Kind,
    MultiOperator,
    ReasonCode,
    EvalResult,
)
from .classify import classify
from .structural import copy, equal, is_simple, is_complex
from .diagnostics import (
    ConsoleChannel,
    RendererContext,
    render_fragment,
    render_diagnostic,
    get_default_channel,
    set_default_channel,
    clog,
)
from .make_test import make_test
from .builtin_tests import test, BuiltinTests
from .validator import validate_rule, is_names
from .evaluation import (
    RuleEvaluator,
    DiagnosticChannel,
    evaluate,
    stop,
    get_evaluator,
)
from .builders import (
    is_type,
    is_string,
    is_integer,
    is_float,
    is_array,
    is_object,
    is_function,
    is_boolean,
    is_undefined,
    is_null,
    is_regex,
    is_date,
    is_one_of,
    is_each,
    is_each_of,
    equals,
    not_equals,
    is_in_range,
    matches,
    optional,
)

__all__ = [
    # Types
    "UNDEFINED",
    "CYCLE_MARKER",
    "Kind",
    "MultiOperator",
    "ReasonCode",
    "EvalResult",
    # Values
    "classify",
    "copy",
    "equal",
    "is_simple",
    "is_complex",
    # Diagnostics
    "ConsoleChannel",
    "RendererContext",
    "DiagnosticChannel",
    "render_fragment",
    "render_diagnostic",
    "get_default_channel",
    "set_default_channel",
    "clog",
    # Tests
    "make_test",
    "test",
    "BuiltinTests",
    # Validation
    "validate_rule",
    "is_names",
    # Evaluation
    "RuleEvaluator",
    "evaluate",
    "stop",
    "get_evaluator",
    # Builders
    "is_type",
    "is_string",
    "is_integer",
    "is_float",
    "is_array",
    "is_object",
    "is_function",
    "is_boolean",
    "is_undefined",
    "is_null",
    "is_regex",
    "is_date",
    "is_one_of",
    "is_each",
    "is_each_of",
    "equals",
    "not_equals",
    "is_in_range",
    "matches",
    "optional",
]
