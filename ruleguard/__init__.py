"""
ruleguard: declarative runtime validation for Python values.

    from ruleguard import stop, test

    def create_user(name, age):
        if stop("create_user", [
            ["name", name, "string"],
            ["age", age, "integer"],
            ["age", age, {"min": 0, "max": 150}, test.range],
        ]):
            return False
        ...
"""

from .rules import (
    UNDEFINED,
    CYCLE_MARKER,
    Kind,
    MultiOperator,
    ReasonCode,
    EvalResult,
    classify,
    copy,
    equal,
    ConsoleChannel,
    DiagnosticChannel,
    render_diagnostic,
    set_default_channel,
    clog,
    make_test,
    test,
    validate_rule,
    RuleEvaluator,
    evaluate,
    stop,
    builders,
)
from .config import Config, get_config
from .utils import (
    get_logger,
    setup_logger,
    safe_dumps,
    safe_loads,
    is_simple,
    is_complex,
    last,
    timestamp,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "evaluate",
    "stop",
    "make_test",
    "test",
    "validate_rule",
    "RuleEvaluator",
    # Values
    "classify",
    "copy",
    "equal",
    "UNDEFINED",
    "CYCLE_MARKER",
    "Kind",
    "MultiOperator",
    "ReasonCode",
    "EvalResult",
    # Diagnostics
    "ConsoleChannel",
    "DiagnosticChannel",
    "render_diagnostic",
    "set_default_channel",
    "clog",
    # Builders
    "builders",
    # Config / logging
    "Config",
    "get_config",
    "get_logger",
    "setup_logger",
    # Helpers
    "safe_dumps",
    "safe_loads",
    "is_simple",
    "is_complex",
    "last",
    "timestamp",
]
