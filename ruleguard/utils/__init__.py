"""
Utility modules.
"""

from .logger import get_logger, setup_logger, RuleguardLogger
from .helpers import safe_dumps, safe_loads, is_simple, is_complex, last, timestamp

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "RuleguardLogger",
    # JSON helpers
    "safe_dumps",
    "safe_loads",
    # Value helpers
    "is_simple",
    "is_complex",
    "last",
    "timestamp",
]
