"""
Logging system for ruleguard.
Provides human-readable logs with console output and optional file output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        # Format a copy so file handlers sharing the record stay uncolored
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class RuleguardLogger:
    """
    Central logging for the validation engine.

    Features:
    - Console output with colors (stderr)
    - Optional daily file output when a log directory is configured
    - Structured rule-failure lines for easy grepping
    """

    _instance: Optional['RuleguardLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "WARNING"):
        if RuleguardLogger._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._create_logger("ruleguard", log_level)

        RuleguardLogger._initialized = True

    def _create_logger(self, name: str, level: str) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        logger.handlers.clear()
        logger.propagate = False

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        # File handler (plain text, no colors)
        if self.log_dir is not None:
            log_file = self.log_dir / f"ruleguard_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.main_logger.warning(msg, *args, **kwargs)

    def rule_failure(self, label: str, reason: str, message: str):
        """
        Log a reported rule failure with structured format.

        Args:
            label: Caller label passed to evaluate (may be empty)
            reason: ReasonCode name (TEST_FAILED, INVALID_RULE, ...)
            message: Rendered diagnostic
        """
        parts = [f"[RULE:{reason}]"]
        if label:
            parts.append(f"label={label}")
        parts.append(message)
        self.main_logger.debug(" | ".join(parts))


# Global logger instance
_logger: Optional[RuleguardLogger] = None


def get_logger() -> RuleguardLogger:
    """Get or create the global logger instance (settings from Config.log)."""
    global _logger
    if _logger is None:
        from ..config import get_config
        log_config = get_config().log
        _logger = RuleguardLogger(log_config.log_dir, log_config.level)
    return _logger


def setup_logger(log_dir: Optional[str] = None, log_level: str = "WARNING") -> RuleguardLogger:
    """Initialize the logger with custom settings."""
    global _logger
    RuleguardLogger._initialized = False
    RuleguardLogger._instance = None
    _logger = RuleguardLogger(log_dir, log_level)
    return _logger
