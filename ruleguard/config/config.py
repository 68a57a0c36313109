"""
Configuration management for ruleguard.
Loads settings from environment variables (and .env files) with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class EngineConfig:
    """
    Rule evaluation settings.

    prod:
        Skip rule-shape and report validation on every evaluate() call.
        Use only once the rules of a code path are known to be well formed.

    max_depth:
        Maximum rule nesting depth. Deeper trees fail with a diagnostic
        instead of exhausting the interpreter stack (each level of nesting
        costs a few Python frames, so keep this well under
        sys.getrecursionlimit() / 3).
    """
    prod: bool = False
    max_depth: int = 200


@dataclass
class RenderConfig:
    """Console diagnostic channel settings."""
    color: bool = True
    show_elapsed: bool = True


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "WARNING"
    log_dir: Optional[str] = None  # No file logging unless set


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Later files override earlier ones; real environment variables win
        for env_name in [".env", env_file]:
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=False)

        self.engine = self._load_engine_config()
        self.render = self._load_render_config()
        self.log = self._load_log_config()

        self._initialized = True

    def _load_engine_config(self) -> EngineConfig:
        """
        Load engine configuration from environment.

        Environment variables:
        - RULEGUARD_PROD: Skip rule validation (default: false)
        - RULEGUARD_MAX_DEPTH: Maximum rule nesting depth (default: 200)
        """
        max_depth_str = os.getenv("RULEGUARD_MAX_DEPTH", "200")
        try:
            max_depth = int(max_depth_str)
        except ValueError:
            raise ValueError(f"RULEGUARD_MAX_DEPTH must be an integer, got '{max_depth_str}'")
        return EngineConfig(
            prod=_env_bool("RULEGUARD_PROD", "false"),
            max_depth=max_depth,
        )

    def _load_render_config(self) -> RenderConfig:
        """Load console rendering configuration from environment."""
        return RenderConfig(
            color=_env_bool("RULEGUARD_COLOR", "true"),
            show_elapsed=_env_bool("RULEGUARD_SHOW_ELAPSED", "true"),
        )

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("LOG_LEVEL", "WARNING"),
            log_dir=os.getenv("LOG_DIR") or None,
        )

    def reload(self, env_file: str = ".env") -> 'Config':
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file)

    def validate(self) -> tuple[bool, List[str]]:
        """
        Validate configuration values.

        The checks are themselves ruleguard rules, evaluated in string mode
        so the messages can be collected instead of printed.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        from ..rules import evaluate, test

        checks = [
            [["RULEGUARD_MAX_DEPTH", "engine.max_depth"], self.engine.max_depth, "integer"],
            [["RULEGUARD_MAX_DEPTH", "engine.max_depth"], self.engine.max_depth, {"min": 1}, test.range],
            [
                ["LOG_LEVEL", "log.level"], self.log.level.upper(),
                ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], "oneOf", test.equal,
            ],
        ]
        errors = []
        for check in checks:
            result = evaluate("Config", check, True)
            if result is not True:
                errors.append(result)
        return len(errors) == 0, errors


def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
