"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    EngineConfig,
    RenderConfig,
    LogConfig,
)

__all__ = [
    "Config",
    "get_config",
    "EngineConfig",
    "RenderConfig",
    "LogConfig",
]
