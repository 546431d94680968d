"""
Runtime Configuration Module

Provides configuration loading for request defaults and logging.
"""

from .runtime import HttpConfig, LoggingConfig, RuntimeConfig

__all__ = [
    "HttpConfig",
    "LoggingConfig",
    "RuntimeConfig",
]
