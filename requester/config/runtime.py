"""
Runtime Configuration

Central configuration for request defaults and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from requester.http.options import (
    DEFAULT_CONNECT_TIMEOUT,
    RequestOption,
)

load_dotenv()


ENV_PREFIX = "REQUESTER_"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass
class HttpConfig:
    """Configuration for outgoing requests."""
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    timeout: Optional[float] = None
    follow_redirects: Optional[bool] = None  # None keeps the per-method default
    ssl_verify: bool = True
    ca_bundle: Optional[str] = None
    proxy: Optional[str] = None

    def to_request_options(self) -> dict[str, Any]:
        """
        Caller options for HttpRequester.

        Only settings that differ from the requester's own defaults are
        emitted, so an untouched config leaves every default in place.
        TLS verification is passed separately as ``ssl_verify``.
        """
        options: dict[str, Any] = {}
        if self.connect_timeout != DEFAULT_CONNECT_TIMEOUT:
            options[RequestOption.CONNECT_TIMEOUT] = self.connect_timeout
        if self.timeout is not None:
            options[RequestOption.TIMEOUT] = self.timeout
        if self.follow_redirects is not None:
            options[RequestOption.FOLLOW_REDIRECTS] = self.follow_redirects
        if self.ca_bundle:
            options[RequestOption.CA_BUNDLE] = self.ca_bundle
        if self.proxy:
            options[RequestOption.PROXY] = self.proxy
        return options


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    http: HttpConfig = field(default_factory=HttpConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - REQUESTER_CONNECT_TIMEOUT: Connect timeout in seconds
        - REQUESTER_TIMEOUT: Read timeout in seconds
        - REQUESTER_FOLLOW_REDIRECTS: Follow redirects (true/false)
        - REQUESTER_SSL_VERIFY: Verify TLS peer and host (true/false)
        - REQUESTER_CA_BUNDLE: Path to a CA bundle
        - REQUESTER_HTTP_PROXY: Proxy URL for both schemes
        - REQUESTER_LOG_LEVEL: Log level
        - REQUESTER_LOG_FILE: Log file path
        """
        overrides: dict[str, Any] = {}

        # HTTP settings
        if os.getenv(f"{ENV_PREFIX}CONNECT_TIMEOUT"):
            overrides.setdefault("http", {})["connect_timeout"] = float(
                os.getenv(f"{ENV_PREFIX}CONNECT_TIMEOUT")
            )
        if os.getenv(f"{ENV_PREFIX}TIMEOUT"):
            overrides.setdefault("http", {})["timeout"] = float(os.getenv(f"{ENV_PREFIX}TIMEOUT"))
        if os.getenv(f"{ENV_PREFIX}FOLLOW_REDIRECTS"):
            overrides.setdefault("http", {})["follow_redirects"] = _env_bool(
                f"{ENV_PREFIX}FOLLOW_REDIRECTS", "true"
            )
        if os.getenv(f"{ENV_PREFIX}SSL_VERIFY"):
            overrides.setdefault("http", {})["ssl_verify"] = _env_bool(
                f"{ENV_PREFIX}SSL_VERIFY", "true"
            )
        if os.getenv(f"{ENV_PREFIX}CA_BUNDLE"):
            overrides.setdefault("http", {})["ca_bundle"] = os.getenv(f"{ENV_PREFIX}CA_BUNDLE")
        if os.getenv(f"{ENV_PREFIX}HTTP_PROXY"):
            overrides.setdefault("http", {})["proxy"] = os.getenv(f"{ENV_PREFIX}HTTP_PROXY")

        # Logging
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        http_data = data.get("http", {})
        logging_data = data.get("logging", {})

        http = HttpConfig(**http_data) if http_data else HttpConfig()
        log = LoggingConfig(**logging_data) if logging_data else LoggingConfig()

        return cls(
            http=http,
            logging=log,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.get("http", {}).items():
            setattr(new_config.http, key, value)
        for key, value in overrides.get("logging", {}).items():
            setattr(new_config.logging, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "http": {
                "connect_timeout": self.http.connect_timeout,
                "timeout": self.http.timeout,
                "follow_redirects": self.http.follow_redirects,
                "ssl_verify": self.http.ssl_verify,
                "ca_bundle": self.http.ca_bundle,
                "proxy": self.http.proxy,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "extra": self.extra,
        }
