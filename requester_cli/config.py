"""
CLI Configuration

Loads the CLI configuration from a JSON file and overlays environment
variables (REQUESTER_* prefix).
"""

from __future__ import annotations

import json
from pathlib import Path

from requester.config import RuntimeConfig


DEFAULT_CONFIG_NAME = "requester.json"


def default_config_paths() -> list[Path]:
    """Locations searched when no config path is given."""
    return [
        Path.cwd() / DEFAULT_CONFIG_NAME,
        Path.cwd() / f".{DEFAULT_CONFIG_NAME}",
        Path.home() / ".config" / "requester" / "config.json",
    ]


def load_config_from_file(path: Path) -> RuntimeConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return RuntimeConfig.from_dict(data)


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"
