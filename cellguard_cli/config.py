"""
CLI Configuration

Configuration management for the Cellguard CLI.
Supports environment variables and configuration files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from core.config.runtime import ENV_PREFIX, LockConfig


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Lock settings
    lock: LockConfig = field(default_factory=LockConfig)

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    # Output
    default_output_format: str = "human"  # "human" or "json"


def default_config_paths() -> list[Path]:
    return [
        Path.cwd() / "cellguard.json",
        Path.cwd() / ".cellguard.json",
        Path.home() / ".config" / "cellguard" / "config.json",
    ]


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    config = CLIConfig()
    config.lock = LockConfig.from_dict(data.get("lock", {}))
    config.log_level = data.get("log_level", config.log_level)
    config.log_file = data.get("log_file", config.log_file)
    config.default_output_format = data.get(
        "default_output_format", config.default_output_format
    )
    return config


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    config.lock = config.lock.with_env_overrides()
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", config.log_level)
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "human")

    return config


def config_to_dict(config: CLIConfig) -> dict:
    return {
        "lock": config.lock.to_dict(),
        "log_level": config.log_level,
        "log_file": config.log_file,
        "default_output_format": config.default_output_format,
    }


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(config_to_dict(CLIConfig()), indent=2) + "\n"
