"""
API Dependencies

Dependency injection for the API: lock configuration and verifier.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from core.config.runtime import LockConfig
from core.lock import SignatureVerifier

logger = logging.getLogger(__name__)


def _load_lock_config() -> LockConfig:
    """Load LockConfig from config file, then overlay environment variables.

    Search order for config file:
      1. ./cellguard.json
      2. ./.cellguard.json
      3. ~/.config/cellguard/config.json

    Environment variables ALWAYS override config file values.
    The .env file is loaded automatically by core.config.runtime on import.
    """
    search_paths = [
        Path.cwd() / "cellguard.json",
        Path.cwd() / ".cellguard.json",
        Path.home() / ".config" / "cellguard" / "config.json",
    ]

    config: LockConfig | None = None

    for path in search_paths:
        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                logger.info(f"Loaded config from {path}")
                config = LockConfig.from_dict(data.get("lock", {}))
                break
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to parse {path}: {e}")

    if config is None:
        config = LockConfig()

    return config.with_env_overrides()


@lru_cache(maxsize=1)
def get_lock_config() -> LockConfig:
    """Lock configuration shared by all requests."""
    return _load_lock_config()


def get_verifier() -> SignatureVerifier:
    """Create a verifier bound to the server's lock configuration."""
    return SignatureVerifier(get_lock_config())
