"""
Runtime Configuration Module

Provides configuration loading for the signature lock.
"""

from .runtime import ENV_PREFIX, LockConfig

__all__ = [
    "ENV_PREFIX",
    "LockConfig",
]
