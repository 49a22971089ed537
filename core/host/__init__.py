"""
Host collaborator contract and an in-memory implementation.
"""

from .interface import HostEnvironment, Source
from .memory import InMemoryHost

__all__ = [
    "HostEnvironment",
    "Source",
    "InMemoryHost",
]
