"""API route handlers."""

from api.routes import health, verify, hashing

__all__ = ["health", "verify", "hashing"]
