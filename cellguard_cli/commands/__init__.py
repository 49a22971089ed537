"""
CLI command modules.
"""

from cellguard_cli.commands import verify, sign, keys

__all__ = ["verify", "sign", "keys"]
