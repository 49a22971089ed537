"""
Shared argument handling for CLI commands.
"""

from __future__ import annotations

import argparse
from argparse import Namespace
from pathlib import Path

from core.crypto.hashing import from_hex


def add_payload_arguments(parser: argparse.ArgumentParser, required: bool = True) -> None:
    """Add the mutually exclusive --payload / --payload-hex / --payload-file options."""
    group = parser.add_mutually_exclusive_group(required=required)
    group.add_argument(
        "--payload",
        type=str,
        help="Payload as UTF-8 text",
    )
    group.add_argument(
        "--payload-hex",
        type=str,
        help="Payload as hex (0x prefix optional)",
    )
    group.add_argument(
        "--payload-file",
        type=str,
        help="Read payload bytes from a file",
    )


def read_payload(args: Namespace) -> bytes:
    """Resolve the payload bytes from parsed arguments."""
    if getattr(args, "payload", None) is not None:
        return args.payload.encode("utf-8")
    if getattr(args, "payload_hex", None) is not None:
        return from_hex(args.payload_hex)
    if getattr(args, "payload_file", None) is not None:
        return Path(args.payload_file).read_bytes()
    return b""


def wants_json(args: Namespace) -> bool:
    """Decide between JSON and human output."""
    if getattr(args, "json", False):
        return True
    config = getattr(args, "cli_config", None)
    return config is not None and config.default_output_format == "json"
