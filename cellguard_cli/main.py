"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m cellguard_cli verify (--payload TEXT | --payload-hex HEX | --payload-file PATH)
                                   [--witness HEX | --witness-args HEX] --fingerprint HEX [--json]
    python -m cellguard_cli sign --privkey HEX (--payload ... ) [--json]
    python -m cellguard_cli fingerprint (--pubkey HEX | --privkey HEX) [--json]
    python -m cellguard_cli hash (--payload ...) [--json]
    python -m cellguard_cli config --init | --show

Exit codes:
    0           authorized / command succeeded
    1           runtime error (bad input, unreadable file, ...)
    100-106     lock rejection code (see core.schemas.errors.ErrorCode)

Environment Variables:
    CELLGUARD_HASH_PERSONALIZATION  Hash personalization tag
    CELLGUARD_WITNESS_INDEX         Witness index read by the script
    CELLGUARD_CELL_INDEX            Group input index read by the script
    CELLGUARD_LOG_LEVEL             Log level (default: WARNING)
    CELLGUARD_LOG_FILE              Also log to this file
    CELLGUARD_OUTPUT_FORMAT         human or json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from cellguard_cli import __version__
from cellguard_cli.commands import keys, sign, verify
from cellguard_cli.config import config_to_dict, get_default_config_template, load_config
from cellguard_cli.inputs import add_payload_arguments


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="cellguard",
        description="Cellguard - verify, sign and fingerprint for the secp256k1 signature lock.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./cellguard.json or ~/.config/cellguard/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Check a witness signature against a fingerprint",
        description="Run the lock: exit 0 when authorized, else the rejection code.",
    )
    add_payload_arguments(verify_parser)
    witness_group = verify_parser.add_mutually_exclusive_group()
    witness_group.add_argument(
        "--witness",
        type=str,
        default=None,
        help="Witness bytes as hex: r(32) || s(32) || recovery_id(1)",
    )
    witness_group.add_argument(
        "--witness-args",
        type=str,
        default=None,
        help="Serialized WitnessArgs as hex; the signature is read from input_type",
    )
    verify_parser.add_argument(
        "--fingerprint",
        type=str,
        required=True,
        help="Expected 32-byte public key fingerprint as hex",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON report",
    )
    verify_parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on runtime errors",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- sign command ---
    sign_parser = subparsers.add_parser(
        "sign",
        help="Sign a payload and print the witness",
        description="Build test witnesses: signature, WitnessArgs and fingerprint.",
    )
    sign_parser.add_argument(
        "--privkey",
        type=str,
        required=True,
        help="32-byte secret key as hex",
    )
    add_payload_arguments(sign_parser)
    sign_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    sign_parser.set_defaults(func=sign.sign_cmd)

    # --- fingerprint command ---
    fingerprint_parser = subparsers.add_parser(
        "fingerprint",
        help="Compute the fingerprint of a public key",
    )
    key_group = fingerprint_parser.add_mutually_exclusive_group(required=True)
    key_group.add_argument("--pubkey", type=str, help="SEC1 public key as hex (33 or 65 bytes)")
    key_group.add_argument("--privkey", type=str, help="32-byte secret key as hex")
    fingerprint_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    fingerprint_parser.set_defaults(func=keys.fingerprint_cmd)

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Hash a payload with the lock hasher",
    )
    add_payload_arguments(hash_parser)
    hash_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    hash_parser.set_defaults(func=keys.hash_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="cellguard.json",
        help="Path for config file (default: cellguard.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (CELLGUARD_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(config_to_dict(args.cli_config), indent=2))
        return EXIT_SUCCESS

    print("Usage: cellguard config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 100-106=lock rejection)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
