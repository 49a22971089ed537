"""
CLI Key and Hash Commands

Usage:
    cellguard fingerprint --pubkey 0x02...
    cellguard fingerprint --privkey 0x...
    cellguard hash --payload test
"""

from __future__ import annotations

import json
from argparse import Namespace

from cellguard_cli.inputs import read_payload, wants_json
from core.config.runtime import LockConfig
from core.crypto.hashing import from_hex, to_hex
from core.crypto.signatures import pubkey_fingerprint, pubkey_from_secret


def _emit(args: Namespace, key: str, value: str) -> None:
    if wants_json(args):
        print(json.dumps({key: value}))
    else:
        print(value)


def fingerprint_cmd(args: Namespace) -> int:
    """Print the fingerprint of a public key (or of a secret key's public key)."""
    config: LockConfig = args.cli_config.lock
    if args.pubkey is not None:
        pubkey = from_hex(args.pubkey)
    else:
        pubkey = pubkey_from_secret(from_hex(args.privkey))

    _emit(args, "fingerprint", to_hex(pubkey_fingerprint(pubkey, hasher=config.hasher())))
    return 0


def hash_cmd(args: Namespace) -> int:
    """Print the domain-separated digest of a payload."""
    config: LockConfig = args.cli_config.lock
    _emit(args, "digest", to_hex(config.hasher().hash(read_payload(args))))
    return 0
