"""
CLI Sign Command

Produce a witness for a payload with a secret key. Intended for building
test inputs; the lock itself never handles secret keys.

Usage:
    cellguard sign --privkey 0x... --payload test [--json]
"""

from __future__ import annotations

import json
from argparse import Namespace
from typing import Any

from cellguard_cli.inputs import read_payload, wants_json
from core.config.runtime import LockConfig
from core.crypto.hashing import from_hex, to_hex
from core.crypto.signatures import pubkey_fingerprint, pubkey_from_secret, sign_message
from core.molecule import WitnessArgs


def build_witness(config: LockConfig, secret: bytes, payload: bytes) -> dict[str, Any]:
    """Sign payload and return every value needed to verify it."""
    hasher = config.hasher()
    signature = sign_message(payload, secret, hasher=hasher)
    pubkey = pubkey_from_secret(secret)
    return {
        "message_digest": to_hex(hasher.hash(payload)),
        "signature": to_hex(signature),
        "witness_args": to_hex(WitnessArgs(input_type=signature).serialize()),
        "pubkey": to_hex(pubkey),
        "fingerprint": to_hex(pubkey_fingerprint(pubkey, hasher=hasher)),
    }


def sign_cmd(args: Namespace) -> int:
    """Execute the sign command."""
    config: LockConfig = args.cli_config.lock
    result = build_witness(config, from_hex(args.privkey), read_payload(args))

    if wants_json(args):
        print(json.dumps(result, indent=2))
    else:
        for key, value in result.items():
            print(f"{key}: {value}")

    return 0
