"""
CLI Verify Command

Run the signature lock over a payload, a witness and a fingerprint.

The witness is given either as raw signature bytes (--witness) or as a
serialized WitnessArgs whose input_type carries the signature
(--witness-args). With neither, the input_type is treated as absent.

Usage:
    cellguard verify --payload test --witness 0x... --fingerprint 0x... [--json]
    cellguard verify --payload-hex 0x74657374 --witness-args 0x... --fingerprint 0x...
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace

from cellguard_cli.inputs import read_payload, wants_json
from core.config.runtime import LockConfig
from core.crypto.hashing import from_hex
from core.host import InMemoryHost
from core.lock import SignatureVerifier, run_script
from core.schemas.errors import LockException
from core.schemas.verification import VerificationReport


logger = logging.getLogger(__name__)


def verify_with_witness_args(
    config: LockConfig,
    fingerprint: bytes,
    payload: bytes,
    witness_args: bytes,
) -> VerificationReport:
    """Run the full lock script against a single-input in-memory host."""
    host = InMemoryHost(
        script_args=fingerprint,
        witnesses=[witness_args],
        inputs_data=[payload],
    )
    # the script reads from fixed indices; pin them to this one-input layout
    single = LockConfig(
        personalization=config.personalization,
        digest_size=config.digest_size,
    )
    try:
        return run_script(host, single)
    except LockException as e:
        return VerificationReport.failure(e)


def print_report_human(report: VerificationReport) -> None:
    """Print report in human-readable format."""
    print(f"ok: {str(report.ok).lower()}")
    if report.error is not None:
        print(f"error: {report.error.name} ({report.error.code})")
        print(f"message: {report.error.message}")
    for name in (
        "message_digest",
        "recovered_pubkey",
        "derived_fingerprint",
        "expected_fingerprint",
    ):
        value = getattr(report, name)
        if value is not None:
            print(f"{name}: {value}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Returns:
        0 when authorized, otherwise the rejection code
    """
    config: LockConfig = args.cli_config.lock
    payload = read_payload(args)
    fingerprint = from_hex(args.fingerprint)

    if args.witness_args is not None:
        logger.info("Verifying through WitnessArgs")
        report = verify_with_witness_args(
            config, fingerprint, payload, from_hex(args.witness_args)
        )
    else:
        witness = from_hex(args.witness) if args.witness is not None else None
        report = SignatureVerifier(config).check(fingerprint, payload, witness)

    if wants_json(args):
        print(json.dumps(report.model_dump(), indent=2))
    else:
        print_report_human(report)

    return report.error_code
