"""
Common test fixtures shared by all modules.

Provides fixed keys and factory functions for lock inputs:
- signed witnesses over a payload
- policy fingerprints
- WitnessArgs-wrapped witnesses and in-memory hosts
"""

from dataclasses import dataclass
from typing import Optional

from core.crypto.hashing import Blake2bHasher
from core.crypto.signatures import pubkey_fingerprint, pubkey_from_secret, sign_message
from core.host import InMemoryHost
from core.molecule import WitnessArgs


# Fixed test keys (DO NOT USE IN PRODUCTION)
TEST_PRIVKEY = bytes.fromhex(
    "d00c06bfd800d27397002dca6fb0993d5ba6399b4238b2f29ee9deb97593d2b0"
)
OTHER_PRIVKEY = bytes.fromhex("11" * 32)

# Public key of secret key 1 is the curve generator
GENERATOR_PRIVKEY = (1).to_bytes(32, "big")
GENERATOR_PUBKEY_HEX = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"

TEST_PAYLOAD = b"test"


@dataclass(frozen=True)
class SignedCase:
    """Everything needed to run one verification."""

    payload: bytes
    witness: bytes
    fingerprint: bytes
    pubkey: bytes


def make_fingerprint(
    secret: bytes = TEST_PRIVKEY,
    hasher: Optional[Blake2bHasher] = None,
) -> bytes:
    """Fingerprint of the public key belonging to secret."""
    return pubkey_fingerprint(pubkey_from_secret(secret), hasher=hasher)


def make_signed_case(
    payload: bytes = TEST_PAYLOAD,
    secret: bytes = TEST_PRIVKEY,
    hasher: Optional[Blake2bHasher] = None,
) -> SignedCase:
    """Sign payload with secret and derive the matching fingerprint."""
    pubkey = pubkey_from_secret(secret)
    return SignedCase(
        payload=payload,
        witness=sign_message(payload, secret, hasher=hasher),
        fingerprint=pubkey_fingerprint(pubkey, hasher=hasher),
        pubkey=pubkey,
    )


def make_host(
    case: Optional[SignedCase] = None,
    input_type: Optional[bytes] = None,
    omit_input_type: bool = False,
) -> InMemoryHost:
    """
    Build the single-input host layout for a signed case.

    input_type overrides the witness bytes; omit_input_type leaves the
    WitnessArgs field empty.
    """
    case = case or make_signed_case()
    if omit_input_type:
        witness = None
    elif input_type is not None:
        witness = input_type
    else:
        witness = case.witness
    return InMemoryHost.from_transaction(
        payload=case.payload,
        script_args=case.fingerprint,
        input_type=witness,
    )


def make_witness_args(witness: bytes) -> bytes:
    """Serialize witness bytes into the input_type of a WitnessArgs."""
    return WitnessArgs(input_type=witness).serialize()


def flip_bit(data: bytes, index: int = 0, bit: int = 0) -> bytes:
    """Return data with one bit flipped."""
    mutable = bytearray(data)
    mutable[index] ^= 1 << bit
    return bytes(mutable)
