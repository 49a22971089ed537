"""
Recoverable secp256k1 signatures.

Compact signature layout: r (32) || s (32) || recovery_id (1).
Curve arithmetic is delegated to coincurve (libsecp256k1).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from coincurve import PrivateKey, PublicKey

from core.crypto.hashing import DIGEST_SIZE, Blake2bHasher
from core.schemas.errors import InvalidSignatureException, LengthNotEnoughException

logger = logging.getLogger(__name__)

SIGNATURE_SIZE = 65
RS_SIZE = 64
RECOVERY_ID_MAX = 3
PUBKEY_COMPRESSED_SIZE = 33
SECRET_KEY_SIZE = 32


@dataclass(frozen=True)
class CompactSignature:
    """A 65-byte recoverable signature split into r||s and the recovery id."""

    rs: bytes
    recovery_id: int

    @classmethod
    def parse(cls, data: bytes) -> "CompactSignature":
        """
        Split exactly 65 bytes into r||s and recovery id.

        Only the layout is checked here; validity of the values is decided
        by recover_pubkey().

        Raises:
            LengthNotEnoughException: If data is not exactly 65 bytes
        """
        if len(data) != SIGNATURE_SIZE:
            raise LengthNotEnoughException(
                f"Signature must be {SIGNATURE_SIZE} bytes, got {len(data)}",
                expected=SIGNATURE_SIZE,
                actual=len(data),
            )
        return cls(rs=bytes(data[:RS_SIZE]), recovery_id=data[RS_SIZE])

    def serialize(self) -> bytes:
        return self.rs + bytes([self.recovery_id])


def recover_pubkey(digest: bytes, signature: bytes | CompactSignature) -> bytes:
    """
    Recover the signer's compressed public key.

    Args:
        digest: 32-byte message digest that was signed
        signature: 65-byte compact signature or a parsed CompactSignature

    Returns:
        33-byte compressed SEC1 public key

    Raises:
        ValueError: If digest is not 32 bytes
        LengthNotEnoughException: If signature bytes are not 65 long
        InvalidSignatureException: If the recovery id is out of range,
            r||s does not parse, or recovery fails
    """
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}")

    if not isinstance(signature, CompactSignature):
        signature = CompactSignature.parse(signature)

    if not 0 <= signature.recovery_id <= RECOVERY_ID_MAX:
        raise InvalidSignatureException(
            f"Recovery id {signature.recovery_id} out of range 0..{RECOVERY_ID_MAX}",
            details={"recovery_id": signature.recovery_id},
        )

    try:
        # hasher=None: digest is already the 32-byte message
        pubkey = PublicKey.from_signature_and_message(
            signature.serialize(), bytes(digest), hasher=None
        )
    except Exception as e:  # coincurve raises ValueError or a bare Exception
        logger.debug(f"Public key recovery failed: {e}")
        raise InvalidSignatureException(
            "Signature does not recover a public key",
            details={"reason": str(e)},
        ) from e

    return pubkey.format(compressed=True)


def pubkey_from_secret(secret: bytes) -> bytes:
    """Derive the 33-byte compressed public key of a 32-byte secret key."""
    if len(secret) != SECRET_KEY_SIZE:
        raise ValueError(f"Secret key must be {SECRET_KEY_SIZE} bytes, got {len(secret)}")
    return PrivateKey(bytes(secret)).public_key.format(compressed=True)


def sign_recoverable(digest: bytes, secret: bytes) -> bytes:
    """
    Sign a 32-byte digest, returning r||s||recovery_id.

    The digest is signed as-is (no additional hashing).
    """
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
    if len(secret) != SECRET_KEY_SIZE:
        raise ValueError(f"Secret key must be {SECRET_KEY_SIZE} bytes, got {len(secret)}")
    return PrivateKey(bytes(secret)).sign_recoverable(bytes(digest), hasher=None)


def sign_message(
    payload: bytes,
    secret: bytes,
    hasher: Optional[Blake2bHasher] = None,
) -> bytes:
    """Hash payload with the lock hasher and sign the digest."""
    hasher = hasher or Blake2bHasher()
    return sign_recoverable(hasher.hash(payload), secret)


def pubkey_fingerprint(pubkey: bytes, hasher: Optional[Blake2bHasher] = None) -> bytes:
    """
    Compute the fingerprint of a public key.

    Accepts any SEC1 encoding (33 or 65 bytes); the fingerprint is always
    taken over the compressed form.

    Raises:
        ValueError: If pubkey is not a valid secp256k1 point encoding
    """
    hasher = hasher or Blake2bHasher()
    if len(pubkey) != PUBKEY_COMPRESSED_SIZE or pubkey[0] not in (2, 3):
        pubkey = PublicKey(bytes(pubkey)).format(compressed=True)
    return hasher.hash(bytes(pubkey))


__all__ = [
    "SIGNATURE_SIZE",
    "RS_SIZE",
    "RECOVERY_ID_MAX",
    "PUBKEY_COMPRESSED_SIZE",
    "CompactSignature",
    "recover_pubkey",
    "pubkey_from_secret",
    "sign_recoverable",
    "sign_message",
    "pubkey_fingerprint",
]
