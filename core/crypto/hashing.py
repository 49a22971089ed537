"""
Hashing Utilities
Domain-separated BLAKE2b-256 hashing for lock verification.

This module provides:
- BLAKE2b-256 hashing with the ledger's personalization tag
- Fingerprint-ready one-shot and incremental hashers
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- The personalization tag is part of every digest; changing it breaks
  every fingerprint and signature produced under the old tag
- Always hash raw bytes exactly as given
- All operations are deterministic and share no mutable state
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass

CKB_HASH_PERSONALIZATION = b"ckb-default-hash"
DIGEST_SIZE = 32

# blake2b limits
_MAX_PERSON_SIZE = hashlib.blake2b.PERSON_SIZE
_MAX_DIGEST_SIZE = hashlib.blake2b.MAX_DIGEST_SIZE


@dataclass(frozen=True)
class Blake2bHasher:
    """
    BLAKE2b hasher bound to a personalization tag.

    The hasher itself holds no running state: each call to hash() or new()
    starts from a fresh hashlib object, so one instance can be shared freely.

    Example:
        >>> Blake2bHasher().hash(b"").hex()
        '44f4c69744d5f8c55d642062949dcae49bc4e7ef43d388c5a12f42b5633d163e'
    """

    personalization: bytes = CKB_HASH_PERSONALIZATION
    digest_size: int = DIGEST_SIZE

    def __post_init__(self) -> None:
        if not isinstance(self.personalization, (bytes, bytearray)):
            raise TypeError("personalization must be bytes")
        if len(self.personalization) > _MAX_PERSON_SIZE:
            raise ValueError(
                f"personalization must be at most {_MAX_PERSON_SIZE} bytes, "
                f"got {len(self.personalization)}"
            )
        if not 1 <= self.digest_size <= _MAX_DIGEST_SIZE:
            raise ValueError(
                f"digest_size must be between 1 and {_MAX_DIGEST_SIZE}, "
                f"got {self.digest_size}"
            )

    def new(self) -> "hashlib._Hash":
        """Return a fresh incremental hasher (update()/digest())."""
        return hashlib.blake2b(
            digest_size=self.digest_size,
            person=bytes(self.personalization),
        )

    def hash(self, data: bytes) -> bytes:
        """
        Hash raw bytes.

        Args:
            data: Bytes to hash (any length, including empty)

        Returns:
            digest_size-byte digest (32 by default)
        """
        h = self.new()
        h.update(data)
        return h.digest()


def new_blake2b(personalization: bytes = CKB_HASH_PERSONALIZATION) -> "hashlib._Hash":
    """Create a fresh 32-byte BLAKE2b hasher with the given personalization."""
    return Blake2bHasher(personalization=personalization).new()


def ckb_hash(data: bytes, personalization: bytes = CKB_HASH_PERSONALIZATION) -> bytes:
    """
    Compute the 32-byte domain-separated digest of raw bytes.

    Args:
        data: Raw bytes to hash
        personalization: Domain-separation tag (16 bytes max)

    Returns:
        32-byte BLAKE2b digest
    """
    return Blake2bHasher(personalization=personalization).hash(data)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + bytes(data).hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.

    The 0x prefix is optional; surrounding whitespace is ignored.

    Raises:
        ValueError: If the string has odd length or contains invalid
                   hex characters

    Example:
        >>> from_hex("0xdeadbeef").hex()
        'deadbeef'
    """
    hex_content = hex_string.strip()
    if hex_content[:2].lower() == "0x":
        hex_content = hex_content[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length, got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "CKB_HASH_PERSONALIZATION",
    "DIGEST_SIZE",
    "Blake2bHasher",
    "new_blake2b",
    "ckb_hash",
    "to_hex",
    "from_hex",
]
