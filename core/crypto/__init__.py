"""
Core cryptographic utilities.

Provides the domain-separated hasher and recoverable secp256k1
signature handling used by the lock.
"""
from .hashing import (
    CKB_HASH_PERSONALIZATION,
    DIGEST_SIZE,
    Blake2bHasher,
    new_blake2b,
    ckb_hash,
    to_hex,
    from_hex,
)
from .signatures import (
    SIGNATURE_SIZE,
    CompactSignature,
    recover_pubkey,
    pubkey_from_secret,
    sign_recoverable,
    sign_message,
    pubkey_fingerprint,
)

__all__ = [
    "CKB_HASH_PERSONALIZATION",
    "DIGEST_SIZE",
    "Blake2bHasher",
    "new_blake2b",
    "ckb_hash",
    "to_hex",
    "from_hex",
    "SIGNATURE_SIZE",
    "CompactSignature",
    "recover_pubkey",
    "pubkey_from_secret",
    "sign_recoverable",
    "sign_message",
    "pubkey_fingerprint",
]
