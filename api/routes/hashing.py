"""
Hashing Routes

Expose the lock hasher so clients can compute digests and fingerprints
exactly as the lock does.
"""

from __future__ import annotations

from coincurve import PublicKey
from fastapi import APIRouter, Depends

from api.deps import get_lock_config
from api.errors import InvalidRequestError
from api.models.requests import FingerprintRequest, HashRequest
from api.models.responses import FingerprintResponse, HashResponse
from api.routes.verify import decode_hex_field
from core.config.runtime import LockConfig
from core.crypto.hashing import to_hex
from core.crypto.signatures import pubkey_fingerprint

router = APIRouter(tags=["hashing"])


@router.post("/hash", response_model=HashResponse)
async def hash_data(
    request: HashRequest,
    config: LockConfig = Depends(get_lock_config),
) -> HashResponse:
    """Domain-separated digest of the given bytes."""
    data = decode_hex_field("data_hex", request.data_hex)
    return HashResponse(digest=to_hex(config.hasher().hash(data)))


@router.post("/fingerprint", response_model=FingerprintResponse)
async def fingerprint(
    request: FingerprintRequest,
    config: LockConfig = Depends(get_lock_config),
) -> FingerprintResponse:
    """Fingerprint of a SEC1 public key, taken over its compressed form."""
    raw = decode_hex_field("pubkey_hex", request.pubkey_hex)
    try:
        compressed = PublicKey(raw).format(compressed=True)
    except ValueError as e:
        raise InvalidRequestError(
            "Field 'pubkey_hex' is not a valid secp256k1 public key",
            details={"field": "pubkey_hex", "reason": str(e)},
        )
    return FingerprintResponse(
        pubkey=to_hex(compressed),
        fingerprint=to_hex(pubkey_fingerprint(compressed, hasher=config.hasher())),
    )
