"""
Verify Route

Run the signature lock over hex-encoded inputs.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_verifier
from api.errors import InvalidRequestError
from api.models.requests import VerifyRequest
from core.crypto.hashing import from_hex
from core.lock import SignatureVerifier
from core.schemas.verification import VerificationReport


logger = logging.getLogger(__name__)

router = APIRouter(tags=["verification"])


def decode_hex_field(name: str, value: str) -> bytes:
    """Decode a hex request field, turning bad hex into a 400."""
    try:
        return from_hex(value)
    except ValueError as e:
        raise InvalidRequestError(
            f"Field '{name}' is not valid hex",
            details={"field": name, "reason": str(e)},
        )


@router.post("/verify", response_model=VerificationReport)
async def verify_witness(
    request: VerifyRequest,
    verifier: SignatureVerifier = Depends(get_verifier),
) -> VerificationReport:
    """
    Verify a witness signature.

    Both outcomes return 200; a rejection carries ok=false and the
    error code and name of the failed step.
    """
    payload = decode_hex_field("payload_hex", request.payload_hex)
    fingerprint = decode_hex_field("fingerprint_hex", request.fingerprint_hex)
    witness = (
        None
        if request.witness_hex is None
        else decode_hex_field("witness_hex", request.witness_hex)
    )

    report = verifier.check(fingerprint, payload, witness)
    if not report.ok:
        logger.info(f"Rejected: {report.error.name}")
    return report
