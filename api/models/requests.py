"""
API Request Models

Pydantic models for API request validation. Byte fields travel as hex
strings (0x prefix optional).
"""

from pydantic import BaseModel, Field


class VerifyRequest(BaseModel):
    """Request body for POST /verify endpoint."""

    payload_hex: str = Field(
        default="",
        max_length=2_000_000,
        description="Payload that was signed, as hex",
    )
    witness_hex: str | None = Field(
        default=None,
        max_length=1_000_000,
        description="Witness bytes r||s||recovery_id as hex; null when absent",
    )
    fingerprint_hex: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Expected public key fingerprint as hex",
    )


class HashRequest(BaseModel):
    """Request body for POST /hash endpoint."""

    data_hex: str = Field(
        default="",
        max_length=2_000_000,
        description="Bytes to hash, as hex",
    )


class FingerprintRequest(BaseModel):
    """Request body for POST /fingerprint endpoint."""

    pubkey_hex: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="SEC1 public key (33 or 65 bytes) as hex",
    )
