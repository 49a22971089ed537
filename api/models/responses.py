"""
API Response Models

Pydantic models for API response serialization. POST /verify responds
with core.schemas.verification.VerificationReport directly.
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "cellguard-api"
    version: str = "v1"


class HashResponse(BaseModel):
    """Response for POST /hash endpoint."""

    digest: str = Field(..., description="32-byte digest as 0x hex")


class FingerprintResponse(BaseModel):
    """Response for POST /fingerprint endpoint."""

    pubkey: str = Field(..., description="Compressed public key as 0x hex")
    fingerprint: str = Field(..., description="Public key fingerprint as 0x hex")


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail = Field(..., description="Error details")
