"""
Schemas
File: verification.py

Purpose: Result format for one lock verification.
Carries the decision and the intermediate digests reached before it,
for CLI and API output.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import LockError, LockException


class VerificationReport(BaseModel):
    """
    Outcome of a single verification.

    Digest fields are 0x-prefixed hex and stay None for stages that were
    not reached before a rejection.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    ok: bool = Field(
        ...,
        description="Whether the signature authorizes the transition",
    )
    error: LockError | None = Field(
        default=None,
        description="Rejection reason (None when ok)",
    )
    message_digest: str | None = Field(
        default=None,
        description="Digest of the payload that was signed",
    )
    recovered_pubkey: str | None = Field(
        default=None,
        description="Compressed public key recovered from the signature",
    )
    derived_fingerprint: str | None = Field(
        default=None,
        description="Digest of the recovered public key",
    )
    expected_fingerprint: str | None = Field(
        default=None,
        description="Fingerprint required by the lock policy",
    )

    @property
    def error_code(self) -> int:
        """Exit code for this outcome: 0 when ok, else the rejection code."""
        return 0 if self.error is None else self.error.code

    @classmethod
    def success(cls, **digests: Any) -> "VerificationReport":
        """Create an authorized report."""
        return cls(ok=True, **digests)

    @classmethod
    def failure(cls, exc: LockException, **digests: Any) -> "VerificationReport":
        """Create a rejected report from a LockException."""
        return cls(ok=False, error=exc.to_error_model(), **digests)
