"""API request and response models."""

from api.models.requests import VerifyRequest, HashRequest, FingerprintRequest
from api.models.responses import (
    HealthResponse,
    HashResponse,
    FingerprintResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "VerifyRequest",
    "HashRequest",
    "FingerprintRequest",
    "HealthResponse",
    "HashResponse",
    "FingerprintResponse",
    "ErrorDetail",
    "ErrorResponse",
]
