"""
Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Error taxonomy and host faults
from .errors import (
    EncodingException,
    ErrorCode,
    FatalHostError,
    IndexOutOfBoundException,
    InvalidSignatureException,
    ItemMissingException,
    LengthNotEnoughException,
    LockError,
    LockException,
    PubkeyHashMismatchException,
    SysError,
    SysErrorKind,
    WitnessMissInputTypeException,
    exception_for_code,
    map_sys_error,
)

# Verification results
from .verification import VerificationReport

__all__ = [
    "EncodingException",
    "ErrorCode",
    "FatalHostError",
    "IndexOutOfBoundException",
    "InvalidSignatureException",
    "ItemMissingException",
    "LengthNotEnoughException",
    "LockError",
    "LockException",
    "PubkeyHashMismatchException",
    "SysError",
    "SysErrorKind",
    "WitnessMissInputTypeException",
    "exception_for_code",
    "map_sys_error",
    "VerificationReport",
]
