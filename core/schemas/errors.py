"""
Schemas
File: errors.py

Purpose: Error taxonomy for the signature lock.
Defines the stable rejection codes, Python exceptions for control flow,
a Pydantic model for structured error communication, and the host's
low-level fault set together with its mapping onto the taxonomy.
"""

from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCode(IntEnum):
    """
    Stable rejection codes.

    The numeric values are the exit codes reported to the host, so they
    must never be renumbered.
    """

    # Host input structure
    INDEX_OUT_OF_BOUND = 100
    ITEM_MISSING = 101
    LENGTH_NOT_ENOUGH = 102
    ENCODING = 103

    # Lock-specific
    WITNESS_MISS_INPUT_TYPE = 104
    INVALID_SIGNATURE = 105
    PUBKEY_HASH_MISMATCH = 106

    @property
    def label(self) -> str:
        """CamelCase name used in reports, e.g. ``PubkeyHashMismatch``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class LockError(BaseModel):
    """Structured form of a rejection, for JSON output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: int = Field(
        ...,
        description="Numeric rejection code (exit code)",
        examples=[int(ErrorCode.PUBKEY_HASH_MISMATCH)],
    )
    name: str = Field(
        ...,
        description="Stable machine-readable error name",
        examples=["PubkeyHashMismatch"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class LockException(Exception):
    """
    Base exception for every rejection of the lock.

    Every subclass is a final, non-retryable "not authorized" outcome.
    """

    code: ErrorCode

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def name(self) -> str:
        return self.code.label

    def to_error_model(self) -> LockError:
        """Convert this exception to a LockError model."""
        return LockError(
            code=int(self.code),
            name=self.name,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={int(self.code)}, message={self.message!r})"


class IndexOutOfBoundException(LockException):
    """Requested item index does not exist on the host."""

    code = ErrorCode.INDEX_OUT_OF_BOUND


class ItemMissingException(LockException):
    """Requested item exists but carries no value."""

    code = ErrorCode.ITEM_MISSING


class LengthNotEnoughException(LockException):
    """Input is shorter than its fixed layout requires."""

    code = ErrorCode.LENGTH_NOT_ENOUGH

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        if expected is not None:
            full_details["expected"] = expected
        if actual is not None:
            full_details["actual"] = actual
        super().__init__(message, details=full_details)


class EncodingException(LockException):
    """Input bytes do not decode to the expected structure."""

    code = ErrorCode.ENCODING


class WitnessMissInputTypeException(LockException):
    """The witness carries no input_type field at all."""

    code = ErrorCode.WITNESS_MISS_INPUT_TYPE


class InvalidSignatureException(LockException):
    """Signature bytes or recovery id are invalid, or recovery failed."""

    code = ErrorCode.INVALID_SIGNATURE


class PubkeyHashMismatchException(LockException):
    """Recovered key does not hash to the expected fingerprint."""

    code = ErrorCode.PUBKEY_HASH_MISMATCH


_EXCEPTIONS_BY_CODE: dict[ErrorCode, type[LockException]] = {
    cls.code: cls
    for cls in (
        IndexOutOfBoundException,
        ItemMissingException,
        LengthNotEnoughException,
        EncodingException,
        WitnessMissInputTypeException,
        InvalidSignatureException,
        PubkeyHashMismatchException,
    )
}


def exception_for_code(code: int | ErrorCode) -> type[LockException]:
    """Look up the exception class for a numeric rejection code."""
    return _EXCEPTIONS_BY_CODE[ErrorCode(code)]


# =============================================================================
# Host Faults
# =============================================================================

class SysErrorKind(Enum):
    """Fault kinds reported by the host's read primitives."""

    INDEX_OUT_OF_BOUND = 1
    ITEM_MISSING = 2
    LENGTH_NOT_ENOUGH = 3
    ENCODING = 4
    UNKNOWN = -1


class SysError(Exception):
    """
    Low-level fault raised by a host read primitive.

    ``code`` is the raw syscall return code; ``size`` is set for
    LENGTH_NOT_ENOUGH and holds the actual available length.
    """

    def __init__(
        self,
        kind: SysErrorKind,
        code: int | None = None,
        size: int | None = None,
    ) -> None:
        self.kind = kind
        self.code = kind.value if code is None else code
        self.size = size
        super().__init__(f"sys error {self.kind.name.lower()} (code={self.code})")

    @classmethod
    def from_code(cls, code: int, size: int | None = None) -> "SysError":
        """Build a SysError from a raw syscall return code."""
        for kind in SysErrorKind:
            if kind is not SysErrorKind.UNKNOWN and kind.value == code:
                return cls(kind, code=code, size=size)
        return cls(SysErrorKind.UNKNOWN, code=code)


class FatalHostError(RuntimeError):
    """
    Unrecognized host fault.

    Not a LockException: it must abort the invocation rather than be
    reported as an ordinary rejection.
    """

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"unexpected sys error {code}")


def map_sys_error(err: SysError) -> LockException:
    """
    Map a host fault onto the rejection taxonomy.

    The mapping is total over the known kinds. UNKNOWN raises
    FatalHostError instead of returning.
    """
    if err.kind is SysErrorKind.INDEX_OUT_OF_BOUND:
        return IndexOutOfBoundException("Index out of bound")
    if err.kind is SysErrorKind.ITEM_MISSING:
        return ItemMissingException("Item missing")
    if err.kind is SysErrorKind.LENGTH_NOT_ENOUGH:
        return LengthNotEnoughException("Length not enough", actual=err.size)
    if err.kind is SysErrorKind.ENCODING:
        return EncodingException("Encoding error")
    raise FatalHostError(err.code)


__all__ = [
    "ErrorCode",
    "LockError",
    "LockException",
    "IndexOutOfBoundException",
    "ItemMissingException",
    "LengthNotEnoughException",
    "EncodingException",
    "WitnessMissInputTypeException",
    "InvalidSignatureException",
    "PubkeyHashMismatchException",
    "exception_for_code",
    "SysErrorKind",
    "SysError",
    "FatalHostError",
    "map_sys_error",
]
