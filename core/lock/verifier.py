"""
Signature Lock Verifier

Decides whether a recoverable secp256k1 signature over a payload was
produced by the key whose fingerprint the lock policy names.

Verification steps (short-circuit on first failure):
1. witness present and at least 65 bytes -> compact signature
2. digest = hash(payload)
3. pubkey = recover(digest, signature)
4. derived = hash(pubkey)
5. derived == policy fingerprint

Every rejection is raised as a LockException carrying its code.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from core.config.runtime import LockConfig
from core.crypto.hashing import Blake2bHasher, to_hex
from core.crypto.signatures import SIGNATURE_SIZE, CompactSignature, recover_pubkey
from core.schemas.errors import (
    LengthNotEnoughException,
    LockException,
    PubkeyHashMismatchException,
    WitnessMissInputTypeException,
)
from core.schemas.verification import VerificationReport

logger = logging.getLogger(__name__)


class SignatureVerifier:
    """
    Verifies witness signatures against a policy fingerprint.

    The verifier holds only its hasher configuration; every call is
    independent, so one instance can serve concurrent verifications.
    """

    def __init__(
        self,
        config: Optional[LockConfig] = None,
        hasher: Optional[Blake2bHasher] = None,
    ) -> None:
        """
        Initialize the verifier.

        Args:
            config: Lock configuration (personalization, digest size)
            hasher: Explicit hasher; overrides the one built from config
        """
        self.config = config or LockConfig()
        self.hasher = hasher or self.config.hasher()

    def verify(
        self,
        policy_fingerprint: bytes,
        payload: bytes,
        witness: Optional[bytes],
    ) -> VerificationReport:
        """
        Verify a witness signature over payload.

        Args:
            policy_fingerprint: Expected 32-byte digest of the signer's key
            payload: Bytes that were signed (hashed before signing)
            witness: Authorization evidence; None when the field is absent

        Returns:
            VerificationReport with ok=True and the intermediate digests

        Raises:
            WitnessMissInputTypeException: witness is None
            LengthNotEnoughException: witness shorter than 65 bytes
            InvalidSignatureException: signature cannot recover a key
            PubkeyHashMismatchException: recovered key has another fingerprint
        """
        reached: dict[str, Any] = {}
        self._run(policy_fingerprint, payload, witness, reached)
        return VerificationReport.success(**reached)

    def check(
        self,
        policy_fingerprint: bytes,
        payload: bytes,
        witness: Optional[bytes],
    ) -> VerificationReport:
        """
        Like verify(), but rejections are returned as a failed report.

        Only LockException is converted; anything else propagates.
        """
        reached: dict[str, Any] = {}
        try:
            self._run(policy_fingerprint, payload, witness, reached)
        except LockException as e:
            return VerificationReport.failure(e, **reached)
        return VerificationReport.success(**reached)

    def is_authorized(
        self,
        policy_fingerprint: bytes,
        payload: bytes,
        witness: Optional[bytes],
    ) -> bool:
        return self.check(policy_fingerprint, payload, witness).ok

    def _run(
        self,
        policy_fingerprint: bytes,
        payload: bytes,
        witness: Optional[bytes],
        reached: dict[str, Any],
    ) -> None:
        reached["expected_fingerprint"] = to_hex(policy_fingerprint)

        signature = self._extract_signature(witness)

        digest = self.hasher.hash(payload)
        reached["message_digest"] = to_hex(digest)
        logger.debug(f"Message digest: {reached['message_digest']}")

        pubkey = recover_pubkey(digest, signature)
        reached["recovered_pubkey"] = to_hex(pubkey)

        derived = self.hasher.hash(pubkey)
        reached["derived_fingerprint"] = to_hex(derived)
        logger.debug(f"Recovered {reached['recovered_pubkey']} -> {reached['derived_fingerprint']}")

        if derived != bytes(policy_fingerprint):
            logger.info("Rejected: recovered key does not match the policy fingerprint")
            raise PubkeyHashMismatchException(
                "Recovered public key hash does not match the lock fingerprint",
                details={
                    "expected": reached["expected_fingerprint"],
                    "derived": reached["derived_fingerprint"],
                },
            )

    @staticmethod
    def _extract_signature(witness: Optional[bytes]) -> CompactSignature:
        """Take the leading 65 bytes of the witness as a compact signature."""
        if witness is None:
            logger.info("Rejected: witness has no input_type field")
            raise WitnessMissInputTypeException("Witness input_type is missing")

        if len(witness) < SIGNATURE_SIZE:
            logger.info(f"Rejected: witness is {len(witness)} bytes, need {SIGNATURE_SIZE}")
            raise LengthNotEnoughException(
                f"Witness must hold at least {SIGNATURE_SIZE} bytes, got {len(witness)}",
                expected=SIGNATURE_SIZE,
                actual=len(witness),
            )

        # trailing bytes beyond the signature are ignored
        return CompactSignature.parse(witness[:SIGNATURE_SIZE])


def verify(
    policy_fingerprint: bytes,
    payload: bytes,
    witness: Optional[bytes],
    *,
    hasher: Optional[Blake2bHasher] = None,
) -> VerificationReport:
    """Verify with a one-off SignatureVerifier. See SignatureVerifier.verify()."""
    return SignatureVerifier(hasher=hasher).verify(policy_fingerprint, payload, witness)
