"""
Signature Unit Tests
Tests for core/crypto/signatures.py

Tests:
- compact signature layout
- public key recovery and its failure modes
- key derivation, signing and fingerprints
"""
import pytest
from coincurve import PrivateKey

from core.crypto.hashing import Blake2bHasher
from core.crypto.signatures import (
    PUBKEY_COMPRESSED_SIZE,
    SIGNATURE_SIZE,
    CompactSignature,
    pubkey_fingerprint,
    pubkey_from_secret,
    recover_pubkey,
    sign_message,
    sign_recoverable,
)
from core.schemas.errors import (
    ErrorCode,
    InvalidSignatureException,
    LengthNotEnoughException,
)

from fixtures.common import (
    GENERATOR_PRIVKEY,
    GENERATOR_PUBKEY_HEX,
    OTHER_PRIVKEY,
    TEST_PRIVKEY,
)


DIGEST = Blake2bHasher().hash(b"test")


class TestCompactSignature:
    """Tests for CompactSignature parsing."""

    def test_parse_splits_rs_and_recovery_id(self):
        raw = bytes(range(64)) + b"\x01"
        sig = CompactSignature.parse(raw)

        assert sig.rs == bytes(range(64))
        assert sig.recovery_id == 1
        assert sig.serialize() == raw

    def test_parse_rejects_short(self):
        with pytest.raises(LengthNotEnoughException) as exc_info:
            CompactSignature.parse(b"\x00" * 64)

        assert exc_info.value.details == {"expected": 65, "actual": 64}

    def test_parse_rejects_long(self):
        with pytest.raises(LengthNotEnoughException):
            CompactSignature.parse(b"\x00" * 66)


class TestRecoverPubkey:
    """Tests for recover_pubkey()."""

    def test_recovers_signer(self):
        signature = sign_recoverable(DIGEST, TEST_PRIVKEY)

        pubkey = recover_pubkey(DIGEST, signature)

        assert pubkey == pubkey_from_secret(TEST_PRIVKEY)
        assert len(pubkey) == PUBKEY_COMPRESSED_SIZE
        assert pubkey[0] in (2, 3)

    def test_accepts_parsed_signature(self):
        signature = sign_recoverable(DIGEST, TEST_PRIVKEY)

        assert recover_pubkey(DIGEST, CompactSignature.parse(signature)) == \
            recover_pubkey(DIGEST, signature)

    def test_recovery_is_deterministic(self):
        signature = sign_recoverable(DIGEST, TEST_PRIVKEY)

        assert recover_pubkey(DIGEST, signature) == recover_pubkey(DIGEST, signature)

    def test_other_digest_recovers_other_key(self):
        signature = sign_recoverable(DIGEST, TEST_PRIVKEY)
        other_digest = Blake2bHasher().hash(b"tesT")

        assert recover_pubkey(other_digest, signature) != pubkey_from_secret(TEST_PRIVKEY)

    @pytest.mark.parametrize("recovery_id", [4, 27, 28, 255])
    def test_recovery_id_out_of_range(self, recovery_id):
        signature = sign_recoverable(DIGEST, TEST_PRIVKEY)
        tampered = signature[:64] + bytes([recovery_id])

        with pytest.raises(InvalidSignatureException) as exc_info:
            recover_pubkey(DIGEST, tampered)

        assert exc_info.value.code == ErrorCode.INVALID_SIGNATURE
        assert exc_info.value.details["recovery_id"] == recovery_id

    def test_overflowing_scalars(self):
        """r and s at or above the curve order do not parse."""
        with pytest.raises(InvalidSignatureException):
            recover_pubkey(DIGEST, b"\xff" * 64 + b"\x00")

    def test_zero_scalars(self):
        """r = s = 0 parses but cannot recover a key."""
        with pytest.raises(InvalidSignatureException):
            recover_pubkey(DIGEST, b"\x00" * 64 + b"\x00")

    def test_wrong_length_signature(self):
        with pytest.raises(LengthNotEnoughException):
            recover_pubkey(DIGEST, b"\x01" * 10)

    def test_wrong_digest_length(self):
        signature = sign_recoverable(DIGEST, TEST_PRIVKEY)
        with pytest.raises(ValueError, match="Digest"):
            recover_pubkey(DIGEST[:31], signature)


class TestSigning:
    """Tests for key derivation and signing helpers."""

    def test_generator_pubkey(self):
        assert pubkey_from_secret(GENERATOR_PRIVKEY).hex() == GENERATOR_PUBKEY_HEX

    def test_sign_recoverable_layout(self):
        signature = sign_recoverable(DIGEST, TEST_PRIVKEY)

        assert len(signature) == SIGNATURE_SIZE
        assert 0 <= signature[64] <= 3

    def test_sign_recoverable_is_deterministic(self):
        """RFC 6979 nonces make signatures reproducible."""
        assert sign_recoverable(DIGEST, TEST_PRIVKEY) == sign_recoverable(DIGEST, TEST_PRIVKEY)

    def test_sign_recoverable_matches_coincurve(self):
        expected = PrivateKey(TEST_PRIVKEY).sign_recoverable(DIGEST, hasher=None)

        assert sign_recoverable(DIGEST, TEST_PRIVKEY) == expected

    def test_sign_message_hashes_payload(self):
        assert sign_message(b"test", TEST_PRIVKEY) == sign_recoverable(DIGEST, TEST_PRIVKEY)

    def test_sign_rejects_bad_lengths(self):
        with pytest.raises(ValueError):
            sign_recoverable(DIGEST[:20], TEST_PRIVKEY)
        with pytest.raises(ValueError):
            sign_recoverable(DIGEST, TEST_PRIVKEY[:31])
        with pytest.raises(ValueError):
            pubkey_from_secret(b"\x01" * 31)


class TestPubkeyFingerprint:
    """Tests for pubkey_fingerprint()."""

    def test_fingerprint_is_hash_of_compressed_key(self):
        pubkey = pubkey_from_secret(TEST_PRIVKEY)

        assert pubkey_fingerprint(pubkey) == Blake2bHasher().hash(pubkey)

    def test_uncompressed_key_normalized(self):
        compressed = pubkey_from_secret(TEST_PRIVKEY)
        uncompressed = PrivateKey(TEST_PRIVKEY).public_key.format(compressed=False)

        assert pubkey_fingerprint(uncompressed) == pubkey_fingerprint(compressed)

    def test_distinct_keys_distinct_fingerprints(self):
        assert pubkey_fingerprint(pubkey_from_secret(TEST_PRIVKEY)) != \
            pubkey_fingerprint(pubkey_from_secret(OTHER_PRIVKEY))

    def test_invalid_key_rejected(self):
        with pytest.raises(ValueError):
            pubkey_fingerprint(b"\x05" * 10)
