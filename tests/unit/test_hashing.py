"""
Hashing Unit Tests
Tests for core/crypto/hashing.py

Tests:
- personalization-bound BLAKE2b digests
- determinism and incremental hashing
- to_hex/from_hex
"""
import hashlib

import pytest

from core.crypto.hashing import (
    CKB_HASH_PERSONALIZATION,
    Blake2bHasher,
    ckb_hash,
    from_hex,
    new_blake2b,
    to_hex,
)


# Digest of the empty byte string under the ckb-default-hash personalization
EMPTY_DIGEST_HEX = "44f4c69744d5f8c55d642062949dcae49bc4e7ef43d388c5a12f42b5633d163e"


class TestBlake2bHasher:
    """Tests for Blake2bHasher."""

    def test_personalization_constant(self):
        """The personalization tag is reproduced byte for byte."""
        assert CKB_HASH_PERSONALIZATION == b"ckb-default-hash"
        assert len(CKB_HASH_PERSONALIZATION) == 16

    def test_empty_input_known_value(self):
        """Hashing empty bytes gives the known blank digest."""
        assert Blake2bHasher().hash(b"").hex() == EMPTY_DIGEST_HEX

    def test_matches_hashlib_blake2b(self):
        """Digest equals hashlib.blake2b with the same parameters."""
        expected = hashlib.blake2b(
            b"hello", digest_size=32, person=b"ckb-default-hash"
        ).digest()

        assert Blake2bHasher().hash(b"hello") == expected

    def test_digest_is_32_bytes(self):
        assert len(Blake2bHasher().hash(b"x" * 1000)) == 32

    def test_deterministic(self):
        """Same input produces the same digest across calls and instances."""
        data = b"test data for hashing"

        assert Blake2bHasher().hash(data) == Blake2bHasher().hash(data)

    def test_different_inputs_different_outputs(self):
        hasher = Blake2bHasher()

        assert hasher.hash(b"input1") != hasher.hash(b"input2")

    def test_personalization_separates_domains(self):
        """Another tag over the same bytes yields another digest."""
        default = Blake2bHasher().hash(b"test")
        other = Blake2bHasher(personalization=b"other-protocol").hash(b"test")
        plain = hashlib.blake2b(b"test", digest_size=32).digest()

        assert default != other
        assert default != plain

    def test_incremental_equals_one_shot(self):
        """Updating piecewise gives the same digest as one call."""
        hasher = Blake2bHasher()
        h = hasher.new()
        h.update(b"te")
        h.update(b"st")

        assert h.digest() == hasher.hash(b"test")

    def test_new_returns_independent_state(self):
        """Each new() starts fresh; no state leaks between calls."""
        hasher = Blake2bHasher()
        first = hasher.new()
        first.update(b"garbage")

        assert hasher.new().digest() == hasher.hash(b"")

    def test_rejects_long_personalization(self):
        with pytest.raises(ValueError, match="personalization"):
            Blake2bHasher(personalization=b"x" * 17)

    def test_rejects_bad_digest_size(self):
        with pytest.raises(ValueError, match="digest_size"):
            Blake2bHasher(digest_size=0)
        with pytest.raises(ValueError, match="digest_size"):
            Blake2bHasher(digest_size=65)

    def test_hasher_is_immutable(self):
        hasher = Blake2bHasher()
        with pytest.raises(AttributeError):
            hasher.personalization = b"changed"


class TestModuleHelpers:
    """Tests for new_blake2b() and ckb_hash()."""

    def test_ckb_hash_equals_hasher(self):
        assert ckb_hash(b"test") == Blake2bHasher().hash(b"test")

    def test_ckb_hash_custom_personalization(self):
        tag = b"alt-tag"
        assert ckb_hash(b"test", personalization=tag) == Blake2bHasher(tag).hash(b"test")

    def test_new_blake2b(self):
        h = new_blake2b()
        h.update(b"test")
        assert h.digest() == ckb_hash(b"test")


class TestHexConversion:
    """Tests for to_hex() and from_hex()."""

    def test_to_hex_adds_prefix(self):
        assert to_hex(bytes.fromhex("deadbeef")) == "0xdeadbeef"

    def test_to_hex_empty(self):
        assert to_hex(b"") == "0x"

    def test_from_hex_with_prefix(self):
        assert from_hex("0xdeadbeef") == bytes.fromhex("deadbeef")

    def test_from_hex_without_prefix(self):
        assert from_hex("deadbeef") == bytes.fromhex("deadbeef")

    def test_from_hex_uppercase_prefix_and_whitespace(self):
        assert from_hex("  0XDEADBEEF \n") == bytes.fromhex("deadbeef")

    def test_from_hex_odd_length(self):
        with pytest.raises(ValueError, match="even length"):
            from_hex("0xabc")

    def test_from_hex_invalid_chars(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            from_hex("0xzz")

    def test_round_trip(self):
        data = bytes(range(256))
        assert from_hex(to_hex(data)) == data
