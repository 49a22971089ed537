"""
Test fixtures package for the signature lock tests.

Usage:
    from fixtures.common import make_signed_case, make_host

    def test_something():
        case = make_signed_case(payload=b"cell data")
        host = make_host(case)
"""

from .common import (
    TEST_PRIVKEY,
    OTHER_PRIVKEY,
    GENERATOR_PRIVKEY,
    GENERATOR_PUBKEY_HEX,
    TEST_PAYLOAD,
    SignedCase,
    make_fingerprint,
    make_signed_case,
    make_host,
    make_witness_args,
    flip_bit,
)

__all__ = [
    "TEST_PRIVKEY",
    "OTHER_PRIVKEY",
    "GENERATOR_PRIVKEY",
    "GENERATOR_PUBKEY_HEX",
    "TEST_PAYLOAD",
    "SignedCase",
    "make_fingerprint",
    "make_signed_case",
    "make_host",
    "make_witness_args",
    "flip_bit",
]
