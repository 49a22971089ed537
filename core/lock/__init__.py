"""
Signature lock: verifier and script entry.
"""

from .verifier import SignatureVerifier, verify
from .script import entry, run_script

__all__ = [
    "SignatureVerifier",
    "verify",
    "entry",
    "run_script",
]
