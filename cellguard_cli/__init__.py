"""
Cellguard CLI

Command-line interface for the secp256k1 signature lock.

Usage:
    python -m cellguard_cli verify --payload test --witness 0x... --fingerprint 0x...
    python -m cellguard_cli sign --privkey 0x... --payload test
    python -m cellguard_cli fingerprint --pubkey 0x02...
    python -m cellguard_cli hash --payload test
"""

__version__ = "0.1.0"
