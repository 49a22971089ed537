"""
Molecule serialization for the witness structures the lock reads.
"""

from .witness_args import (
    MoleculeError,
    WitnessArgs,
    encode_bytes,
    decode_bytes,
    encode_table,
    decode_table,
)

__all__ = [
    "MoleculeError",
    "WitnessArgs",
    "encode_bytes",
    "decode_bytes",
    "encode_table",
    "decode_table",
]
