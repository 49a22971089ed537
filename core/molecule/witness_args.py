"""
WitnessArgs molecule codec.

WitnessArgs is a molecule table with three optional byte fields:

    table WitnessArgs {
        lock:        BytesOpt,
        input_type:  BytesOpt,
        output_type: BytesOpt,
    }

Table layout:  total_size:u32le || offset[0..3]:u32le || field bytes
BytesOpt:      empty for None, otherwise Bytes
Bytes:         item_count:u32le || items
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

NUMBER_SIZE = 4
FIELD_COUNT = 3
HEADER_SIZE = NUMBER_SIZE * (1 + FIELD_COUNT)

_U32 = struct.Struct("<I")


class MoleculeError(ValueError):
    """Raised when bytes do not form a valid molecule structure."""


def _read_u32(data: bytes, offset: int) -> int:
    return _U32.unpack_from(data, offset)[0]


def encode_bytes(value: bytes) -> bytes:
    """Encode a molecule Bytes fixvec."""
    return _U32.pack(len(value)) + bytes(value)


def decode_bytes(data: bytes) -> bytes:
    """Decode a molecule Bytes fixvec, checking its length prefix."""
    if len(data) < NUMBER_SIZE:
        raise MoleculeError(
            f"Bytes header needs {NUMBER_SIZE} bytes, got {len(data)}"
        )
    item_count = _read_u32(data, 0)
    if NUMBER_SIZE + item_count != len(data):
        raise MoleculeError(
            f"Bytes declares {item_count} items but carries {len(data) - NUMBER_SIZE}"
        )
    return bytes(data[NUMBER_SIZE:])


def encode_bytes_opt(value: Optional[bytes]) -> bytes:
    return b"" if value is None else encode_bytes(value)


def decode_bytes_opt(data: bytes) -> Optional[bytes]:
    return None if not data else decode_bytes(data)


def encode_table(fields: list[bytes]) -> bytes:
    """Encode already-serialized fields as a molecule table."""
    header_size = NUMBER_SIZE * (1 + len(fields))
    total_size = header_size + sum(len(f) for f in fields)

    offsets = []
    cursor = header_size
    for field in fields:
        offsets.append(cursor)
        cursor += len(field)

    header = _U32.pack(total_size) + b"".join(_U32.pack(o) for o in offsets)
    return header + b"".join(fields)


def decode_table(data: bytes, field_count: int) -> list[bytes]:
    """
    Split a molecule table into its raw field slices.

    Raises:
        MoleculeError: On any structural violation, or if the table does
            not carry exactly field_count fields
    """
    data = bytes(data)
    if len(data) < NUMBER_SIZE:
        raise MoleculeError(f"Table header needs {NUMBER_SIZE} bytes, got {len(data)}")

    total_size = _read_u32(data, 0)
    if total_size != len(data):
        raise MoleculeError(f"Table declares {total_size} bytes but got {len(data)}")

    if total_size == NUMBER_SIZE:
        actual_count = 0
    else:
        if total_size < NUMBER_SIZE * 2:
            raise MoleculeError("Table too short for its first offset")
        first_offset = _read_u32(data, NUMBER_SIZE)
        if first_offset % NUMBER_SIZE != 0 or first_offset < NUMBER_SIZE * 2:
            raise MoleculeError(f"Invalid first offset {first_offset}")
        if first_offset > total_size:
            raise MoleculeError(f"First offset {first_offset} beyond table end")
        actual_count = first_offset // NUMBER_SIZE - 1

    if actual_count != field_count:
        raise MoleculeError(f"Table has {actual_count} fields, expected {field_count}")

    offsets = [
        _read_u32(data, NUMBER_SIZE * (i + 1)) for i in range(field_count)
    ]
    offsets.append(total_size)

    for start, end in zip(offsets, offsets[1:]):
        if start > end:
            raise MoleculeError(f"Offsets not monotonic: {start} > {end}")

    return [data[start:end] for start, end in zip(offsets, offsets[1:])]


@dataclass(frozen=True)
class WitnessArgs:
    """Witness carried alongside a transaction input."""

    lock: Optional[bytes] = None
    input_type: Optional[bytes] = None
    output_type: Optional[bytes] = None

    def serialize(self) -> bytes:
        return encode_table([
            encode_bytes_opt(self.lock),
            encode_bytes_opt(self.input_type),
            encode_bytes_opt(self.output_type),
        ])

    @classmethod
    def from_bytes(cls, data: bytes) -> "WitnessArgs":
        """
        Decode serialized WitnessArgs.

        Raises:
            MoleculeError: If data is not a valid WitnessArgs table
        """
        lock, input_type, output_type = decode_table(data, FIELD_COUNT)
        return cls(
            lock=decode_bytes_opt(lock),
            input_type=decode_bytes_opt(input_type),
            output_type=decode_bytes_opt(output_type),
        )


__all__ = [
    "MoleculeError",
    "WitnessArgs",
    "encode_bytes",
    "decode_bytes",
    "encode_table",
    "decode_table",
]
