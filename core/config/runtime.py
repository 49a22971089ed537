"""
Runtime Configuration

Configuration for the signature lock: hashing parameters and the host
locations the script reads its inputs from.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

from core.crypto.hashing import CKB_HASH_PERSONALIZATION, DIGEST_SIZE, Blake2bHasher, from_hex

load_dotenv()


ENV_PREFIX = "CELLGUARD_"


def _decode_personalization(value: str | bytes) -> bytes:
    """Accept raw bytes, a 0x-prefixed hex string, or plain text."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if value.startswith("0x"):
        return from_hex(value)
    return value.encode("utf-8")


@dataclass
class LockConfig:
    """
    Configuration for one lock verification.

    Can be loaded from:
    - Environment variables (CELLGUARD_* prefix, .env supported)
    - A dictionary (e.g. parsed from cellguard.json)
    - Programmatic construction
    """
    personalization: bytes = CKB_HASH_PERSONALIZATION
    digest_size: int = DIGEST_SIZE
    witness_index: int = 0
    cell_index: int = 0

    def __post_init__(self) -> None:
        # secp256k1 signing and recovery take exactly 32-byte digests
        if self.digest_size != DIGEST_SIZE:
            raise ValueError(
                f"digest_size must be {DIGEST_SIZE}, got {self.digest_size}"
            )

    def hasher(self) -> Blake2bHasher:
        """Build the hasher described by this config."""
        return Blake2bHasher(
            personalization=self.personalization,
            digest_size=self.digest_size,
        )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - CELLGUARD_HASH_PERSONALIZATION: personalization tag (text or 0x hex)
        - CELLGUARD_WITNESS_INDEX: witness index holding the signature
        - CELLGUARD_CELL_INDEX: group input index holding the payload
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_PERSONALIZATION"):
            overrides["personalization"] = os.getenv(f"{ENV_PREFIX}HASH_PERSONALIZATION")
        if os.getenv(f"{ENV_PREFIX}WITNESS_INDEX"):
            overrides["witness_index"] = int(os.getenv(f"{ENV_PREFIX}WITNESS_INDEX", "0"))
        if os.getenv(f"{ENV_PREFIX}CELL_INDEX"):
            overrides["cell_index"] = int(os.getenv(f"{ENV_PREFIX}CELL_INDEX", "0"))

        return overrides

    @classmethod
    def from_env(cls) -> "LockConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LockConfig":
        """Load configuration from a dictionary (supports partial data)."""
        kwargs: dict[str, Any] = {}
        if data.get("personalization") is not None:
            kwargs["personalization"] = _decode_personalization(data["personalization"])
        for key in ("digest_size", "witness_index", "cell_index"):
            if key in data:
                kwargs[key] = int(data[key])
        return cls(**kwargs)

    def with_env_overrides(self) -> "LockConfig":
        """Return a new config with environment variable overrides applied."""
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        if "personalization" in overrides:
            new_config.personalization = _decode_personalization(overrides["personalization"])
        if "witness_index" in overrides:
            new_config.witness_index = overrides["witness_index"]
        if "cell_index" in overrides:
            new_config.cell_index = overrides["cell_index"]
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        try:
            personalization: str = self.personalization.decode("ascii")
        except UnicodeDecodeError:
            personalization = "0x" + self.personalization.hex()
        else:
            # text starting with 0x would read back as hex
            if personalization.startswith("0x"):
                personalization = "0x" + self.personalization.hex()
        return {
            "personalization": personalization,
            "digest_size": self.digest_size,
            "witness_index": self.witness_index,
            "cell_index": self.cell_index,
        }
