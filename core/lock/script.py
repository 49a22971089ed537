"""
Lock script entry.

Reads the lock's three inputs from the host and runs the verifier:

    witness     <- load_witness_args(witness_index, INPUT).input_type
    payload     <- load_cell_data(cell_index, GROUP_INPUT)
    fingerprint <- load_script_args()
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from core.config.runtime import LockConfig
from core.host.interface import HostEnvironment, Source
from core.lock.verifier import SignatureVerifier
from core.schemas.errors import LockException, SysError, map_sys_error
from core.schemas.verification import VerificationReport

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _load(read: Callable[[], T]) -> T:
    """Run a host read, translating its fault into a LockException."""
    try:
        return read()
    except SysError as e:
        # map_sys_error raises FatalHostError for unknown faults
        raise map_sys_error(e) from e


def run_script(
    host: HostEnvironment,
    config: Optional[LockConfig] = None,
) -> VerificationReport:
    """
    Run the lock against a host.

    Returns:
        Authorized VerificationReport

    Raises:
        LockException: On any rejection, including mapped host faults
        FatalHostError: On a host fault outside the known set
    """
    config = config or LockConfig()

    witness_args = _load(lambda: host.load_witness_args(config.witness_index, Source.INPUT))
    payload = _load(lambda: host.load_cell_data(config.cell_index, Source.GROUP_INPUT))
    fingerprint = _load(host.load_script_args)

    return SignatureVerifier(config).verify(fingerprint, payload, witness_args.input_type)


def entry(host: HostEnvironment, config: Optional[LockConfig] = None) -> int:
    """
    Run the lock and return its exit code.

    0 means authorized; any other value is the ErrorCode of the rejection.
    FatalHostError is not caught.
    """
    try:
        run_script(host, config)
    except LockException as e:
        logger.info(f"Lock rejected with {e.name} ({int(e.code)}): {e.message}")
        return int(e.code)
    return 0
