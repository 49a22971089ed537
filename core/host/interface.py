"""
Host Interface

Defines the read contract the lock consumes from its host environment.
Every read primitive reports faults by raising SysError.
"""

from abc import ABC, abstractmethod
from enum import IntEnum

from core.molecule import WitnessArgs


class Source(IntEnum):
    """Where a read primitive looks up an item."""

    INPUT = 1
    OUTPUT = 2
    CELL_DEP = 3
    HEADER_DEP = 4
    GROUP_INPUT = 0x0100000000000001
    GROUP_OUTPUT = 0x0100000000000002


class HostEnvironment(ABC):
    """
    Read-only view of the transaction being verified.

    Implementations raise core.schemas.errors.SysError for every fault;
    they never return partial data.
    """

    @abstractmethod
    def load_witness_args(self, index: int, source: Source) -> WitnessArgs:
        """Load and decode the WitnessArgs at index within source."""

    @abstractmethod
    def load_cell_data(self, index: int, source: Source) -> bytes:
        """Load the data of the cell at index within source."""

    @abstractmethod
    def load_script_args(self) -> bytes:
        """Load the args of the script currently being executed."""
