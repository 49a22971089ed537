"""
In-memory host environment.

Backs the host read contract with plain Python values. Used by the CLI,
the API and the tests to run the lock script without a ledger node.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from core.host.interface import HostEnvironment, Source
from core.molecule import MoleculeError, WitnessArgs
from core.schemas.errors import SysError, SysErrorKind

logger = logging.getLogger(__name__)


def _pick(items: Sequence[Optional[bytes]], index: int) -> bytes:
    if index < 0 or index >= len(items):
        raise SysError(SysErrorKind.INDEX_OUT_OF_BOUND)
    item = items[index]
    if item is None:
        raise SysError(SysErrorKind.ITEM_MISSING)
    return item


class InMemoryHost(HostEnvironment):
    """
    Host backed by in-memory transaction data.

    Args:
        script_args: Args of the executing script (the policy fingerprint)
        witnesses: Raw serialized witnesses, one per input index.
            A None slot reads as ITEM_MISSING.
        inputs_data: Data of each input cell
        outputs_data: Data of each output cell
        cell_deps_data: Data of each dep cell
        group_inputs: Input indices that belong to the executing script group
            (default: every input)
        group_outputs: Output indices that belong to the group (default: none)
    """

    def __init__(
        self,
        script_args: bytes,
        witnesses: Sequence[Optional[bytes]] = (),
        inputs_data: Sequence[Optional[bytes]] = (),
        outputs_data: Sequence[Optional[bytes]] = (),
        cell_deps_data: Sequence[Optional[bytes]] = (),
        group_inputs: Optional[Sequence[int]] = None,
        group_outputs: Optional[Sequence[int]] = None,
    ) -> None:
        self.script_args = bytes(script_args)
        self.witnesses = list(witnesses)
        self.inputs_data = list(inputs_data)
        self.outputs_data = list(outputs_data)
        self.cell_deps_data = list(cell_deps_data)
        self.group_inputs = (
            list(range(len(self.inputs_data))) if group_inputs is None else list(group_inputs)
        )
        self.group_outputs = [] if group_outputs is None else list(group_outputs)

    @classmethod
    def from_transaction(
        cls,
        payload: bytes,
        script_args: bytes,
        input_type: Optional[bytes] = None,
        lock: Optional[bytes] = None,
    ) -> "InMemoryHost":
        """
        Build the single-input layout the lock is normally run against.

        The payload is the data of input 0 and the signature travels in the
        input_type field of witness 0.
        """
        witness = WitnessArgs(lock=lock, input_type=input_type).serialize()
        return cls(
            script_args=script_args,
            witnesses=[witness],
            inputs_data=[payload],
            outputs_data=[b""],
        )

    def _resolve(self, index: int, source: Source) -> tuple[Sequence[Optional[bytes]], int]:
        """Translate (index, source) into a backing list and a concrete index."""
        if source == Source.INPUT:
            return self.inputs_data, index
        if source == Source.OUTPUT:
            return self.outputs_data, index
        if source == Source.CELL_DEP:
            return self.cell_deps_data, index
        if source == Source.GROUP_INPUT:
            if index < 0 or index >= len(self.group_inputs):
                raise SysError(SysErrorKind.INDEX_OUT_OF_BOUND)
            return self.inputs_data, self.group_inputs[index]
        if source == Source.GROUP_OUTPUT:
            if index < 0 or index >= len(self.group_outputs):
                raise SysError(SysErrorKind.INDEX_OUT_OF_BOUND)
            return self.outputs_data, self.group_outputs[index]
        # header deps carry no cell data
        raise SysError(SysErrorKind.INDEX_OUT_OF_BOUND)

    def load_witness_args(self, index: int, source: Source) -> WitnessArgs:
        if source == Source.GROUP_INPUT:
            if index < 0 or index >= len(self.group_inputs):
                raise SysError(SysErrorKind.INDEX_OUT_OF_BOUND)
            index = self.group_inputs[index]
        elif source == Source.GROUP_OUTPUT:
            if index < 0 or index >= len(self.group_outputs):
                raise SysError(SysErrorKind.INDEX_OUT_OF_BOUND)
            index = self.group_outputs[index]
        elif source not in (Source.INPUT, Source.OUTPUT):
            raise SysError(SysErrorKind.INDEX_OUT_OF_BOUND)

        raw = _pick(self.witnesses, index)
        try:
            return WitnessArgs.from_bytes(raw)
        except MoleculeError as e:
            logger.debug(f"Witness {index} is not valid WitnessArgs: {e}")
            raise SysError(SysErrorKind.ENCODING) from e

    def load_cell_data(self, index: int, source: Source) -> bytes:
        items, concrete = self._resolve(index, source)
        return bytes(_pick(items, concrete))

    def load_script_args(self) -> bytes:
        return self.script_args
