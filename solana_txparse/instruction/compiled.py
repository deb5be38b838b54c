"""Fallback instruction for programs without a registered decoder."""

from typing import Any, List, Sequence

import base58
from solders.instruction import AccountMeta
from solders.pubkey import Pubkey

from solana_txparse.instruction.base import ProgramInstruction


class OpaqueInstruction(ProgramInstruction):
    """Resolved accounts and program id around untouched instruction data."""

    name = "Compiled"

    def __init__(self, program_id: Pubkey, accounts: Sequence[AccountMeta], data: bytes):
        self._program_id = program_id
        self._accounts = list(accounts)
        self._data = bytes(data)

    @property
    def program_id(self) -> Pubkey:
        return self._program_id

    @property
    def accounts(self) -> List[AccountMeta]:
        return self._accounts

    def data(self) -> bytes:
        return self._data

    def data_base58(self) -> str:
        """Data encoded the way JSON-RPC renders compiled instructions."""
        return base58.b58encode(self._data).decode("ascii")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OpaqueInstruction):
            return NotImplemented
        return (
            self._program_id == other._program_id
            and self._accounts == other._accounts
            and self._data == other._data
        )

    def __hash__(self) -> int:
        return hash((self._program_id, self._data))

    def __repr__(self) -> str:
        return f"OpaqueInstruction(program_id={self._program_id}, data={self.data_base58()!r})"
