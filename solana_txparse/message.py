"""Account and program id resolution for compiled instructions.

A message holds a single account key table; every compiled instruction refers
into it by index. Signer and writable roles come from the key's position in
that table as described by the message header, never from the instruction.

Any object exposing ``account_keys``, ``header`` and ``instructions`` is
accepted (``solders.message.Message`` does). Transactions are accepted too,
their ``message`` is used.
"""

import logging
from typing import Any, List, Sequence, Tuple

from solders.instruction import AccountMeta
from solders.pubkey import Pubkey

from solana_txparse.utils.error_handling import IndexOutOfRangeError

logger = logging.getLogger(__name__)


def message_of(transaction_or_message: Any) -> Any:
    """Return the message of a transaction, or the argument if it already is one."""
    if hasattr(transaction_or_message, "account_keys"):
        return transaction_or_message
    return transaction_or_message.message


def _check_index(index: int, length: int, kind: str) -> None:
    if index < 0 or index >= length:
        raise IndexOutOfRangeError(
            f"{kind} index {index} out of range (length {length})",
            index=index,
            length=length,
            kind=kind,
        )


def get_instruction(message: Any, index: int) -> Any:
    """Get the compiled instruction at ``index``.

    Raises:
        IndexOutOfRangeError: If the message has no instruction at that index
    """
    instructions = message.instructions
    if index < 0 or index >= len(instructions):
        raise IndexOutOfRangeError(
            f"transaction doesn't have an instruction at index '{index}'",
            index=index,
            length=len(instructions),
            kind="instruction",
        )
    return instructions[index]


def is_signer(message: Any, key_index: int) -> bool:
    return key_index < message.header.num_required_signatures


def is_writable(message: Any, key_index: int) -> bool:
    header = message.header
    num_signed = header.num_required_signatures
    if key_index < num_signed:
        return key_index < num_signed - header.num_readonly_signed_accounts
    num_unsigned = len(message.account_keys) - num_signed
    return key_index - num_signed < num_unsigned - header.num_readonly_unsigned_accounts


def account_meta(message: Any, key_index: int) -> AccountMeta:
    """Build the account meta for entry ``key_index`` of the key table."""
    keys: Sequence[Pubkey] = message.account_keys
    _check_index(key_index, len(keys), "account")
    return AccountMeta(
        pubkey=keys[key_index],
        is_signer=is_signer(message, key_index),
        is_writable=is_writable(message, key_index),
    )


def resolve_instruction_accounts(message: Any, instruction: Any) -> List[AccountMeta]:
    """Resolve the account indexes of ``instruction`` against the key table.

    Raises:
        IndexOutOfRangeError: If any account index is outside the key table
    """
    return [account_meta(message, key_index) for key_index in instruction.accounts]


def resolve_program_id(message: Any, program_id_index: int) -> Pubkey:
    """Look up a program id index in the key table.

    Raises:
        IndexOutOfRangeError: If the index is outside the key table
    """
    keys = message.account_keys
    _check_index(program_id_index, len(keys), "program id")
    return keys[program_id_index]


def resolve_instruction(transaction_or_message: Any, index: int) -> Tuple[List[AccountMeta], Pubkey]:
    """Resolve the accounts and program id of instruction ``index``.

    Args:
        transaction_or_message: Message (or transaction) holding the instruction
        index: Position of the instruction in the message

    Returns:
        The ordered account metas and the program id

    Raises:
        IndexOutOfRangeError: If the instruction, an account or the program id
            index does not resolve
    """
    message = message_of(transaction_or_message)
    instruction = get_instruction(message, index)
    accounts = resolve_instruction_accounts(message, instruction)
    program_id = resolve_program_id(message, instruction.program_id_index)
    return accounts, program_id
