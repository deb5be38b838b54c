"""Unit tests for checked decoding of one expected variant."""

import pytest
from solders.instruction import Instruction
from solders.pubkey import Pubkey

from solana_txparse.constants import SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID
from solana_txparse.instruction.typed import TypedInstructionDecoder, typed_instruction_decoder
from solana_txparse.programs import system, token
from solana_txparse.programs.system import SystemInstruction
from solana_txparse.programs.token import Burn, TokenInstruction, Transfer
from solana_txparse.utils.error_handling import (
    AccountResolutionError,
    IndexOutOfRangeError,
    InstructionDecodeError,
    ProgramIdMismatchError,
    ProgramIdResolutionError,
    TypeMismatchError,
)
from tests.fixtures.common import build_message, fake_instruction, fake_message, token_transfer


def test_decodes_expected_variant(mixed_message, keys):
    transfer = token.decode_transfer(mixed_message, 2)

    assert isinstance(transfer, Transfer)
    assert transfer.amount == 500
    assert transfer.owner.pubkey == keys.payer


def test_missing_instruction(mixed_message):
    with pytest.raises(IndexOutOfRangeError) as exc_info:
        token.decode_transfer(mixed_message, 9)

    assert exc_info.value.message == "transaction doesn't have an instruction at index '9'"


def test_unresolvable_account():
    message = fake_message(
        [Pubkey.new_unique(), TOKEN_PROGRAM_ID],
        [fake_instruction(1, [0, 5, 0], bytes([3]) + (1).to_bytes(8, "little"))],
    )

    with pytest.raises(AccountResolutionError) as exc_info:
        token.decode_transfer(message, 0)

    assert exc_info.value.instruction_index == 0
    assert exc_info.value.message.startswith("instruction '0': failed to resolve accounts: ")
    assert isinstance(exc_info.value.__cause__, IndexOutOfRangeError)


def test_unresolvable_program_id():
    message = fake_message([Pubkey.new_unique()], [fake_instruction(4, [0])])

    with pytest.raises(ProgramIdResolutionError) as exc_info:
        token.decode_transfer(message, 0)

    assert exc_info.value.message.startswith("instruction '0': failed to resolve program ID: ")
    assert exc_info.value.__cause__.kind == "program id"


def test_other_program(mixed_message):
    with pytest.raises(ProgramIdMismatchError) as exc_info:
        token.decode_transfer(mixed_message, 1)

    error = exc_info.value
    assert error.program_id == SYSTEM_PROGRAM_ID
    assert error.expected_program_id == TOKEN_PROGRAM_ID
    assert error.message == (
        f"instruction '1': programID ({SYSTEM_PROGRAM_ID}) "
        f"doesn't match expected value '{TOKEN_PROGRAM_ID}'"
    )


def test_undecodable_data(keys):
    message = build_message(
        Instruction(TOKEN_PROGRAM_ID, bytes([3, 1, 2]), token_transfer(keys.source, keys.destination, keys.payer, 0).accounts),
        payer=keys.payer,
    )

    with pytest.raises(InstructionDecodeError) as exc_info:
        token.decode_transfer(message, 0)

    error = exc_info.value
    assert error.message.startswith("instruction '0': failed to decode as 'TokenInstruction': Transfer: malformed")
    assert error.instruction_index == 0


def test_not_enough_accounts(keys):
    instruction = token_transfer(keys.source, keys.destination, keys.payer, 7)
    message = build_message(
        Instruction(TOKEN_PROGRAM_ID, instruction.data, instruction.accounts[:2]),
        payer=keys.payer,
    )

    with pytest.raises(InstructionDecodeError) as exc_info:
        token.decode_transfer(message, 0)

    assert "not enough accounts" in exc_info.value.message


def test_other_variant(keys):
    burn_data = bytes([8]) + (10).to_bytes(8, "little")
    accounts = token_transfer(keys.source, keys.destination, keys.payer, 0).accounts
    message = build_message(Instruction(TOKEN_PROGRAM_ID, burn_data, accounts), payer=keys.payer)

    assert token.decode_burn(message, 0) == Burn(amount=10)
    with pytest.raises(TypeMismatchError) as exc_info:
        token.decode_transfer(message, 0)

    error = exc_info.value
    assert error.obtained == "Burn"
    assert error.expected == "Transfer"
    assert error.message == "instruction '0': obtained type 'Burn' doesn't match expected type 'Transfer'"


def test_variant_must_belong_to_definition():
    with pytest.raises(ValueError):
        TypedInstructionDecoder(TOKEN_PROGRAM_ID, TokenInstruction, system.Transfer)


def test_factory(mixed_message):
    decode = typed_instruction_decoder(SYSTEM_PROGRAM_ID, SystemInstruction, system.Transfer)

    assert decode.expected_type_id == 2
    assert decode(mixed_message, 1).lamports == 1_000
    assert repr(decode) == "TypedInstructionDecoder(SystemInstruction.Transfer)"
