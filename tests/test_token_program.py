"""Unit tests for SPL Token and Token-2022 instructions."""

import pytest
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from solana_txparse.constants import TOKEN_2022_PROGRAM_ID, TOKEN_PROGRAM_ID
from solana_txparse.instruction.decoder import decode_instruction
from solana_txparse.programs import token, token2022
from solana_txparse.programs.token import (
    AuthorityType,
    InitializeMint2,
    SetAuthority,
    TokenInstruction,
    TransferChecked,
)
from solana_txparse.programs.token2022 import Token2022Instruction
from solana_txparse.utils.error_handling import InstructionDecodeError, ProgramIdMismatchError
from tests.fixtures.common import build_message, token_transfer, token_transfer_data


def _single(keys, program_id, data, count=2):
    accounts = [AccountMeta(keys.payer, True, True)]
    accounts.extend(AccountMeta(Pubkey.new_unique(), False, True) for _ in range(count - 1))
    return build_message(Instruction(program_id, data, accounts), payer=keys.payer)


def test_transfer_checked(keys):
    mint = Pubkey.new_unique()
    accounts = [
        AccountMeta(keys.source, False, True),
        AccountMeta(mint, False, False),
        AccountMeta(keys.destination, False, True),
        AccountMeta(keys.payer, True, False),
    ]
    data = bytes([12]) + (1_500_000).to_bytes(8, "little") + bytes([6])
    message = build_message(Instruction(TOKEN_PROGRAM_ID, data, accounts), payer=keys.payer)

    decoded = token.decode_transfer_checked(message, 0)

    assert decoded == TransferChecked(amount=1_500_000, decimals=6)
    assert decoded.mint.pubkey == mint
    assert decode_instruction(message, 0).data() == data


def test_multisig_signers_follow_named_accounts(keys):
    multisig = Pubkey.new_unique()
    signers = [Pubkey.new_unique(), Pubkey.new_unique()]
    message = build_message(
        token_transfer(keys.source, keys.destination, multisig, 5, signers=signers),
        payer=keys.payer,
    )

    decoded = token.decode_transfer(message, 0)

    assert decoded.owner.pubkey == multisig
    assert not decoded.owner.is_signer
    assert [meta.pubkey for meta in decoded.remaining_accounts] == signers
    assert all(meta.is_signer for meta in decoded.remaining_accounts)


def test_initialize_mint_with_freeze_authority(keys):
    mint_authority = Pubkey.new_unique()
    freeze_authority = Pubkey.new_unique()
    data = bytes([20, 9]) + bytes(mint_authority) + bytes([1]) + bytes(freeze_authority)
    message = _single(keys, TOKEN_PROGRAM_ID, data, count=1)

    decoded = token.decode_initialize_mint2(message, 0)

    assert decoded == InitializeMint2(
        decimals=9, mint_authority=mint_authority, freeze_authority=freeze_authority
    )
    assert decode_instruction(message, 0).data() == data


def test_initialize_mint_without_freeze_authority(keys):
    mint_authority = Pubkey.new_unique()
    data = bytes([0, 6]) + bytes(mint_authority) + bytes([0])
    message = _single(keys, TOKEN_PROGRAM_ID, data)

    decoded = token.decode_initialize_mint(message, 0)

    assert decoded.mint_authority == mint_authority
    assert decoded.freeze_authority is None
    assert decoded.rent_sysvar is not None
    assert decode_instruction(message, 0).data() == data


def test_set_authority(keys):
    new_owner = Pubkey.new_unique()
    data = bytes([6, 2, 1]) + bytes(new_owner)
    message = _single(keys, TOKEN_PROGRAM_ID, data)

    decoded = token.decode_set_authority(message, 0)

    assert decoded == SetAuthority(authority_type=AuthorityType.ACCOUNT_OWNER, new_authority=new_owner)


def test_set_authority_removes_authority(keys):
    message = _single(keys, TOKEN_PROGRAM_ID, bytes([6, 3, 0]))

    decoded = token.decode_set_authority(message, 0)

    assert decoded.authority_type is AuthorityType.CLOSE_ACCOUNT
    assert decoded.new_authority is None


def test_set_authority_rejects_unknown_authority_type(keys):
    message = _single(keys, TOKEN_PROGRAM_ID, bytes([6, 9, 0]))

    with pytest.raises(InstructionDecodeError):
        token.decode_set_authority(message, 0)


def test_sync_native(keys):
    message = _single(keys, TOKEN_PROGRAM_ID, bytes([17]), count=1)

    decoded = decode_instruction(message, 0)

    assert isinstance(decoded, TokenInstruction)
    assert decoded.name == "SyncNative"
    assert decoded.obtain() == (17, "SyncNative", decoded.impl)


def test_token_2022_shares_the_instruction_set(keys):
    message = build_message(
        token_transfer(keys.source, keys.destination, keys.payer, 77, program_id=TOKEN_2022_PROGRAM_ID),
        payer=keys.payer,
    )

    decoded = decode_instruction(message, 0)

    assert isinstance(decoded, Token2022Instruction)
    assert decoded.program_id == TOKEN_2022_PROGRAM_ID
    assert token2022.decode_transfer(message, 0).amount == 77
    with pytest.raises(ProgramIdMismatchError):
        token.decode_transfer(message, 0)


def test_token_2022_extensions_are_not_decoded(keys):
    message = _single(keys, TOKEN_2022_PROGRAM_ID, bytes([26, 0]))

    with pytest.raises(InstructionDecodeError) as exc_info:
        decode_instruction(message, 0)

    assert exc_info.value.details["program"] == "Token2022"


def test_instructions_of_both_programs_differ(keys):
    accounts = token_transfer(keys.source, keys.destination, keys.payer, 1).accounts
    token_instruction = TokenInstruction.decode(accounts, token_transfer_data(1))
    token2022_instruction = Token2022Instruction.decode(accounts, token_transfer_data(1))

    assert token_instruction.impl == token2022_instruction.impl
    assert token_instruction != token2022_instruction
    assert token_instruction == TokenInstruction.decode(accounts, token_transfer_data(1))
