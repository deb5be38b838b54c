"""Common test fixtures for solana-txparse tests.

This module provides messages and registries that can be reused across
different test modules.
"""

from types import SimpleNamespace

import pytest
from solders.compute_budget import set_compute_unit_limit
from solders.instruction import AccountMeta, Instruction
from solders.message import Message
from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer

from solana_txparse.constants import TOKEN_PROGRAM_ID
from solana_txparse.errors.registry import CustomErrorResolverRegistry, register_builtin_error_resolvers


def token_transfer_data(amount):
    """Raw SPL Token ``Transfer`` data: type id 3, then a u64 amount."""
    return bytes([3]) + amount.to_bytes(8, "little")


def token_transfer(source, destination, owner, amount, program_id=TOKEN_PROGRAM_ID, signers=()):
    accounts = [
        AccountMeta(source, is_signer=False, is_writable=True),
        AccountMeta(destination, is_signer=False, is_writable=True),
        AccountMeta(owner, is_signer=not signers, is_writable=False),
    ]
    accounts.extend(AccountMeta(signer, is_signer=True, is_writable=False) for signer in signers)
    return Instruction(program_id, token_transfer_data(amount), accounts)


def build_message(*instructions, payer):
    """Compile instructions into a legacy message paid by ``payer``."""
    return Message(list(instructions), payer)


def fake_message(account_keys, instructions, num_required_signatures=1,
                 num_readonly_signed_accounts=0, num_readonly_unsigned_accounts=0):
    """Message look-alike that allows indexes a compiled message would reject."""
    return SimpleNamespace(
        account_keys=list(account_keys),
        header=SimpleNamespace(
            num_required_signatures=num_required_signatures,
            num_readonly_signed_accounts=num_readonly_signed_accounts,
            num_readonly_unsigned_accounts=num_readonly_unsigned_accounts,
        ),
        instructions=list(instructions),
    )


def fake_instruction(program_id_index, accounts, data=b""):
    return SimpleNamespace(program_id_index=program_id_index, accounts=list(accounts), data=data)


@pytest.fixture
def keys():
    """Named unique public keys."""
    return SimpleNamespace(
        payer=Pubkey.new_unique(),
        recipient=Pubkey.new_unique(),
        source=Pubkey.new_unique(),
        destination=Pubkey.new_unique(),
        unknown_program=Pubkey.new_unique(),
        other=Pubkey.new_unique(),
    )


@pytest.fixture
def mixed_message(keys):
    """Compute budget, system transfer, token transfer and an unknown program, in that order."""
    return build_message(
        set_compute_unit_limit(200_000),
        transfer(TransferParams(from_pubkey=keys.payer, to_pubkey=keys.recipient, lamports=1_000)),
        token_transfer(keys.source, keys.destination, keys.payer, 500),
        Instruction(
            keys.unknown_program,
            b"\x01\x02\x03",
            [
                AccountMeta(keys.payer, is_signer=True, is_writable=True),
                AccountMeta(keys.other, is_signer=False, is_writable=False),
            ],
        ),
        payer=keys.payer,
    )


@pytest.fixture
def error_registry():
    """A private custom error resolver registry holding the built-in resolvers."""
    return register_builtin_error_resolvers(CustomErrorResolverRegistry())
