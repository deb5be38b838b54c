"""Unit tests for System program instructions."""

import pytest
from construct import Int32ul, Int64ul
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import (
    AllocateParams,
    AssignParams,
    CreateAccountParams,
    CreateAccountWithSeedParams,
    allocate,
    assign,
    create_account,
    create_account_with_seed,
)

from solana_txparse.constants import SYSTEM_PROGRAM_ID
from solana_txparse.instruction.decoder import decode_instruction
from solana_txparse.programs import system
from solana_txparse.programs.system import (
    Allocate,
    Assign,
    CreateAccount,
    SystemInstruction,
    TransferWithSeed,
)
from solana_txparse.utils.error_handling import InstructionDecodeError
from tests.fixtures.common import build_message


@pytest.fixture
def new_account():
    return Pubkey.new_unique()


def test_create_account(keys, new_account):
    owner = Pubkey.new_unique()
    instruction = create_account(CreateAccountParams(
        from_pubkey=keys.payer, to_pubkey=new_account, lamports=2_000_000, space=165, owner=owner
    ))
    message = build_message(instruction, payer=keys.payer)

    decoded = system.decode_create_account(message, 0)

    assert decoded == CreateAccount(lamports=2_000_000, space=165, owner=owner)
    assert decoded.funding_account.pubkey == keys.payer
    assert decoded.new_account == AccountMeta(new_account, is_signer=True, is_writable=True)
    assert decode_instruction(message, 0).data() == bytes(instruction.data)


def test_assign_and_allocate(keys):
    owner = Pubkey.new_unique()
    message = build_message(
        assign(AssignParams(pubkey=keys.payer, owner=owner)),
        allocate(AllocateParams(pubkey=keys.payer, space=1024)),
        payer=keys.payer,
    )

    assert system.decode_assign(message, 0) == Assign(owner=owner)
    assert system.decode_allocate(message, 1) == Allocate(space=1024)


def test_create_account_with_seed(keys, new_account):
    base = Pubkey.new_unique()
    owner = Pubkey.new_unique()
    instruction = create_account_with_seed(CreateAccountWithSeedParams(
        from_pubkey=keys.payer,
        to_pubkey=new_account,
        base=base,
        seed="vault",
        lamports=5_000,
        space=0,
        owner=owner,
    ))
    message = build_message(instruction, payer=keys.payer)

    decoded = system.decode_create_account_with_seed(message, 0)

    assert decoded.base == base
    assert decoded.seed == "vault"
    assert decoded.lamports == 5_000
    assert decoded.owner == owner
    assert decoded.base_account.pubkey == base
    assert decode_instruction(message, 0).data() == bytes(instruction.data)


def test_create_account_with_seed_without_base_account(keys, new_account):
    """The base account may be left out when the funding account is the base."""
    impl = system.CreateAccountWithSeed(
        base=keys.payer, seed="a", lamports=1, space=2, owner=SYSTEM_PROGRAM_ID
    )
    data = SystemInstruction(impl).data()
    message = build_message(
        Instruction(
            SYSTEM_PROGRAM_ID,
            data,
            [AccountMeta(keys.payer, True, True), AccountMeta(new_account, False, True)],
        ),
        payer=keys.payer,
    )

    decoded = system.decode_create_account_with_seed(message, 0)

    assert decoded == impl
    assert decoded.base_account is None


def test_transfer_with_seed_wire_format(keys):
    from_owner = Pubkey.new_unique()
    seed = "seed-1"
    data = (
        Int32ul.build(11)
        + Int64ul.build(42)
        + Int64ul.build(len(seed)) + seed.encode()
        + bytes(from_owner)
    )
    accounts = [
        AccountMeta(Pubkey.new_unique(), False, True),
        AccountMeta(keys.payer, True, False),
        AccountMeta(keys.recipient, False, True),
    ]
    message = build_message(Instruction(SYSTEM_PROGRAM_ID, data, accounts), payer=keys.payer)

    decoded = system.decode_transfer_with_seed(message, 0)

    assert decoded == TransferWithSeed(lamports=42, from_seed=seed, from_owner=from_owner)
    assert decoded.recipient_account.pubkey == keys.recipient


def test_advance_nonce_has_no_parameters(keys):
    accounts = [
        AccountMeta(Pubkey.new_unique(), False, True),
        AccountMeta(Pubkey.new_unique(), False, False),
        AccountMeta(keys.payer, True, False),
    ]
    message = build_message(
        Instruction(SYSTEM_PROGRAM_ID, Int32ul.build(4), accounts), payer=keys.payer
    )

    decoded = decode_instruction(message, 0)

    assert decoded.name == "AdvanceNonceAccount"
    assert decoded.impl.nonce_authority.pubkey == keys.payer
    assert decoded.data() == Int32ul.build(4)


def test_type_id_is_four_bytes(keys):
    message = build_message(
        Instruction(SYSTEM_PROGRAM_ID, b"\x02\x00", [AccountMeta(keys.payer, True, True)]),
        payer=keys.payer,
    )

    with pytest.raises(InstructionDecodeError):
        decode_instruction(message, 0)


def test_unknown_type_id(keys):
    message = build_message(
        Instruction(SYSTEM_PROGRAM_ID, Int32ul.build(13), [AccountMeta(keys.payer, True, True)]),
        payer=keys.payer,
    )

    with pytest.raises(InstructionDecodeError) as exc_info:
        decode_instruction(message, 0)

    assert exc_info.value.__cause__.details["type_id"] == 13


def test_instruction_requires_a_variant():
    with pytest.raises(TypeError):
        SystemInstruction(object())
