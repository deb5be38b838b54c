"""Typed decoders for System program instructions."""

from solana_txparse.constants import SYSTEM_PROGRAM_ID
from solana_txparse.instruction.typed import typed_instruction_decoder
from solana_txparse.programs.system.instructions import (
    AdvanceNonceAccount,
    Allocate,
    AllocateWithSeed,
    Assign,
    AssignWithSeed,
    AuthorizeNonceAccount,
    CreateAccount,
    CreateAccountWithSeed,
    InitializeNonceAccount,
    SystemInstruction,
    Transfer,
    TransferWithSeed,
    UpgradeNonceAccount,
    WithdrawNonceAccount,
)


def _decoder(variant_class):
    return typed_instruction_decoder(SYSTEM_PROGRAM_ID, SystemInstruction, variant_class)


decode_create_account = _decoder(CreateAccount)
decode_assign = _decoder(Assign)
decode_transfer = _decoder(Transfer)
decode_create_account_with_seed = _decoder(CreateAccountWithSeed)
decode_advance_nonce_account = _decoder(AdvanceNonceAccount)
decode_withdraw_nonce_account = _decoder(WithdrawNonceAccount)
decode_initialize_nonce_account = _decoder(InitializeNonceAccount)
decode_authorize_nonce_account = _decoder(AuthorizeNonceAccount)
decode_allocate = _decoder(Allocate)
decode_allocate_with_seed = _decoder(AllocateWithSeed)
decode_assign_with_seed = _decoder(AssignWithSeed)
decode_transfer_with_seed = _decoder(TransferWithSeed)
decode_upgrade_nonce_account = _decoder(UpgradeNonceAccount)
