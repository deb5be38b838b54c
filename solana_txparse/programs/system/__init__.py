"""System program: instructions, typed decoders and custom errors."""

from solana_txparse.programs.system.decoders import (
    decode_create_account,
    decode_assign,
    decode_transfer,
    decode_create_account_with_seed,
    decode_advance_nonce_account,
    decode_withdraw_nonce_account,
    decode_initialize_nonce_account,
    decode_authorize_nonce_account,
    decode_allocate,
    decode_allocate_with_seed,
    decode_assign_with_seed,
    decode_transfer_with_seed,
    decode_upgrade_nonce_account,
)
from solana_txparse.programs.system.errors import (
    SYSTEM_ERROR_MESSAGES,
    SystemErrorCode,
    SystemProgramError,
    system_error_resolver,
)
from solana_txparse.programs.system.instructions import (
    SYSTEM_VARIANTS,
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
