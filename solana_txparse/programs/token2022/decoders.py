"""Typed decoders for Token-2022 program instructions."""

from solana_txparse.constants import TOKEN_2022_PROGRAM_ID
from solana_txparse.instruction.typed import typed_instruction_decoder
from solana_txparse.programs.token.instructions import (
    Approve,
    ApproveChecked,
    Burn,
    BurnChecked,
    CloseAccount,
    FreezeAccount,
    InitializeAccount,
    InitializeAccount2,
    InitializeAccount3,
    InitializeMint,
    InitializeMint2,
    InitializeMultisig,
    InitializeMultisig2,
    MintTo,
    MintToChecked,
    Revoke,
    SetAuthority,
    SyncNative,
    ThawAccount,
    Transfer,
    TransferChecked,
)
from solana_txparse.programs.token2022.instructions import Token2022Instruction


def _decoder(variant_class):
    return typed_instruction_decoder(TOKEN_2022_PROGRAM_ID, Token2022Instruction, variant_class)


decode_initialize_mint = _decoder(InitializeMint)
decode_initialize_account = _decoder(InitializeAccount)
decode_initialize_multisig = _decoder(InitializeMultisig)
decode_transfer = _decoder(Transfer)
decode_approve = _decoder(Approve)
decode_revoke = _decoder(Revoke)
decode_set_authority = _decoder(SetAuthority)
decode_mint_to = _decoder(MintTo)
decode_burn = _decoder(Burn)
decode_close_account = _decoder(CloseAccount)
decode_freeze_account = _decoder(FreezeAccount)
decode_thaw_account = _decoder(ThawAccount)
decode_transfer_checked = _decoder(TransferChecked)
decode_approve_checked = _decoder(ApproveChecked)
decode_mint_to_checked = _decoder(MintToChecked)
decode_burn_checked = _decoder(BurnChecked)
decode_initialize_account2 = _decoder(InitializeAccount2)
decode_sync_native = _decoder(SyncNative)
decode_initialize_account3 = _decoder(InitializeAccount3)
decode_initialize_multisig2 = _decoder(InitializeMultisig2)
decode_initialize_mint2 = _decoder(InitializeMint2)
