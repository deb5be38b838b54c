"""Token-2022 program: instructions and typed decoders."""

from solana_txparse.programs.token2022.decoders import (
    decode_initialize_mint,
    decode_initialize_account,
    decode_initialize_multisig,
    decode_transfer,
    decode_approve,
    decode_revoke,
    decode_set_authority,
    decode_mint_to,
    decode_burn,
    decode_close_account,
    decode_freeze_account,
    decode_thaw_account,
    decode_transfer_checked,
    decode_approve_checked,
    decode_mint_to_checked,
    decode_burn_checked,
    decode_initialize_account2,
    decode_sync_native,
    decode_initialize_account3,
    decode_initialize_multisig2,
    decode_initialize_mint2,
)
from solana_txparse.programs.token2022.instructions import Token2022Instruction
