"""Associated Token Account program."""

from solana_txparse.programs.associated_token_account.decoders import decode_create
from solana_txparse.programs.associated_token_account.instructions import (
    ATA_VARIANTS,
    AssociatedTokenAccountInstruction,
    Create,
)
