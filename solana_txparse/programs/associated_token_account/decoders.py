"""Typed decoders for Associated Token Account program instructions."""

from solana_txparse.constants import ASSOCIATED_TOKEN_PROGRAM_ID
from solana_txparse.instruction.typed import typed_instruction_decoder
from solana_txparse.programs.associated_token_account.instructions import (
    AssociatedTokenAccountInstruction,
    Create,
)

decode_create = typed_instruction_decoder(
    ASSOCIATED_TOKEN_PROGRAM_ID,
    AssociatedTokenAccountInstruction,
    Create
)
