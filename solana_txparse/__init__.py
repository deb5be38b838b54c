"""solana-txparse package.

This package interprets Solana transactions: it decodes the instructions of
a message into typed, program specific instructions and turns the error
payloads returned by the network into a matchable error taxonomy.
"""

import logging

from solana_txparse.errors import (
    CustomErrorResolverRegistry,
    CustomInstructionError,
    InstructionError,
    InstructionErrorAtIndex,
    KnownInstructionError,
    KnownTransactionError,
    TransactionError,
    UndefinedInstructionError,
    UndefinedTransactionError,
    custom_instruction_error_resolver,
    parse_instruction_error,
    parse_transaction_error,
    register_builtin_error_resolvers,
    register_custom_error_resolver,
    resolve_custom_error,
)
from solana_txparse.instruction import (
    InstructionVariant,
    OpaqueInstruction,
    ProgramInstruction,
    TypedInstructionDecoder,
    VariantDefinition,
    VariantInstruction,
    typed_instruction_decoder,
)
from solana_txparse.instruction.decoder import (
    InstructionDecoder,
    decode_all_instructions,
    decode_instruction,
)
from solana_txparse.instruction.projections import (
    as_close_token_account,
    as_create_associated_token_account,
    as_system_transfer,
    as_token_transfer,
    as_token_transfer_checked,
)
from solana_txparse.message import resolve_instruction
from solana_txparse.programs.registry import ProgramDecoderRegistry, default_decoder_registry
from solana_txparse.utils.error_handling import SolanaTxParseError

__version__ = "0.1.0"
__author__ = "solana-txparse contributors"

logger = logging.getLogger(__name__)

register_builtin_error_resolvers()
