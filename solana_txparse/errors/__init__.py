"""Transaction and instruction error taxonomy."""

from solana_txparse.errors.instruction_error import (
    INSTRUCTION_ERROR_MESSAGES,
    CustomErrorResolver,
    CustomInstructionError,
    InstructionError,
    InstructionErrorType,
    KnownInstructionError,
    UndefinedInstructionError,
    parse_instruction_error,
)
from solana_txparse.errors.program_error import ProgramCustomError
from solana_txparse.errors.registry import (
    CustomErrorResolverRegistry,
    register_builtin_error_resolvers,
    register_custom_error_resolver,
    resolve_custom_error,
)
from solana_txparse.errors.transaction_error import (
    TRANSACTION_ERROR_MESSAGES,
    InstructionErrorAtIndex,
    KnownTransactionError,
    TransactionError,
    TransactionErrorType,
    UndefinedTransactionError,
    custom_instruction_error_resolver,
    parse_transaction_error,
)
