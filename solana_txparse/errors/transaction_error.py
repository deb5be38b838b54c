"""Transaction errors reported by the network.

The ``err`` field of a transaction status is already JSON decoded when it
reaches this module: either a bare string naming the error kind or an
object. The only object understood is ``{"InstructionError": [index, payload]}``
whose payload is an instruction error.

Parsing never raises: a payload of unknown shape gives None.
"""

import logging
from enum import Enum
from typing import Any, Optional

from solana_txparse.errors.instruction_error import (
    CustomErrorResolver,
    InstructionError,
    as_integer,
    parse_instruction_error,
    resolve_nothing,
)
from solana_txparse.errors.registry import CustomErrorResolverRegistry
from solana_txparse.message import get_instruction, message_of, resolve_program_id
from solana_txparse.utils.error_handling import IndexOutOfRangeError

logger = logging.getLogger(__name__)


class TransactionErrorType(Enum):
    """Named transaction error kinds, valued by their wire name."""
    ACCOUNT_IN_USE = "AccountInUse"
    ACCOUNT_LOADED_TWICE = "AccountLoadedTwice"
    ACCOUNT_NOT_FOUND = "AccountNotFound"
    PROGRAM_ACCOUNT_NOT_FOUND = "ProgramAccountNotFound"
    INSUFFICIENT_FUNDS_FOR_FEE = "InsufficientFundsForFee"
    INVALID_ACCOUNT_FOR_FEE = "InvalidAccountForFee"
    ALREADY_PROCESSED = "AlreadyProcessed"
    BLOCKHASH_NOT_FOUND = "BlockhashNotFound"
    CALL_CHAIN_TOO_DEEP = "CallChainTooDeep"
    MISSING_SIGNATURE_FOR_FEE = "MissingSignatureForFee"
    INVALID_ACCOUNT_INDEX = "InvalidAccountIndex"
    SIGNATURE_FAILURE = "SignatureFailure"
    INVALID_PROGRAM_FOR_EXECUTION = "InvalidProgramForExecution"
    SANITIZE_FAILURE = "SanitizeFailure"
    CLUSTER_MAINTENANCE = "ClusterMaintenance"
    ACCOUNT_BORROW_OUTSTANDING = "AccountBorrowOutstanding"
    WOULD_EXCEED_MAX_BLOCK_COST_LIMIT = "WouldExceedMaxBlockCostLimit"
    UNSUPPORTED_VERSION = "UnsupportedVersion"
    INVALID_WRITABLE_ACCOUNT = "InvalidWritableAccount"
    WOULD_EXCEED_MAX_ACCOUNT_COST_LIMIT = "WouldExceedMaxAccountCostLimit"
    WOULD_EXCEED_ACCOUNT_DATA_BLOCK_LIMIT = "WouldExceedAccountDataBlockLimit"
    TOO_MANY_ACCOUNT_LOCKS = "TooManyAccountLocks"
    ADDRESS_LOOKUP_TABLE_NOT_FOUND = "AddressLookupTableNotFound"
    INVALID_ADDRESS_LOOKUP_TABLE_OWNER = "InvalidAddressLookupTableOwner"
    INVALID_ADDRESS_LOOKUP_TABLE_DATA = "InvalidAddressLookupTableData"
    INVALID_ADDRESS_LOOKUP_TABLE_INDEX = "InvalidAddressLookupTableIndex"
    INVALID_RENT_PAYING_ACCOUNT = "InvalidRentPayingAccount"
    WOULD_EXCEED_MAX_VOTE_COST_LIMIT = "WouldExceedMaxVoteCostLimit"
    WOULD_EXCEED_ACCOUNT_DATA_TOTAL_LIMIT = "WouldExceedAccountDataTotalLimit"
    MAX_LOADED_ACCOUNTS_DATA_SIZE_EXCEEDED = "MaxLoadedAccountsDataSizeExceeded"
    INVALID_LOADED_ACCOUNTS_DATA_SIZE_LIMIT = "InvalidLoadedAccountsDataSizeLimit"
    RESANITIZATION_NEEDED = "ResanitizationNeeded"
    UNBALANCED_TRANSACTION = "UnbalancedTransaction"
    PROGRAM_CACHE_HIT_MAX_LIMIT = "ProgramCacheHitMaxLimit"


TRANSACTION_ERROR_MESSAGES = {
    TransactionErrorType.ACCOUNT_IN_USE: "Account in use",
    TransactionErrorType.ACCOUNT_LOADED_TWICE: "Account loaded twice",
    TransactionErrorType.ACCOUNT_NOT_FOUND:
        "Attempt to debit an account but found no record of a prior credit.",
    TransactionErrorType.PROGRAM_ACCOUNT_NOT_FOUND: "Attempt to load a program that does not exist",
    TransactionErrorType.INSUFFICIENT_FUNDS_FOR_FEE: "Insufficient funds for fee",
    TransactionErrorType.INVALID_ACCOUNT_FOR_FEE: "This account may not be used to pay transaction fees",
    TransactionErrorType.ALREADY_PROCESSED: "This transaction has already been processed",
    TransactionErrorType.BLOCKHASH_NOT_FOUND: "Blockhash not found",
    TransactionErrorType.CALL_CHAIN_TOO_DEEP: "Loader call chain is too deep",
    TransactionErrorType.MISSING_SIGNATURE_FOR_FEE: "Transaction requires a fee but has no signature present",
    TransactionErrorType.INVALID_ACCOUNT_INDEX: "Transaction contains an invalid account reference",
    TransactionErrorType.SIGNATURE_FAILURE: "Transaction did not pass signature verification",
    TransactionErrorType.INVALID_PROGRAM_FOR_EXECUTION: "This program may not be used for executing instructions",
    TransactionErrorType.SANITIZE_FAILURE: "Transaction failed to sanitize accounts offsets correctly",
    TransactionErrorType.CLUSTER_MAINTENANCE: "Transactions are currently disabled due to cluster maintenance",
    TransactionErrorType.ACCOUNT_BORROW_OUTSTANDING:
        "Transaction processing left an account with an outstanding borrowed reference",
    TransactionErrorType.WOULD_EXCEED_MAX_BLOCK_COST_LIMIT: "Transaction would exceed max Block Cost Limit",
    TransactionErrorType.UNSUPPORTED_VERSION: "Transaction version is unsupported",
    TransactionErrorType.INVALID_WRITABLE_ACCOUNT: "Transaction loads a writable account that cannot be written",
    TransactionErrorType.WOULD_EXCEED_MAX_ACCOUNT_COST_LIMIT:
        "Transaction would exceed max account limit within the block",
    TransactionErrorType.WOULD_EXCEED_ACCOUNT_DATA_BLOCK_LIMIT:
        "Transaction would exceed account data limit within the block",
    TransactionErrorType.TOO_MANY_ACCOUNT_LOCKS: "Transaction locked too many accounts",
    TransactionErrorType.ADDRESS_LOOKUP_TABLE_NOT_FOUND:
        "Transaction loads an address table account that doesn't exist",
    TransactionErrorType.INVALID_ADDRESS_LOOKUP_TABLE_OWNER:
        "Transaction loads an address table account with an invalid owner",
    TransactionErrorType.INVALID_ADDRESS_LOOKUP_TABLE_DATA:
        "Transaction loads an address table account with invalid data",
    TransactionErrorType.INVALID_ADDRESS_LOOKUP_TABLE_INDEX:
        "Transaction address table lookup uses an invalid index",
    TransactionErrorType.INVALID_RENT_PAYING_ACCOUNT:
        "Transaction leaves an account with a lower balance than rent-exempt minimum",
    TransactionErrorType.WOULD_EXCEED_MAX_VOTE_COST_LIMIT: "Transaction would exceed max Vote Cost Limit",
    TransactionErrorType.WOULD_EXCEED_ACCOUNT_DATA_TOTAL_LIMIT:
        "Transaction would exceed total account data limit",
    TransactionErrorType.MAX_LOADED_ACCOUNTS_DATA_SIZE_EXCEEDED:
        "Transaction exceeded max loaded accounts data size cap",
    TransactionErrorType.INVALID_LOADED_ACCOUNTS_DATA_SIZE_LIMIT:
        "LoadedAccountsDataSizeLimit set for transaction must be greater than 0.",
    TransactionErrorType.RESANITIZATION_NEEDED: "ResanitizationNeeded",
    TransactionErrorType.UNBALANCED_TRANSACTION:
        "Sum of account balances before and after transaction do not match",
    TransactionErrorType.PROGRAM_CACHE_HIT_MAX_LIMIT: "Program cache hit max limit",
}

_TRANSACTION_ERROR_TYPES = {kind.value: kind for kind in TransactionErrorType}


class KnownTransactionError(Exception):
    """A named transaction error kind."""

    def __init__(self, kind: TransactionErrorType):
        self.kind = kind
        super().__init__(TRANSACTION_ERROR_MESSAGES[kind])

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, KnownTransactionError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"KnownTransactionError({self.kind.value})"


class UndefinedTransactionError(Exception):
    """A transaction error name this library does not know; the name is its message."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, UndefinedTransactionError):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"UndefinedTransactionError({self.name!r})"


class InstructionErrorAtIndex(Exception):
    """An instruction of the transaction failed."""

    def __init__(self, index: int, cause: InstructionError):
        self.index = index
        self.cause = cause
        super().__init__(f"Error processing instruction {index}: {cause}")
        self.__cause__ = cause

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, InstructionErrorAtIndex):
            return NotImplemented
        return self.index == other.index and self.cause == other.cause

    def __hash__(self) -> int:
        return hash((self.index, self.cause))

    def __repr__(self) -> str:
        return f"InstructionErrorAtIndex(index={self.index}, cause={self.cause!r})"


class TransactionError(Exception):
    """A parsed transaction error.

    Attributes:
        cause: The precise error (``KnownTransactionError``,
            ``UndefinedTransactionError`` or ``InstructionErrorAtIndex``)
        raw_error: The payload as it was received
    """

    def __init__(self, cause: Exception, raw_error: Any):
        self.cause = cause
        self.raw_error = raw_error
        super().__init__(str(cause))
        self.__cause__ = cause

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TransactionError):
            return NotImplemented
        return self.cause == other.cause and self.raw_error == other.raw_error

    def __hash__(self) -> int:
        return hash(self.cause)

    def __repr__(self) -> str:
        return f"TransactionError(cause={self.cause!r})"


def custom_instruction_error_resolver(
    transaction: Any,
    index: int,
    registry: Optional[CustomErrorResolverRegistry] = None
) -> CustomErrorResolver:
    """Custom error resolver bound to the program of instruction ``index``.

    The program id is resolved when the resolver is called; if it cannot be
    resolved the resolver finds nothing.
    """
    registry = registry if registry is not None else CustomErrorResolverRegistry.get_instance()

    def resolve(code: int) -> Optional[Exception]:
        message = message_of(transaction)
        try:
            program_id = resolve_program_id(message, get_instruction(message, index).program_id_index)
        except IndexOutOfRangeError:
            return None
        return registry.resolve(program_id, code)

    return resolve


def _parse_instruction_error_object(
    transaction: Any,
    raw: dict,
    registry: Optional[CustomErrorResolverRegistry]
) -> Optional[InstructionErrorAtIndex]:
    fields = raw.get("InstructionError")
    if not isinstance(fields, (list, tuple)) or len(fields) != 2:
        return None

    index = as_integer(fields[0])
    if index is None or index < 0:
        return None

    resolve_custom: CustomErrorResolver = resolve_nothing
    if transaction is not None:
        message = message_of(transaction)
        try:
            program_id = resolve_program_id(message, get_instruction(message, index).program_id_index)
        except IndexOutOfRangeError as e:
            logger.debug(f"Instruction error does not match the transaction: {e.message}")
            return None
        registry = registry if registry is not None else CustomErrorResolverRegistry.get_instance()
        resolve_custom = registry.bound_resolver(program_id)

    cause = parse_instruction_error(fields[1], resolve_custom)
    if cause is None:
        return None
    return InstructionErrorAtIndex(index, cause)


def parse_transaction_error(
    transaction: Any,
    raw: Any,
    registry: Optional[CustomErrorResolverRegistry] = None
) -> Optional[TransactionError]:
    """Parse the ``err`` payload of a transaction status.

    Args:
        transaction: Transaction (or message) the error belongs to, or None.
            When given, the instruction index of an instruction error must
            exist in it and custom error codes are resolved for that
            instruction's program.
        raw: Decoded JSON payload
        registry: Custom error resolvers, defaults to the process-wide registry

    Returns:
        The parsed error, or None if the payload is not understood
    """
    if isinstance(raw, str):
        kind = _TRANSACTION_ERROR_TYPES.get(raw)
        cause: Exception = KnownTransactionError(kind) if kind else UndefinedTransactionError(raw)
        return TransactionError(cause, raw)

    if isinstance(raw, dict):
        cause = _parse_instruction_error_object(transaction, raw, registry)
        if cause is None:
            return None
        return TransactionError(cause, raw)

    return None
