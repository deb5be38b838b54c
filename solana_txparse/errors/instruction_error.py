"""Instruction errors reported by the runtime.

The JSON-RPC ``err`` payload of a failed instruction is either a bare
string naming the error kind (``"InvalidArgument"``) or an object; the
only object understood here is ``{"Custom": code}``, a program specific
error code.
"""

from enum import Enum
from typing import Any, Callable, Optional

CustomErrorResolver = Callable[[int], Optional[Exception]]


class InstructionErrorType(Enum):
    """Named instruction error kinds, valued by their wire name."""
    GENERIC_ERROR = "GenericError"
    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_INSTRUCTION_DATA = "InvalidInstructionData"
    INVALID_ACCOUNT_DATA = "InvalidAccountData"
    ACCOUNT_DATA_TOO_SMALL = "AccountDataTooSmall"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    INCORRECT_PROGRAM_ID = "IncorrectProgramId"
    MISSING_REQUIRED_SIGNATURE = "MissingRequiredSignature"
    ACCOUNT_ALREADY_INITIALIZED = "AccountAlreadyInitialized"
    UNINITIALIZED_ACCOUNT = "UninitializedAccount"
    UNBALANCED_INSTRUCTION = "UnbalancedInstruction"
    MODIFIED_PROGRAM_ID = "ModifiedProgramId"
    EXTERNAL_ACCOUNT_LAMPORT_SPEND = "ExternalAccountLamportSpend"
    EXTERNAL_ACCOUNT_DATA_MODIFIED = "ExternalAccountDataModified"
    READONLY_LAMPORT_CHANGE = "ReadonlyLamportChange"
    READONLY_DATA_MODIFIED = "ReadonlyDataModified"
    DUPLICATE_ACCOUNT_INDEX = "DuplicateAccountIndex"
    EXECUTABLE_MODIFIED = "ExecutableModified"
    RENT_EPOCH_MODIFIED = "RentEpochModified"
    NOT_ENOUGH_ACCOUNT_KEYS = "NotEnoughAccountKeys"
    ACCOUNT_DATA_SIZE_CHANGED = "AccountDataSizeChanged"
    ACCOUNT_NOT_EXECUTABLE = "AccountNotExecutable"
    ACCOUNT_BORROW_FAILED = "AccountBorrowFailed"
    ACCOUNT_BORROW_OUTSTANDING = "AccountBorrowOutstanding"
    DUPLICATE_ACCOUNT_OUT_OF_SYNC = "DuplicateAccountOutOfSync"
    INVALID_ERROR = "InvalidError"
    EXECUTABLE_DATA_MODIFIED = "ExecutableDataModified"
    EXECUTABLE_LAMPORT_CHANGE = "ExecutableLamportChange"
    EXECUTABLE_ACCOUNT_NOT_RENT_EXEMPT = "ExecutableAccountNotRentExempt"
    UNSUPPORTED_PROGRAM_ID = "UnsupportedProgramId"
    CALL_DEPTH = "CallDepth"
    MISSING_ACCOUNT = "MissingAccount"
    REENTRANCY_NOT_ALLOWED = "ReentrancyNotAllowed"
    MAX_SEED_LENGTH_EXCEEDED = "MaxSeedLengthExceeded"
    INVALID_SEEDS = "InvalidSeeds"
    INVALID_REALLOC = "InvalidRealloc"
    COMPUTATIONAL_BUDGET_EXCEEDED = "ComputationalBudgetExceeded"
    PRIVILEGE_ESCALATION = "PrivilegeEscalation"
    PROGRAM_ENVIRONMENT_SETUP_FAILURE = "ProgramEnvironmentSetupFailure"
    PROGRAM_FAILED_TO_COMPLETE = "ProgramFailedToComplete"
    PROGRAM_FAILED_TO_COMPILE = "ProgramFailedToCompile"
    IMMUTABLE = "Immutable"
    INCORRECT_AUTHORITY = "IncorrectAuthority"
    ACCOUNT_NOT_RENT_EXEMPT = "AccountNotRentExempt"
    INVALID_ACCOUNT_OWNER = "InvalidAccountOwner"
    ARITHMETIC_OVERFLOW = "ArithmeticOverflow"
    UNSUPPORTED_SYSVAR = "UnsupportedSysvar"
    ILLEGAL_OWNER = "IllegalOwner"
    MAX_ACCOUNTS_DATA_ALLOCATIONS_EXCEEDED = "MaxAccountsDataAllocationsExceeded"
    MAX_ACCOUNTS_EXCEEDED = "MaxAccountsExceeded"
    MAX_INSTRUCTION_TRACE_LENGTH_EXCEEDED = "MaxInstructionTraceLengthExceeded"
    BUILTIN_PROGRAMS_MUST_CONSUME_COMPUTE_UNITS = "BuiltinProgramsMustConsumeComputeUnits"


INSTRUCTION_ERROR_MESSAGES = {
    InstructionErrorType.GENERIC_ERROR: "generic instruction error",
    InstructionErrorType.INVALID_ARGUMENT: "invalid program argument",
    InstructionErrorType.INVALID_INSTRUCTION_DATA: "invalid instruction data",
    InstructionErrorType.INVALID_ACCOUNT_DATA: "invalid account data for instruction",
    InstructionErrorType.ACCOUNT_DATA_TOO_SMALL: "account data too small for instruction",
    InstructionErrorType.INSUFFICIENT_FUNDS: "insufficient funds for instruction",
    InstructionErrorType.INCORRECT_PROGRAM_ID: "incorrect program id for instruction",
    InstructionErrorType.MISSING_REQUIRED_SIGNATURE: "missing required signature for instruction",
    InstructionErrorType.ACCOUNT_ALREADY_INITIALIZED: "instruction requires an uninitialized account",
    InstructionErrorType.UNINITIALIZED_ACCOUNT: "instruction requires an initialized account",
    InstructionErrorType.UNBALANCED_INSTRUCTION:
        "sum of account balances before and after instruction do not match",
    InstructionErrorType.MODIFIED_PROGRAM_ID: "instruction modified the program id of an account",
    InstructionErrorType.EXTERNAL_ACCOUNT_LAMPORT_SPEND:
        "instruction spent from the balance of an account it does not own",
    InstructionErrorType.EXTERNAL_ACCOUNT_DATA_MODIFIED:
        "instruction modified data of an account it does not own",
    InstructionErrorType.READONLY_LAMPORT_CHANGE: "instruction changed the balance of a read-only account",
    InstructionErrorType.READONLY_DATA_MODIFIED: "instruction modified data of a read-only account",
    InstructionErrorType.DUPLICATE_ACCOUNT_INDEX: "instruction contains duplicate accounts",
    InstructionErrorType.EXECUTABLE_MODIFIED: "instruction changed executable bit of an account",
    InstructionErrorType.RENT_EPOCH_MODIFIED: "instruction modified rent epoch of an account",
    InstructionErrorType.NOT_ENOUGH_ACCOUNT_KEYS: "insufficient account keys for instruction",
    InstructionErrorType.ACCOUNT_DATA_SIZE_CHANGED: "non-system instruction changed account size",
    InstructionErrorType.ACCOUNT_NOT_EXECUTABLE: "instruction expected an executable account",
    InstructionErrorType.ACCOUNT_BORROW_FAILED:
        "instruction tries to borrow reference for an account which is already borrowed",
    InstructionErrorType.ACCOUNT_BORROW_OUTSTANDING:
        "instruction left account with an outstanding borrowed reference",
    InstructionErrorType.DUPLICATE_ACCOUNT_OUT_OF_SYNC:
        "instruction modifications of multiply-passed account differ",
    InstructionErrorType.INVALID_ERROR: "program returned invalid error code",
    InstructionErrorType.EXECUTABLE_DATA_MODIFIED: "instruction changed executable accounts data",
    InstructionErrorType.EXECUTABLE_LAMPORT_CHANGE: "instruction changed the balance of a executable account",
    InstructionErrorType.EXECUTABLE_ACCOUNT_NOT_RENT_EXEMPT: "executable accounts must be rent exempt",
    InstructionErrorType.UNSUPPORTED_PROGRAM_ID: "Unsupported program id",
    InstructionErrorType.CALL_DEPTH: "Cross-program invocation call depth too deep",
    InstructionErrorType.MISSING_ACCOUNT: "An account required by the instruction is missing",
    InstructionErrorType.REENTRANCY_NOT_ALLOWED:
        "Cross-program invocation reentrancy not allowed for this instruction",
    InstructionErrorType.MAX_SEED_LENGTH_EXCEEDED: "Length of the seed is too long for address generation",
    InstructionErrorType.INVALID_SEEDS: "Provided seeds do not result in a valid address",
    InstructionErrorType.INVALID_REALLOC: "Failed to reallocate account data",
    InstructionErrorType.COMPUTATIONAL_BUDGET_EXCEEDED: "Computational budget exceeded",
    InstructionErrorType.PRIVILEGE_ESCALATION:
        "Cross-program invocation with unauthorized signer or writable account",
    InstructionErrorType.PROGRAM_ENVIRONMENT_SETUP_FAILURE: "Failed to create program execution environment",
    InstructionErrorType.PROGRAM_FAILED_TO_COMPLETE: "Program failed to complete",
    InstructionErrorType.PROGRAM_FAILED_TO_COMPILE: "Program failed to compile",
    InstructionErrorType.IMMUTABLE: "Account is immutable",
    InstructionErrorType.INCORRECT_AUTHORITY: "Incorrect authority provided",
    InstructionErrorType.ACCOUNT_NOT_RENT_EXEMPT: "An account does not have enough lamports to be rent-exempt",
    InstructionErrorType.INVALID_ACCOUNT_OWNER: "Invalid account owner",
    InstructionErrorType.ARITHMETIC_OVERFLOW: "Program arithmetic overflowed",
    InstructionErrorType.UNSUPPORTED_SYSVAR: "Unsupported sysvar",
    InstructionErrorType.ILLEGAL_OWNER: "Provided owner is not allowed",
    InstructionErrorType.MAX_ACCOUNTS_DATA_ALLOCATIONS_EXCEEDED:
        "Accounts data allocations exceeded the maximum allowed per transaction",
    InstructionErrorType.MAX_ACCOUNTS_EXCEEDED: "Max accounts exceeded",
    InstructionErrorType.MAX_INSTRUCTION_TRACE_LENGTH_EXCEEDED: "Max instruction trace length exceeded",
    InstructionErrorType.BUILTIN_PROGRAMS_MUST_CONSUME_COMPUTE_UNITS:
        "Builtin programs must consume compute units",
}

_INSTRUCTION_ERROR_TYPES = {kind.value: kind for kind in InstructionErrorType}


class InstructionError(Exception):
    """Base class of parsed instruction errors."""


class KnownInstructionError(InstructionError):
    """A named instruction error kind."""

    def __init__(self, kind: InstructionErrorType):
        self.kind = kind
        super().__init__(INSTRUCTION_ERROR_MESSAGES[kind])

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, KnownInstructionError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"KnownInstructionError({self.kind.value})"


class UndefinedInstructionError(InstructionError):
    """An instruction error name this library does not know; the name is its message."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, UndefinedInstructionError):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"UndefinedInstructionError({self.name!r})"


class CustomInstructionError(InstructionError):
    """A program specific error code, with the program's own error when resolved.

    The resolved error is also exposed as ``__cause__``.
    """

    def __init__(self, code: int, cause: Optional[Exception] = None):
        self.code = code
        self.cause = cause
        message = str(cause) if cause is not None else f"custom program error: {code:#x}"
        super().__init__(message)
        self.__cause__ = cause

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CustomInstructionError):
            return NotImplemented
        return self.code == other.code and self.cause == other.cause

    def __hash__(self) -> int:
        return hash(self.code)

    def __repr__(self) -> str:
        return f"CustomInstructionError(code={self.code}, cause={self.cause!r})"


def as_integer(value: Any) -> Optional[int]:
    """Read a JSON number (int, float or numeric string) as an int.

    Booleans, fractional values and anything non numeric give None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def resolve_nothing(code: int) -> Optional[Exception]:
    """Custom error resolver that never finds anything."""
    return None


def parse_instruction_error(
    payload: Any,
    resolve_custom: Optional[CustomErrorResolver] = None
) -> Optional[InstructionError]:
    """Parse the error payload of a failed instruction.

    Args:
        payload: Decoded JSON value, a string or ``{"Custom": code}``
        resolve_custom: Maps a custom code to the program's error, or None

    Returns:
        The parsed error, or None if the payload has an unknown shape
    """
    if isinstance(payload, str):
        kind = _INSTRUCTION_ERROR_TYPES.get(payload)
        if kind is None:
            return UndefinedInstructionError(payload)
        return KnownInstructionError(kind)

    if isinstance(payload, dict):
        code = as_integer(payload.get("Custom"))
        if code is None or code < 0:
            return None
        cause = (resolve_custom or resolve_nothing)(code)
        return CustomInstructionError(code, cause)

    return None
