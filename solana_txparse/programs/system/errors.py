"""System program custom errors."""

from enum import IntEnum

from solana_txparse.errors.program_error import ProgramCustomError


class SystemErrorCode(IntEnum):
    ACCOUNT_ALREADY_IN_USE = 0
    RESULT_WITH_NEGATIVE_LAMPORTS = 1
    INVALID_PROGRAM_ID = 2
    INVALID_ACCOUNT_DATA_LENGTH = 3
    MAX_SEED_LENGTH_EXCEEDED = 4
    ADDRESS_WITH_SEED_MISMATCH = 5
    NONCE_NO_RECENT_BLOCKHASHES = 6
    NONCE_BLOCKHASH_NOT_EXPIRED = 7
    NONCE_UNEXPECTED_BLOCKHASH_VALUE = 8


SYSTEM_ERROR_MESSAGES = {
    SystemErrorCode.ACCOUNT_ALREADY_IN_USE: "an account with the same address already exists",
    SystemErrorCode.RESULT_WITH_NEGATIVE_LAMPORTS: "account does not have enough SOL to perform the operation",
    SystemErrorCode.INVALID_PROGRAM_ID: "cannot assign account to this program id",
    SystemErrorCode.INVALID_ACCOUNT_DATA_LENGTH: "cannot allocate account data of this length",
    SystemErrorCode.MAX_SEED_LENGTH_EXCEEDED: "length of requested seed is too long",
    SystemErrorCode.ADDRESS_WITH_SEED_MISMATCH: "provided address does not match addressed derived from seed",
    SystemErrorCode.NONCE_NO_RECENT_BLOCKHASHES: "advancing stored nonce requires a populated RecentBlockhashes sysvar",
    SystemErrorCode.NONCE_BLOCKHASH_NOT_EXPIRED: "stored nonce is still in recent_blockhashes",
    SystemErrorCode.NONCE_UNEXPECTED_BLOCKHASH_VALUE: "specified nonce does not match stored nonce",
}


class SystemProgramError(ProgramCustomError):
    PROGRAM_NAME = "System"
    CODES = SystemErrorCode
    MESSAGES = SYSTEM_ERROR_MESSAGES


def system_error_resolver(code: int):
    """Resolve a System program custom error code, None if unknown."""
    return SystemProgramError.resolve(code)
