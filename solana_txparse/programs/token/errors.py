"""SPL Token program custom errors.

Token-2022 keeps the same meaning for these codes, so the resolver is
registered for both programs.
"""

from enum import IntEnum

from solana_txparse.errors.program_error import ProgramCustomError


class TokenErrorCode(IntEnum):
    NOT_RENT_EXEMPT = 0
    INSUFFICIENT_FUNDS = 1
    INVALID_MINT = 2
    MINT_MISMATCH = 3
    OWNER_MISMATCH = 4
    FIXED_SUPPLY = 5
    ALREADY_IN_USE = 6
    INVALID_NUMBER_OF_PROVIDED_SIGNERS = 7
    INVALID_NUMBER_OF_REQUIRED_SIGNERS = 8
    UNINITIALIZED_STATE = 9
    NATIVE_NOT_SUPPORTED = 10
    NON_NATIVE_HAS_BALANCE = 11
    INVALID_INSTRUCTION = 12
    INVALID_STATE = 13
    OVERFLOW = 14
    AUTHORITY_TYPE_NOT_SUPPORTED = 15
    MINT_CANNOT_FREEZE = 16
    ACCOUNT_FROZEN = 17
    MINT_DECIMALS_MISMATCH = 18
    NON_NATIVE_NOT_SUPPORTED = 19


TOKEN_ERROR_MESSAGES = {
    TokenErrorCode.NOT_RENT_EXEMPT: "Lamport balance below rent-exempt threshold",
    TokenErrorCode.INSUFFICIENT_FUNDS: "Insufficient funds",
    TokenErrorCode.INVALID_MINT: "Invalid Mint",
    TokenErrorCode.MINT_MISMATCH: "Account not associated with this Mint",
    TokenErrorCode.OWNER_MISMATCH: "Owner does not match",
    TokenErrorCode.FIXED_SUPPLY: "Fixed supply",
    TokenErrorCode.ALREADY_IN_USE: "Already in use",
    TokenErrorCode.INVALID_NUMBER_OF_PROVIDED_SIGNERS: "Invalid number of provided signers",
    TokenErrorCode.INVALID_NUMBER_OF_REQUIRED_SIGNERS: "Invalid number of required signers",
    TokenErrorCode.UNINITIALIZED_STATE: "State is uninitialized",
    TokenErrorCode.NATIVE_NOT_SUPPORTED: "Instruction does not support native tokens",
    TokenErrorCode.NON_NATIVE_HAS_BALANCE: "Non-native account can only be closed if its balance is zero",
    TokenErrorCode.INVALID_INSTRUCTION: "Invalid instruction",
    TokenErrorCode.INVALID_STATE: "State is invalid for requested operation",
    TokenErrorCode.OVERFLOW: "Operation overflowed",
    TokenErrorCode.AUTHORITY_TYPE_NOT_SUPPORTED: "Account does not support specified authority type",
    TokenErrorCode.MINT_CANNOT_FREEZE: "This token mint cannot freeze accounts",
    TokenErrorCode.ACCOUNT_FROZEN: "Account is frozen",
    TokenErrorCode.MINT_DECIMALS_MISMATCH: "The provided decimals value different from the Mint decimals",
    TokenErrorCode.NON_NATIVE_NOT_SUPPORTED: "Instruction does not support non-native tokens",
}


class TokenError(ProgramCustomError):
    PROGRAM_NAME = "Token"
    CODES = TokenErrorCode
    MESSAGES = TOKEN_ERROR_MESSAGES


def token_error_resolver(code: int):
    """Resolve a Token program custom error code, None if unknown."""
    return TokenError.resolve(code)
