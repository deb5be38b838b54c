"""
Error handling utilities for solana-txparse.

This module provides standardized error handling mechanisms including:
- Custom exception classes for instruction resolution and decoding
- A decorator for logging (and optionally retrying) failures
"""

import asyncio
import functools
import inspect
import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, cast

# Get logger
logger = logging.getLogger(__name__)

# Type variable for function return types
F = TypeVar('F', bound=Callable[..., Any])


class ErrorCode(Enum):
    """Error codes for solana-txparse."""
    # General errors
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001
    VALIDATION_ERROR = 1002

    # RPC errors
    RPC_ERROR = 3000

    # Instruction errors
    INDEX_OUT_OF_RANGE = 6000
    ACCOUNT_RESOLUTION_ERROR = 6001
    PROGRAM_ID_RESOLUTION_ERROR = 6002
    PROGRAM_ID_MISMATCH = 6003
    INSTRUCTION_DECODE_ERROR = 6004
    TYPE_MISMATCH = 6005


# Base exception classes
class SolanaTxParseError(Exception):
    """Base exception class for all solana-txparse errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize a new SolanaTxParseError.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        # Format the error message
        formatted_message = f"[{error_code.name}] {message}"
        if details:
            formatted_message += f" - Details: {details}"

        super().__init__(formatted_message)


class ValidationError(SolanaTxParseError):
    """Error related to validation failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


class ConfigurationError(SolanaTxParseError):
    """Error related to configuration issues."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class RPCError(SolanaTxParseError):
    """Exception for RPC-related errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        rpc_error_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the RPC exception.

        Args:
            message: Error message
            status_code: HTTP status code
            rpc_error_code: RPC-specific error code
            endpoint: The RPC endpoint that returned the error
            details: Additional error details
        """
        self.status_code = status_code
        self.rpc_error_code = rpc_error_code
        self.endpoint = endpoint

        error_details = details or {}
        if status_code:
            error_details["status_code"] = status_code
        if rpc_error_code:
            error_details["rpc_error_code"] = rpc_error_code
        if endpoint:
            error_details["endpoint"] = endpoint

        super().__init__(message, ErrorCode.RPC_ERROR, error_details)


class IndexOutOfRangeError(SolanaTxParseError):
    """An instruction, account or program id index does not resolve."""

    def __init__(self, message: str, index: int, length: int, kind: str):
        self.index = index
        self.length = length
        self.kind = kind
        super().__init__(
            message,
            ErrorCode.INDEX_OUT_OF_RANGE,
            {"kind": kind, "index": index, "length": length}
        )


class AccountResolutionError(SolanaTxParseError):
    """Accounts of an instruction could not be resolved."""

    def __init__(self, instruction_index: int, reason: str):
        self.instruction_index = instruction_index
        super().__init__(
            f"instruction '{instruction_index}': failed to resolve accounts: {reason}",
            ErrorCode.ACCOUNT_RESOLUTION_ERROR,
            {"instruction_index": instruction_index}
        )


class ProgramIdResolutionError(SolanaTxParseError):
    """The program id of an instruction could not be resolved."""

    def __init__(self, instruction_index: int, reason: str):
        self.instruction_index = instruction_index
        super().__init__(
            f"instruction '{instruction_index}': failed to resolve program ID: {reason}",
            ErrorCode.PROGRAM_ID_RESOLUTION_ERROR,
            {"instruction_index": instruction_index}
        )


class ProgramIdMismatchError(SolanaTxParseError):
    """The instruction belongs to another program than the one requested."""

    def __init__(self, instruction_index: int, program_id: Any, expected_program_id: Any):
        self.instruction_index = instruction_index
        self.program_id = program_id
        self.expected_program_id = expected_program_id
        super().__init__(
            f"instruction '{instruction_index}': programID ({program_id}) "
            f"doesn't match expected value '{expected_program_id}'",
            ErrorCode.PROGRAM_ID_MISMATCH,
            {
                "instruction_index": instruction_index,
                "program_id": str(program_id),
                "expected_program_id": str(expected_program_id),
            }
        )


class InstructionDecodeError(SolanaTxParseError):
    """Instruction data could not be decoded for its program."""

    def __init__(
        self,
        message: str,
        program_id: Any = None,
        instruction_index: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.program_id = program_id
        self.instruction_index = instruction_index

        error_details = details or {}
        if program_id is not None:
            error_details["program_id"] = str(program_id)
        if instruction_index is not None:
            error_details["instruction_index"] = instruction_index

        super().__init__(message, ErrorCode.INSTRUCTION_DECODE_ERROR, error_details)


class TypeMismatchError(SolanaTxParseError):
    """A decoded variant is not the variant type the caller asked for."""

    def __init__(self, instruction_index: int, obtained: str, expected: str):
        self.instruction_index = instruction_index
        self.obtained = obtained
        self.expected = expected
        super().__init__(
            f"instruction '{instruction_index}': obtained type '{obtained}' "
            f"doesn't match expected type '{expected}'",
            ErrorCode.TYPE_MISMATCH,
            {"instruction_index": instruction_index}
        )


# Error handling decorators
def handle_errors(
    retries: int = 0,
    retry_delay: float = 1.0,
    retry_on: Optional[List[Type[Exception]]] = None,
    logger_instance: Optional[logging.Logger] = None
) -> Callable[[F], F]:
    """
    Decorator for standardized error handling.

    Failures are logged and re-raised. Exceptions listed in ``retry_on``
    are retried up to ``retries`` times with a linearly growing delay.

    Args:
        retries: Number of retry attempts (0 = no retries)
        retry_delay: Delay between retry attempts in seconds
        retry_on: List of exception types to retry on
        logger_instance: Logger instance to use (defaults to module logger)

    Returns:
        Decorated function with error handling

    Example:
        @handle_errors(retries=3, retry_on=[RPCError])
        async def get_signatures(address: str):
            # This function will retry up to 3 times on RPCError
            ...
    """
    log = logger_instance or logger
    retry_exceptions = tuple(retry_on or [RPCError])

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                attempts = 0
                while True:
                    try:
                        return await func(*args, **kwargs)
                    except retry_exceptions as e:
                        attempts += 1
                        if attempts > retries:
                            log.error(f"Failed after {retries} retries in {func.__name__}: {str(e)}")
                            raise
                        log.warning(
                            f"Retrying {func.__name__} after error: {str(e)}. "
                            f"Attempt {attempts}/{retries}"
                        )
                        await asyncio.sleep(retry_delay * attempts)
                    except Exception as e:
                        log.error(f"Error in {func.__name__}: {str(e)}")
                        raise

            return cast(F, async_wrapper)

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            attempts = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except retry_exceptions as e:
                    attempts += 1
                    if attempts > retries:
                        log.error(f"Failed after {retries} retries in {func.__name__}: {str(e)}")
                        raise
                    log.warning(
                        f"Retrying {func.__name__} after error: {str(e)}. "
                        f"Attempt {attempts}/{retries}"
                    )
                    time.sleep(retry_delay * attempts)
                except Exception as e:
                    log.error(f"Error in {func.__name__}: {str(e)}")
                    raise

        return cast(F, sync_wrapper)

    return decorator
