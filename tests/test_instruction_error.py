"""Unit tests for instruction error parsing."""

import pytest

from solana_txparse.errors import (
    CustomInstructionError,
    InstructionErrorType,
    KnownInstructionError,
    UndefinedInstructionError,
    parse_instruction_error,
)
from solana_txparse.errors.instruction_error import INSTRUCTION_ERROR_MESSAGES, as_integer
from solana_txparse.programs.token import TokenError, TokenErrorCode, token_error_resolver


def test_known_kind():
    error = parse_instruction_error("InvalidArgument")

    assert error == KnownInstructionError(InstructionErrorType.INVALID_ARGUMENT)
    assert str(error) == "invalid program argument"


def test_unknown_kind_keeps_its_name():
    error = parse_instruction_error("SomethingNew")

    assert isinstance(error, UndefinedInstructionError)
    assert str(error) == "SomethingNew"


def test_every_kind_has_a_message():
    assert set(INSTRUCTION_ERROR_MESSAGES) == set(InstructionErrorType)


def test_custom_without_resolver():
    error = parse_instruction_error({"Custom": 16})

    assert error == CustomInstructionError(16)
    assert error.cause is None
    assert str(error) == "custom program error: 0x10"


def test_custom_resolved():
    error = parse_instruction_error({"Custom": 1}, token_error_resolver)

    assert error.code == 1
    assert error.cause == TokenError(TokenErrorCode.INSUFFICIENT_FUNDS)
    assert error.__cause__ is error.cause
    assert str(error) == "Insufficient funds"


def test_custom_code_unknown_to_resolver():
    error = parse_instruction_error({"Custom": 4000}, token_error_resolver)

    assert error == CustomInstructionError(4000)


def test_custom_code_as_json_float():
    assert parse_instruction_error({"Custom": 1.0}) == CustomInstructionError(1)


@pytest.mark.parametrize("payload", [
    {"Custom": -1},
    {"Custom": 1.5},
    {"Custom": "abc"},
    {"Custom": True},
    {"Custom": None},
    {"BorshIoError": "x"},
    17,
    None,
    ["InvalidArgument"],
])
def test_unknown_shapes(payload):
    assert parse_instruction_error(payload) is None


@pytest.mark.parametrize("value,expected", [
    (3, 3),
    (3.0, 3),
    ("3", 3),
    ("3.0", 3),
    (3.2, None),
    (True, None),
    ("x", None),
    (None, None),
])
def test_as_integer(value, expected):
    assert as_integer(value) == expected
