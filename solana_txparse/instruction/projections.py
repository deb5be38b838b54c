"""Shortcuts that return a decoded instruction's payload when it is one specific variant."""

from typing import Optional, Type, TypeVar

from solana_txparse.instruction.base import InstructionVariant, ProgramInstruction, VariantInstruction
from solana_txparse.programs.associated_token_account.instructions import (
    AssociatedTokenAccountInstruction,
    Create,
)
from solana_txparse.programs.system.instructions import SystemInstruction
from solana_txparse.programs.system.instructions import Transfer as SystemTransfer
from solana_txparse.programs.token.instructions import CloseAccount, TokenInstruction, Transfer, TransferChecked

V = TypeVar("V", bound=InstructionVariant)


def _project(
    instruction: ProgramInstruction,
    instruction_class: Type[VariantInstruction],
    variant_class: Type[V]
) -> Optional[V]:
    # Token2022Instruction subclasses TokenInstruction, so token projections cover both programs
    if isinstance(instruction, instruction_class) and type(instruction.impl) is variant_class:
        return instruction.impl
    return None


def as_token_transfer(instruction: ProgramInstruction) -> Optional[Transfer]:
    return _project(instruction, TokenInstruction, Transfer)


def as_token_transfer_checked(instruction: ProgramInstruction) -> Optional[TransferChecked]:
    return _project(instruction, TokenInstruction, TransferChecked)


def as_close_token_account(instruction: ProgramInstruction) -> Optional[CloseAccount]:
    return _project(instruction, TokenInstruction, CloseAccount)


def as_system_transfer(instruction: ProgramInstruction) -> Optional[SystemTransfer]:
    return _project(instruction, SystemInstruction, SystemTransfer)


def as_create_associated_token_account(instruction: ProgramInstruction) -> Optional[Create]:
    return _project(instruction, AssociatedTokenAccountInstruction, Create)
