"""Compute Budget program instructions (u8 type id, no accounts)."""

from dataclasses import dataclass

from construct import Int8ul, Int32ul, Int64ul, Struct

from solana_txparse.constants import COMPUTE_BUDGET_PROGRAM_ID
from solana_txparse.instruction.base import InstructionVariant, VariantDefinition, VariantInstruction


@dataclass
class RequestUnitsDeprecated(InstructionVariant):
    LAYOUT = Struct("units" / Int32ul, "additional_fee" / Int32ul)

    units: int
    additional_fee: int


@dataclass
class RequestHeapFrame(InstructionVariant):
    """Request a heap region of ``bytes`` bytes, a multiple of 1024."""

    LAYOUT = Struct("bytes" / Int32ul)

    bytes: int


@dataclass
class SetComputeUnitLimit(InstructionVariant):
    LAYOUT = Struct("units" / Int32ul)

    units: int


@dataclass
class SetComputeUnitPrice(InstructionVariant):
    """Priority fee, in micro-lamports per compute unit."""

    LAYOUT = Struct("micro_lamports" / Int64ul)

    micro_lamports: int


@dataclass
class SetLoadedAccountsDataSizeLimit(InstructionVariant):
    LAYOUT = Struct("bytes" / Int32ul)

    bytes: int


COMPUTE_BUDGET_VARIANTS = VariantDefinition(
    [
        (0, RequestUnitsDeprecated),
        (1, RequestHeapFrame),
        (2, SetComputeUnitLimit),
        (3, SetComputeUnitPrice),
        (4, SetLoadedAccountsDataSizeLimit),
    ],
    tag=Int8ul,
)


class ComputeBudgetInstruction(VariantInstruction):
    PROGRAM_ID = COMPUTE_BUDGET_PROGRAM_ID
    PROGRAM_NAME = "ComputeBudget"
    VARIANTS = COMPUTE_BUDGET_VARIANTS
