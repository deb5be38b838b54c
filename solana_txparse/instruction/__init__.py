"""Instruction model, opaque fallback and typed decoding."""

from solana_txparse.instruction.base import (
    NO_TYPE_ID,
    InstructionVariant,
    ProgramInstruction,
    VariantDefinition,
    VariantInstruction,
)
from solana_txparse.instruction.compiled import OpaqueInstruction
from solana_txparse.instruction.typed import TypedInstructionDecoder, typed_instruction_decoder
