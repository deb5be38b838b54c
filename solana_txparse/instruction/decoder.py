"""Decode the instructions of a message through the program decoder registry."""

import logging
from typing import Any, List, Optional

from solana_txparse.instruction.base import ProgramInstruction
from solana_txparse.instruction.compiled import OpaqueInstruction
from solana_txparse.logging_config import log_with_context
from solana_txparse.message import get_instruction, message_of, resolve_instruction
from solana_txparse.programs.registry import ProgramDecoderRegistry, default_decoder_registry
from solana_txparse.utils.error_handling import InstructionDecodeError

logger = logging.getLogger(__name__)


class InstructionDecoder:
    """Decodes instructions of one message.

    Instructions of programs with a registered decoder become structured
    instructions; all others are returned as ``OpaqueInstruction``.
    """

    def __init__(self, transaction_or_message: Any, registry: Optional[ProgramDecoderRegistry] = None):
        """Initialize the decoder.

        Args:
            transaction_or_message: Message, or transaction holding one
            registry: Decoder registry, defaults to the built-in programs
        """
        self.message = message_of(transaction_or_message)
        self.registry = registry if registry is not None else default_decoder_registry()

    def __len__(self) -> int:
        return len(self.message.instructions)

    def decode(self, index: int) -> ProgramInstruction:
        """Decode the instruction at ``index``.

        Args:
            index: Position of the instruction in the message

        Returns:
            The decoded instruction

        Raises:
            IndexOutOfRangeError: If the instruction, one of its accounts or
                its program id does not resolve
            InstructionDecodeError: If the program's decoder rejects the data
        """
        instruction = get_instruction(self.message, index)
        accounts, program_id = resolve_instruction(self.message, index)
        data = bytes(instruction.data)

        decoder = self.registry.get(program_id)
        if decoder is None:
            log_with_context(
                logger, "debug", "No decoder registered, keeping instruction opaque",
                program_id=program_id, index=index
            )
            return OpaqueInstruction(program_id, accounts, data)

        name = self.registry.name_of(program_id)
        try:
            return decoder(accounts, data)
        except Exception as e:
            reason = e.message if isinstance(e, InstructionDecodeError) else str(e)
            log_with_context(
                logger, "debug", "Instruction data rejected by decoder",
                program=name, index=index, reason=reason
            )
            raise InstructionDecodeError(
                f"unable to decode instruction {index} for program {name}: {reason}",
                program_id=program_id,
                instruction_index=index,
                details={"program": name}
            ) from e

    def decode_all(self) -> List[ProgramInstruction]:
        """Decode every instruction in order, stopping at the first failure."""
        return [self.decode(index) for index in range(len(self))]


def decode_instruction(
    transaction_or_message: Any,
    index: int,
    registry: Optional[ProgramDecoderRegistry] = None
) -> ProgramInstruction:
    """Decode instruction ``index`` of a message."""
    return InstructionDecoder(transaction_or_message, registry).decode(index)


def decode_all_instructions(
    transaction_or_message: Any,
    registry: Optional[ProgramDecoderRegistry] = None
) -> List[ProgramInstruction]:
    """Decode all instructions of a message."""
    return InstructionDecoder(transaction_or_message, registry).decode_all()
