"""Checked decoding of one instruction into one expected variant.

A typed decoder answers "is instruction N of this message a token
``Transfer``, and if so give it to me", distinguishing every way the answer
can be no.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from solders.pubkey import Pubkey

from solana_txparse.instruction.base import InstructionVariant, VariantDefinition, VariantInstruction
from solana_txparse.message import (
    get_instruction,
    message_of,
    resolve_instruction_accounts,
    resolve_program_id,
)
from solana_txparse.utils.error_handling import (
    AccountResolutionError,
    IndexOutOfRangeError,
    InstructionDecodeError,
    ProgramIdMismatchError,
    ProgramIdResolutionError,
    TypeMismatchError,
)

V = TypeVar("V", bound=InstructionVariant)


class TypedInstructionDecoder(Generic[V]):
    """Callable ``(transaction_or_message, index) -> variant``.

    Args:
        expected_program_id: Program the instruction must belong to
        instruction_class: ``VariantInstruction`` subclass used to decode the data
        variant_class: Exact variant the instruction must decode to
        definition: Variant table to check against, defaults to the one of
            ``instruction_class``
    """

    def __init__(
        self,
        expected_program_id: Pubkey,
        instruction_class: Type[VariantInstruction],
        variant_class: Type[V],
        definition: Optional[VariantDefinition] = None
    ):
        self.expected_program_id = expected_program_id
        self.instruction_class = instruction_class
        self.variant_class = variant_class
        self.definition = definition or instruction_class.VARIANTS
        self.expected_type_id = self.definition.type_id_of(variant_class)
        if self.expected_type_id is None:
            raise ValueError(
                f"{variant_class.__name__} is not a variant of {instruction_class.__name__}"
            )

    def __call__(self, transaction_or_message: Any, index: int) -> V:
        """Decode instruction ``index`` as ``variant_class``.

        Raises:
            IndexOutOfRangeError: No instruction at ``index``
            AccountResolutionError: An account index does not resolve
            ProgramIdResolutionError: The program id index does not resolve
            ProgramIdMismatchError: The instruction targets another program
            InstructionDecodeError: The data does not decode for the program
            TypeMismatchError: The instruction is another variant
        """
        message = message_of(transaction_or_message)
        instruction = get_instruction(message, index)

        try:
            accounts = resolve_instruction_accounts(message, instruction)
        except IndexOutOfRangeError as e:
            raise AccountResolutionError(index, e.message) from e

        try:
            program_id = resolve_program_id(message, instruction.program_id_index)
        except IndexOutOfRangeError as e:
            raise ProgramIdResolutionError(index, e.message) from e

        if program_id != self.expected_program_id:
            raise ProgramIdMismatchError(index, program_id, self.expected_program_id)

        try:
            decoded = self.instruction_class.decode(accounts, bytes(instruction.data))
        except InstructionDecodeError as e:
            raise InstructionDecodeError(
                f"instruction '{index}': failed to decode as "
                f"'{self.instruction_class.__name__}': {e.message}",
                program_id=program_id,
                instruction_index=index
            ) from e

        type_id, name, impl = decoded.obtain(self.definition)
        if type_id != self.expected_type_id or type(impl) is not self.variant_class:
            raise TypeMismatchError(index, name or type(impl).__name__, self.variant_class.__name__)
        return impl

    def __repr__(self) -> str:
        return (
            f"TypedInstructionDecoder({self.instruction_class.__name__}."
            f"{self.variant_class.__name__})"
        )


def typed_instruction_decoder(
    expected_program_id: Pubkey,
    instruction_class: Type[VariantInstruction],
    variant_class: Type[V],
    definition: Optional[VariantDefinition] = None
) -> TypedInstructionDecoder[V]:
    """Build a typed decoder for one variant of one program."""
    return TypedInstructionDecoder(expected_program_id, instruction_class, variant_class, definition)
