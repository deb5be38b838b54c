"""Registry of program decoders.

Maps a program id to the function that turns resolved accounts and raw data
into a structured instruction. Programs without an entry decode to an
``OpaqueInstruction``.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional, Sequence

from solders.instruction import AccountMeta
from solders.pubkey import Pubkey

from solana_txparse.instruction.base import ProgramInstruction
from solana_txparse.programs.associated_token_account import AssociatedTokenAccountInstruction
from solana_txparse.programs.compute_budget import ComputeBudgetInstruction
from solana_txparse.programs.system import SystemInstruction
from solana_txparse.programs.token import TokenInstruction
from solana_txparse.programs.token2022 import Token2022Instruction
from solana_txparse.programs.vote import VoteInstruction
from solana_txparse.utils.error_handling import ConfigurationError

logger = logging.getLogger(__name__)

ProgramDecoder = Callable[[Sequence[AccountMeta], bytes], ProgramInstruction]


class ProgramDecoderRegistry:
    """Registry for program decoders."""

    def __init__(self):
        """Initialize an empty registry."""
        self._decoders: Dict[Pubkey, ProgramDecoder] = {}
        self._names: Dict[Pubkey, str] = {}

    def register(self, program_id: Pubkey, decoder: ProgramDecoder, name: Optional[str] = None) -> None:
        """Register the decoder of a program.

        Args:
            program_id: Program the decoder handles
            decoder: Callable ``(accounts, data) -> ProgramInstruction``
            name: Human-readable program name, used in error messages

        Raises:
            ConfigurationError: If the program already has a decoder
        """
        if program_id in self._decoders:
            raise ConfigurationError(
                f"a decoder is already registered for program {program_id}",
                {"program_id": str(program_id), "name": self._names[program_id]}
            )
        self._decoders[program_id] = decoder
        self._names[program_id] = name or str(program_id)
        logger.debug(f"Registered decoder for {self._names[program_id]} ({program_id})")

    def get(self, program_id: Pubkey) -> Optional[ProgramDecoder]:
        """Get the decoder for a program, or None if it has none."""
        return self._decoders.get(program_id)

    def name_of(self, program_id: Pubkey) -> Optional[str]:
        return self._names.get(program_id)

    def program_ids(self) -> List[Pubkey]:
        return list(self._decoders)

    def __contains__(self, program_id: Pubkey) -> bool:
        return program_id in self._decoders

    def __len__(self) -> int:
        return len(self._decoders)


def register_builtin_decoders(registry: ProgramDecoderRegistry) -> ProgramDecoderRegistry:
    """Register the decoders of the built-in programs on ``registry``."""
    for instruction_class in (
        SystemInstruction,
        TokenInstruction,
        Token2022Instruction,
        VoteInstruction,
        AssociatedTokenAccountInstruction,
        ComputeBudgetInstruction,
    ):
        registry.register(
            instruction_class.PROGRAM_ID,
            instruction_class.decode,
            instruction_class.PROGRAM_NAME
        )
    return registry


_default_registry: Optional[ProgramDecoderRegistry] = None
_default_registry_lock = threading.Lock()


def default_decoder_registry() -> ProgramDecoderRegistry:
    """Get the process-wide registry holding the built-in programs."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = register_builtin_decoders(ProgramDecoderRegistry())
    return _default_registry
