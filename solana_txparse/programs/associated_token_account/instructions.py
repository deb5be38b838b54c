"""Associated Token Account program instructions.

The program has a single decoded instruction, ``Create``, with no type id.
Empty data or a ``0`` byte creates the account; a ``1`` byte creates it only if it
does not exist yet (idempotent create).
"""

from dataclasses import dataclass

from construct import Flag, MappingError

from solana_txparse.constants import ASSOCIATED_TOKEN_PROGRAM_ID
from solana_txparse.instruction.base import InstructionVariant, VariantDefinition, VariantInstruction


@dataclass
class Create(InstructionVariant):
    ACCOUNTS = (
        "payer",
        "associated_token_account",
        "wallet",
        "mint",
        "system_program",
        "token_program",
        "rent_sysvar",
    )
    # the rent sysvar is no longer required by the program
    OPTIONAL_ACCOUNTS = 1

    idempotent: bool = False

    @classmethod
    def parse_params(cls, payload: bytes) -> "Create":
        if not payload:
            return cls(idempotent=False)
        if payload not in (b"\x00", b"\x01"):
            raise MappingError(f"unsupported instruction data 0x{payload.hex()}")
        return cls(idempotent=Flag.parse(payload))

    def encode_params(self) -> bytes:
        return Flag.build(True) if self.idempotent else b""


ATA_VARIANTS = VariantDefinition([(0, Create)])


class AssociatedTokenAccountInstruction(VariantInstruction):
    PROGRAM_ID = ASSOCIATED_TOKEN_PROGRAM_ID
    PROGRAM_NAME = "AssociatedTokenAccount"
    VARIANTS = ATA_VARIANTS
