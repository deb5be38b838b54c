"""SPL Token program instructions.

One byte type id followed by packed little endian parameters. Optional
public keys use the ``COption`` packing: a one byte flag, then the key only
when the flag is set.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from construct import Int8ul, Int64ul, Struct
from solders.pubkey import Pubkey

from solana_txparse.codec import PUBLIC_KEY, IntEnumAdapter, option
from solana_txparse.constants import TOKEN_PROGRAM_ID
from solana_txparse.instruction.base import InstructionVariant, VariantDefinition, VariantInstruction


class AuthorityType(IntEnum):
    MINT_TOKENS = 0
    FREEZE_ACCOUNT = 1
    ACCOUNT_OWNER = 2
    CLOSE_ACCOUNT = 3


_AMOUNT = Struct("amount" / Int64ul)
_AMOUNT_CHECKED = Struct("amount" / Int64ul, "decimals" / Int8ul)
_INITIALIZE_MINT = Struct(
    "decimals" / Int8ul,
    "mint_authority" / PUBLIC_KEY,
    "freeze_authority" / option(PUBLIC_KEY),
)


@dataclass
class InitializeMint(InstructionVariant):
    ACCOUNTS = ("mint", "rent_sysvar")
    LAYOUT = _INITIALIZE_MINT

    decimals: int
    mint_authority: Pubkey
    freeze_authority: Optional[Pubkey] = None


@dataclass
class InitializeAccount(InstructionVariant):
    ACCOUNTS = ("account", "mint", "owner", "rent_sysvar")


@dataclass
class InitializeMultisig(InstructionVariant):
    """Signer accounts follow the named ones."""

    ACCOUNTS = ("multisig", "rent_sysvar")
    LAYOUT = Struct("m" / Int8ul)

    m: int


@dataclass
class Transfer(InstructionVariant):
    """Transfer tokens between accounts of the same mint.

    With a multisig owner the signers follow the named accounts.
    """

    ACCOUNTS = ("source", "destination", "owner")
    LAYOUT = _AMOUNT

    amount: int


@dataclass
class Approve(InstructionVariant):
    ACCOUNTS = ("source", "delegate", "owner")
    LAYOUT = _AMOUNT

    amount: int


@dataclass
class Revoke(InstructionVariant):
    ACCOUNTS = ("source", "owner")


@dataclass
class SetAuthority(InstructionVariant):
    ACCOUNTS = ("account", "current_authority")
    LAYOUT = Struct(
        "authority_type" / IntEnumAdapter(Int8ul, AuthorityType),
        "new_authority" / option(PUBLIC_KEY),
    )

    authority_type: AuthorityType
    new_authority: Optional[Pubkey] = None


@dataclass
class MintTo(InstructionVariant):
    ACCOUNTS = ("mint", "destination", "authority")
    LAYOUT = _AMOUNT

    amount: int


@dataclass
class Burn(InstructionVariant):
    ACCOUNTS = ("account", "mint", "owner")
    LAYOUT = _AMOUNT

    amount: int


@dataclass
class CloseAccount(InstructionVariant):
    ACCOUNTS = ("account", "destination", "owner")


@dataclass
class FreezeAccount(InstructionVariant):
    ACCOUNTS = ("account", "mint", "authority")


@dataclass
class ThawAccount(InstructionVariant):
    ACCOUNTS = ("account", "mint", "authority")


@dataclass
class TransferChecked(InstructionVariant):
    ACCOUNTS = ("source", "mint", "destination", "owner")
    LAYOUT = _AMOUNT_CHECKED

    amount: int
    decimals: int


@dataclass
class ApproveChecked(InstructionVariant):
    ACCOUNTS = ("source", "mint", "delegate", "owner")
    LAYOUT = _AMOUNT_CHECKED

    amount: int
    decimals: int


@dataclass
class MintToChecked(InstructionVariant):
    ACCOUNTS = ("mint", "destination", "authority")
    LAYOUT = _AMOUNT_CHECKED

    amount: int
    decimals: int


@dataclass
class BurnChecked(InstructionVariant):
    ACCOUNTS = ("account", "mint", "owner")
    LAYOUT = _AMOUNT_CHECKED

    amount: int
    decimals: int


@dataclass
class InitializeAccount2(InstructionVariant):
    ACCOUNTS = ("account", "mint", "rent_sysvar")
    LAYOUT = Struct("owner" / PUBLIC_KEY)

    owner: Pubkey


@dataclass
class SyncNative(InstructionVariant):
    ACCOUNTS = ("account",)


@dataclass
class InitializeAccount3(InstructionVariant):
    ACCOUNTS = ("account", "mint")
    LAYOUT = Struct("owner" / PUBLIC_KEY)

    owner: Pubkey


@dataclass
class InitializeMultisig2(InstructionVariant):
    ACCOUNTS = ("multisig",)
    LAYOUT = Struct("m" / Int8ul)

    m: int


@dataclass
class InitializeMint2(InstructionVariant):
    ACCOUNTS = ("mint",)
    LAYOUT = _INITIALIZE_MINT

    decimals: int
    mint_authority: Pubkey
    freeze_authority: Optional[Pubkey] = None


TOKEN_VARIANTS = VariantDefinition(
    [
        (0, InitializeMint),
        (1, InitializeAccount),
        (2, InitializeMultisig),
        (3, Transfer),
        (4, Approve),
        (5, Revoke),
        (6, SetAuthority),
        (7, MintTo),
        (8, Burn),
        (9, CloseAccount),
        (10, FreezeAccount),
        (11, ThawAccount),
        (12, TransferChecked),
        (13, ApproveChecked),
        (14, MintToChecked),
        (15, BurnChecked),
        (16, InitializeAccount2),
        (17, SyncNative),
        (18, InitializeAccount3),
        (19, InitializeMultisig2),
        (20, InitializeMint2),
    ],
    tag=Int8ul,
)


class TokenInstruction(VariantInstruction):
    PROGRAM_ID = TOKEN_PROGRAM_ID
    PROGRAM_NAME = "Token"
    VARIANTS = TOKEN_VARIANTS
