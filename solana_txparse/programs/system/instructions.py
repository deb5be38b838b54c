"""System program instructions.

Bincode encoded: a u32 little endian type id followed by the parameters.
"""

from dataclasses import dataclass

from construct import Int32ul, Int64ul, Struct
from solders.pubkey import Pubkey

from solana_txparse.codec import BINCODE_STRING, PUBLIC_KEY
from solana_txparse.constants import SYSTEM_PROGRAM_ID
from solana_txparse.instruction.base import InstructionVariant, VariantDefinition, VariantInstruction


@dataclass
class CreateAccount(InstructionVariant):
    ACCOUNTS = ("funding_account", "new_account")
    LAYOUT = Struct("lamports" / Int64ul, "space" / Int64ul, "owner" / PUBLIC_KEY)

    lamports: int
    space: int
    owner: Pubkey


@dataclass
class Assign(InstructionVariant):
    ACCOUNTS = ("assigned_account",)
    LAYOUT = Struct("owner" / PUBLIC_KEY)

    owner: Pubkey


@dataclass
class Transfer(InstructionVariant):
    """Move lamports from a signing account to another account."""

    ACCOUNTS = ("funding_account", "recipient_account")
    LAYOUT = Struct("lamports" / Int64ul)

    lamports: int


@dataclass
class CreateAccountWithSeed(InstructionVariant):
    """Create an account at an address derived from a base key and a seed.

    The base account is only present when it differs from the funding
    account.
    """

    ACCOUNTS = ("funding_account", "created_account", "base_account")
    OPTIONAL_ACCOUNTS = 1
    LAYOUT = Struct(
        "base" / PUBLIC_KEY,
        "seed" / BINCODE_STRING,
        "lamports" / Int64ul,
        "space" / Int64ul,
        "owner" / PUBLIC_KEY,
    )

    base: Pubkey
    seed: str
    lamports: int
    space: int
    owner: Pubkey


@dataclass
class AdvanceNonceAccount(InstructionVariant):
    ACCOUNTS = ("nonce_account", "recent_blockhashes_sysvar", "nonce_authority")


@dataclass
class WithdrawNonceAccount(InstructionVariant):
    ACCOUNTS = (
        "nonce_account",
        "recipient_account",
        "recent_blockhashes_sysvar",
        "rent_sysvar",
        "nonce_authority",
    )
    LAYOUT = Struct("lamports" / Int64ul)

    lamports: int


@dataclass
class InitializeNonceAccount(InstructionVariant):
    ACCOUNTS = ("nonce_account", "recent_blockhashes_sysvar", "rent_sysvar")
    LAYOUT = Struct("authority" / PUBLIC_KEY)

    authority: Pubkey


@dataclass
class AuthorizeNonceAccount(InstructionVariant):
    ACCOUNTS = ("nonce_account", "nonce_authority")
    LAYOUT = Struct("authority" / PUBLIC_KEY)

    authority: Pubkey


@dataclass
class Allocate(InstructionVariant):
    ACCOUNTS = ("new_account",)
    LAYOUT = Struct("space" / Int64ul)

    space: int


@dataclass
class AllocateWithSeed(InstructionVariant):
    ACCOUNTS = ("allocated_account", "base_account")
    LAYOUT = Struct(
        "base" / PUBLIC_KEY,
        "seed" / BINCODE_STRING,
        "space" / Int64ul,
        "owner" / PUBLIC_KEY,
    )

    base: Pubkey
    seed: str
    space: int
    owner: Pubkey


@dataclass
class AssignWithSeed(InstructionVariant):
    ACCOUNTS = ("assigned_account", "base_account")
    LAYOUT = Struct("base" / PUBLIC_KEY, "seed" / BINCODE_STRING, "owner" / PUBLIC_KEY)

    base: Pubkey
    seed: str
    owner: Pubkey


@dataclass
class TransferWithSeed(InstructionVariant):
    ACCOUNTS = ("funding_account", "base_account", "recipient_account")
    LAYOUT = Struct("lamports" / Int64ul, "from_seed" / BINCODE_STRING, "from_owner" / PUBLIC_KEY)

    lamports: int
    from_seed: str
    from_owner: Pubkey


@dataclass
class UpgradeNonceAccount(InstructionVariant):
    ACCOUNTS = ("nonce_account",)


SYSTEM_VARIANTS = VariantDefinition(
    [
        (0, CreateAccount),
        (1, Assign),
        (2, Transfer),
        (3, CreateAccountWithSeed),
        (4, AdvanceNonceAccount),
        (5, WithdrawNonceAccount),
        (6, InitializeNonceAccount),
        (7, AuthorizeNonceAccount),
        (8, Allocate),
        (9, AllocateWithSeed),
        (10, AssignWithSeed),
        (11, TransferWithSeed),
        (12, UpgradeNonceAccount),
    ],
    tag=Int32ul,
)


class SystemInstruction(VariantInstruction):
    PROGRAM_ID = SYSTEM_PROGRAM_ID
    PROGRAM_NAME = "System"
    VARIANTS = SYSTEM_VARIANTS
