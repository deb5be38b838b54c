"""Vote program instructions (bincode, u32 type id)."""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

from construct import Int8ul, Int32ul, Int64sl, Int64ul, Struct
from solders.hash import Hash
from solders.pubkey import Pubkey

from solana_txparse.codec import HASH, PUBLIC_KEY, IntEnumAdapter, bincode_vec, option
from solana_txparse.constants import VOTE_PROGRAM_ID
from solana_txparse.instruction.base import InstructionVariant, VariantDefinition, VariantInstruction


class VoteAuthorize(IntEnum):
    VOTER = 0
    WITHDRAWER = 1


@dataclass
class InitializeAccount(InstructionVariant):
    ACCOUNTS = ("vote_account", "rent_sysvar", "clock_sysvar", "node")
    LAYOUT = Struct(
        "node_pubkey" / PUBLIC_KEY,
        "authorized_voter" / PUBLIC_KEY,
        "authorized_withdrawer" / PUBLIC_KEY,
        "commission" / Int8ul,
    )

    node_pubkey: Pubkey
    authorized_voter: Pubkey
    authorized_withdrawer: Pubkey
    commission: int


@dataclass
class Authorize(InstructionVariant):
    ACCOUNTS = ("vote_account", "clock_sysvar", "authority")
    LAYOUT = Struct(
        "new_authority" / PUBLIC_KEY,
        "vote_authorize" / IntEnumAdapter(Int32ul, VoteAuthorize),
    )

    new_authority: Pubkey
    vote_authorize: VoteAuthorize


@dataclass
class Vote(InstructionVariant):
    """Vote on a set of slots; ``hash`` is the bank hash of the last one."""

    ACCOUNTS = ("vote_account", "slot_hashes_sysvar", "clock_sysvar", "vote_authority")
    LAYOUT = Struct(
        "slots" / bincode_vec(Int64ul),
        "hash" / HASH,
        "timestamp" / option(Int64sl),
    )

    slots: List[int]
    hash: Hash
    timestamp: Optional[int] = None

    @classmethod
    def parse_params(cls, payload: bytes) -> "Vote":
        parsed = cls.LAYOUT.parse(payload)
        return cls(slots=list(parsed["slots"]), hash=parsed["hash"], timestamp=parsed["timestamp"])


@dataclass
class Withdraw(InstructionVariant):
    ACCOUNTS = ("vote_account", "recipient", "withdraw_authority")
    LAYOUT = Struct("lamports" / Int64ul)

    lamports: int


@dataclass
class UpdateValidatorIdentity(InstructionVariant):
    ACCOUNTS = ("vote_account", "node", "withdraw_authority")


@dataclass
class UpdateCommission(InstructionVariant):
    ACCOUNTS = ("vote_account", "withdraw_authority")
    LAYOUT = Struct("commission" / Int8ul)

    commission: int


VOTE_VARIANTS = VariantDefinition(
    [
        (0, InitializeAccount),
        (1, Authorize),
        (2, Vote),
        (3, Withdraw),
        (4, UpdateValidatorIdentity),
        (5, UpdateCommission),
    ],
    tag=Int32ul,
)


class VoteInstruction(VariantInstruction):
    PROGRAM_ID = VOTE_PROGRAM_ID
    PROGRAM_NAME = "Vote"
    VARIANTS = VOTE_VARIANTS
