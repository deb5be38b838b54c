"""Instruction variant model.

Every decoded instruction, structured or opaque, is a ``ProgramInstruction``:
it knows its program id, its resolved accounts and can re-derive its data.

Structured instructions are discriminated unions. A program declares a closed
``VariantDefinition`` (type id -> payload class, plus the tag encoding) and a
``VariantInstruction`` subclass bound to its program id. The payload classes
are ``InstructionVariant`` dataclasses whose parameters are described by a
``construct`` layout.
"""

import abc
import inspect
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Type

from construct import Construct, ConstructError
from solders.instruction import AccountMeta
from solders.pubkey import Pubkey

from solana_txparse.utils.error_handling import InstructionDecodeError

# Type id used by programs whose instructions carry no tag
NO_TYPE_ID = 0


class ProgramInstruction(abc.ABC):
    """Capabilities shared by every decoded instruction."""

    @property
    @abc.abstractmethod
    def program_id(self) -> Pubkey:
        """Program the instruction was addressed to."""

    @property
    @abc.abstractmethod
    def accounts(self) -> List[AccountMeta]:
        """Resolved accounts, in instruction order."""

    @abc.abstractmethod
    def data(self) -> bytes:
        """Instruction data as it would appear on the wire."""


class AccountSlot:
    """Read-only view of one positional account of a variant."""

    def __init__(self, index: int):
        self.index = index

    def __get__(self, instance, owner):
        if instance is None:
            return self
        if self.index < len(instance.accounts):
            return instance.accounts[self.index]
        return None


@dataclass
class InstructionVariant:
    """Base class of instruction payloads.

    Subclasses list their positional accounts in ``ACCOUNTS``; each name
    becomes a read-only attribute returning the matching ``AccountMeta``.
    The last ``OPTIONAL_ACCOUNTS`` names may be missing. Accounts past the
    named ones (multisig signers) are exposed through ``remaining_accounts``.
    """

    ACCOUNTS: ClassVar[Tuple[str, ...]] = ()
    OPTIONAL_ACCOUNTS: ClassVar[int] = 0
    LAYOUT: ClassVar[Optional[Construct]] = None

    accounts: List[AccountMeta] = field(default_factory=list, compare=False, repr=False, kw_only=True)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        annotations = inspect.get_annotations(cls)
        for index, name in enumerate(cls.__dict__.get("ACCOUNTS", ())):
            if name in annotations:
                raise TypeError(f"{cls.__name__}: account '{name}' shadows a parameter")
            setattr(cls, name, AccountSlot(index))

    @classmethod
    def min_accounts(cls) -> int:
        return len(cls.ACCOUNTS) - cls.OPTIONAL_ACCOUNTS

    @classmethod
    def param_names(cls) -> List[str]:
        return [f.name for f in fields(cls) if f.name != "accounts"]

    @classmethod
    def parse_params(cls, payload: bytes) -> "InstructionVariant":
        """Build the variant from the bytes following the type id."""
        if cls.LAYOUT is None:
            return cls()
        parsed = cls.LAYOUT.parse(payload)
        return cls(**{name: parsed[name] for name in cls.param_names()})

    def encode_params(self) -> bytes:
        if self.LAYOUT is None:
            return b""
        return self.LAYOUT.build(self.params())

    def params(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.param_names()}

    @property
    def remaining_accounts(self) -> List[AccountMeta]:
        return self.accounts[len(self.ACCOUNTS):]


class VariantDefinition:
    """Closed table of the variants of one program's instructions.

    Args:
        variants: ``(type_id, variant_class)`` pairs
        tag: ``construct`` integer codec of the type id, or ``None`` for
            programs with a single, untagged instruction
    """

    def __init__(
        self,
        variants: Sequence[Tuple[int, Type[InstructionVariant]]],
        tag: Optional[Construct] = None
    ):
        if tag is None and len(variants) != 1:
            raise ValueError("untagged definitions hold exactly one variant")
        self.tag = tag
        self._by_type_id: Dict[int, Type[InstructionVariant]] = {}
        self._by_class: Dict[Type[InstructionVariant], int] = {}
        for type_id, variant_cls in variants:
            if type_id in self._by_type_id:
                raise ValueError(f"duplicate type id {type_id}")
            self._by_type_id[type_id] = variant_cls
            self._by_class[variant_cls] = type_id

    def __contains__(self, variant_cls: Type[InstructionVariant]) -> bool:
        return variant_cls in self._by_class

    def __len__(self) -> int:
        return len(self._by_type_id)

    def variant_for(self, type_id: int) -> Optional[Type[InstructionVariant]]:
        return self._by_type_id.get(type_id)

    def type_id_of(self, variant_cls: Type[InstructionVariant]) -> Optional[int]:
        return self._by_class.get(variant_cls)

    def name_of(self, type_id: int) -> Optional[str]:
        variant_cls = self._by_type_id.get(type_id)
        return variant_cls.__name__ if variant_cls else None

    def split(self, data: bytes) -> Tuple[int, bytes]:
        """Separate the type id from the payload.

        Raises:
            InstructionDecodeError: If the data is shorter than the tag
        """
        if self.tag is None:
            return NO_TYPE_ID, data
        size = self.tag.sizeof()
        if len(data) < size:
            raise InstructionDecodeError(
                f"instruction data too short for a type id: {len(data)} < {size} bytes"
            )
        return self.tag.parse(data[:size]), data[size:]

    def encode_tag(self, type_id: int) -> bytes:
        if self.tag is None:
            return b""
        return self.tag.build(type_id)


class VariantInstruction(ProgramInstruction):
    """A structured instruction: one variant of its program's definition."""

    PROGRAM_ID: ClassVar[Pubkey]
    PROGRAM_NAME: ClassVar[str]
    VARIANTS: ClassVar[VariantDefinition]

    def __init__(self, impl: InstructionVariant, type_id: Optional[int] = None):
        if type_id is None:
            type_id = self.VARIANTS.type_id_of(type(impl))
            if type_id is None:
                raise TypeError(f"{type(impl).__name__} is not a {self.PROGRAM_NAME} instruction")
        self.type_id = type_id
        self.impl = impl

    @classmethod
    def decode(cls, accounts: Sequence[AccountMeta], data: bytes) -> "VariantInstruction":
        """Decode instruction data for this program.

        Args:
            accounts: Resolved instruction accounts
            data: Raw instruction data

        Returns:
            The decoded instruction

        Raises:
            InstructionDecodeError: On an unknown type id, too few accounts or
                malformed parameters
        """
        try:
            type_id, payload = cls.VARIANTS.split(bytes(data))
        except InstructionDecodeError as e:
            raise InstructionDecodeError(e.message, program_id=cls.PROGRAM_ID) from e

        variant_cls = cls.VARIANTS.variant_for(type_id)
        if variant_cls is None:
            raise InstructionDecodeError(
                f"unknown {cls.PROGRAM_NAME} instruction type id {type_id}",
                program_id=cls.PROGRAM_ID,
                details={"type_id": type_id}
            )

        if len(accounts) < variant_cls.min_accounts():
            raise InstructionDecodeError(
                f"{variant_cls.__name__}: not enough accounts, "
                f"got {len(accounts)}, need {variant_cls.min_accounts()}",
                program_id=cls.PROGRAM_ID
            )

        try:
            impl = variant_cls.parse_params(payload)
        except ConstructError as e:
            raise InstructionDecodeError(
                f"{variant_cls.__name__}: malformed parameters: {e}",
                program_id=cls.PROGRAM_ID
            ) from e

        impl.accounts = list(accounts)
        return cls(impl, type_id)

    @property
    def program_id(self) -> Pubkey:
        return self.PROGRAM_ID

    @property
    def accounts(self) -> List[AccountMeta]:
        return self.impl.accounts

    @property
    def name(self) -> str:
        return self.VARIANTS.name_of(self.type_id)

    def data(self) -> bytes:
        return self.VARIANTS.encode_tag(self.type_id) + self.impl.encode_params()

    def obtain(self, definition: Optional[VariantDefinition] = None) -> Tuple[int, Optional[str], InstructionVariant]:
        """Return the type id, variant name and payload of this instruction."""
        definition = definition or self.VARIANTS
        return self.type_id, definition.name_of(self.type_id), self.impl

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.type_id == other.type_id
            and self.impl == other.impl
            and self.accounts == other.accounts
        )

    def __hash__(self) -> int:
        return hash((type(self), self.type_id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.impl!r})"
