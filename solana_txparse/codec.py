"""Binary field codecs shared by the program instruction layouts.

Thin ``construct`` adapters so layouts can declare Solana specific field
types (public keys, hashes, optional values, bincode strings) next to the
plain little endian integers.
"""

from typing import Type

from construct import (
    Adapter,
    Bytes,
    Flag,
    If,
    Int64ul,
    MappingError,
    PascalString,
    PrefixedArray,
    Struct,
    this,
)
from solders.hash import Hash
from solders.pubkey import Pubkey


class PublicKeyAdapter(Adapter):
    def _decode(self, obj, context, path):
        return Pubkey.from_bytes(obj)

    def _encode(self, obj, context, path):
        return bytes(obj)


class HashAdapter(Adapter):
    def _decode(self, obj, context, path):
        return Hash.from_bytes(obj)

    def _encode(self, obj, context, path):
        return bytes(obj)


class OptionAdapter(Adapter):
    """One flag byte followed by the value when the flag is set."""

    def _decode(self, obj, context, path):
        return obj.value if obj.present else None

    def _encode(self, obj, context, path):
        return {"present": obj is not None, "value": obj}


class IntEnumAdapter(Adapter):
    """Maps a raw integer onto an ``IntEnum`` member, rejecting unknown values."""

    def __init__(self, subcon, enum_cls: Type):
        super().__init__(subcon)
        self.enum_cls = enum_cls

    def _decode(self, obj, context, path):
        try:
            return self.enum_cls(obj)
        except ValueError:
            raise MappingError(f"invalid {self.enum_cls.__name__} value {obj}", path=path)

    def _encode(self, obj, context, path):
        return int(obj)


PUBLIC_KEY = PublicKeyAdapter(Bytes(32))
HASH = HashAdapter(Bytes(32))

# bincode strings and vectors carry a u64 length prefix
BINCODE_STRING = PascalString(Int64ul, "utf8")


def option(subcon):
    """COption / bincode Option: u8 presence flag, then the value if present."""
    return OptionAdapter(Struct("present" / Flag, "value" / If(this.present, subcon)))


def bincode_vec(subcon):
    return PrefixedArray(Int64ul, subcon)
