"""Base class of program specific errors carried by ``Custom`` instruction errors."""

from enum import IntEnum
from typing import Any, ClassVar, Mapping, Optional, Type


class ProgramCustomError(Exception):
    """A program error identified by its numeric custom code.

    Subclasses bind ``CODES`` (an ``IntEnum`` of the program's codes) and
    ``MESSAGES`` (code -> human readable message).
    """

    PROGRAM_NAME: ClassVar[str] = ""
    CODES: ClassVar[Type[IntEnum]]
    MESSAGES: ClassVar[Mapping[IntEnum, str]]

    def __init__(self, code: int):
        self.code = self.CODES(code)
        self.message = self.MESSAGES[self.code]
        super().__init__(self.message)

    @classmethod
    def resolve(cls, code: int) -> Optional["ProgramCustomError"]:
        """Custom error resolver: the error for ``code``, or None if unknown."""
        try:
            return cls(code)
        except ValueError:
            return None

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash((type(self), int(self.code)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.name})"
