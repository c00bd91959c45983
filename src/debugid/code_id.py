"""
Code identifiers name an executable or library rather than its debug file.

On Windows this is the PE timestamp followed by the image size, elsewhere it
is usually the full GNU build id or Mach-O UUID. The value is kept as the hex
string it was given.
"""

from __future__ import annotations

import dataclasses
import typing

from debugid.binary import as_bytes
from debugid.exceptions import ParseCodeIdError
from debugid.text import HEX_DIGITS

if typing.TYPE_CHECKING:
    import typing_extensions


@dataclasses.dataclass(frozen=True, order=True, repr=False)
class CodeId:
    value: str = ""

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"value must be a str, got {type(self.value).__name__}")

    @classmethod
    def from_binary(cls, data: bytes) -> typing_extensions.Self:
        return cls(as_bytes(data).hex())

    @classmethod
    def parse_hex(cls, value: str) -> typing_extensions.Self:
        if len(value) % 2 != 0:
            raise ParseCodeIdError(value, "odd number of hex digits")
        for position, char in enumerate(value):
            if char not in HEX_DIGITS:
                raise ParseCodeIdError(value, f"unexpected character {char!r} at position {position}")
        return cls(value.lower())

    def as_str(self) -> str:
        return self.value

    def is_nil(self) -> bool:
        return not self.value

    def to_bytes(self) -> bytes:
        try:
            return bytes.fromhex(self.value)
        except ValueError as e:
            raise ParseCodeIdError(self.value, str(e)) from e

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"CodeId({self.value})"
