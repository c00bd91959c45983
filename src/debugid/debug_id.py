"""
Canonical representation of a debug identifier.

A debug id names the debug information of a build. It is a 128-bit unique
value plus an appendix, which on Windows is the PDB age and is zero on every
other platform. Whatever layout an id was read from, the unique value is kept
in canonical big-endian order, so ids from different sources compare equal
when they name the same build.
"""

from __future__ import annotations

import dataclasses
import typing
import uuid

from debugid import binary, text
from debugid.exceptions import SerializationError
from debugid.text import IdFormat

if typing.TYPE_CHECKING:
    import typing_extensions

    from debugid import json_util

_NIL_UUID = uuid.UUID(int=0)


@dataclasses.dataclass(frozen=True, order=True, repr=False)
class DebugId:
    unique_id: uuid.UUID = _NIL_UUID
    appendix: int = 0

    def __post_init__(self):
        if not isinstance(self.unique_id, uuid.UUID):
            raise TypeError(f"unique_id must be a UUID, got {type(self.unique_id).__name__}")
        if isinstance(self.appendix, bool) or not isinstance(self.appendix, int):
            raise TypeError(f"appendix must be an int, got {type(self.appendix).__name__}")
        if not 0 <= self.appendix <= text.MAX_APPENDIX:
            raise ValueError(f"appendix {self.appendix} is outside of the unsigned 32-bit range")

    @classmethod
    def from_parts(cls, unique_id: uuid.UUID | bytes, appendix: int = 0) -> typing_extensions.Self:
        if isinstance(unique_id, bytes | bytearray | memoryview):
            unique_id = binary.raw_bytes_to_uuid(unique_id)
        return cls(unique_id, appendix)

    @classmethod
    def from_uuid(cls, unique_id: uuid.UUID) -> typing_extensions.Self:
        return cls(unique_id, 0)

    @classmethod
    def nil(cls) -> typing_extensions.Self:
        return cls(_NIL_UUID, 0)

    @classmethod
    def parse(cls, value: str) -> typing_extensions.Self:
        """
        Parses a debug id from any of its textual forms.

        :raises ParseDebugIdError: When the string is not a valid debug id
        """
        return cls(*text.parse_parts(value))

    @classmethod
    def from_breakpad(cls, value: str) -> typing_extensions.Self:
        # The parser also takes the hyphenated forms; Breakpad strings are a subset.
        return cls.parse(value)

    @classmethod
    def from_guid_bytes(cls, data: bytes, appendix: int = 0) -> typing_extensions.Self:
        """Reads a 16-byte GUID in the Microsoft mixed-endian layout."""
        return cls(binary.guid_bytes_to_uuid(data), appendix)

    @classmethod
    def from_guid_age(cls, guid: bytes, age: int) -> typing_extensions.Self:
        """Builds the id of a PDB from its CodeView GUID and age."""
        return cls.from_guid_bytes(guid, age)

    @classmethod
    def from_raw_bytes(cls, data: bytes, appendix: int = 0) -> typing_extensions.Self:
        """Reads 16 bytes that are already in canonical order, such as a Mach-O UUID."""
        return cls(binary.raw_bytes_to_uuid(data), appendix)

    @classmethod
    def from_build_id(cls, build_id: bytes) -> typing_extensions.Self:
        """Derives the id of an ELF module from its GNU build id."""
        return cls(binary.build_id_to_uuid(build_id), 0)

    def is_nil(self) -> bool:
        return self.unique_id.int == 0 and self.appendix == 0

    def to_guid_bytes(self) -> bytes:
        return binary.uuid_to_guid_bytes(self.unique_id)

    def to_raw_bytes(self) -> bytes:
        return self.unique_id.bytes

    def format(self, style: IdFormat = IdFormat.HYPHENATED) -> str:
        return text.format_parts(self.unique_id, self.appendix, style)

    def breakpad(self) -> str:
        return text.format_breakpad(self.unique_id, self.appendix)

    def __str__(self) -> str:
        return text.format_hyphenated(self.unique_id, self.appendix)

    def __repr__(self) -> str:
        return f"DebugId(uuid={str(self.unique_id)!r}, appendix={self.appendix})"

    @classmethod
    def from_json(cls, data: json_util.JsonValue) -> typing_extensions.Self:
        if not isinstance(data, str):
            raise SerializationError(f"Expected a debug id string, got {type(data).__name__}")
        return cls.parse(data)

    def to_json(self) -> json_util.JsonValue:
        return str(self)
