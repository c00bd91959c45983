"""
Debug identifiers for native debug information files.

A debug id combines a 128-bit unique value with a 32-bit appendix (the PDB
age on Windows). It can be read from and written to the textual forms used
by symbol servers and Breakpad, and the byte layouts used by PE, ELF and
Mach-O toolchains.
"""

from __future__ import annotations

from debugid.code_id import CodeId
from debugid.debug_id import DebugId
from debugid.exceptions import (
    InvalidAppendix,
    InvalidCharacter,
    InvalidLength,
    ParseCodeIdError,
    ParseDebugIdError,
    SerializationError,
)
from debugid.text import IdFormat

__all__ = [
    "CodeId",
    "DebugId",
    "IdFormat",
    "InvalidAppendix",
    "InvalidCharacter",
    "InvalidLength",
    "ParseCodeIdError",
    "ParseDebugIdError",
    "SerializationError",
]
