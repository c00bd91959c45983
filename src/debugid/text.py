"""
Textual forms of a debug identifier.

Accepted inputs, case-insensitive:

- ``dfb8e43a-f242-3d73-a453-aeb6a777ef75``
- ``dfb8e43a-f242-3d73-a453-aeb6a777ef75-a`` (or a space instead of the last hyphen)
- ``DFB8E43AF2423D73A453AEB6A777EF75a``, the Breakpad form

The appendix is always hexadecimal and may have any width, as long as its
value fits in 32 bits.
"""

from __future__ import annotations

import enum
import logging
import uuid

from debugid.exceptions import InvalidAppendix, InvalidCharacter, InvalidLength

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
HYPHEN_POSITIONS = frozenset((8, 13, 18, 23))
HYPHENATED_LENGTH = 36
COMPACT_LENGTH = 32
APPENDIX_SEPARATORS = ("-", " ")
MAX_APPENDIX = 0xFFFFFFFF


class IdFormat(enum.Enum):
    HYPHENATED = "hyphenated"
    BREAKPAD = "breakpad"


def _split_body(text: str, length: int, hyphens: frozenset[int]) -> tuple[str, str]:
    for position, char in enumerate(text[:length]):
        if position in hyphens:
            if char != "-":
                raise InvalidCharacter(text, position, f"expected '-' at position {position}, found {char!r}")
        elif char not in HEX_DIGITS:
            raise InvalidCharacter(text, position)

    if len(text) < length:
        expected = length - len(hyphens)
        found = len(text) - sum(1 for position in hyphens if position < len(text))
        raise InvalidLength(text, f"expected {expected} hex digits, found {found}")

    return text[:length], text[length:]


def _parse_appendix(text: str, tail: str) -> int:
    if not tail:
        return 0

    if any(char not in HEX_DIGITS for char in tail):
        raise InvalidAppendix(text, f"appendix {tail!r} is not a hexadecimal number")

    appendix = int(tail, 16)
    if appendix > MAX_APPENDIX:
        raise InvalidAppendix(text, f"appendix 0x{appendix:x} does not fit in 32 bits")

    if len(tail) > 8:
        logger.debug("Accepted %d digit appendix in %r", len(tail), text)

    return appendix


def parse_parts(text: str) -> tuple[uuid.UUID, int]:
    """
    Parses any accepted textual form.

    :returns: The canonical unique id and the appendix
    :raises InvalidCharacter: A hex digit or hyphen was expected but not found
    :raises InvalidLength: The GUID body does not hold exactly 32 hex digits
    :raises InvalidAppendix: The trailing appendix is malformed or too large
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    if len(text) > 8 and text[8] == "-":
        body, tail = _split_body(text, HYPHENATED_LENGTH, HYPHEN_POSITIONS)
        if tail:
            if tail[0] in HEX_DIGITS:
                raise InvalidLength(text, "last group of the GUID has more than 12 hex digits")
            if tail[0] not in APPENDIX_SEPARATORS:
                raise InvalidCharacter(text, HYPHENATED_LENGTH)
    else:
        body, tail = _split_body(text, COMPACT_LENGTH, frozenset())

    if tail and tail[0] in APPENDIX_SEPARATORS:
        tail = tail[1:]
        if not tail:
            raise InvalidAppendix(text, "missing appendix after separator")

    return uuid.UUID(hex=body), _parse_appendix(text, tail)


def format_hyphenated(unique_id: uuid.UUID, appendix: int) -> str:
    if appendix:
        return f"{unique_id}-{appendix:x}"
    return str(unique_id)


def format_breakpad(unique_id: uuid.UUID, appendix: int) -> str:
    return f"{unique_id.hex.upper()}{appendix:x}"


def format_parts(unique_id: uuid.UUID, appendix: int, style: IdFormat = IdFormat.HYPHENATED) -> str:
    if style == IdFormat.HYPHENATED:
        return format_hyphenated(unique_id, appendix)
    elif style == IdFormat.BREAKPAD:
        return format_breakpad(unique_id, appendix)
    else:
        raise ValueError(f"Unknown format: {style}")
