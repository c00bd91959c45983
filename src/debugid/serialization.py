"""
Hooks for storing debug ids inside other structured data.

Each codec turns a DebugId into one external representation and back.
Decoding malformed data raises a ParseDebugIdError subclass when the value
itself is invalid, or SerializationError when the representation has the
wrong shape.
"""

from __future__ import annotations

import json
import typing
import uuid
from collections.abc import Mapping

from debugid.adapters.debug_id import DebugIdAdapter
from debugid.binary import GuidAge
from debugid.debug_id import DebugId
from debugid.exceptions import SerializationError
from debugid.text import IdFormat

if typing.TYPE_CHECKING:
    from collections.abc import Collection

    from debugid import json_util

T = typing.TypeVar("T")


class DebugIdCodec(typing.Generic[T]):
    def encode(self, debug_id: DebugId) -> T:
        raise NotImplementedError

    def decode(self, data: T) -> DebugId:
        raise NotImplementedError


class StringCodec(DebugIdCodec[str]):
    def __init__(self, style: IdFormat = IdFormat.HYPHENATED):
        self.style = style

    def encode(self, debug_id: DebugId) -> str:
        return debug_id.format(self.style)

    def decode(self, data: str) -> DebugId:
        return DebugId.from_json(data)


class RecordCodec(DebugIdCodec[dict]):
    """Represents a DebugId as ``{"unique_id": <uuid>, "appendix": <int>}``."""

    def encode(self, debug_id: DebugId) -> dict:
        return {
            "unique_id": str(debug_id.unique_id),
            "appendix": debug_id.appendix,
        }

    def decode(self, data: dict) -> DebugId:
        if not isinstance(data, Mapping):
            raise SerializationError(f"Expected a mapping, got {type(data).__name__}")

        missing = {"unique_id", "appendix"} - set(data)
        if missing:
            raise SerializationError(f"Missing fields: {', '.join(sorted(missing))}")

        unique_id, appendix = data["unique_id"], data["appendix"]
        if not isinstance(unique_id, str):
            raise SerializationError(f"unique_id must be a string, got {type(unique_id).__name__}")
        if isinstance(appendix, bool) or not isinstance(appendix, int):
            raise SerializationError(f"appendix must be an integer, got {type(appendix).__name__}")

        try:
            parsed = uuid.UUID(unique_id)
        except ValueError as e:
            raise SerializationError(f"Invalid debug id record {dict(data)!r}: {e}") from e

        # braces, urn prefixes and unhyphenated strings are all accepted by UUID()
        if str(parsed) != unique_id.lower():
            raise SerializationError(f"Invalid debug id record {dict(data)!r}: unique_id must be a hyphenated UUID")

        try:
            return DebugId(parsed, appendix)
        except ValueError as e:
            raise SerializationError(f"Invalid debug id record {dict(data)!r}: {e}") from e


class BinaryCodec(DebugIdCodec[bytes]):
    """Packs a DebugId into the 20-byte GUID and age record of PDB files."""

    def __init__(self):
        self._construct = DebugIdAdapter()
        self.size = GuidAge.sizeof()

    def encode(self, debug_id: DebugId) -> bytes:
        return self._construct.build(debug_id)

    def decode(self, data: bytes) -> DebugId:
        if len(data) != self.size:
            raise SerializationError(f"Expected {self.size} bytes, got {len(data)}")
        return self._construct.parse(data)


def _json_default(obj: object) -> json_util.JsonValue:
    if isinstance(obj, DebugId):
        return obj.to_json()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(value: object, **kwargs) -> str:
    """json.dumps, writing any DebugId in its canonical string form."""
    return json.dumps(value, default=_json_default, **kwargs)


def loads(data: str | bytes, keys: Collection[str]) -> typing.Any:
    """json.loads, reading the string values stored under `keys` as DebugIds."""

    def hook(obj: dict) -> dict:
        for key in keys:
            if key in obj and obj[key] is not None:
                obj[key] = DebugId.from_json(obj[key])
        return obj

    return json.loads(data, object_hook=hook)
