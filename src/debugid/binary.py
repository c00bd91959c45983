"""
Byte layouts for GUIDs as native toolchains store them.

Microsoft GUIDs keep their first three fields (Data1, Data2 and Data3) in
little-endian order, with the trailing eight bytes stored sequentially.
ELF build ids and Mach-O UUIDs are already in canonical big-endian order.
"""

from __future__ import annotations

import uuid

import construct
from construct import Bytes, Int16ub, Int16ul, Int32ub, Int32ul, Struct

from debugid.exceptions import InvalidLength

GUID_SIZE = 16

MixedEndianGuid = Struct(
    data1=Int32ul,
    data2=Int16ul,
    data3=Int16ul,
    data4=Bytes(8),
)

CanonicalGuid = Struct(
    data1=Int32ub,
    data2=Int16ub,
    data3=Int16ub,
    data4=Bytes(8),
)


def as_bytes(data: bytes) -> bytes:
    if not isinstance(data, bytes | bytearray | memoryview):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    return bytes(data)


def _check_size(data: bytes) -> bytes:
    data = as_bytes(data)
    if len(data) != GUID_SIZE:
        raise InvalidLength(data, f"expected {GUID_SIZE} bytes, got {len(data)}")
    return data


def swap_guid_bytes(data: bytes) -> bytes:
    """
    Converts between the Microsoft mixed-endian layout and the canonical one.
    Applying it twice returns the original bytes.
    """
    return CanonicalGuid.build(MixedEndianGuid.parse(_check_size(data)))


def guid_bytes_to_uuid(data: bytes) -> uuid.UUID:
    return uuid.UUID(bytes=swap_guid_bytes(data))


def uuid_to_guid_bytes(value: uuid.UUID) -> bytes:
    return swap_guid_bytes(value.bytes)


def raw_bytes_to_uuid(data: bytes) -> uuid.UUID:
    return uuid.UUID(bytes=_check_size(data))


def build_id_to_uuid(build_id: bytes) -> uuid.UUID:
    """
    Folds an ELF or Mach-O build id into a GUID the way Breakpad does:
    the first 16 bytes are used (zero-padded when shorter) and read as a
    mixed-endian GUID.
    """
    data = as_bytes(build_id)[:GUID_SIZE].ljust(GUID_SIZE, b"\x00")
    return guid_bytes_to_uuid(data)


GUID = construct.ExprAdapter(
    Bytes(GUID_SIZE),
    lambda obj, ctx: guid_bytes_to_uuid(obj),
    lambda obj, ctx: uuid_to_guid_bytes(obj),
)

RawUUID = construct.ExprAdapter(
    Bytes(GUID_SIZE),
    lambda obj, ctx: uuid.UUID(bytes=obj),
    lambda obj, ctx: obj.bytes,
)

GuidAge = Struct(
    guid=GUID,
    age=Int32ul,
)

RawUuidAppendix = Struct(
    uuid=RawUUID,
    appendix=Int32ub,
)
