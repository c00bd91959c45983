from __future__ import annotations

import dataclasses
import uuid

import pytest

from debugid import DebugId, SerializationError
from tests import test_lib


def test_nil(nil_id: DebugId):
    assert nil_id.is_nil()
    assert nil_id == DebugId()
    assert nil_id.unique_id == uuid.UUID(int=0)
    assert nil_id.appendix == 0


def test_not_nil():
    assert not DebugId(test_lib.SAMPLE_UUID).is_nil()
    assert not DebugId(uuid.UUID(int=0), 1).is_nil()


def test_from_parts():
    assert DebugId.from_parts(test_lib.SAMPLE_UUID, 10) == DebugId(test_lib.SAMPLE_UUID, 10)
    assert DebugId.from_parts(test_lib.SAMPLE_RAW_BYTES, 10) == DebugId(test_lib.SAMPLE_UUID, 10)
    assert DebugId.from_uuid(test_lib.SAMPLE_UUID) == DebugId(test_lib.SAMPLE_UUID, 0)


@pytest.mark.parametrize("appendix", [-1, 1 << 32])
def test_appendix_out_of_range(appendix: int):
    with pytest.raises(ValueError, match="outside of the unsigned 32-bit range"):
        DebugId(test_lib.SAMPLE_UUID, appendix)


@pytest.mark.parametrize("appendix", ["1", 1.0, True])
def test_appendix_wrong_type(appendix):
    with pytest.raises(TypeError, match="appendix must be an int"):
        DebugId(test_lib.SAMPLE_UUID, appendix)


def test_unique_id_wrong_type():
    with pytest.raises(TypeError, match="unique_id must be a UUID, got str"):
        DebugId("dfb8e43a-f242-3d73-a453-aeb6a777ef75")  # type: ignore[arg-type]


def test_immutable(sample_id: DebugId):
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample_id.appendix = 11  # type: ignore[misc]


def test_ordering():
    low = DebugId(uuid.UUID(int=1), 5)
    high = DebugId(uuid.UUID(int=2), 0)

    assert low < high
    assert DebugId(uuid.UUID(int=1), 0) < low
    assert sorted([high, low, DebugId.nil()]) == [DebugId.nil(), low, high]
    # canonical bytes compare the same way as the UUID
    assert DebugId(uuid.UUID(bytes=b"\x01" + b"\x00" * 15)) > DebugId(uuid.UUID(bytes=b"\x00" + b"\xff" * 15))


def test_hash_as_key(sample_id: DebugId):
    table = {sample_id: "foo.pdb"}

    assert table[DebugId.parse("dfb8e43a-f242-3d73-a453-aeb6a777ef75-a")] == "foo.pdb"
    assert DebugId(test_lib.SAMPLE_UUID, 11) not in table


def test_repr(sample_id: DebugId):
    assert repr(sample_id) == "DebugId(uuid='dfb8e43a-f242-3d73-a453-aeb6a777ef75', appendix=10)"


def test_json(sample_id: DebugId):
    assert sample_id.to_json() == "dfb8e43a-f242-3d73-a453-aeb6a777ef75-a"
    assert DebugId.from_json(sample_id.to_json()) == sample_id


def test_from_json_wrong_type():
    with pytest.raises(SerializationError, match="Expected a debug id string, got dict"):
        DebugId.from_json({"unique_id": str(test_lib.SAMPLE_UUID)})
