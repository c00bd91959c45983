from __future__ import annotations

import construct

from debugid.binary import GuidAge, RawUuidAppendix
from debugid.debug_id import DebugId


class DebugIdAdapter(construct.Adapter):
    """Stores a DebugId as a mixed-endian GUID followed by a little-endian age."""

    def __init__(self, subcon=GuidAge):
        super().__init__(subcon)

    def _decode(self, obj: construct.Container, context, path) -> DebugId:
        return DebugId(obj.guid, obj.age)

    def _encode(self, obj: DebugId, context, path) -> dict:
        return {"guid": obj.unique_id, "age": obj.appendix}


class RawDebugIdAdapter(construct.Adapter):
    """Stores a DebugId as canonical bytes followed by a big-endian appendix."""

    def __init__(self, subcon=RawUuidAppendix):
        super().__init__(subcon)

    def _decode(self, obj: construct.Container, context, path) -> DebugId:
        return DebugId(obj.uuid, obj.appendix)

    def _encode(self, obj: DebugId, context, path) -> dict:
        return {"uuid": obj.unique_id, "appendix": obj.appendix}
