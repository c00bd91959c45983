from __future__ import annotations

from debugid.adapters.debug_id import DebugIdAdapter, RawDebugIdAdapter

__all__ = [
    "DebugIdAdapter",
    "RawDebugIdAdapter",
]
