from __future__ import annotations

import pytest

from debugid import DebugId
from tests import test_lib


@pytest.fixture
def sample_id() -> DebugId:
    return DebugId(test_lib.SAMPLE_UUID, 10)


@pytest.fixture
def nil_id() -> DebugId:
    return DebugId.nil()
