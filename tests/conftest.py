from __future__ import annotations

from datetime import datetime

import pytest

from task_ledger.infra.clock import Clock, fixed_clock

NOW = datetime(2026, 1, 1, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> Clock:
    return fixed_clock(NOW)
