from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now()


def fixed_clock(at: datetime) -> Clock:
    def _now() -> datetime:
        return at

    return _now
