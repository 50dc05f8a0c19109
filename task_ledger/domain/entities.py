from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Union

UNBOUNDED_DEADLINE = datetime.max
UNBOUNDED_PRIORITY = sys.maxsize


class _TaskBehaviour:
    """Behaviour shared by every task variant.

    Variants only decide ``deadline``, ``priority`` and ``describe()``;
    ``time_left`` and the string form are derived from those.
    """

    deadline: datetime
    priority: int

    def describe(self) -> str:
        raise NotImplementedError

    def time_left(self, now: datetime | None = None) -> int:
        current = now if now is not None else datetime.now()
        return int(abs((self.deadline - current).total_seconds()))

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class SimpleTask(_TaskBehaviour):
    name: str
    description: str

    @property
    def deadline(self) -> datetime:
        return UNBOUNDED_DEADLINE

    @property
    def priority(self) -> int:
        return UNBOUNDED_PRIORITY

    def describe(self) -> str:
        return f"Task{{name='{self.name}', description='{self.description}'}}"


def _extend(rendering: str, attribute: str) -> str:
    # "Task{...}" -> "Task{..., attribute}"
    return f"{rendering[:-1]}, {attribute}}}"


@dataclass(frozen=True)
class DeadlineTask(_TaskBehaviour):
    wrapped: Task
    deadline: datetime

    @property
    def priority(self) -> int:
        return self.wrapped.priority

    @property
    def name(self) -> str:
        return self.wrapped.name

    @property
    def description(self) -> str:
        return self.wrapped.description

    def describe(self) -> str:
        return _extend(self.wrapped.describe(), f"deadline={self.deadline.isoformat()}")


@dataclass(frozen=True)
class PriorityTask(_TaskBehaviour):
    wrapped: Task
    priority: int

    @property
    def deadline(self) -> datetime:
        return self.wrapped.deadline

    @property
    def name(self) -> str:
        return self.wrapped.name

    @property
    def description(self) -> str:
        return self.wrapped.description

    def describe(self) -> str:
        return _extend(self.wrapped.describe(), f"priority={self.priority}")


Task = Union[SimpleTask, DeadlineTask, PriorityTask]
