from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from task_ledger.domain.entities import DeadlineTask, PriorityTask, SimpleTask, Task
from task_ledger.domain.errors import (
    DeadlineInPastError,
    InvalidFieldCountError,
    MalformedFieldError,
    MalformedIntegerError,
    MalformedTimestampError,
)
from task_ledger.infra.clock import Clock, system_clock

FIELD_SEPARATOR = ","
PRIORITY_MIN = -(2**31)
PRIORITY_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}(:[0-9]{2}(\.[0-9]{1,6})?)?")


@dataclass(frozen=True)
class ParsedLine:
    category: str
    task: Task


class TaskParser:
    """Turns ``category,name,description[,field4[,field5]]`` lines into tasks.

    With four fields the extra value is read as a priority when it is an
    integer and as a deadline otherwise. With five fields it is always
    deadline then priority.
    """

    def __init__(self, clock: Clock = system_clock) -> None:
        self._clock = clock

    @staticmethod
    def category_of(line: str) -> str:
        return line.split(FIELD_SEPARATOR, 1)[0]

    def parse_line(self, line: str) -> ParsedLine:
        category = self.category_of(line)
        return ParsedLine(category=category, task=self.parse(line))

    def parse(self, line: str) -> Task:
        fields = _split_fields(line)
        if len(fields) not in (3, 4, 5):
            raise InvalidFieldCountError(line, len(fields))

        task: Task = SimpleTask(name=fields[1], description=fields[2])
        if len(fields) == 3:
            return task

        if len(fields) == 4:
            priority = _parse_int(fields[3])
            if priority is not None:
                return PriorityTask(wrapped=task, priority=priority)
            deadline = _parse_timestamp(fields[3])
            if deadline is None:
                raise MalformedFieldError(line, fields[3], "priority or deadline")
            self._check_deadline(deadline)
            return DeadlineTask(wrapped=task, deadline=deadline)

        deadline = _parse_timestamp(fields[3])
        if deadline is None:
            raise MalformedTimestampError(line, fields[3])
        self._check_deadline(deadline)
        priority = _parse_int(fields[4])
        if priority is None:
            raise MalformedIntegerError(line, fields[4])
        return PriorityTask(wrapped=DeadlineTask(wrapped=task, deadline=deadline), priority=priority)

    def _check_deadline(self, deadline: datetime) -> None:
        if deadline < self._clock():
            raise DeadlineInPastError(deadline)


def _split_fields(line: str) -> list[str]:
    fields = line.split(FIELD_SEPARATOR)
    # a trailing separator does not open a new field
    while len(fields) > 1 and not fields[-1]:
        fields.pop()
    return fields


def _parse_int(value: str) -> int | None:
    if not _INTEGER_RE.fullmatch(value):
        return None
    number = int(value)
    if not PRIORITY_MIN <= number <= PRIORITY_MAX:
        return None
    return number


def _parse_timestamp(value: str) -> datetime | None:
    if not _TIMESTAMP_RE.fullmatch(value):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
