from __future__ import annotations

from datetime import datetime


class TaskError(Exception):
    """Base class for per-line ingestion failures."""


class DeadlineInPastError(TaskError):
    def __init__(self, deadline: datetime) -> None:
        super().__init__(f"The deadline {deadline.isoformat()} has already passed")
        self.deadline = deadline


class TaskParseError(TaskError):
    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Could not parse line '{line}': {reason}")
        self.line = line
        self.reason = reason


class InvalidFieldCountError(TaskParseError):
    def __init__(self, line: str, count: int) -> None:
        super().__init__(line, f"expected 3 to 5 fields, got {count}")
        self.count = count


class MalformedFieldError(TaskParseError):
    def __init__(self, line: str, value: str, expected: str) -> None:
        super().__init__(line, f"'{value}' is not a valid {expected}")
        self.value = value


class MalformedIntegerError(MalformedFieldError):
    def __init__(self, line: str, value: str) -> None:
        super().__init__(line, value, "priority")


class MalformedTimestampError(MalformedFieldError):
    def __init__(self, line: str, value: str) -> None:
        super().__init__(line, value, "deadline")
