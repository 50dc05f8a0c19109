from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TextIO

from task_ledger.domain.entities import Task
from task_ledger.domain.errors import TaskError
from task_ledger.domain.options import RenderOptions
from task_ledger.infra.clock import Clock, system_clock
from task_ledger.infra.repository import TaskRepository

from .parser import TaskParser

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[TaskError], None]
SortKey = Callable[[Task], tuple[int, ...]]


@dataclass
class ReadSummary:
    accepted: int = 0
    rejected: int = 0
    errors: list[TaskError] = field(default_factory=list)


class TaskService:
    def __init__(
        self,
        repo: TaskRepository,
        parser: TaskParser | None = None,
        clock: Clock = system_clock,
    ) -> None:
        self._repo = repo
        self._clock = clock
        self._parser = parser or TaskParser(clock)

    def read_tasks(self, lines: Iterable[str], on_error: ErrorHandler | None = None) -> ReadSummary:
        summary = ReadSummary()
        for number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line:
                logger.debug("Skipping empty line %d", number)
                continue
            category = self._parser.category_of(line)
            try:
                task = self._parser.parse(line)
            except TaskError as exc:
                logger.info("Rejected line %d (category %r): %s", number, category, exc)
                summary.rejected += 1
                summary.errors.append(exc)
                if on_error is not None:
                    on_error(exc)
                continue
            self._repo.insert(category, task)
            summary.accepted += 1
        logger.debug("Read %d task(s), rejected %d line(s)", summary.accepted, summary.rejected)
        return summary

    def render(self, options: RenderOptions) -> str:
        sort_key = self._sort_key(options.include_priority)
        lines: list[str] = []
        if options.include_category:
            for category, tasks in self._repo.buckets():
                lines.append(category.upper())
                lines.extend(str(task) for task in sorted(tasks, key=sort_key))
        else:
            lines.extend(str(task) for task in sorted(self._repo.all_tasks(), key=sort_key))
        return "".join(f"{line}\n" for line in lines)

    def print_tasks(self, out: TextIO, options: RenderOptions) -> None:
        out.write(self.render(options))
        out.flush()

    def _sort_key(self, include_priority: bool) -> SortKey:
        clock = self._clock

        def by_time_left(task: Task) -> tuple[int, ...]:
            return (task.time_left(clock()),)

        def by_priority(task: Task) -> tuple[int, ...]:
            return (task.priority, task.time_left(clock()))

        return by_priority if include_priority else by_time_left
