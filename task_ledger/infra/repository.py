from __future__ import annotations

import bisect

from task_ledger.domain.entities import Task


class TaskRepository:
    """In-memory category buckets, kept in ascending category order."""

    def __init__(self) -> None:
        self._categories: list[str] = []
        self._buckets: dict[str, list[Task]] = {}

    def insert(self, category: str, task: Task) -> None:
        bucket = self._buckets.get(category)
        if bucket is None:
            bucket = self._create_bucket(category)
        bucket.append(task)

    def categories(self) -> list[str]:
        return list(self._categories)

    def buckets(self) -> list[tuple[str, list[Task]]]:
        return [(category, list(self._buckets[category])) for category in self._categories]

    def all_tasks(self) -> list[Task]:
        return [task for category in self._categories for task in self._buckets[category]]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def _create_bucket(self, category: str) -> list[Task]:
        bisect.insort(self._categories, category)
        bucket: list[Task] = []
        self._buckets[category] = bucket
        return bucket
