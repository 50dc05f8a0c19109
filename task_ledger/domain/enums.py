from __future__ import annotations

from enum import StrEnum

from .options import RenderOptions


class DisplayMode(StrEnum):
    CATEGORIES_PRIORITY = "categories-priority"
    CATEGORIES = "categories"
    ALL = "all"
    ALL_PRIORITY = "all-priority"

    @property
    def options(self) -> RenderOptions:
        return _MODE_OPTIONS[self]

    @property
    def banner(self) -> str:
        return _MODE_BANNERS[self]


_MODE_OPTIONS = {
    DisplayMode.CATEGORIES_PRIORITY: RenderOptions(include_priority=True, include_category=True),
    DisplayMode.CATEGORIES: RenderOptions(include_priority=False, include_category=True),
    DisplayMode.ALL: RenderOptions(include_priority=False, include_category=False),
    DisplayMode.ALL_PRIORITY: RenderOptions(include_priority=True, include_category=False),
}

_MODE_BANNERS = {
    DisplayMode.CATEGORIES_PRIORITY: "By categories with priority",
    DisplayMode.CATEGORIES: "By categories without priority",
    DisplayMode.ALL: "All tasks without priority",
    DisplayMode.ALL_PRIORITY: "All tasks with priority",
}
