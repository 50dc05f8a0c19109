from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    include_priority: bool = False
    include_category: bool = False
