"""Viewer defaults: paging, sorting, thresholds and UI timings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from fpl_consistency.models import LOW_SAMPLE_THRESHOLD

SortDirection = Literal["asc", "desc"]
ViewMode = Literal["card", "table"]


@dataclass(frozen=True)
class ViewerConfig:
    page_size: int = 10
    default_sort_by: str = "points_avg"
    default_sort_order: SortDirection = "desc"
    min_matches_for_score: int = LOW_SAMPLE_THRESHOLD
    min_search_chars: int = 1
    search_debounce_ms: int = 300
    resize_debounce_ms: int = 150
    notification_ms: int = 2000
    mobile_breakpoint: int = 768
    large_screen_breakpoint: int = 1024

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1")
        if self.default_sort_order not in ("asc", "desc"):
            raise ValueError(
                f"default_sort_order must be 'asc' or 'desc', got {self.default_sort_order!r}"
            )
        if self.search_debounce_ms < 0 or self.resize_debounce_ms < 0:
            raise ValueError("debounce delays cannot be negative")
        if self.notification_ms < 0:
            raise ValueError("notification_ms cannot be negative")


DEFAULT_CONFIG = ViewerConfig()

EXPORT_FILENAME = "fpl_return_consistency.csv"
EXPORT_MEDIA_TYPE = "text/csv; charset=utf-8"
