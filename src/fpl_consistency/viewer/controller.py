"""Stateful viewer controller that drives the pool pipeline.

The controller owns everything that changes in response to user actions
(search text, club/position filters, sort column, current page and view
mode) and rebuilds the visible page from the immutable record set on every
change. Pipeline failures are contained here: the view resets to an empty
first page and the error is logged.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from fpl_consistency.config import DEFAULT_CONFIG, SortDirection, ViewerConfig, ViewMode
from fpl_consistency.models import PlayerRecord, resolve_column
from fpl_consistency.pool import (
    PageResult,
    QuerySpec,
    empty_page,
    extract_clubs,
    ordered_headers,
    paginate,
    process,
    to_csv,
)

from .debounce import Debouncer


logger = logging.getLogger(__name__)

VIEW_CHANGE_MESSAGES = {
    "card": "Switched to Card View",
    "table": "Switched to Table View",
}


def initial_view_mode(width: Optional[int], config: ViewerConfig = DEFAULT_CONFIG) -> ViewMode:
    if width is not None and width < config.mobile_breakpoint:
        return "card"
    return "table"


@dataclass
class ViewerState:
    sort_by: str
    sort_order: SortDirection
    search_text: str = ""
    club: str = ""
    position: str = ""
    current_page: int = 1
    total_pages: int = 1
    total_items: int = 0
    rows: List[PlayerRecord] = field(default_factory=list)
    view_mode: ViewMode = "table"
    notification: Optional[str] = None


class ViewerController:
    def __init__(
        self,
        records: Iterable[PlayerRecord],
        config: ViewerConfig = DEFAULT_CONFIG,
        *,
        viewport_width: Optional[int] = None,
    ) -> None:
        self._records = tuple(records)
        self.config = config
        self.clubs = extract_clubs(self._records)
        self.state = ViewerState(
            sort_by=config.default_sort_by,
            sort_order=config.default_sort_order,
            view_mode=initial_view_mode(viewport_width, config),
        )
        self._lock = threading.RLock()
        self._search_debouncer = Debouncer(config.search_debounce_ms)
        self._resize_debouncer = Debouncer(config.resize_debounce_ms)
        self._notification_timer = Debouncer(config.notification_ms)

    # Pipeline -----------------------------------------------------------

    def query_spec(self) -> QuerySpec:
        state = self.state
        return QuerySpec(
            search_text=state.search_text,
            club=state.club or None,
            position=state.position or None,
            sort_field=state.sort_by,
            sort_direction=state.sort_order,
            min_search_chars=self.config.min_search_chars,
        )

    def processed(self) -> List[PlayerRecord]:
        return process(self._records, self.query_spec())

    def load_page(self, page: int = 1) -> PageResult:
        """Recompute the visible page; never raises for bad data."""

        with self._lock:
            try:
                result = paginate(self.processed(), page, self.config.page_size)
            except Exception:
                logger.exception("Error loading player data for page %s", page)
                result = empty_page(self.config.page_size)

            state = self.state
            state.rows = result.rows
            state.current_page = result.current_page
            state.total_pages = result.total_pages
            state.total_items = result.total_items
            return result

    @property
    def headers(self) -> List[str]:
        rows = self.state.rows
        return ordered_headers(rows[0] if rows else None)

    # Filters ------------------------------------------------------------

    def set_search(self, text: str) -> None:
        """Record new search text and schedule a debounced reload."""

        with self._lock:
            self.state.search_text = text
        self._search_debouncer.schedule(self.load_page, 1)

    def flush_search(self) -> bool:
        return self._search_debouncer.flush()

    def set_club(self, club: Optional[str]) -> PageResult:
        with self._lock:
            self.state.club = club or ""
            return self.load_page(1)

    def set_position(self, position: Optional[str]) -> PageResult:
        with self._lock:
            self.state.position = (position or "").upper()
            return self.load_page(1)

    def toggle_sort(self, column: str) -> PageResult:
        """Flip direction on the active column, or sort a new column descending."""

        column = resolve_column(column)
        with self._lock:
            state = self.state
            if state.sort_by == column:
                state.sort_order = "asc" if state.sort_order == "desc" else "desc"
            else:
                state.sort_by = column
                state.sort_order = "desc"
            return self.load_page(1)

    def clear_search(self) -> PageResult:
        self._search_debouncer.cancel()
        with self._lock:
            self.state.search_text = ""
            return self.load_page(1)

    def clear_club(self) -> PageResult:
        return self.set_club(None)

    def clear_position(self) -> PageResult:
        return self.set_position(None)

    def reset_sort(self) -> PageResult:
        with self._lock:
            self.state.sort_by = self.config.default_sort_by
            self.state.sort_order = self.config.default_sort_order
            return self.load_page(1)

    def clear_all_filters(self) -> PageResult:
        self._search_debouncer.cancel()
        with self._lock:
            state = self.state
            state.search_text = ""
            state.club = ""
            state.position = ""
            state.sort_by = self.config.default_sort_by
            state.sort_order = self.config.default_sort_order
            return self.load_page(1)

    def active_filter_count(self) -> int:
        state = self.state
        return sum(
            (
                bool(state.search_text),
                bool(state.club),
                bool(state.position),
                state.sort_by != self.config.default_sort_by,
            )
        )

    def has_active_filters(self) -> bool:
        return self.active_filter_count() > 0

    # Paging -------------------------------------------------------------

    def next_page(self) -> PageResult:
        return self.load_page(self.state.current_page + 1)

    def previous_page(self) -> PageResult:
        return self.load_page(self.state.current_page - 1)

    # Export -------------------------------------------------------------

    def export_csv(self) -> Optional[str]:
        """Return CSV for the full filtered view, or None when it is empty."""

        records = self.processed()
        if not records:
            logger.warning("No data to export")
            return None
        return to_csv(records)

    # Viewport -----------------------------------------------------------

    def handle_resize(self, width: int) -> None:
        self._resize_debouncer.schedule(self.apply_viewport, width)

    def flush_resize(self) -> bool:
        return self._resize_debouncer.flush()

    def apply_viewport(self, width: int) -> Optional[str]:
        """Switch view mode for ``width`` and return the notification, if any."""

        with self._lock:
            state = self.state
            message = None
            if width < self.config.mobile_breakpoint and state.view_mode == "table":
                state.view_mode = "card"
                message = VIEW_CHANGE_MESSAGES["card"]
            elif width >= self.config.large_screen_breakpoint and state.view_mode == "card":
                state.view_mode = "table"
                message = VIEW_CHANGE_MESSAGES["table"]
            if message is not None:
                state.notification = message
                logger.info(message)
                self._notification_timer.schedule(self._expire_notification, message)
            return message

    def _expire_notification(self, message: str) -> None:
        with self._lock:
            if self.state.notification == message:
                self.state.notification = None

    def clear_notification(self) -> None:
        self._notification_timer.cancel()
        with self._lock:
            self.state.notification = None

    def flush_notification(self) -> bool:
        """Expire the visible notification now instead of after ``notification_ms``."""

        return self._notification_timer.flush()

    def close(self) -> None:
        self._search_debouncer.cancel()
        self._resize_debouncer.cancel()
        self._notification_timer.cancel()


__all__ = [
    "VIEW_CHANGE_MESSAGES",
    "ViewerController",
    "ViewerState",
    "initial_view_mode",
]
