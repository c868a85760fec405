"""Split a processed view into fixed-size pages."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from fpl_consistency.models import PlayerRecord


@dataclass(frozen=True)
class PageResult:
    """One page of records plus the metadata needed to render navigation."""

    rows: List[PlayerRecord]
    current_page: int
    total_pages: int
    total_items: int
    page_size: int

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def first_item(self) -> int:
        """1-based index of the first row on this page (0 when empty)."""

        if not self.rows:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def last_item(self) -> int:
        if not self.rows:
            return 0
        return self.first_item + len(self.rows) - 1


def empty_page(page_size: int) -> PageResult:
    return PageResult(rows=[], current_page=1, total_pages=1, total_items=0, page_size=page_size)


def paginate(records: Sequence[PlayerRecord], page: int, page_size: int) -> PageResult:
    """Return page ``page`` of ``records``.

    There is always at least one page. Out-of-range page numbers clamp to the
    nearest valid page instead of raising.
    """

    if page_size < 1:
        raise ValueError("page_size must be at least 1")

    total_items = len(records)
    total_pages = max(1, math.ceil(total_items / page_size))
    current_page = max(1, min(int(page), total_pages))
    start = (current_page - 1) * page_size

    return PageResult(
        rows=list(records[start : start + page_size]),
        current_page=current_page,
        total_pages=total_pages,
        total_items=total_items,
        page_size=page_size,
    )


__all__ = [
    "PageResult",
    "empty_page",
    "paginate",
]
