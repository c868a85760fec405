"""Name search and club/position filtering over the player pool."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from fpl_consistency.config import DEFAULT_CONFIG, SortDirection
from fpl_consistency.models import PlayerRecord, resolve_column


@dataclass(frozen=True)
class QuerySpec:
    """Filter and sort options for one pipeline invocation."""

    search_text: str = ""
    club: str | None = None
    position: str | None = None
    sort_field: str = DEFAULT_CONFIG.default_sort_by
    sort_direction: SortDirection = DEFAULT_CONFIG.default_sort_order
    min_search_chars: int = field(default=DEFAULT_CONFIG.min_search_chars, compare=False)

    def __post_init__(self) -> None:
        if self.sort_direction not in ("asc", "desc"):
            raise ValueError(
                f"sort_direction must be 'asc' or 'desc', got {self.sort_direction!r}"
            )
        object.__setattr__(self, "sort_field", resolve_column(self.sort_field))
        object.__setattr__(self, "club", self.club or None)
        object.__setattr__(self, "position", (self.position or "").upper() or None)

    @property
    def search_term(self) -> str:
        return (self.search_text or "").strip()

    @property
    def search_active(self) -> bool:
        return len(self.search_term) >= max(self.min_search_chars, 1)


def _matches_search(record: PlayerRecord, needle: str) -> bool:
    return needle in (record.name or "").casefold()


def _passes_filters(record: PlayerRecord, spec: QuerySpec) -> bool:
    if spec.club is not None and record.club != spec.club:
        return False
    if spec.position is not None:
        code = record.position.value if record.position is not None else None
        if code != spec.position:
            return False
    return True


def filter_records(records: Sequence[PlayerRecord], spec: QuerySpec) -> List[PlayerRecord]:
    """Return the records selected by ``spec`` without touching the input.

    An active name search takes exclusive precedence: while search text is
    present the club and position filters are ignored rather than combined.
    Otherwise club and position are applied together, each only when set.
    """

    if spec.search_active:
        needle = spec.search_term.casefold()
        return [record for record in records if _matches_search(record, needle)]

    return [record for record in records if _passes_filters(record, spec)]


__all__ = [
    "QuerySpec",
    "filter_records",
]
