"""Column sorting with numeric-first, collation-aware string fallback comparison."""

from __future__ import annotations

import math
from enum import Enum
from functools import cmp_to_key, lru_cache
from typing import Any, List, Sequence, Tuple

from pyuca import Collator

from fpl_consistency.config import SortDirection
from fpl_consistency.models import PlayerRecord, resolve_column


def _as_number(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return math.nan


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loads the Unicode collation table; shared by every comparison.
    return Collator()


def collation_key(text: str) -> Tuple[int, ...]:
    """Return a Unicode Collation Algorithm key for casefolded ``text``.

    Accented letters sort next to their base letter, so ``Ødegaard`` lands
    between ``Bruno`` and ``Zinchenko`` regardless of the process locale.
    """

    return tuple(_collator().sort_key(text.casefold()))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).casefold()


def compare_values(left: Any, right: Any) -> int:
    """Three-way compare two cell values.

    Both values are compared numerically when both parse as numbers;
    otherwise they are compared as casefolded strings using Unicode
    collation (see ``collation_key``). ``None`` parses as NaN and compares
    as the empty string.
    """

    left_num = _as_number(left)
    right_num = _as_number(right)
    if not math.isnan(left_num) and not math.isnan(right_num):
        return (left_num > right_num) - (left_num < right_num)

    left_key = collation_key(_as_text(left))
    right_key = collation_key(_as_text(right))
    return (left_key > right_key) - (left_key < right_key)


def sort_records(
    records: Sequence[PlayerRecord],
    field: str,
    direction: SortDirection = "desc",
) -> List[PlayerRecord]:
    """Return a stably sorted copy of ``records`` ordered by column ``field``.

    Descending order negates the comparison instead of reversing the output,
    so records with equal values keep their input order in both directions.
    """

    if direction not in ("asc", "desc"):
        raise ValueError(f"direction must be 'asc' or 'desc', got {direction!r}")

    column = resolve_column(field)
    sign = -1 if direction == "desc" else 1
    keyed = [(record.column_value(column), record) for record in records]

    def _compare(left: tuple[Any, PlayerRecord], right: tuple[Any, PlayerRecord]) -> int:
        return sign * compare_values(left[0], right[0])

    keyed.sort(key=cmp_to_key(_compare))
    return [record for _, record in keyed]


__all__ = [
    "collation_key",
    "compare_values",
    "sort_records",
]
