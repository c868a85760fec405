"""Display-only transformations applied to records on their way to the screen.

Nothing here mutates a record or feeds back into filtering and sorting: the
low-sample rule changes what is shown for the consistency score, while the
pipeline keeps ordering by the stored value.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Union

from fpl_consistency.config import DISPLAY_ORDER, HIDDEN_COLUMNS
from fpl_consistency.models import LOW_SAMPLE_THRESHOLD, POSITION_NAMES, PlayerRecord, Position

MISSING_VALUE = "-"
LOW_SAMPLE_MARKER = "(low sample)"


def is_low_sample(record: PlayerRecord, threshold: int = LOW_SAMPLE_THRESHOLD) -> bool:
    return (record.matches_counted or 0) < threshold


def format_consistency_score(
    record: PlayerRecord,
    threshold: int = LOW_SAMPLE_THRESHOLD,
) -> Union[int, float]:
    """Return the consistency score to display for ``record``.

    Low-sample players always show ``0`` whatever score is stored; otherwise
    the stored score is shown, falling back to ``0`` when absent.
    """

    if is_low_sample(record, threshold):
        return 0
    return record.consistency_score or 0


def ordered_headers(sample: Union[PlayerRecord, Mapping[str, Any], None]) -> List[str]:
    """Return display columns for rows shaped like ``sample``.

    Known columns come first in canonical order, followed by any other keys
    in their natural order. The identifier column is never included.
    """

    if sample is None:
        return []
    keys = sample.as_row().keys() if isinstance(sample, PlayerRecord) else sample.keys()
    available = [key for key in keys if key not in HIDDEN_COLUMNS]
    ordered = [key for key in DISPLAY_ORDER if key in available]
    remaining = [key for key in available if key not in DISPLAY_ORDER]
    return ordered + remaining


def _format_value(value: Any) -> str:
    if value is None or value == "":
        return MISSING_VALUE
    if isinstance(value, Position):
        return value.value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_cell(
    record: PlayerRecord,
    header: str,
    threshold: int = LOW_SAMPLE_THRESHOLD,
) -> str:
    if header == "consistency_score":
        score = _format_value(format_consistency_score(record, threshold))
        if is_low_sample(record, threshold):
            return f"{score} {LOW_SAMPLE_MARKER}"
        return score
    return _format_value(record.column_value(header))


def position_display(code: Union[str, Position, None]) -> str:
    if code is None or code == "":
        return MISSING_VALUE
    key = code.value if isinstance(code, Position) else str(code).upper()
    if key in POSITION_NAMES:
        return f"{key} ({POSITION_NAMES[key]})"
    return str(code)


def extract_clubs(records: Iterable[PlayerRecord]) -> List[str]:
    """Return the sorted, de-duplicated club codes present in ``records``."""

    return sorted({record.club for record in records if record.club})


__all__ = [
    "LOW_SAMPLE_MARKER",
    "MISSING_VALUE",
    "extract_clubs",
    "format_cell",
    "format_consistency_score",
    "is_low_sample",
    "ordered_headers",
    "position_display",
]
