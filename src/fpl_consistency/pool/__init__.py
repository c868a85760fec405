"""Player pool pipeline (filtering, sorting, paging, formatting, export)."""

from .export import to_csv, write_csv
from .filtering import QuerySpec, filter_records
from .formatting import (
    extract_clubs,
    format_cell,
    format_consistency_score,
    is_low_sample,
    ordered_headers,
    position_display,
)
from .pagination import PageResult, empty_page, paginate
from .pipeline import process
from .sorting import collation_key, compare_values, sort_records

__all__ = [
    "PageResult",
    "QuerySpec",
    "collation_key",
    "compare_values",
    "empty_page",
    "extract_clubs",
    "filter_records",
    "format_cell",
    "format_consistency_score",
    "is_low_sample",
    "ordered_headers",
    "paginate",
    "position_display",
    "process",
    "sort_records",
    "to_csv",
    "write_csv",
]
