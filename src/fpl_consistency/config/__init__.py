"""Configuration helpers for viewer defaults and column metadata."""

from .columns import (
    COLUMN_LABELS,
    COLUMN_TOOLTIPS,
    DISPLAY_ORDER,
    HIDDEN_COLUMNS,
    NUMERIC_COLUMNS,
    SortOption,
    column_label,
    column_tooltip,
    get_sort_option,
    is_numeric_column,
    iter_sort_options,
    sort_label,
)
from .viewer import (
    DEFAULT_CONFIG,
    EXPORT_FILENAME,
    EXPORT_MEDIA_TYPE,
    SortDirection,
    ViewerConfig,
    ViewMode,
)

__all__ = [
    "COLUMN_LABELS",
    "COLUMN_TOOLTIPS",
    "DEFAULT_CONFIG",
    "DISPLAY_ORDER",
    "EXPORT_FILENAME",
    "EXPORT_MEDIA_TYPE",
    "HIDDEN_COLUMNS",
    "NUMERIC_COLUMNS",
    "SortDirection",
    "SortOption",
    "ViewMode",
    "ViewerConfig",
    "column_label",
    "column_tooltip",
    "get_sort_option",
    "is_numeric_column",
    "iter_sort_options",
    "sort_label",
]
