"""Input adapters that turn the metrics JSON file into records."""

from .metrics import (
    BUNDLED_DATASET,
    DatasetLoadError,
    load_bundled_records,
    load_records_from_json,
    rows_to_records,
)

__all__ = [
    "BUNDLED_DATASET",
    "DatasetLoadError",
    "load_bundled_records",
    "load_records_from_json",
    "rows_to_records",
]
