"""Load the precomputed player-metrics dataset into canonical records."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from fpl_consistency.models import PlayerRecord


logger = logging.getLogger(__name__)

BUNDLED_DATASET = Path(__file__).resolve().parent.parent / "data" / "metrics_latest.json"


class DatasetLoadError(RuntimeError):
    """Raised when the metrics dataset cannot be read as a JSON array."""


def rows_to_records(rows: Iterable[Any]) -> List[PlayerRecord]:
    """Validate raw JSON objects into records, skipping non-object entries."""

    records: List[PlayerRecord] = []
    skipped = 0
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            logger.warning(
                "Skipping dataset entry %d: expected an object, got %s",
                index,
                type(row).__name__,
            )
            skipped += 1
            continue
        records.append(PlayerRecord.model_validate(dict(row)))

    logger.info("Loaded %d player records (%d skipped)", len(records), skipped)
    return records


def load_records_from_json(path: Path) -> List[PlayerRecord]:
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DatasetLoadError(f"Dataset file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(f"Unable to read dataset {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetLoadError(f"Dataset {path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise DatasetLoadError(
            f"Dataset {path} must contain a JSON array, got {type(payload).__name__}"
        )
    return rows_to_records(payload)


def load_bundled_records() -> List[PlayerRecord]:
    """Load the dataset shipped with the package."""

    return load_records_from_json(BUNDLED_DATASET)
