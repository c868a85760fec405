"""Canonical player-metrics record shared by the loader, pipeline and exporter."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic.config import ConfigDict


logger = logging.getLogger(__name__)

LOW_SAMPLE_THRESHOLD = 6


class Position(str, Enum):
    GKP = "GKP"
    DEF = "DEF"
    MID = "MID"
    FWD = "FWD"

    @property
    def full_name(self) -> str:
        return POSITION_NAMES[self.value]


Number = Union[int, float]

POSITION_NAMES: Dict[str, str] = {
    "GKP": "Goalkeeper",
    "DEF": "Defender",
    "MID": "Midfielder",
    "FWD": "Forward",
}

_COUNT_FIELDS = (
    "matches_counted",
    "returns_5plus_count",
    "blanks_le2_count",
    "hauls_10plus_count",
)

_RATE_FIELDS = (
    "return_rate_raw",
    "return_rate_smooth",
    "blanks_rate",
    "points_avg",
    "points_sd",
    "consistency_score",
)


def _malformed(field_name: str, value: Any) -> None:
    logger.warning("Ignoring malformed value %r for field %s", value, field_name)
    return None


def _parse_number(text: str) -> Number:
    try:
        return int(text)
    except ValueError:
        return float(text)


def _coerce_number(value: Any, field_name: str) -> Optional[Number]:
    """Validate a numeric cell, keeping ints as ints and floats as floats."""

    if value is None:
        return None
    if isinstance(value, bool):
        return _malformed(field_name, value)
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = _parse_number(text)
        except ValueError:
            return _malformed(field_name, value)
    else:
        return _malformed(field_name, value)
    if isinstance(number, float) and (math.isnan(number) or math.isinf(number)):
        return _malformed(field_name, value)
    return number


def _coerce_count(value: Any, field_name: str) -> Optional[int]:
    number = _coerce_number(value, field_name)
    if number is None:
        return None
    if not float(number).is_integer() or number < 0:
        return _malformed(field_name, value)
    return int(number)


class PlayerRecord(BaseModel):
    """Season consistency metrics for one player, as produced upstream.

    Attribute names are Pythonic; the dataset keys (``web_name``, ``team``,
    ``element_type``) are kept as aliases so rows and CSV headers match the
    source file. Every field is optional: malformed values are logged and
    stored as ``None`` rather than rejecting the whole record. Unknown keys
    are retained as extras.
    """

    id: Optional[int] = None
    name: str = Field(default="", alias="web_name")
    club: str = Field(default="", alias="team")
    position: Optional[Position] = Field(default=None, alias="element_type")
    matches_counted: Optional[int] = None
    returns_5plus_count: Optional[int] = None
    return_rate_raw: Optional[Number] = None
    return_rate_smooth: Optional[Number] = None
    blanks_le2_count: Optional[int] = None
    blanks_rate: Optional[Number] = None
    hauls_10plus_count: Optional[int] = None
    points_avg: Optional[Number] = None
    points_sd: Optional[Number] = None
    consistency_score: Optional[Number] = None

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @field_validator("id", *_COUNT_FIELDS, mode="before")
    @classmethod
    def _validate_count(cls, value: Any, info: ValidationInfo) -> Optional[int]:
        return _coerce_count(value, info.field_name)

    @field_validator(*_RATE_FIELDS, mode="before")
    @classmethod
    def _validate_rate(cls, value: Any, info: ValidationInfo) -> Optional[Number]:
        return _coerce_number(value, info.field_name)

    @field_validator("name", "club", mode="before")
    @classmethod
    def _validate_text(cls, value: Any, info: ValidationInfo) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        _malformed(info.field_name, value)
        return ""

    @field_validator("position", mode="before")
    @classmethod
    def _validate_position(cls, value: Any, info: ValidationInfo) -> Optional[Position]:
        if value is None or isinstance(value, Position):
            return value
        if isinstance(value, str):
            code = value.strip().upper()
            if not code:
                return None
            if code in POSITION_NAMES:
                return Position(code)
        return _malformed(info.field_name, value)

    @property
    def is_low_sample(self) -> bool:
        return (self.matches_counted or 0) < LOW_SAMPLE_THRESHOLD

    def as_row(self) -> Dict[str, Any]:
        """Return the record keyed by dataset column.

        Columns follow the model's field declaration order, not the key order
        of the source object. Only fields supplied at load time are included,
        followed by any extra keys in the order they were encountered.
        """

        dumped = self.model_dump(by_alias=True, mode="json")
        present = {COLUMN_KEYS[name] for name in self.model_fields_set if name in COLUMN_KEYS}
        present.update(self.model_extra or {})
        return {key: value for key, value in dumped.items() if key in present}

    def column_value(self, key: str) -> Any:
        return self.as_row().get(key)


COLUMN_KEYS: Dict[str, str] = {
    name: field.alias or name for name, field in PlayerRecord.model_fields.items()
}


def resolve_column(field: str) -> str:
    """Map a record attribute name (``club``) to its column key (``team``)."""

    return COLUMN_KEYS.get(field, field)


__all__ = [
    "COLUMN_KEYS",
    "LOW_SAMPLE_THRESHOLD",
    "POSITION_NAMES",
    "PlayerRecord",
    "Position",
    "resolve_column",
]
