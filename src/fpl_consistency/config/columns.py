"""Column display configuration: canonical order, labels, tooltips and sort options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class SortOption:
    key: str
    label: str


DISPLAY_ORDER: Tuple[str, ...] = (
    "web_name",
    "team",
    "element_type",
    "matches_counted",
    "points_avg",
    "returns_5plus_count",
    "return_rate_raw",
    "return_rate_smooth",
    "blanks_le2_count",
    "blanks_rate",
    "hauls_10plus_count",
    "points_sd",
    "consistency_score",
)

HIDDEN_COLUMNS: frozenset[str] = frozenset({"id"})

NUMERIC_COLUMNS: frozenset[str] = frozenset(
    {
        "matches_counted",
        "returns_5plus_count",
        "return_rate_raw",
        "return_rate_smooth",
        "blanks_le2_count",
        "blanks_rate",
        "hauls_10plus_count",
        "points_avg",
        "points_sd",
        "consistency_score",
    }
)

COLUMN_LABELS: Mapping[str, str] = {
    "web_name": "PLAYER",
    "team": "TEAM",
    "element_type": "POSITION",
    "matches_counted": "MATCHES",
    "returns_5plus_count": "5+ RETURNS",
    "return_rate_raw": "RETURN RATE",
    "return_rate_smooth": "RETURN RATE (SMOOTHED)",
    "blanks_le2_count": "BLANKS (<=2)",
    "blanks_rate": "BLANK RATE",
    "hauls_10plus_count": "HAULS (10+)",
    "points_avg": "AVG POINTS",
    "points_sd": "POINTS VOLATILITY",
    "consistency_score": "CONSISTENCY SCORE",
}

COLUMN_TOOLTIPS: Mapping[str, str] = {
    "web_name": "Player name",
    "team": "Club (abbreviated)",
    "element_type": "GKP (Goalkeeper), DEF (Defender), MID (Midfielder), FWD (Forward)",
    "matches_counted": (
        "Appearances only (minutes > 0). All metrics calculated from these matches."
    ),
    "returns_5plus_count": (
        "5+ point returns. Count of matches where the player scored 5 or more FPL points."
    ),
    "return_rate_raw": "Raw return rate (%) = returns / matches. Unadjusted proportion.",
    "return_rate_smooth": (
        "Smoothed return rate (%) using plus-four adjustment (x+2)/(n+4). "
        "Stabilizes small-sample estimates."
    ),
    "blanks_le2_count": "Blanks = matches with 0-2 points.",
    "blanks_rate": "Blank rate (%) = blanks / matches. Lower = more reliable floor.",
    "hauls_10plus_count": "10+ point hauls. Double-digit games, a measure of upside.",
    "points_avg": "Average FPL points per appearance.",
    "points_sd": (
        "Points volatility (population SD) of match-to-match points. "
        "Higher = more streaky."
    ),
    "consistency_score": (
        "Percentile-based composite (0-100): 55% return rate, 25% low volatility, "
        "20% low blanks. Players with fewer than 6 matches score 0."
    ),
}

_SORT_OPTIONS: Dict[str, SortOption] = {
    option.key: option
    for option in (
        SortOption("points_avg", "Avg Points"),
        SortOption("consistency_score", "Consistency Score"),
        SortOption("return_rate_smooth", "Return Rate"),
        SortOption("returns_5plus_count", "5+ Returns Count"),
        SortOption("hauls_10plus_count", "Hauls (10+)"),
        SortOption("blanks_rate", "Blank Rate"),
        SortOption("points_sd", "Volatility (SD)"),
        SortOption("matches_counted", "Matches"),
        SortOption("web_name", "Player Name"),
    )
}


def iter_sort_options() -> Iterable[SortOption]:
    """Return the sort choices offered to users, in menu order."""

    return _SORT_OPTIONS.values()


def get_sort_option(key: str) -> SortOption:
    """Fetch a sort option by column key, raising KeyError if missing."""

    if key not in _SORT_OPTIONS:
        raise KeyError(f"No sort option configured for column {key!r}")
    return _SORT_OPTIONS[key]


def sort_label(key: str) -> str:
    option = _SORT_OPTIONS.get(key)
    return option.label if option else key


def column_label(header: str) -> str:
    if header in COLUMN_LABELS:
        return COLUMN_LABELS[header]
    return header[:1].upper() + header[1:].replace("_", " ")


def column_tooltip(header: str) -> str:
    return COLUMN_TOOLTIPS.get(header, "")


def is_numeric_column(header: str) -> bool:
    return header in NUMERIC_COLUMNS
