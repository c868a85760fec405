import pytest

from fpl_consistency.models import PlayerRecord
from fpl_consistency.pool import QuerySpec, filter_records


def _record(name: str, club: str, position: str) -> PlayerRecord:
    return PlayerRecord(name=name, club=club, position=position, matches_counted=10)


def _pool() -> list[PlayerRecord]:
    return [
        _record("Salah", "LIV", "MID"),
        _record("Haaland", "MCI", "FWD"),
        _record("Alexander-Arnold", "LIV", "DEF"),
        _record("Gvardiol", "MCI", "DEF"),
        _record("Ngumoha", "LIV", "FWD"),
    ]


def _names(records: list[PlayerRecord]) -> list[str]:
    return [record.name for record in records]


def test_no_criteria_returns_everything_in_order():
    pool = _pool()

    assert filter_records(pool, QuerySpec()) == pool


def test_club_and_position_combine():
    pool = _pool()

    assert _names(filter_records(pool, QuerySpec(club="LIV"))) == [
        "Salah",
        "Alexander-Arnold",
        "Ngumoha",
    ]
    assert _names(filter_records(pool, QuerySpec(position="DEF"))) == [
        "Alexander-Arnold",
        "Gvardiol",
    ]
    assert _names(filter_records(pool, QuerySpec(club="LIV", position="fwd"))) == ["Ngumoha"]


def test_search_is_case_insensitive_substring():
    pool = _pool()

    assert _names(filter_records(pool, QuerySpec(search_text="  AAL "))) == ["Haaland"]
    assert _names(filter_records(pool, QuerySpec(search_text="ar"))) == [
        "Alexander-Arnold",
        "Gvardiol",
    ]


def test_search_overrides_club_and_position_filters():
    pool = _pool()
    spec = QuerySpec(search_text="haa", club="LIV", position="DEF")

    assert _names(filter_records(pool, spec)) == ["Haaland"]


def test_blank_search_falls_back_to_filters():
    pool = _pool()

    assert _names(filter_records(pool, QuerySpec(search_text="   ", club="MCI"))) == [
        "Haaland",
        "Gvardiol",
    ]


def test_min_search_chars_threshold():
    pool = _pool()
    spec = QuerySpec(search_text="s", club="MCI", min_search_chars=2)

    assert _names(filter_records(pool, spec)) == ["Haaland", "Gvardiol"]


def test_no_matches_is_empty_not_error():
    assert filter_records(_pool(), QuerySpec(search_text="zzz")) == []
    assert filter_records(_pool(), QuerySpec(club="ARS")) == []
    assert filter_records([], QuerySpec(club="ARS")) == []


def test_filter_never_grows_or_mutates_input():
    pool = _pool()
    snapshot = list(pool)
    specs = [
        QuerySpec(),
        QuerySpec(club="LIV"),
        QuerySpec(position="GKP"),
        QuerySpec(search_text="a", club="MCI"),
    ]

    for spec in specs:
        assert len(filter_records(pool, spec)) <= len(pool)
    assert pool == snapshot


def test_records_without_position_never_match_position_filter():
    pool = [PlayerRecord(name="Unknown", club="LIV"), _record("Salah", "LIV", "MID")]

    assert _names(filter_records(pool, QuerySpec(position="MID"))) == ["Salah"]


def test_query_spec_normalizes_fields():
    spec = QuerySpec(club="", position="mid", sort_field="name", sort_direction="asc")

    assert spec.club is None
    assert spec.position == "MID"
    assert spec.sort_field == "web_name"


def test_query_spec_rejects_unknown_direction():
    with pytest.raises(ValueError):
        QuerySpec(sort_direction="sideways")  # type: ignore[arg-type]
