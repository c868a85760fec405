from fpl_consistency.models import PlayerRecord
from fpl_consistency.pool import QuerySpec, format_consistency_score, process


def _scenario() -> list[PlayerRecord]:
    return [
        PlayerRecord(name="Salah", club="LIV", position="MID", matches_counted=20, consistency_score=92),
        PlayerRecord(name="Haaland", club="MCI", position="FWD", matches_counted=18, consistency_score=95),
        PlayerRecord(name="Newbie", club="LIV", position="FWD", matches_counted=2, consistency_score=80),
    ]


def test_filter_then_sort_uses_stored_scores():
    spec = QuerySpec(club="LIV", sort_field="consistency_score", sort_direction="desc")

    result = process(_scenario(), spec)

    assert [record.name for record in result] == ["Salah", "Newbie"]
    newbie = result[1]
    assert newbie.consistency_score == 80
    assert format_consistency_score(newbie) == 0


def test_ascending_scenario_orders_by_raw_score():
    spec = QuerySpec(club="LIV", sort_field="consistency_score", sort_direction="asc")

    assert [record.name for record in process(_scenario(), spec)] == ["Newbie", "Salah"]


def test_process_is_idempotent():
    records = _scenario() + [
        PlayerRecord(name="Saka", club="ARS", position="MID", matches_counted=16, consistency_score=92),
    ]
    spec = QuerySpec(sort_field="consistency_score", sort_direction="desc")

    first = process(records, spec)
    second = process(records, spec)

    assert first == second
    assert [record.name for record in first] == ["Haaland", "Salah", "Saka", "Newbie"]


def test_search_precedence_flows_through_pipeline():
    spec = QuerySpec(search_text="haa", club="LIV", sort_field="name", sort_direction="asc")

    assert [record.name for record in process(_scenario(), spec)] == ["Haaland"]


def test_process_leaves_source_untouched():
    records = _scenario()
    snapshot = list(records)

    process(records, QuerySpec(sort_field="name", sort_direction="asc"))

    assert records == snapshot
