import pytest

from fpl_consistency.models import PlayerRecord
from fpl_consistency.pool import paginate


def _records(count: int) -> list[PlayerRecord]:
    return [PlayerRecord(id=index, name=f"Player {index}") for index in range(1, count + 1)]


def test_out_of_range_page_clamps_to_last():
    records = _records(25)

    result = paginate(records, 99, 10)

    assert result.current_page == 3
    assert result.total_pages == 3
    assert result.total_items == 25
    assert result.page_size == 10
    assert [record.id for record in result.rows] == [21, 22, 23, 24, 25]
    assert result.first_item == 21
    assert result.last_item == 25
    assert result.has_previous
    assert not result.has_next


@pytest.mark.parametrize("page", [0, -4])
def test_low_page_numbers_clamp_to_first(page):
    result = paginate(_records(25), page, 10)

    assert result.current_page == 1
    assert [record.id for record in result.rows] == list(range(1, 11))
    assert not result.has_previous


def test_empty_input_still_has_one_page():
    result = paginate([], 3, 10)

    assert result.rows == []
    assert result.current_page == 1
    assert result.total_pages == 1
    assert result.total_items == 0
    assert result.first_item == 0
    assert result.last_item == 0


def test_pages_cover_every_record_once_in_order():
    records = _records(23)
    first = paginate(records, 1, 5)

    collected: list[PlayerRecord] = []
    for page in range(1, first.total_pages + 1):
        result = paginate(records, page, 5)
        assert len(result.rows) <= 5
        collected.extend(result.rows)

    assert first.total_pages == 5
    assert collected == records


def test_exact_multiple_has_no_trailing_page():
    result = paginate(_records(20), 2, 10)

    assert result.total_pages == 2
    assert len(result.rows) == 10


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        paginate(_records(3), 1, 0)
