"""Compose filtering and sorting into the processed view of the pool."""

from __future__ import annotations

from typing import List, Sequence

from fpl_consistency.models import PlayerRecord

from .filtering import QuerySpec, filter_records
from .sorting import sort_records


def process(all_records: Sequence[PlayerRecord], spec: QuerySpec) -> List[PlayerRecord]:
    """Filter ``all_records`` by ``spec`` and then sort the survivors.

    Pure: the same records and spec always produce the same sequence.
    """

    filtered = filter_records(all_records, spec)
    return sort_records(filtered, spec.sort_field, spec.sort_direction)


__all__ = ["process"]
