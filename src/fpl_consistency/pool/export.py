"""CSV export helpers for the filtered player view."""

from __future__ import annotations

import csv
from io import StringIO
from pathlib import Path
from typing import Sequence

from fpl_consistency.models import PlayerRecord


def to_csv(records: Sequence[PlayerRecord]) -> str:
    """Serialize ``records`` as CRLF-terminated CSV text.

    The header is taken from the first record's columns in their natural
    order; later records missing a column get an empty field. Text containing
    a comma or double quote is quoted with inner quotes doubled. An empty
    input produces an empty string.
    """

    if not records:
        return ""

    headers = list(records[0].as_row().keys())

    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(headers)
    for record in records:
        row = record.as_row()
        writer.writerow([row.get(header) for header in headers])

    return buffer.getvalue()


def write_csv(records: Sequence[PlayerRecord], path: Path) -> bool:
    """Write the CSV export to ``path``; return False when there is nothing to write."""

    csv_text = to_csv(records)
    if not csv_text:
        return False
    with Path(path).open("w", newline="", encoding="utf-8") as f:
        f.write(csv_text)
    return True


__all__ = [
    "to_csv",
    "write_csv",
]
