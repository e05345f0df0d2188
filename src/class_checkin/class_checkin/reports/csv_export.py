from __future__ import annotations

import csv
import io
from typing import Any, Iterable, Sequence


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if value is None:
        return ""
    return str(value)


def to_csv(fieldnames: Sequence[str], rows: Iterable[dict]) -> str:
    """Render rows as comma-separated text.

    QUOTE_MINIMAL wraps a field in quotes only when it holds the delimiter, a
    quote or a line break, and doubles embedded quotes.
    """

    out = io.StringIO()
    writer = csv.writer(out, delimiter=",", quotechar='"', quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(fieldnames)
    for row in rows:
        writer.writerow([_cell(row.get(name)) for name in fieldnames])
    return out.getvalue()
