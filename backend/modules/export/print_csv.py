from __future__ import annotations
import io, csv
from typing import Any, Dict, Iterable

CSV_FIELDS = ["id", "name", "quantity", "price", "category", "supplier"]


def render_csv(items: Iterable[Dict[str, Any]]) -> str:
    """
    Render inventory rows as CSV.
    Columns: id, name, quantity, price, category, supplier
    Fields holding a comma, quote or newline are quoted; embedded quotes doubled.
    """
    # build CSV once (simple + fine for typical inventory sizes)
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(CSV_FIELDS)
    for item in items:
        w.writerow([item.get(field) for field in CSV_FIELDS])
    return buf.getvalue()
