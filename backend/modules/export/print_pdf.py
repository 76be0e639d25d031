from __future__ import annotations
import io, logging, math
from typing import Any, Dict, Iterable

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# PDF + TABLE CONFIG
# ---------------------------------------------------------------------
# Offsets are measured from the top-left corner of the page, in points.
PAGE_SIZE = A4
MARGIN = 30

TITLE_FONT = "Helvetica"
TEXT_FONT = "Helvetica"
TITLE_SIZE = 18
TEXT_SIZE = 12

TABLE_TOP = 100
ROW_STEP = 20

# (header, x) in column order
COLUMNS = [
    ("Name", 50),
    ("Qty", 200),
    ("Price", 260),
    ("Category", 330),
    ("Supplier", 420),
]


# ---------------------------------------------------------------------
# CELL FORMATTING
# ---------------------------------------------------------------------
def format_price(price: Any, currency_symbol: str) -> str:
    """Two decimals behind the currency symbol; missing or non-numeric prices count as 0."""
    try:
        value = float(price)
    except (TypeError, ValueError):
        value = 0.0
    if math.isnan(value) or math.isinf(value):
        value = 0.0
    return f"{currency_symbol}{value:.2f}"


def row_cells(item: Dict[str, Any], currency_symbol: str) -> list[str]:
    quantity = item.get("quantity")
    return [
        str(item.get("name") or ""),
        "0" if quantity is None else str(quantity),
        format_price(item.get("price"), currency_symbol),
        str(item.get("category") or "-"),
        str(item.get("supplier") or "-"),
    ]


# ---------------------------------------------------------------------
# MAIN PDF GENERATOR
# ---------------------------------------------------------------------
def render_pdf(
    items: Iterable[Dict[str, Any]],
    currency_symbol: str = "$",
    title: str = "Inventory Report",
) -> bytes:
    """
    Inventory table report: centred title, then one row per item under a
    fixed five column header. A new page (with the header repeated) starts
    whenever the next row would run into the bottom margin.
    """
    buf = io.BytesIO()
    # Uncompressed page streams keep the rendered strings searchable in the bytes
    c = canvas.Canvas(buf, pagesize=PAGE_SIZE, pageCompression=0, invariant=1)
    c.setTitle(title)
    page_w, page_h = PAGE_SIZE
    bottom = page_h - MARGIN

    def baseline(top: float, size: float) -> float:
        return page_h - top - size

    def draw_row(cells: list[str], top: float):
        c.setFont(TEXT_FONT, TEXT_SIZE)
        for (_, x), text in zip(COLUMNS, cells):
            try:
                text.encode("cp1252")
            except UnicodeEncodeError:
                # Built-in Helvetica is WinAnsi only; other glyphs come out as boxes
                logger.warning(f"PDF cell {text!r} has characters outside cp1252")
            c.drawString(x, baseline(top, TEXT_SIZE), text)

    # 1. title
    c.setFont(TITLE_FONT, TITLE_SIZE)
    c.drawCentredString(page_w / 2, baseline(MARGIN, TITLE_SIZE), title)

    # 2. header
    headers = [h for h, _ in COLUMNS]
    draw_row(headers, TABLE_TOP)
    y = TABLE_TOP + ROW_STEP

    # 3. rows
    for item in items:
        if y + ROW_STEP > bottom:
            c.showPage()
            draw_row(headers, TABLE_TOP)
            y = TABLE_TOP + ROW_STEP
        draw_row(row_cells(item, currency_symbol), y)
        y += ROW_STEP

    c.save()
    return buf.getvalue()
