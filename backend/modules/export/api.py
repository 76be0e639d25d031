from __future__ import annotations
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from common.deps import get_inventory_repo, get_settings
from core.config import Settings
from core.errors import FormatError
from .print_csv import render_csv
from .print_pdf import render_pdf

logger = logging.getLogger(__name__)
router = APIRouter()


def _attachment(body, media_type: str, filename: str) -> StreamingResponse:
    return StreamingResponse(
        iter([body]),
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/csv")
def export_csv(repo=Depends(get_inventory_repo)):
    """
    # Export every inventory item (sorted by name) as CSV.
    """
    try:
        csv_text = render_csv(repo.list_items())
    except Exception as e:
        logger.error(f"CSV export failed: {e}")
        raise FormatError("Failed to export CSV") from e
    return _attachment(csv_text, "text/csv", "inventory.csv")


@router.get("/pdf")
def export_pdf(
        repo=Depends(get_inventory_repo),
        settings: Settings = Depends(get_settings),
):
    """
    # Export every inventory item (sorted by name) as a PDF table.
    """
    try:
        pdf_bytes = render_pdf(
            repo.list_items(),
            currency_symbol=settings.EXPORT_CURRENCY_SYMBOL,
            title=settings.EXPORT_TITLE,
        )
    except Exception as e:
        logger.error(f"PDF export failed: {e}")
        raise FormatError("Failed to export PDF") from e
    return _attachment(pdf_bytes, "application/pdf", "inventory.pdf")
