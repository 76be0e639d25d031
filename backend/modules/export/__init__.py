# Export module
"""
Read-only downloads of the full inventory list:
- print_csv: CSV rendering
- print_pdf: PDF table report (reportlab)
- api: the /export router
"""

from .api import router

__all__ = ["router"]
