"""Google Sheets output: worksheet acquisition and row appends."""

from h2h_logger.sheets.client import RowSink, open_worksheet
from h2h_logger.sheets.service import append_record

__all__ = [
    "RowSink",
    "append_record",
    "open_worksheet",
]
