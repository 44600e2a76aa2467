"""Append transaction records to the worksheet."""

import asyncio
import logging

from h2h_logger.models.results import AppendResult
from h2h_logger.models.transaction import TransactionRecord
from h2h_logger.sheets.client import RowSink

logger = logging.getLogger(__name__)


async def append_record(sheet: RowSink | None, record: TransactionRecord) -> AppendResult:
    """Append one nine-column row for ``record``.

    The gspread call is blocking, so it runs in a worker thread; the request
    still waits for it. Values are written RAW so numeric text stays text.
    Never raises: failures come back as ``AppendResult(error=...)``.
    """
    if sheet is None:
        return AppendResult(error="No worksheet configured")

    row = record.to_row()
    try:
        await asyncio.to_thread(sheet.append_row, row, value_input_option="RAW")
    except Exception as exc:
        logger.error("Failed to append row for %s: %s", record.permalink, exc, exc_info=True)
        return AppendResult(error=str(exc))

    logger.info("Data successfully written to sheet", extra={"permalink": record.permalink})
    return AppendResult(appended=True)
