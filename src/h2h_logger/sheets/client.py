"""Google Sheets worksheet handle.

The worksheet is opened once at application startup (see ``app.lifespan``)
and injected into the Slack handler, rather than looked up per request.
"""

import json
import logging
from typing import Any, Protocol

import gspread

from h2h_logger.config import Settings

logger = logging.getLogger(__name__)


class RowSink(Protocol):
    """Anything that can append one row of cell values (e.g. a gspread Worksheet)."""

    def append_row(self, values: list[str], value_input_option: str = ...) -> Any: ...


def open_worksheet(settings: Settings) -> gspread.Worksheet | None:
    """Authorize with a service account and open the configured worksheet.

    Returns None when no spreadsheet is configured. Credentials come from
    ``google_service_account_json`` if set, otherwise from
    ``google_service_account_file`` (or gspread's default location).
    Lets gspread and auth errors propagate: a broken configuration should
    fail startup, not every request.
    """
    if not settings.spreadsheet_id:
        logger.warning("SPREADSHEET_ID not configured; rows will not be persisted")
        return None

    if settings.google_service_account_json:
        info = json.loads(settings.google_service_account_json)
        gc = gspread.service_account_from_dict(info)
    elif settings.google_service_account_file:
        gc = gspread.service_account(filename=settings.google_service_account_file)
    else:
        gc = gspread.service_account()

    spreadsheet = gc.open_by_key(settings.spreadsheet_id)
    if settings.worksheet_name:
        worksheet = spreadsheet.worksheet(settings.worksheet_name)
    else:
        worksheet = spreadsheet.sheet1

    logger.info(
        "Opened worksheet %r in spreadsheet %s", worksheet.title, settings.spreadsheet_id
    )
    return worksheet
