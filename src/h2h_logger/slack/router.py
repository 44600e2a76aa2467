"""Slack webhook router."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from h2h_logger.config import get_settings
from h2h_logger.sheets import RowSink
from h2h_logger.slack.handlers import handle_slack_event
from h2h_logger.slack.verification import verify_slack_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["slack"])


def get_sheet(request: Request) -> RowSink | None:
    """Return the worksheet handle acquired at startup (None if not configured)."""
    return getattr(request.app.state, "sheet", None)


@router.post("/slack/events")
async def slack_events(
    request: Request,
    body: bytes = Depends(verify_slack_request),
    sheet: RowSink | None = Depends(get_sheet),
) -> JSONResponse:
    """Receive Slack webhook events.

    Always answers 200. When ``skip_slack_retries`` is enabled, Slack retries
    (X-Slack-Retry-Num header) are acknowledged without being logged again.
    """
    settings = get_settings()
    retry_num = request.headers.get("X-Slack-Retry-Num")
    if settings.skip_slack_retries and retry_num:
        logger.info("Skipping Slack retry #%s", retry_num)
        return JSONResponse({"success": True})

    return await handle_slack_event(body, sheet, settings)
