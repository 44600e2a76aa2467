"""Slack event dispatch: handshake, app_mention parsing, and sheet logging.

Every stage returns a result object instead of raising. ``handle_slack_event``
is the only place that decides the HTTP response, and apart from the
url_verification handshake it is always ``{"success": true}``: Slack expects
a 200 whatever happens downstream, so failures only reach the logs.
"""

import json
import logging
import math

from fastapi.responses import JSONResponse
from pydantic import ValidationError

from h2h_logger.config import Settings, get_settings
from h2h_logger.extraction import extract_fields
from h2h_logger.models.results import ParseResult, RecordResult
from h2h_logger.models.slack import MentionEvent
from h2h_logger.models.transaction import TransactionRecord
from h2h_logger.sheets import RowSink, append_record
from h2h_logger.slack.permalink import build_permalink
from h2h_logger.timestamps import parse_slack_ts, to_iso_utc, to_local_date_time

logger = logging.getLogger(__name__)


def parse_payload(body: bytes) -> ParseResult:
    """Decode the request body into a JSON object."""
    logger.info("Data received from Slack: %s", body.decode("utf-8", errors="replace"))

    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and the int digit limit
        return ParseResult(error=f"Invalid JSON body: {exc}")

    if not isinstance(payload, dict):
        return ParseResult(error=f"Expected a JSON object, got {type(payload).__name__}")

    logger.info("Parsed data: %s", json.dumps(payload))
    return ParseResult(payload=payload)


def build_transaction_record(event: dict, settings: Settings) -> RecordResult:
    """Extract fields, permalink and timestamps from an app_mention event."""
    try:
        mention = MentionEvent.model_validate(event)
        logger.info("Message received: %s", mention.text)

        fields = extract_fields(mention.text)
        permalink = build_permalink(mention.channel, mention.ts, settings.slack_workspace_url)

        logger.info("Source Bank: %s", fields.source_bank)
        logger.info("Beneficiary Bank: %s", fields.beneficiary_bank)
        logger.info("Total: %s", fields.total)
        logger.info("FFB: %s", fields.ffb_quantity)
        logger.info("Notes: %s", fields.notes)
        logger.info("Link Slack: %s", permalink)

        instant = parse_slack_ts(mention.ts)
        date_local, time_local = to_local_date_time(instant, settings.local_timezone)
    except ValidationError as exc:
        return RecordResult(error=f"Malformed app_mention event: {exc.error_count()} error(s)")
    except Exception as exc:
        logger.error("Failed to build record: %s", exc, exc_info=True)
        return RecordResult(error=str(exc))

    record = TransactionRecord(
        timestamp_utc=to_iso_utc(instant),
        date_local=date_local,
        time_local=time_local,
        fields=fields,
        permalink=permalink,
    )
    return RecordResult(record=record)


async def handle_slack_event(
    body: bytes,
    sheet: RowSink | None,
    settings: Settings | None = None,
) -> JSONResponse:
    """Dispatch a Slack event based on its type.

    - url_verification: return the challenge token
    - event_callback with an app_mention: parse the message and append a row
    - anything else (including failures at any stage): acknowledge with success

    Never raises.
    """
    try:
        return await _dispatch(body, sheet, settings or get_settings())
    except Exception as exc:
        logger.error("Unhandled error processing Slack request: %s", exc, exc_info=True)
        return _acknowledge()


async def _dispatch(body: bytes, sheet: RowSink | None, settings: Settings) -> JSONResponse:
    parsed = parse_payload(body)
    if not parsed.ok:
        logger.warning("Ignoring Slack request: %s", parsed.error)
        return _acknowledge()

    payload = parsed.payload
    if payload.get("type") == "url_verification":
        logger.info("URL verification request received. Challenge: %s", payload.get("challenge"))
        return _challenge_response(payload)

    event = payload.get("event")
    if not isinstance(event, dict) or event.get("type") != "app_mention":
        return _acknowledge()

    built = build_transaction_record(event, settings)
    if not built.ok:
        logger.error("Could not log app_mention: %s", built.error)
        return _acknowledge()

    appended = await append_record(sheet, built.record)
    if not appended.ok:
        logger.error(
            "Row not written for %s: %s", built.record.permalink, appended.error
        )

    return _acknowledge()


def _challenge_response(payload: dict) -> JSONResponse:
    """Echo the handshake challenge; omitted when absent, null when not finite."""
    if "challenge" not in payload:
        return JSONResponse({})
    challenge = payload["challenge"]
    if isinstance(challenge, float) and not math.isfinite(challenge):
        challenge = None
    return JSONResponse({"challenge": challenge})


def _acknowledge() -> JSONResponse:
    return JSONResponse({"success": True})


def _reject_constant(name: str) -> None:
    raise ValueError(f"Unsupported JSON constant: {name}")
