"""Slack request signature verification as a FastAPI dependency."""

import logging

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from h2h_logger.config import get_settings

logger = logging.getLogger(__name__)


async def verify_slack_request(request: Request) -> bytes:
    """Return the raw request body, verifying its Slack signature when configured.

    Verification runs only if ``slack_signing_secret`` is set. The body is
    returned unparsed: JSON decoding belongs to the handler, which must
    acknowledge even malformed payloads.

    Raises HTTPException(403) if verification is enabled and the signature is invalid.
    """
    settings = get_settings()
    body = await request.body()

    if not settings.slack_signing_secret:
        return body

    timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
    signature = request.headers.get("X-Slack-Signature", "")

    verifier = SignatureVerifier(signing_secret=settings.slack_signing_secret)

    if not verifier.is_valid(
        body=body.decode("utf-8", errors="replace"), timestamp=timestamp, signature=signature
    ):
        logger.warning("Rejected Slack request with invalid signature")
        raise HTTPException(status_code=403, detail="Invalid Slack signature")

    return body
