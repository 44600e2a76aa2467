"""Slack app_mention event model."""

from pydantic import BaseModel


class MentionEvent(BaseModel):
    """The ``event`` object of an app_mention callback (fields the logger reads)."""

    type: str
    channel: str
    ts: str  # Slack message ts, e.g., "1234567890.123456"
    text: str
    user: str | None = None
