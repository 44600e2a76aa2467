"""Slack message permalink construction."""


def build_permalink(channel_id: str, timestamp: str, workspace_url: str) -> str:
    """Build a direct link to a Slack message.

    The message ts "1234567890.123456" becomes "p1234567890123456" in the
    path. Only the decimal point is removed; nothing is validated.
    """
    base = workspace_url.rstrip("/")
    return f"{base}/archives/{channel_id}/p{timestamp.replace('.', '', 1)}"
