"""Slack message timestamp conversion.

A Slack ``ts`` is a decimal string of epoch seconds ("1700000000.123456").
It is truncated to millisecond precision and rendered three ways for the
sheet: an ISO-8601 UTC instant plus a local date and a local 12-hour time.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from zoneinfo import ZoneInfo

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_slack_ts(ts: str) -> datetime:
    """Convert a Slack ``ts`` string to an aware UTC datetime (millisecond precision).

    Raises ValueError if ``ts`` is not a finite decimal number.
    """
    try:
        seconds = Decimal(ts)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"Invalid Slack timestamp: {ts!r}") from exc
    if not seconds.is_finite():
        raise ValueError(f"Invalid Slack timestamp: {ts!r}")

    millis = int(seconds * 1000)
    return _EPOCH + timedelta(milliseconds=millis)


def to_iso_utc(instant: datetime) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc = instant.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_local_date_time(instant: datetime, tz_name: str) -> tuple[str, str]:
    """Render an instant in ``tz_name`` as US-style date and time strings.

    Returns e.g. ("1/5/2024", "3:04:05 PM"): month, day and hour are not
    zero-padded, minutes and seconds are.
    """
    local = instant.astimezone(ZoneInfo(tz_name))
    date = f"{local.month}/{local.day}/{local.year}"
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    time = f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    return date, time
