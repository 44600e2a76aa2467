"""Per-stage outcomes for webhook processing.

Each stage of the handler (parse, build record, append) returns one of these
instead of raising, so the handler can always acknowledge Slack with a 200
while every failure path stays observable in tests.
"""

from typing import Any

from pydantic import BaseModel

from h2h_logger.models.transaction import TransactionRecord


class ParseResult(BaseModel):
    """Outcome of decoding the request body."""

    payload: dict[str, Any] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.payload is not None


class RecordResult(BaseModel):
    """Outcome of turning an app_mention event into a sheet record."""

    record: TransactionRecord | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None


class AppendResult(BaseModel):
    """Outcome of appending a record to the worksheet."""

    appended: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.appended
