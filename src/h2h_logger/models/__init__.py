"""Data models for the H2H logger pipeline."""

from h2h_logger.models.results import AppendResult, ParseResult, RecordResult
from h2h_logger.models.slack import MentionEvent
from h2h_logger.models.transaction import NOT_FOUND, TransactionFields, TransactionRecord

__all__ = [
    "MentionEvent",
    "NOT_FOUND",
    "TransactionFields",
    "TransactionRecord",
    "ParseResult",
    "RecordResult",
    "AppendResult",
]
