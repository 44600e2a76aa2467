"""Field extraction from free-text H2H transfer messages.

Public API:
    extract_fields(text) -> TransactionFields
        Runs all five extractors; each missing field is "N/A".
"""

from h2h_logger.extraction.fields import (
    extract_beneficiary_bank,
    extract_ffb_quantity,
    extract_fields,
    extract_notes,
    extract_source_bank,
    extract_total,
)

__all__ = [
    "extract_fields",
    "extract_source_bank",
    "extract_beneficiary_bank",
    "extract_total",
    "extract_ffb_quantity",
    "extract_notes",
]
