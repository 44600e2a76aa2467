"""Regex extraction of H2H transfer fields from Slack message text.

Example message:

    H2H BRI to BCA Total 9000 (5 ffb) notes Insufficient balance

Each extractor is anchored on its own literal and runs independently, so a
missing field never affects the others. Matching is case-insensitive; word
and digit classes are ASCII-only while whitespace includes Unicode spaces
such as the NBSP some Slack clients insert.
"""

import re

from h2h_logger.models.transaction import NOT_FOUND, TransactionFields

_FLAGS = re.IGNORECASE

SOURCE_BANK_PATTERN = re.compile(r"H2H\s+([A-Za-z0-9_]+)", _FLAGS)
BENEFICIARY_BANK_PATTERN = re.compile(r"to\s+(.*?)\s+Total", _FLAGS | re.DOTALL)
TOTAL_PATTERN = re.compile(r"Total\s+([0-9]+)", _FLAGS)
FFB_PATTERN = re.compile(r"([0-9]+)\s+ffb", _FLAGS)
# Notes run to the first line break after the anchor (or end of input)
NOTES_PATTERN = re.compile(r"notes\s+(.*?)(?:\n|\Z)", _FLAGS | re.DOTALL)


def _first_group(pattern: re.Pattern[str], text: str, *, strip: bool = False) -> str:
    match = pattern.search(text)
    if not match:
        return NOT_FOUND
    value = match.group(1)
    if strip:
        value = value.strip()
    return value or NOT_FOUND


def extract_source_bank(text: str) -> str:
    """Return the word following "H2H", or "N/A"."""
    return _first_group(SOURCE_BANK_PATTERN, text)


def extract_beneficiary_bank(text: str) -> str:
    """Return the text between "to" and "Total" (may span lines), or "N/A"."""
    return _first_group(BENEFICIARY_BANK_PATTERN, text, strip=True)


def extract_total(text: str) -> str:
    """Return the digits following "Total", or "N/A"."""
    return _first_group(TOTAL_PATTERN, text)


def extract_ffb_quantity(text: str) -> str:
    """Return the digits preceding "ffb", or "N/A"."""
    return _first_group(FFB_PATTERN, text)


def extract_notes(text: str) -> str:
    """Return the rest of the line after "notes", or "N/A"."""
    return _first_group(NOTES_PATTERN, text, strip=True)


def extract_fields(text: str) -> TransactionFields:
    """Run every field extractor against the same message text."""
    return TransactionFields(
        source_bank=extract_source_bank(text),
        beneficiary_bank=extract_beneficiary_bank(text),
        total=extract_total(text),
        ffb_quantity=extract_ffb_quantity(text),
        notes=extract_notes(text),
    )
