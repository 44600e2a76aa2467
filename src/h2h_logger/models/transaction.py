"""Extracted transaction fields and the sheet row built from them."""

from pydantic import BaseModel

# Placeholder written to the sheet when a field's anchor is not in the message
NOT_FOUND = "N/A"


class TransactionFields(BaseModel):
    """The five free-text fields parsed from one H2H message."""

    source_bank: str = NOT_FOUND
    beneficiary_bank: str = NOT_FOUND
    total: str = NOT_FOUND  # Digits as text, never converted to a number
    ffb_quantity: str = NOT_FOUND
    notes: str = NOT_FOUND


class TransactionRecord(BaseModel):
    """One sheet row: timestamps, extracted fields, and the message permalink."""

    timestamp_utc: str
    date_local: str
    time_local: str
    fields: TransactionFields
    permalink: str

    def to_row(self) -> list[str]:
        """Return the nine sheet columns in their fixed order."""
        return [
            self.timestamp_utc,
            self.date_local,
            self.time_local,
            self.fields.source_bank,
            self.fields.beneficiary_bank,
            self.fields.total,
            self.fields.ffb_quantity,
            self.fields.notes,
            self.permalink,
        ]
