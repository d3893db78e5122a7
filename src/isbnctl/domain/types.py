"""Classification enums for ISBN forms and parse failures."""

from __future__ import annotations

from enum import StrEnum


class IsbnForm(StrEnum):
    """Length-based form of a cleaned identifier."""

    ISBN10 = "isbn10"
    ISBN13 = "isbn13"


class FailureReason(StrEnum):
    """Why an input did not produce an ISBN value."""

    UNSUPPORTED_TYPE = "unsupported_type"
    MALFORMED_LENGTH = "malformed_length"
    CHECKSUM = "checksum"
    UNKNOWN_GROUP = "unknown_group"
    UNKNOWN_REGISTRANT = "unknown_registrant"
