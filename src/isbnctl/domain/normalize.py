"""Input normalization: lexical cleaning and ISBN-10/13 conversion.

``clean`` only filters characters; it never checks length or checksum.
Conversion always recomputes check digits rather than trusting the input.
"""

from __future__ import annotations

from isbnctl.domain.checksum import CHECK_CHARACTER, checksum13

ISBN_SAFE_CHARACTERS = frozenset("0123456789" + CHECK_CHARACTER)

ISBN10_LENGTH = 10
ISBN13_LENGTH = 13

BOOKLAND_PREFIX = "978"


def clean(raw: str) -> str:
    """Strip every character that is not a digit or ``X``."""
    return "".join(c for c in raw if c in ISBN_SAFE_CHARACTERS)


def check_digit13(seq12: str) -> int:
    """Compute the ISBN-13 check digit for the first 12 characters."""
    return (10 - checksum13(seq12) % 10) % 10


def check_digit10(seq9: str) -> str:
    """Compute the ISBN-10 check character (``0-9`` or ``X``) for 9 digits.

    Weights run 1..9 over the body; with weight 10 on the check digit the
    total is divisible by 11 exactly when the check equals the body sum mod 11.
    """
    value = sum(int(c) * (i + 1) for i, c in enumerate(seq9)) % 11
    return CHECK_CHARACTER if value == 10 else str(value)


def to13(seq10: str) -> str:
    """Convert a 10-character sequence to its ISBN-13 equivalent.

    The original check character is dropped and the ISBN-13 check digit
    recomputed over ``978`` plus the first nine digits.
    """
    if len(seq10) != ISBN10_LENGTH:
        msg = f"Expected {ISBN10_LENGTH} characters, got {len(seq10)}"
        raise ValueError(msg)
    body = BOOKLAND_PREFIX + seq10[:9]
    return f"{body}{check_digit13(body)}"


def to10(seq13: str) -> str | None:
    """Convert a ``978``-prefixed 13-digit sequence to ISBN-10.

    Returns None for ``979`` identifiers, which have no ISBN-10 form.
    """
    if len(seq13) != ISBN13_LENGTH:
        msg = f"Expected {ISBN13_LENGTH} characters, got {len(seq13)}"
        raise ValueError(msg)
    if not seq13.startswith(BOOKLAND_PREFIX):
        return None
    body = seq13[3:12]
    return f"{body}{check_digit10(body)}"


def cleaned_isbn(raw: str) -> str:
    """Clean *raw* and lift a 10-character result to 13 digits."""
    seq = clean(raw)
    if len(seq) == ISBN10_LENGTH:
        seq = to13(seq)
    return seq
