"""Checksum engine for ISBN-13 (mod 10) and ISBN-10 (mod 11).

Both functions are pure and total over correctly sized sequences.
Length checks belong to the caller.
"""

from __future__ import annotations

CHECK_CHARACTER = "X"


def digit_value(char: str) -> int:
    """Return the numeric value of an identifier character (``X`` is 10)."""
    if char == CHECK_CHARACTER:
        return 10
    return int(char)


def checksum13(seq: str) -> int:
    """Weighted sum with weights alternating 1 and 3 from the left.

    A 13-character sequence is valid iff the result is divisible by 10.
    """
    return sum(digit_value(c) * (3 if i & 1 else 1) for i, c in enumerate(seq))


def checksum10(seq: str) -> int:
    """Weighted sum with weight ``index + 1`` for each position.

    A 10-character sequence is valid iff the result is divisible by 11.
    """
    return sum(digit_value(c) * (i + 1) for i, c in enumerate(seq))
