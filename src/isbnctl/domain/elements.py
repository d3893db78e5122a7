"""Decomposed ISBN elements.

INVARIANT: concatenating all fields without separators reproduces the
13-digit sequence exactly.
"""

from __future__ import annotations

from dataclasses import dataclass

HYPHEN = "-"


@dataclass(frozen=True)
class Elements:
    """The five elements of an ISBN-13.

    ``registrant`` and ``publication`` are strings because they may carry
    leading zeros.
    """

    prefix: int  # 978 or 979
    group: int
    registrant: str
    publication: str
    check_digit: int

    def parts(self) -> tuple[str, str, str, str, str]:
        return (
            str(self.prefix),
            str(self.group),
            self.registrant,
            self.publication,
            str(self.check_digit),
        )

    def joined(self, separator: str = HYPHEN) -> str:
        """Render the elements joined by *separator* (hyphen by default)."""
        return separator.join(self.parts())

    def digits(self) -> str:
        return "".join(self.parts())

    def to_dict(self) -> dict[str, int | str]:
        return {
            "prefix": self.prefix,
            "group": self.group,
            "registrant": self.registrant,
            "publication": self.publication,
            "check_digit": self.check_digit,
        }
