"""Registration table: groups, registrant rules, and element decomposition.

The table maps prefix keys (``"978" + group``) to registration groups.
Lookup is a greedy longest-prefix match over keys sorted once by
descending length; each group then applies its ordered numeric-range
rules to fix the registrant width.

The default table is built once from :mod:`isbnctl.domain.ranges` and
shared read-only. Nothing here mutates it after construction.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from isbnctl.domain.elements import Elements

logger = logging.getLogger(__name__)

# Digits between the 3-digit prefix and the check digit.
_BODY_LENGTH = 9


@dataclass(frozen=True)
class Rule:
    """A closed integer interval and the registrant width it selects."""

    low: int
    high: int
    length: int

    def matches(self, digits: str) -> bool:
        """Whether the first ``length`` digits of *digits* fall in the interval."""
        if self.length <= 0 or len(digits) < self.length:
            return False
        head = digits[: self.length]
        if not head.isdigit():
            return False
        return self.low <= int(head) <= self.high

    @classmethod
    def from_range(cls, span: str, length: int) -> Rule:
        """Build a rule from a 7-digit ``"start-end"`` span.

        Bounds are truncated to *length* digits, matching the published
        range-message layout where padding past the registrant is zeros
        (start) or nines (end).
        """
        start, end = span.split("-")
        return cls(low=int(start[:length]), high=int(end[:length]), length=length)


@dataclass(frozen=True)
class RegistrationGroup:
    """A registration group: prefix, group number, agency name, and rules."""

    prefix: int
    group: int
    name: str
    rules: tuple[Rule, ...]

    @property
    def key(self) -> str:
        return f"{self.prefix}{self.group}"

    def elements_for(self, isbn: str) -> Elements | None:
        """Split a 13-digit sequence into elements using this group's rules.

        Returns None when no rule matches the registrant digits.
        """
        digits = isbn[len(self.key) : -1]
        rule = next((r for r in self.rules if r.matches(digits)), None)
        if rule is None:
            logger.debug("No registrant rule in group %s matches %s", self.key, isbn)
            return None
        return Elements(
            prefix=self.prefix,
            group=self.group,
            registrant=digits[: rule.length],
            publication=digits[rule.length :],
            check_digit=int(isbn[-1]),
        )


class RegistrationTable(Mapping[str, RegistrationGroup]):
    """Immutable mapping from prefix keys to registration groups."""

    def __init__(self, groups: Iterable[RegistrationGroup]) -> None:
        data: dict[str, RegistrationGroup] = {}
        for group in groups:
            data[group.key] = group
        self._groups = MappingProxyType(data)
        # Stable sort keeps insertion order among equal-length keys.
        self._keys_by_length = tuple(sorted(data, key=len, reverse=True))

    def __getitem__(self, key: str) -> RegistrationGroup:
        return self._groups[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} groups)"

    def group_for(self, isbn: str) -> RegistrationGroup | None:
        """Return the group whose key is the longest prefix of *isbn*."""
        for key in self._keys_by_length:
            if isbn.startswith(key):
                return self._groups[key]
        logger.debug("No registration group matches %s", isbn)
        return None

    def decompose(self, isbn: str) -> Elements | None:
        """Find the group for *isbn* and split it into elements."""
        group = self.group_for(isbn)
        if group is None:
            return None
        return group.elements_for(isbn)

    @classmethod
    def from_ranges(
        cls,
        ranges: Iterable[tuple[str, str, Iterable[tuple[str, int]]]],
    ) -> RegistrationTable:
        """Build a table from ``(prefix, agency, [(span, length), ...])`` rows.

        *prefix* is the hyphenated group prefix (``"978-1"``). Spans with
        length 0 mark unassigned ranges and produce no rule.
        """
        groups: list[RegistrationGroup] = []
        for prefix, agency, spans in ranges:
            ean, group = prefix.split("-")
            rules = tuple(Rule.from_range(span, length) for span, length in spans if length > 0)
            groups.append(
                RegistrationGroup(prefix=int(ean), group=int(group), name=agency, rules=rules)
            )
        return cls(groups)


def decompose(isbn: str, table: RegistrationTable) -> Elements | None:
    """Decompose a 13-digit sequence against *table*."""
    return table.decompose(isbn)


@functools.cache
def default_table() -> RegistrationTable:
    """The process-wide table built from the embedded range dataset."""
    from isbnctl.domain.ranges import REGISTRATION_GROUPS

    table = RegistrationTable.from_ranges(REGISTRATION_GROUPS)
    logger.debug("Loaded registration table with %d groups", len(table))
    return table
