"""Tests for registration rules, groups, and table lookup."""

from __future__ import annotations

import pytest

from isbnctl.domain.elements import Elements
from isbnctl.domain.ranges import REGISTRATION_GROUPS
from isbnctl.domain.registry import (
    RegistrationGroup,
    RegistrationTable,
    Rule,
    decompose,
    default_table,
)


class TestRule:
    def test_from_range_truncates_bounds(self) -> None:
        rule = Rule.from_range("5500000-7319999", 5)
        assert rule == Rule(low=55000, high=73199, length=5)

    def test_matches_inclusive_bounds(self) -> None:
        rule = Rule(100, 399, 3)
        assert rule.matches("100000")
        assert rule.matches("399999")
        assert not rule.matches("400000")
        assert not rule.matches("099999")

    def test_longer_than_digits_never_matches(self) -> None:
        assert not Rule(0, 9999999, 7).matches("1234")

    def test_zero_length_never_matches(self) -> None:
        assert not Rule(0, 0, 0).matches("1234")

    def test_preserves_leading_zero_semantics(self) -> None:
        assert Rule(0, 19, 2).matches("0712345")


class TestRegistrationGroup:
    def test_key_concatenates_prefix_and_group(self) -> None:
        group = RegistrationGroup(prefix=978, group=626, name="Taiwan", rules=())
        assert group.key == "978626"

    def test_first_matching_rule_wins(self) -> None:
        group = RegistrationGroup(
            prefix=978,
            group=1,
            name="Overlap",
            rules=(Rule(40, 40, 2), Rule(4000, 5499, 4)),
        )
        elements = group.elements_for("9781408855898")
        assert elements is not None
        assert elements.registrant == "40"

    def test_elements_split(self) -> None:
        group = default_table()["9781"]
        elements = group.elements_for("9781408855898")
        assert elements == Elements(
            prefix=978, group=1, registrant="4088", publication="5589", check_digit=8
        )

    def test_no_rule_returns_none(self) -> None:
        group = RegistrationGroup(prefix=979, group=8, name="x", rules=(Rule(4000, 8499, 4),))
        assert group.elements_for("9798230000006") is None


class TestRegistrationTable:
    def test_longest_prefix_wins(self, small_table: RegistrationTable) -> None:
        group = small_table.group_for("9781200000000")
        assert group is not None
        assert group.name == "Long group"

    def test_shorter_prefix_when_longer_absent(self, small_table: RegistrationTable) -> None:
        group = small_table.group_for("9781300000000")
        assert group is not None
        assert group.name == "Short group"

    def test_no_group(self, small_table: RegistrationTable) -> None:
        assert small_table.group_for("9785000000000") is None

    def test_decompose_uses_longest_group(self, small_table: RegistrationTable) -> None:
        elements = decompose("9781245123451", small_table)
        assert elements is not None
        assert (elements.group, elements.registrant, elements.publication) == (12, "45", "12345")

    def test_decompose_no_rule(self, small_table: RegistrationTable) -> None:
        assert small_table.decompose("9798230000006") is None

    def test_is_read_only_mapping(self, small_table: RegistrationTable) -> None:
        assert len(small_table) == 3
        assert set(small_table) == {"9781", "97812", "9798"}
        with pytest.raises(TypeError):
            small_table["9780"] = small_table["9781"]  # type: ignore[index]

    def test_from_ranges_drops_unassigned(self) -> None:
        table = RegistrationTable.from_ranges(
            [("979-8", "United States", [("0000000-1999999", 0), ("2000000-2299999", 3)])]
        )
        assert table["9798"].rules == (Rule(200, 229, 3),)

    def test_repr(self, small_table: RegistrationTable) -> None:
        assert repr(small_table) == "RegistrationTable(3 groups)"


class TestDefaultTable:
    def test_cached(self) -> None:
        assert default_table() is default_table()

    def test_covers_dataset(self) -> None:
        assert len(default_table()) == len(REGISTRATION_GROUPS)

    def test_keys_are_prefix_free(self) -> None:
        keys = list(default_table())
        for key in keys:
            assert not any(other != key and other.startswith(key) for other in keys)

    def test_every_group_has_rules(self) -> None:
        for group in default_table().values():
            assert group.prefix in (978, 979)
            assert group.rules

    @pytest.mark.parametrize(
        "isbn,expected",
        [
            ("9780439554930", "978-0-439-55493-0"),
            ("9782070100927", "978-2-07-010092-7"),
            ("9783518188125", "978-3-518-18812-5"),
            ("9784101050454", "978-4-10-105045-4"),
            ("9786269533251", "978-626-95332-5-1"),
            ("9798627974040", "979-8-6279-7404-0"),
            ("9785020138506", "978-5-02-013850-6"),
            ("9788535902778", "978-85-359-0277-8"),
            ("9789350251232", "978-93-5025-123-2"),
            ("9789027439178", "978-90-274-3917-8"),
            ("9788301145606", "978-83-01-14560-6"),
            ("9788936400217", "978-89-364-0021-7"),
            ("9786001234569", "978-600-123-456-9"),
            ("9786041234567", "978-604-1-23456-7"),
            ("9786500123456", "978-65-00-12345-6"),
            ("9789571332451", "978-957-13-3245-1"),
            ("9789871234561", "978-987-1234-56-1"),
            ("9789953401232", "978-9953-401-23-2"),
            ("9789993701231", "978-99937-0-123-1"),
            ("9791360012345", "979-13-600-1234-5"),
        ],
    )
    def test_known_hyphenations(self, isbn: str, expected: str) -> None:
        elements = default_table().decompose(isbn)
        assert elements is not None
        assert elements.joined() == expected
        assert elements.digits() == isbn

    def test_unassigned_range(self) -> None:
        # 978-626 8000000-9499999 is not assigned.
        assert default_table().decompose("9786268533251") is None

    def test_unassigned_leading_range(self) -> None:
        # 978-9922 0000000-1999999 is not assigned.
        assert default_table().decompose("9789922123455") is None


FULLY_ALLOCATED_GROUPS = [
    *(f"978-{n}" for n in (0, 1, 2, 3, 4, 5, 7, 65)),
    *(f"978-{n}" for n in range(80, 95)),
    *(f"978-{n}" for n in range(600, 635) if n not in (610, 611)),
    *(f"978-{n}" for n in range(950, 990)),
    "979-8",
    "979-10",
    "979-11",
    "979-12",
    "979-13",
]


class TestDataset:
    def test_size(self) -> None:
        assert len(REGISTRATION_GROUPS) > 250

    @pytest.mark.parametrize("group_id", FULLY_ALLOCATED_GROUPS)
    def test_group_present(self, group_id: str) -> None:
        assert group_id.replace("-", "") in default_table()

    @pytest.mark.parametrize("row", REGISTRATION_GROUPS, ids=lambda row: row[0])
    def test_spans_cover_full_range(self, row: tuple) -> None:
        _, _, spans = row
        expected_start = 0
        for span, _length in spans:
            start, end = (int(bound) for bound in span.split("-"))
            assert start == expected_start
            assert end >= start
            expected_start = end + 1
        assert expected_start == 10_000_000

    def test_rows_are_unique(self) -> None:
        ids = [row[0] for row in REGISTRATION_GROUPS]
        assert len(ids) == len(set(ids))
