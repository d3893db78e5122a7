"""Tests for IsbnService operations."""

from __future__ import annotations

import json

import pytest

from isbnctl.domain.registry import RegistrationTable, default_table
from isbnctl.services.isbn import IsbnRecord, IsbnService


@pytest.fixture
def service() -> IsbnService:
    return IsbnService()


class TestConstruction:
    def test_defaults_to_shared_table(self, service: IsbnService) -> None:
        assert service.table is default_table()

    def test_custom_table(self, small_table: RegistrationTable) -> None:
        assert IsbnService(small_table).table is small_table


class TestValidate:
    def test_all_valid(self, service: IsbnService) -> None:
        result = service.validate(["0-306-40615-2", "9781408855898"])
        assert result.ok
        assert result.op == "validate"
        assert result.data["count"] == 2
        assert result.data["valid_count"] == 2
        assert [item["form"] for item in result.data["items"]] == ["isbn10", "isbn13"]

    def test_checksum_only(self, service: IsbnService) -> None:
        """Unassigned groups still pass validation."""
        assert service.validate(["9786700000007"]).ok

    def test_single_invalid(self, service: IsbnService) -> None:
        result = service.validate(["978-1-4088-5589-9"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ISBN"
        assert result.error.message == "Invalid ISBN '978-1-4088-5589-9'"

    def test_mixed_batch_keeps_items(self, service: IsbnService) -> None:
        result = service.validate(["0306406152", "123", "9781408855898"])
        assert not result.ok
        assert result.data["valid_count"] == 2
        assert result.error is not None
        assert result.error.detail == {"invalid": ["123"]}
        assert result.error.message == "1 of 3 values are not valid ISBNs"

    def test_no_input(self, service: IsbnService) -> None:
        result = service.validate([])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_INPUT"


class TestHyphenate:
    def test_hyphenates(self, service: IsbnService) -> None:
        result = service.hyphenate(["1408855895", "9780439554930"])
        assert result.ok
        assert [item["isbn"] for item in result.data["items"]] == [
            "978-1-4088-5589-8",
            "978-0-439-55493-0",
        ]

    def test_rejected_with_reason(self, service: IsbnService) -> None:
        result = service.hyphenate(["9781408855898", "9786700000007"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNRECOGNIZED_ISBN"
        rejected = result.data["items"][1]
        assert rejected == {"input": "9786700000007", "isbn": None, "reason": "unknown_group"}

    def test_groups_across_regions(self, service: IsbnService) -> None:
        result = service.hyphenate(
            ["85-359-0277-5", "5-02-013850-9", "9789953401232", "9789993701231", "9791360012345"]
        )
        assert result.ok
        assert [item["isbn"] for item in result.items] == [
            "978-85-359-0277-8",
            "978-5-02-013850-6",
            "978-9953-401-23-2",
            "978-99937-0-123-1",
            "979-13-600-1234-5",
        ]

    def test_no_input(self, service: IsbnService) -> None:
        assert not service.hyphenate([]).ok


class TestInspect:
    def test_breakdown(self, service: IsbnService) -> None:
        result = service.inspect("1-4088-5589-5")
        assert result.ok
        data = result.data
        assert data["isbn"] == "978-1-4088-5589-8"
        assert data["gtin"] == 9781408855898
        assert data["group"] == "978-1"
        assert data["group_name"] == "English language"
        assert data["isbn10"] == "1-4088-5589-5"
        assert data["input_form"] == "isbn10"
        assert data["elements"] == {
            "prefix": 978,
            "group": 1,
            "registrant": "4088",
            "publication": "5589",
            "check_digit": 8,
        }

    def test_json_serializable(self, service: IsbnService) -> None:
        parsed = json.loads(service.inspect("9798627974040").model_dump_json())
        assert parsed["data"]["isbn"] == "979-8-6279-7404-0"
        assert parsed["data"]["isbn10"] is None

    @pytest.mark.parametrize(
        "raw,code,reason",
        [
            ("123", "INVALID_ISBN", "malformed_length"),
            ("978-1-4088-5589-9", "INVALID_ISBN", "checksum"),
            ("9786700000007", "UNRECOGNIZED_ISBN", "unknown_group"),
            ("9798230000006", "UNRECOGNIZED_ISBN", "unknown_registrant"),
        ],
    )
    def test_failures(self, service: IsbnService, raw: str, code: str, reason: str) -> None:
        result = service.inspect(raw)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == code
        assert result.error.detail == {"input": raw, "reason": reason}
        assert result.error.message.startswith(f"Invalid ISBN '{raw}'")


class TestGroups:
    def test_lists_all(self, service: IsbnService) -> None:
        result = service.groups()
        assert result.ok
        assert result.data["count"] == len(default_table())
        assert result.meta == {"table_size": len(default_table())}

    def test_prefix_filter(self, service: IsbnService) -> None:
        result = service.groups(prefix=979)
        assert result.data["items"]
        assert all(item["prefix"] == 979 for item in result.data["items"])

    def test_search_is_case_insensitive(self, service: IsbnService) -> None:
        result = service.groups(search="ENGLISH")
        assert [item["id"] for item in result.data["items"]] == ["978-0", "978-1"]

    def test_no_match(self, service: IsbnService) -> None:
        result = service.groups(search="atlantis")
        assert result.ok
        assert result.data["count"] == 0


class TestIsbnRecord:
    def test_serializes_isbn_as_string(self) -> None:
        from isbnctl.domain.isbn import ISBN

        isbn = ISBN.parse(9780306406157)
        assert isbn is not None
        dumped = IsbnRecord.from_isbn(isbn).model_dump()
        assert dumped["isbn"] == "978-0-306-40615-7"
        assert dumped["isbn10"] == "0-306-40615-2"


class TestUnsupportedInput:
    def test_inspect_non_text(self, service: IsbnService) -> None:
        result = service.inspect(1.5)  # type: ignore[arg-type]
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ISBN"
        assert result.error.detail == {"input": 1.5, "reason": "unsupported_type"}
        assert result.error.message == "Invalid ISBN '1.5': expected a string or an integer"

    def test_hyphenate_non_text(self, service: IsbnService) -> None:
        result = service.hyphenate([None])  # type: ignore[list-item]
        assert not result.ok
        assert result.items == [{"input": None, "isbn": None, "reason": "unsupported_type"}]
