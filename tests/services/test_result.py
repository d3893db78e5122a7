"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from isbnctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult.success("hyphenate", {"count": 1})
        assert result.ok is True
        assert result.op == "hyphenate"
        assert result.data == {"count": 1}
        assert result.error is None
        assert result.meta is None

    def test_failure_construction(self) -> None:
        error = ServiceError(code="INVALID_ISBN", message="Invalid ISBN '123'")
        result = ServiceResult.failure("inspect", error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_ISBN"
        assert result.data == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult.success("groups", {"count": 2}, meta={"table_size": 17})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 2
        assert parsed["meta"]["table_size"] == 17

    def test_frozen(self) -> None:
        result = ServiceResult.success("test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestBatch:
    def test_successful_batch(self) -> None:
        items = [{"input": "0306406152", "valid": True}]
        result = ServiceResult.batch("validate", items, valid_count=1)
        assert result.ok
        assert result.items == items
        assert result.data == {"items": items, "count": 1, "valid_count": 1}

    def test_failed_batch_keeps_items(self) -> None:
        items = [{"input": "123", "isbn": None, "reason": "malformed_length"}]
        error = ServiceError(code="UNRECOGNIZED_ISBN", message="Invalid ISBN '123'")
        result = ServiceResult.batch("hyphenate", items, error=error)
        assert not result.ok
        assert result.error == error
        assert result.items == items
        assert result.data["count"] == 1

    def test_single_value_result_has_no_items(self) -> None:
        assert ServiceResult.success("inspect", {"isbn": "978-0-306-40615-7"}).items == []


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="UNRECOGNIZED_ISBN",
            message="bad",
            detail={"input": "9786700000007", "reason": "unknown_group"},
        )
        assert error.detail["reason"] == "unknown_group"

    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="bad").detail == {}
