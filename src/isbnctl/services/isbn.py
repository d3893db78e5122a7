"""IsbnService: validate, hyphenate, inspect, and list registration groups.

Wraps the domain pipeline in the ServiceResult contract. Batch operations
report every input in ``data["items"]`` and fail as a whole when any
input fails, so callers can still show which values were rejected.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import BaseModel

from isbnctl.domain.isbn import ISBN, form_of, resolve
from isbnctl.domain.types import FailureReason
from isbnctl.services.base import BaseService
from isbnctl.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)

CODE_INVALID = "INVALID_ISBN"
CODE_UNRECOGNIZED = "UNRECOGNIZED_ISBN"
CODE_NO_INPUT = "NO_INPUT"

_REASON_MESSAGES: dict[FailureReason, str] = {
    FailureReason.UNSUPPORTED_TYPE: "expected a string or an integer",
    FailureReason.MALFORMED_LENGTH: "expected 10 or 13 digits",
    FailureReason.CHECKSUM: "check digit does not match",
    FailureReason.UNKNOWN_GROUP: "no registration group for this prefix",
    FailureReason.UNKNOWN_REGISTRANT: "registrant range is not assigned",
}

# Reasons that mean the input is not an ISBN at all, as opposed to an
# ISBN the registration table does not know.
_INVALID_REASONS = frozenset(
    {FailureReason.UNSUPPORTED_TYPE, FailureReason.MALFORMED_LENGTH, FailureReason.CHECKSUM}
)


def _code_for(reason: FailureReason) -> str:
    return CODE_INVALID if reason in _INVALID_REASONS else CODE_UNRECOGNIZED


class IsbnRecord(BaseModel):
    """Serializable breakdown of a parsed ISBN."""

    model_config = {"frozen": True}

    isbn: ISBN
    gtin: int
    group: str
    group_name: str
    elements: dict[str, int | str]
    isbn10: str | None = None

    @classmethod
    def from_isbn(cls, isbn: ISBN) -> IsbnRecord:
        return cls(
            isbn=isbn,
            gtin=isbn.gtin,
            group=isbn.registration_group,
            group_name=isbn.group_name,
            elements=isbn.elements.to_dict(),
            isbn10=isbn.isbn10,
        )


class IsbnService(BaseService):
    """ISBN operations over a shared registration table."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, values: list[str]) -> ServiceResult:
        """Checksum-validate each value without decomposing it."""
        if not values:
            return self._no_input("validate")

        items: list[dict[str, Any]] = []
        for value in values:
            form = form_of(value)
            items.append(
                {"input": value, "valid": form is not None, "form": form.value if form else None}
            )
        invalid = [item["input"] for item in items if not item["valid"]]
        log.debug("isbn.validate", count=len(items), invalid=len(invalid))

        error = None
        if invalid:
            error = ServiceError(
                code=CODE_INVALID,
                message=self._batch_message(invalid, len(items), "not valid ISBNs"),
                detail={"invalid": invalid},
            )
        return ServiceResult.batch(
            "validate", items, error=error, valid_count=len(items) - len(invalid)
        )

    def hyphenate(self, values: list[str]) -> ServiceResult:
        """Render each value in canonical hyphenated ISBN-13 form."""
        if not values:
            return self._no_input("hyphenate")

        items: list[dict[str, Any]] = []
        for value in values:
            outcome = resolve(value, self._table)
            if isinstance(outcome, FailureReason):
                items.append({"input": value, "isbn": None, "reason": outcome.value})
            else:
                items.append({"input": value, "isbn": outcome.isbn_string, "reason": None})
        rejected = [item["input"] for item in items if item["isbn"] is None]
        log.debug("isbn.hyphenate", count=len(items), rejected=len(rejected))

        error = None
        if rejected:
            error = ServiceError(
                code=CODE_UNRECOGNIZED,
                message=self._batch_message(rejected, len(items), "not recognized ISBNs"),
                detail={"rejected": rejected},
            )
        return ServiceResult.batch("hyphenate", items, error=error)

    def inspect(self, value: str) -> ServiceResult:
        """Decompose a single value into its registration group and elements."""
        outcome = resolve(value, self._table)
        if isinstance(outcome, FailureReason):
            log.debug("isbn.inspect.rejected", value=value, reason=outcome.value)
            return ServiceResult.failure(
                "inspect",
                ServiceError(
                    code=_code_for(outcome),
                    message=f"Invalid ISBN '{value}': {_REASON_MESSAGES[outcome]}",
                    detail={"input": value, "reason": outcome.value},
                ),
            )

        data = IsbnRecord.from_isbn(outcome).model_dump(mode="json")
        form = form_of(value)
        data["input_form"] = form.value if form else None
        return ServiceResult.success("inspect", data)

    def groups(self, *, prefix: int | None = None, search: str | None = None) -> ServiceResult:
        """List registration groups, optionally filtered by prefix or name."""
        needle = search.casefold() if search else None
        items: list[dict[str, Any]] = []
        for group in self._table.values():
            if prefix is not None and group.prefix != prefix:
                continue
            if needle and needle not in group.name.casefold():
                continue
            items.append(
                {
                    "id": f"{group.prefix}-{group.group}",
                    "prefix": group.prefix,
                    "group": group.group,
                    "name": group.name,
                    "rules": len(group.rules),
                }
            )
        return ServiceResult.success(
            "groups",
            {"items": items, "count": len(items)},
            meta={"table_size": len(self._table)},
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _batch_message(failed: list[str], total: int, what: str) -> str:
        if total == 1:
            return f"Invalid ISBN '{failed[0]}'"
        return f"{len(failed)} of {total} values are {what}"

    @staticmethod
    def _no_input(op: str) -> ServiceResult:
        return ServiceResult.failure(
            op, ServiceError(code=CODE_NO_INPUT, message="No ISBN values given")
        )
