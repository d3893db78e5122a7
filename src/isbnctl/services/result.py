"""ServiceResult and ServiceError: what every IsbnService operation returns.

Batch operations (``validate``, ``hyphenate``) keep one entry per input
under ``data["items"]`` whether or not the batch as a whole succeeded, so
a failed result still says which inputs were rejected and why.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable code, a message, and structured detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    INVARIANT: ``error`` is set exactly when ``ok`` is False. Build results
    with :meth:`success`, :meth:`failure` or :meth:`batch`.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"validate"``, ``"inspect"``, ...).
        data: Operation payload. Batch items survive failure.
        error: Structured error when ``ok`` is False.
        meta: Facts about the run rather than the inputs (table size).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def items(self) -> list[dict[str, Any]]:
        """Per-input entries of a batch result (empty for single-value ops)."""
        return self.data.get("items", [])

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any] | None = None, *, meta: dict[str, Any] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data or {}, meta=meta)

    @classmethod
    def failure(
        cls, op: str, error: ServiceError, *, data: dict[str, Any] | None = None
    ) -> ServiceResult:
        return cls(ok=False, op=op, data=data or {}, error=error)

    @classmethod
    def batch(
        cls,
        op: str,
        items: list[dict[str, Any]],
        *,
        error: ServiceError | None = None,
        **counts: int,
    ) -> ServiceResult:
        """Wrap per-input *items*; the batch fails as a whole when *error* is given."""
        data: dict[str, Any] = {"items": items, "count": len(items), **counts}
        if error is None:
            return cls.success(op, data)
        return cls.failure(op, error, data=data)
