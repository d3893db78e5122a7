"""BaseService: shared foundation for isbnctl services.

Every service receives the registration table at construction time.
The table is immutable, so one instance can back any number of services.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from isbnctl.domain.registry import RegistrationTable


class BaseService:
    """Base for service-layer classes.

    Usage::

        class IsbnService(BaseService):
            def inspect(self, value: str) -> ServiceResult:
                isbn = ISBN.parse(value, self._table)
                ...
    """

    def __init__(self, table: RegistrationTable | None = None) -> None:
        if table is None:
            from isbnctl.domain.registry import default_table

            table = default_table()
        self._table = table

    @property
    def table(self) -> RegistrationTable:
        return self._table
