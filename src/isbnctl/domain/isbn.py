"""ISBN value, validation entry points, and the parse pipeline.

Pipeline: clean -> checksum -> lift ISBN-10 to 13 digits -> longest-prefix
group lookup -> registrant rule -> elements -> canonical hyphenated string.

INVARIANT: An ``ISBN`` exists only for inputs that pass every stage.
All failures collapse to ``None``/``False`` here. The serialization hooks
are the only place a descriptive error is raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError, core_schema

from isbnctl.domain.checksum import CHECK_CHARACTER, checksum10, checksum13
from isbnctl.domain.elements import HYPHEN, Elements
from isbnctl.domain.normalize import (
    ISBN10_LENGTH,
    ISBN13_LENGTH,
    clean,
    cleaned_isbn,
    to10,
)
from isbnctl.domain.registry import RegistrationGroup, RegistrationTable, default_table
from isbnctl.domain.types import FailureReason, IsbnForm

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

logger = logging.getLogger(__name__)


class InvalidISBNError(ValueError):
    """Raised at the serialization boundary when a raw value is not an ISBN."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid ISBN '{raw}'")


# ---------------------------------------------------------------------------
# Validation (checksum only, no decomposition)
# ---------------------------------------------------------------------------


def _as_text(value: str | int) -> str | None:
    """Render an accepted input as text; ``bool`` and other types are rejected."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    return None


def form_of(value: str | int) -> IsbnForm | None:
    """Return the checksum-valid form of *value*, or None if it is invalid."""
    text = _as_text(value)
    if text is None:
        return None
    seq = clean(text)
    if len(seq) == ISBN13_LENGTH:
        if CHECK_CHARACTER in seq:
            return None
        return IsbnForm.ISBN13 if checksum13(seq) % 10 == 0 else None
    if len(seq) == ISBN10_LENGTH:
        # X is only legal as the final check character.
        if CHECK_CHARACTER in seq[:-1]:
            return None
        return IsbnForm.ISBN10 if checksum10(seq) % 11 == 0 else None
    return None


def is_valid(value: str | int) -> bool:
    """Check length and checksum of an ISBN-10, ISBN-13, or integer GTIN."""
    return form_of(value) is not None


# ---------------------------------------------------------------------------
# Decomposition pipeline
# ---------------------------------------------------------------------------


def _resolve(
    value: str | int,
    table: RegistrationTable | None,
) -> tuple[str, RegistrationGroup, Elements] | FailureReason:
    """Run the full pipeline, returning the parts or the first failure."""
    text = _as_text(value)
    if text is None:
        return FailureReason.UNSUPPORTED_TYPE
    if len(clean(text)) not in (ISBN10_LENGTH, ISBN13_LENGTH):
        return FailureReason.MALFORMED_LENGTH
    if not is_valid(text):
        return FailureReason.CHECKSUM

    isbn = cleaned_isbn(text)
    registry = table if table is not None else default_table()
    group = registry.group_for(isbn)
    if group is None:
        return FailureReason.UNKNOWN_GROUP
    elements = group.elements_for(isbn)
    if elements is None:
        return FailureReason.UNKNOWN_REGISTRANT
    return isbn, group, elements


def explain(value: str | int, table: RegistrationTable | None = None) -> FailureReason | None:
    """Return why *value* does not parse, or None if it does."""
    resolved = _resolve(value, table)
    if isinstance(resolved, FailureReason):
        return resolved
    return None


def hyphenated(value: str | int, table: RegistrationTable | None = None) -> str | None:
    """Return the canonical hyphenated ISBN-13 for *value*, or None."""
    resolved = _resolve(value, table)
    if isinstance(resolved, FailureReason):
        logger.debug("Cannot hyphenate %r: %s", value, resolved)
        return None
    _, _, elements = resolved
    return elements.joined()


# ---------------------------------------------------------------------------
# ISBN value
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class ISBN:
    """A parsed and decomposed ISBN, always in 13-digit form.

    ISBN-10 inputs are converted on construction, so ``"1-4088-5589-5"``
    and ``"978-1-4088-5589-8"`` produce equal values. Build instances
    with :meth:`parse`; equality and hashing use the canonical string.

    Attributes:
        group_name: Agency name of the registration group.
        elements: The five decomposed elements.
        isbn_string: Canonical hyphenated form.
        gtin: The 13-digit Global Trade Item Number.
    """

    group_name: str
    elements: Elements
    isbn_string: str
    gtin: int

    @classmethod
    def parse(cls, value: str | int, table: RegistrationTable | None = None) -> ISBN | None:
        """Parse an ISBN-10/13 string or integer GTIN.

        Returns None for malformed, checksum-invalid, or unassigned input;
        use :func:`resolve` to learn which.
        """
        outcome = resolve(value, table)
        if isinstance(outcome, FailureReason):
            logger.debug("Rejected ISBN %r: %s", value, outcome)
            return None
        return outcome

    @property
    def registration_group(self) -> str:
        """The hyphenated group prefix, e.g. ``"978-1"``."""
        return f"{self.elements.prefix}{HYPHEN}{self.elements.group}"

    @property
    def isbn10(self) -> str | None:
        """Hyphenated ISBN-10 form, or None for ``979`` identifiers."""
        ten = to10(str(self.gtin))
        if ten is None:
            return None
        e = self.elements
        return HYPHEN.join((str(e.group), e.registrant, e.publication, ten[-1]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ISBN):
            return NotImplemented
        return self.isbn_string == other.isbn_string

    def __hash__(self) -> int:
        return hash(self.isbn_string)

    def __str__(self) -> str:
        return self.isbn_string

    def __repr__(self) -> str:
        return f"ISBN('{self.isbn_string}')"

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_for_pydantic,
            serialization=core_schema.plain_serializer_function_ser_schema(
                encode_isbn,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "isbn", "examples": ["978-1-4088-5589-8"]}


def resolve(value: str | int, table: RegistrationTable | None = None) -> ISBN | FailureReason:
    """Parse *value*, returning the ISBN or the first stage it failed at."""
    resolved = _resolve(value, table)
    if isinstance(resolved, FailureReason):
        return resolved
    isbn, group, elements = resolved
    return ISBN(
        group_name=group.name,
        elements=elements,
        isbn_string=elements.joined(),
        gtin=int(isbn),
    )


# ---------------------------------------------------------------------------
# Serialization boundary
# ---------------------------------------------------------------------------


def decode_isbn(value: object) -> ISBN:
    """Decode a scalar into an ISBN.

    Integers are tried first, then strings; both run the full parse
    pipeline. Raises :class:`InvalidISBNError` carrying the raw value
    when parsing fails, and ``TypeError`` for any other input type.
    """
    if isinstance(value, ISBN):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        raw = str(value)
    elif isinstance(value, str):
        raw = value
    else:
        msg = f"ISBN must be a string or an integer, got {type(value).__name__}"
        raise TypeError(msg)
    isbn = ISBN.parse(raw)
    if isbn is None:
        raise InvalidISBNError(raw)
    return isbn


def encode_isbn(isbn: ISBN) -> str:
    """Encode an ISBN as its canonical hyphenated string (never the integer)."""
    return isbn.isbn_string


def _validate_for_pydantic(value: Any) -> ISBN:
    try:
        return decode_isbn(value)
    except InvalidISBNError as exc:
        raise PydanticCustomError(
            "isbn_invalid",
            "Invalid ISBN '{raw}'",
            {"raw": exc.raw},
        ) from exc
    except TypeError as exc:
        raise PydanticCustomError(
            "isbn_type",
            "ISBN must be a string or an integer",
        ) from exc
