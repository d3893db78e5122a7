"""isbnctl: ISBN parsing, validation, and hyphenation."""

from isbnctl.domain.isbn import ISBN, hyphenated, is_valid

__version__ = "0.1.0"

__all__ = ["ISBN", "__version__", "hyphenated", "is_valid"]
