"""Pydantic models for the isbnctl.toml sections.

Defaults live here; isbnctl.toml only carries overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
    show_isbn10: bool = True
