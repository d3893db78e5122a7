"""Locate the ``isbnctl.toml`` to load.

An explicit ``--config`` path wins, then ``$ISBNCTL_CONFIG``, then the
nearest ``isbnctl.toml`` in the working directory or one of its parents.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "isbnctl.toml"
CONFIG_ENV_VAR = "ISBNCTL_CONFIG"


def locate_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Return the config path to load, or None when there is nothing to load.

    An explicit or environment path is returned even when it does not
    exist, so the caller can report it instead of silently using defaults.
    """
    override = explicit or os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
