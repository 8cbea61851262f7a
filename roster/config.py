"""Backing-file location for roster runs.

The file is picked from, in order: an explicit path (the CLI's --file),
the ROSTER_FILE environment variable, then students.txt in the current
directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

DEFAULT_FILE_NAME = "students.txt"
ENV_VAR = "ROSTER_FILE"


def resolve_data_file(explicit: Optional[str] = None) -> Path:
    """Return the path of the backing file to load from and save to."""
    raw = explicit or os.environ.get(ENV_VAR) or DEFAULT_FILE_NAME
    return Path(raw).expanduser()
