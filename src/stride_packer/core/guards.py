"""Input checks shared by the path and file helpers.

Paths reaching this layer come straight from user input or stored settings,
so every public helper runs them through :func:`is_well_formed_path` before
touching the filesystem.
"""

import re
from pathlib import Path

# Characters rejected in any path, on every host
INVALID_PATH_CHARS = re.compile(r'[<>"|?*\x00-\x1f]')

# A colon is only legal as a drive designator such as "C:"
DRIVE_SEGMENT = re.compile(r"^[A-Za-z]:$")


def is_blank(value: object) -> bool:
    """Return True for None, non-strings and empty strings."""
    return not isinstance(value, str) or not value


def is_well_formed_path(path: object) -> bool:
    """Check that a path string can be safely handed to the filesystem.

    Args:
        path: Candidate path string

    Returns:
        False for None, empty or whitespace-only input, and for paths that
        contain characters illegal in Windows file names.
    """
    if is_blank(path) or not path.strip():  # type: ignore[union-attr]
        return False

    if INVALID_PATH_CHARS.search(path):  # type: ignore[arg-type]
        return False

    for segment in re.split(r"[\\/]", path):  # type: ignore[arg-type]
        if ":" in segment and not DRIVE_SEGMENT.match(segment):
            return False

    return True


def to_host_path(path: str) -> Path:
    """Build a Path, accepting both separator styles."""
    return Path(path.replace("\\", "/"))
