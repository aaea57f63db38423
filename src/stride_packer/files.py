"""Defensive file and directory operations.

Every helper here turns a filesystem fault into a plain return value
(False, "", [] or None) so callers can report failure without handling
exceptions. The cause is logged at DEBUG level.
"""

import logging
import os
import shutil
from datetime import datetime

from .config import DEFAULT_CONFIG, PackagerConfig
from .core.guards import is_blank, is_well_formed_path, to_host_path
from .core.types import SearchOption

logger = logging.getLogger(__name__)

# Raised by pathlib, os and shutil calls on bad input or OS faults
FILESYSTEM_ERRORS = (OSError, ValueError, TypeError)


def save_file(content: str | None, file_path: str | None) -> bool:
    """Write text to a file, creating parent directories as needed.

    Args:
        content: Text to write; empty content is rejected
        file_path: Destination file

    Returns:
        True once the content has been written
    """
    if is_blank(content):
        logger.debug("Refusing to save empty content to %r", file_path)
        return False
    if not is_well_formed_path(file_path):
        logger.debug("Invalid save path: %r", file_path)
        return False

    path = to_host_path(file_path)  # type: ignore[arg-type]
    try:
        # Encode before opening so a bad string never truncates the target
        data = content.encode("utf-8")  # type: ignore[union-attr]
    except UnicodeEncodeError as e:
        logger.debug("Content for %s is not encodable: %s", path, e)
        return False

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except FILESYSTEM_ERRORS as e:
        logger.debug("Failed to save %s: %s", path, e)
        return False
    return True


def load_file(file_path: str | None) -> str:
    """Return the text of a file, or "" if it cannot be read."""
    if not is_well_formed_path(file_path):
        logger.debug("Invalid load path: %r", file_path)
        return ""

    path = to_host_path(file_path)  # type: ignore[arg-type]
    try:
        if not path.is_file():
            logger.debug("File not found: %s", path)
            return ""
        return path.read_text(encoding="utf-8")
    except FILESYSTEM_ERRORS as e:
        logger.debug("Failed to load %s: %s", path, e)
        return ""


def delete_file(file_path: str | None) -> bool:
    """Delete a file. Returns True only if a file existed and was removed."""
    if not is_well_formed_path(file_path):
        logger.debug("Invalid delete path: %r", file_path)
        return False

    path = to_host_path(file_path)  # type: ignore[arg-type]
    try:
        if not path.is_file():
            logger.debug("File not found: %s", path)
            return False
        path.unlink()
    except FILESYSTEM_ERRORS as e:
        logger.debug("Failed to delete %s: %s", path, e)
        return False
    return True


def _is_name_pattern(pattern: object) -> bool:
    if not isinstance(pattern, str):
        return False
    return "/" not in pattern and "\\" not in pattern and ".." not in pattern


def get_files_in_directory(
    directory_path: str | None,
    pattern: str | None = "*",
    search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
) -> list[str]:
    """List files in a directory.

    Args:
        directory_path: Directory to enumerate
        pattern: Glob pattern matched against file names (default all files).
            Patterns holding separators or ".." are rejected
        search_option: Recurse into subdirectories with ALL_DIRECTORIES

    Returns:
        Sorted list of matching file paths; empty if the directory is
        missing, malformed or cannot be read, or the pattern is rejected
    """
    if not is_well_formed_path(directory_path):
        logger.debug("Invalid directory path: %r", directory_path)
        return []

    pattern = pattern or "*"
    if not _is_name_pattern(pattern):
        logger.debug("Pattern must match names inside the directory: %r", pattern)
        return []

    directory = to_host_path(directory_path)  # type: ignore[arg-type]
    try:
        if not directory.is_dir():
            logger.debug("Directory not found: %s", directory)
            return []

        if search_option is SearchOption.ALL_DIRECTORIES:
            matches = directory.rglob(pattern)
        else:
            matches = directory.glob(pattern)
        return sorted(str(p) for p in matches if p.is_file())
    except FILESYSTEM_ERRORS + (NotImplementedError,) as e:
        logger.debug("Failed to list %s: %s", directory, e)
        return []


def ensure_directory_exists(directory_path: str | None) -> bool:
    """Create a directory (and parents) unless it already exists."""
    if not is_well_formed_path(directory_path):
        logger.debug("Invalid directory path: %r", directory_path)
        return False

    directory = to_host_path(directory_path)  # type: ignore[arg-type]
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except FILESYSTEM_ERRORS as e:
        logger.debug("Failed to create %s: %s", directory, e)
        return False
    return True


def move_file(source_path: str | None, destination_path: str | None) -> bool:
    """Move a file to a new location.

    The destination's directory must already exist and the destination
    itself must not. The source is only removed once the destination holds
    the file.

    Args:
        source_path: Existing file to move
        destination_path: New file location

    Returns:
        True if the file now lives at destination_path
    """
    if not is_well_formed_path(source_path) or not is_well_formed_path(destination_path):
        logger.debug("Invalid move arguments: %r -> %r", source_path, destination_path)
        return False

    source = to_host_path(source_path)  # type: ignore[arg-type]
    destination = to_host_path(destination_path)  # type: ignore[arg-type]
    try:
        if not source.is_file():
            logger.debug("Source file not found: %s", source)
            return False
        if destination.exists():
            logger.debug("Destination already exists: %s", destination)
            return False
        if not destination.parent.is_dir():
            logger.debug("Destination directory not found: %s", destination.parent)
            return False

        # Falls back to copy-then-delete across devices
        shutil.move(str(source), str(destination))
    except FILESYSTEM_ERRORS as e:
        logger.debug("Failed to move %s to %s: %s", source, destination, e)
        return False

    return destination.is_file() and not source.exists()


def get_file_last_modified(file_path: str | None) -> datetime | None:
    """Return the local modification time of a file, or None."""
    if not is_well_formed_path(file_path):
        logger.debug("Invalid file path: %r", file_path)
        return None

    path = to_host_path(file_path)  # type: ignore[arg-type]
    try:
        if not path.is_file():
            logger.debug("File not found: %s", path)
            return None
        return datetime.fromtimestamp(path.stat().st_mtime)
    except FILESYSTEM_ERRORS + (OverflowError,) as e:
        logger.debug("Failed to stat %s: %s", path, e)
        return None


def copy_directory(source_dir: str | None, destination_dir: str | None) -> bool:
    """Recursively copy a directory tree, overwriting existing files.

    Arguments are checked before anything is written: the source must be
    an existing directory and the destination must not lie inside it. Once
    copying starts it is best-effort; a failure part way through leaves the
    files copied so far in place.

    Args:
        source_dir: Directory to copy
        destination_dir: Target directory, created if missing

    Returns:
        True only if every file was copied
    """
    if not is_well_formed_path(source_dir) or not is_well_formed_path(destination_dir):
        logger.debug("Invalid copy arguments: %r -> %r", source_dir, destination_dir)
        return False

    source = to_host_path(source_dir)  # type: ignore[arg-type]
    destination = to_host_path(destination_dir)  # type: ignore[arg-type]
    try:
        if not source.is_dir():
            logger.debug("Source directory not found: %s", source)
            return False
        if destination.resolve().is_relative_to(source.resolve()):
            logger.debug("Destination %s is inside source %s", destination, source)
            return False
        if destination.exists() and not destination.is_dir():
            logger.debug("Destination is not a directory: %s", destination)
            return False

        shutil.copytree(source, destination, dirs_exist_ok=True)
    except FILESYSTEM_ERRORS + (RuntimeError,) as e:
        # shutil.Error is an OSError carrying every per-file failure
        logger.debug("Failed to copy %s to %s: %s", source, destination, e)
        return False
    return True


def generate_unique_file_name(
    base_name: str | None,
    extension: str | None = "",
    directory: str | None = "",
    config: PackagerConfig = DEFAULT_CONFIG,
) -> str:
    """Build a timestamped file name.

    The timestamp has one-second resolution, so two calls within the same
    second return the same name. Callers needing more must add their own
    suffix.

    Args:
        base_name: Leading part of the name; None is treated as ""
        extension: Suffix including its dot, e.g. ".txt"
        directory: When given, the result is joined onto this directory

    Returns:
        ``{base_name}_{timestamp}{extension}``, or the full path when a
        directory is given
    """
    timestamp = datetime.now().strftime(config.timestamp_format)
    file_name = f"{base_name or ''}_{timestamp}{extension or ''}"

    if not is_blank(directory):
        return os.path.join(directory, file_name)  # type: ignore[arg-type]

    return file_name
