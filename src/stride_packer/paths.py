"""Path safety, naming and asset classification.

This module is the trust boundary the packer relies on to keep reads and
writes inside a project or package root. None of the helpers raise: bad
input, missing paths and OS faults all collapse into the documented
sentinel return value, with the cause logged at DEBUG level.
"""

import logging
import os
import re
from pathlib import Path

from .config import DEFAULT_CONFIG, PackagerConfig
from .core.guards import is_blank, is_well_formed_path, to_host_path
from .core.types import AssetType, ProjectValidationResult

logger = logging.getLogger(__name__)

# Reserved Stride extensions, keyed lower-case
ASSET_EXTENSIONS: dict[str, AssetType] = {
    ".sdprefab": AssetType.PREFAB,
    ".sdscene": AssetType.SCENE,
    ".sdmat": AssetType.MATERIAL,
    ".sdfx": AssetType.EFFECT,
    ".sdtex": AssetType.TEXTURE,
    ".sdm3d": AssetType.MODEL,
    ".sdsnd": AssetType.SOUND,
    ".sdpage": AssetType.UI_PAGE,
    ".sdpkg": AssetType.PACKAGE,
    ".sdskel": AssetType.SKELETON,
    ".sdanim": AssetType.ANIMATION,
    ".sdsheet": AssetType.SPRITE_SHEET,
}

# Characters that cannot appear in a file name on any supported host
INVALID_FILENAME_CHARS = r'[<>:"/\\|?*\x00-\x1f]'


def _canonical(path: str) -> Path:
    return to_host_path(path).resolve()


def is_path_within_directory(file_path: str | None, directory_path: str | None) -> bool:
    """Check that a path lies inside (or is) a containment directory.

    Both inputs are resolved to absolute paths and compared segment by
    segment, so ``/root/TestDir2`` is not considered inside ``/root/TestDir``.

    Args:
        file_path: Path to check
        directory_path: Containment boundary

    Returns:
        True if file_path equals directory_path or is a descendant of it.
        False for empty, malformed or unresolvable input.
    """
    if not is_well_formed_path(file_path) or not is_well_formed_path(directory_path):
        logger.debug("Containment check rejected input: %r in %r", file_path, directory_path)
        return False

    try:
        resolved_path = _canonical(file_path)  # type: ignore[arg-type]
        resolved_base = _canonical(directory_path)  # type: ignore[arg-type]
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug("Unable to resolve %r or %r: %s", file_path, directory_path, e)
        return False

    return resolved_path.is_relative_to(resolved_base)


def normalize_path(path: str | None) -> str | None:
    """Return the absolute form of a path using forward slashes.

    The input is returned unchanged when it is None, empty or malformed.
    Normalizing an already normalized path returns it unchanged.
    """
    if not is_well_formed_path(path):
        return path

    try:
        absolute = os.path.abspath(to_host_path(path))  # type: ignore[arg-type]
    except (OSError, ValueError) as e:
        logger.debug("Unable to normalize %r: %s", path, e)
        return path

    return absolute.replace("\\", "/")


def get_relative_path_from_to(from_path: str | None, to_path: str | None) -> str | None:
    """Express to_path relative to from_path.

    Args:
        from_path: Base directory
        to_path: Target path

    Returns:
        The relative path with forward slashes. to_path itself is returned
        when from_path is empty or malformed, when to_path is malformed, or
        when no relative form exists (e.g. different drives).
    """
    if is_blank(to_path):
        return to_path

    if not is_well_formed_path(from_path) or not is_well_formed_path(to_path):
        logger.debug("Relative path fallback for %r -> %r", from_path, to_path)
        return to_path

    try:
        relative = os.path.relpath(
            os.path.abspath(to_host_path(to_path)),  # type: ignore[arg-type]
            os.path.abspath(to_host_path(from_path)),  # type: ignore[arg-type]
        )
    except (OSError, ValueError) as e:
        logger.debug("No relative path from %r to %r: %s", from_path, to_path, e)
        return to_path

    return relative.replace("\\", "/")


def validate_stride_project(
    directory_path: str | None,
    config: PackagerConfig = DEFAULT_CONFIG,
) -> ProjectValidationResult:
    """Inspect a directory and explain whether it is a Stride project root.

    A project root holds a Visual Studio solution file directly and at least
    one Stride package file somewhere below it.

    Args:
        directory_path: Directory selected by the user
        config: Supplies the solution and package marker patterns

    Returns:
        ProjectValidationResult describing what was found
    """
    result = ProjectValidationResult()

    if not is_well_formed_path(directory_path):
        result.error_message = "Directory does not exist"
        return result

    directory = to_host_path(directory_path)  # type: ignore[arg-type]

    try:
        if not directory.is_dir():
            result.error_message = "Directory does not exist"
            return result

        result.has_solution_file = any(
            p.is_file() for p in directory.glob(config.solution_pattern)
        )
        result.has_stride_packages = any(
            p.is_file() for p in directory.rglob(config.project_marker_pattern)
        )
    except OSError as e:
        logger.debug("Error validating project %r: %s", directory_path, e)
        result.error_message = f"Error validating project: {e}"
        return result

    if result.has_solution_file and result.has_stride_packages:
        result.is_valid = True
        result.success_message = (
            "Valid Stride project (Visual Studio solution with Stride packages)"
        )
    elif not result.has_solution_file and not result.has_stride_packages:
        result.error_message = (
            "Not a Stride project root. Please select the Visual Studio "
            "solution folder containing the .sln file"
        )
        result.suggestions.append(
            "Look for a folder containing a .sln file (Visual Studio solution)"
        )
        result.suggestions.append(
            "The packer will automatically find Stride packages in the project"
        )
    elif not result.has_solution_file:
        result.error_message = (
            "Found Stride packages but no Visual Studio solution. "
            "Please select the folder containing the .sln file"
        )
        result.suggestions.append("Look for the directory containing the .sln file")
    else:
        result.error_message = (
            "Found Visual Studio solution but no Stride packages. "
            "This may not be a Stride project"
        )
        result.suggestions.append(
            "Ensure this is a Stride game project, not just any Visual Studio solution"
        )

    return result


def is_stride_project(
    directory_path: str | None,
    config: PackagerConfig = DEFAULT_CONFIG,
) -> bool:
    """Return True if the directory exists and is a Stride project root."""
    return validate_stride_project(directory_path, config).is_valid


def _extension(file_path: str | None) -> str:
    if not is_well_formed_path(file_path):
        return ""
    return os.path.splitext(to_host_path(file_path).name)[1].lower()  # type: ignore[arg-type]


def is_stride_asset(file_path: str | None) -> bool:
    """Return True if the file carries a recognized Stride asset extension."""
    return _extension(file_path) in ASSET_EXTENSIONS


def get_asset_type_from_extension(file_path: str | None) -> AssetType:
    """Classify a file by its extension.

    Matching is case-insensitive. Missing, unmapped or malformed input
    yields AssetType.UNKNOWN.
    """
    return ASSET_EXTENSIONS.get(_extension(file_path), AssetType.UNKNOWN)


def sanitize_filename_component(value: str | None) -> str:
    """Replace characters that are illegal in file names with underscores.

    Args:
        value: Raw name component, may be None

    Returns:
        Sanitized component ("" for None)
    """
    if is_blank(value):
        return ""
    return re.sub(INVALID_FILENAME_CHARS, "_", value)  # type: ignore[arg-type]


def make_package_file_name(
    package_name: str | None,
    version: str | None,
    config: PackagerConfig = DEFAULT_CONFIG,
) -> str:
    """Build the archive file name for a package.

    Example:
        ("TestPackage", "1.0.0") -> "TestPackage-1_0_0.stridepackage"

    Args:
        package_name: Package name, may be None
        version: Package version, may be None

    Returns:
        ``{name}-{version}{extension}`` with illegal characters replaced and
        dots in the version turned into underscores
    """
    safe_name = sanitize_filename_component(package_name)
    safe_version = sanitize_filename_component(version).replace(".", "_")
    return f"{safe_name}-{safe_version}{config.package_extension}"


def _holds_marker(directory: Path, pattern: str) -> bool:
    return any(p.is_file() for p in directory.glob(pattern))


def get_project_root_from_asset(
    asset_file_path: str | None,
    config: PackagerConfig = DEFAULT_CONFIG,
) -> str:
    """Find the project root that owns an asset file.

    Walks upward from the asset's directory and stops at the first ancestor
    that directly holds a Stride package file. The walk ends at the
    filesystem root.

    Args:
        asset_file_path: Existing asset file
        config: Supplies the project marker pattern

    Returns:
        Absolute path of the project root, or "" if none was found or the
        input is empty, malformed or missing
    """
    if not is_well_formed_path(asset_file_path):
        logger.debug("Project root lookup rejected input: %r", asset_file_path)
        return ""

    try:
        asset_path = to_host_path(asset_file_path)  # type: ignore[arg-type]
        if not asset_path.exists():
            logger.debug("Asset not found: %s", asset_path)
            return ""

        start = asset_path.resolve().parent
        for directory in (start, *start.parents):
            if _holds_marker(directory, config.project_marker_pattern):
                return str(directory)
    except (OSError, RuntimeError) as e:
        logger.debug("Project root lookup failed for %r: %s", asset_file_path, e)

    return ""
