"""Project scanning and asset classification.

This module walks a Stride project and collects every recognized asset
file with its type, skipping build output and anything that resolves
outside the project root.
"""

import logging
import os
from collections import Counter
from pathlib import Path

from .core.guards import is_well_formed_path, to_host_path
from .core.types import AssetType, ScannedAsset
from .paths import ASSET_EXTENSIONS, get_asset_type_from_extension, is_path_within_directory

logger = logging.getLogger(__name__)

# Build output folders produced by dotnet/MSBuild
IGNORED_DIRECTORIES = {"bin", "obj"}


def _is_ignored_directory(name: str) -> bool:
    return name.startswith(".") or name.lower() in IGNORED_DIRECTORIES


def scan_project_assets(project_path: str | None) -> list[ScannedAsset]:
    """Recursively scan a project and collect its Stride assets.

    Args:
        project_path: Project root directory

    Returns:
        Asset records sorted by relative path. Empty if the path is
        malformed, missing or not a directory.
    """
    if not is_well_formed_path(project_path):
        logger.debug("Invalid project path: %r", project_path)
        return []

    root = to_host_path(project_path)  # type: ignore[arg-type]
    try:
        if not root.is_dir():
            logger.debug("Project directory not found: %s", root)
            return []
        root_resolved = root.resolve()
    except OSError as e:
        logger.debug("Unable to open project %s: %s", root, e)
        return []

    assets: list[ScannedAsset] = []

    for dirpath, dirnames, filenames in os.walk(root_resolved):
        # Prune in place so os.walk skips build output and hidden folders
        dirnames[:] = [d for d in dirnames if not _is_ignored_directory(d)]

        for filename in filenames:
            if filename.startswith("."):
                continue

            file_path = Path(dirpath) / filename

            # Legal on POSIX but not portable, e.g. "Level:1.sdscene"
            if not is_well_formed_path(str(file_path)):
                if os.path.splitext(filename)[1].lower() in ASSET_EXTENSIONS:
                    logger.warning("Skipping %s: path is not portable", file_path)
                continue

            asset_type = get_asset_type_from_extension(filename)
            if asset_type is AssetType.UNKNOWN:
                continue

            try:
                if not is_path_within_directory(str(file_path), str(root_resolved)):
                    logger.warning("Skipping %s: resolves outside %s", file_path, root_resolved)
                    continue

                size_bytes = file_path.stat().st_size
                relative_path = file_path.relative_to(root_resolved).as_posix()

                assets.append(
                    ScannedAsset(
                        relative_path=relative_path,
                        asset_type=asset_type.value,
                        size_bytes=size_bytes,
                    )
                )

            except OSError as e:
                logger.warning("Failed to process %s: %s", file_path, e)
                continue

    assets.sort(key=lambda a: a["relative_path"])
    return assets


def summarize_assets(assets: list[ScannedAsset]) -> dict[str, int]:
    """Count scanned assets per asset type.

    Example:
        [{"asset_type": "Prefab", ...}, {"asset_type": "Prefab", ...}] -> {"Prefab": 2}
    """
    return dict(sorted(Counter(a["asset_type"] for a in assets).items()))
