"""Stride Packer - path safety and asset helpers.

This package provides the filesystem layer of the Stride package tool:
containment checks, defensive file operations, asset classification and
package file naming for Stride game projects.
"""

# Path safety and classification
from .paths import (
    get_asset_type_from_extension,
    get_project_root_from_asset,
    get_relative_path_from_to,
    is_path_within_directory,
    is_stride_asset,
    is_stride_project,
    make_package_file_name,
    normalize_path,
    validate_stride_project,
)

# Defensive file operations
from .files import (
    copy_directory,
    delete_file,
    ensure_directory_exists,
    generate_unique_file_name,
    get_file_last_modified,
    get_files_in_directory,
    load_file,
    move_file,
    save_file,
)

# Core utilities
from .config import DEFAULT_CONFIG, ConfigError, PackagerConfig, load_config
from .core import AssetType, ProjectValidationResult, ScannedAsset, SearchOption
from .scanner import scan_project_assets, summarize_assets

__version__ = "0.8.0"

__all__ = [
    # Path helpers
    "get_asset_type_from_extension",
    "get_project_root_from_asset",
    "get_relative_path_from_to",
    "is_path_within_directory",
    "is_stride_asset",
    "is_stride_project",
    "make_package_file_name",
    "normalize_path",
    "validate_stride_project",
    # File helpers
    "copy_directory",
    "delete_file",
    "ensure_directory_exists",
    "generate_unique_file_name",
    "get_file_last_modified",
    "get_files_in_directory",
    "load_file",
    "move_file",
    "save_file",
    # Scanning
    "scan_project_assets",
    "summarize_assets",
    # Types and configuration
    "AssetType",
    "ConfigError",
    "DEFAULT_CONFIG",
    "PackagerConfig",
    "ProjectValidationResult",
    "ScannedAsset",
    "SearchOption",
    "load_config",
]
