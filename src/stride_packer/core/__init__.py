"""Core utilities shared across the package.

This package contains type definitions, input guards and configuration
schema validation used by the path, file and scanner modules.
"""

from .guards import is_well_formed_path, to_host_path
from .types import AssetType, ProjectValidationResult, ScannedAsset, SearchOption
from .validator import config_errors, config_validator

__all__ = [
    "AssetType",
    "ProjectValidationResult",
    "ScannedAsset",
    "SearchOption",
    "is_well_formed_path",
    "to_host_path",
    "config_errors",
    "config_validator",
]
