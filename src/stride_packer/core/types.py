"""Type definitions shared by the path and file helpers.

AssetType mirrors the asset categories of a Stride project, keyed by the
reserved ``.sd*`` file extensions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict


class AssetType(str, Enum):
    """Semantic category of a Stride asset file."""

    PREFAB = "Prefab"
    SCENE = "Scene"
    MATERIAL = "Material"
    EFFECT = "Effect"
    TEXTURE = "Texture"
    MODEL = "Model"
    SOUND = "Sound"
    UI_PAGE = "UIPage"
    PACKAGE = "Package"
    SKELETON = "Skeleton"
    ANIMATION = "Animation"
    SPRITE_SHEET = "SpriteSheet"
    UNKNOWN = "Unknown"


class SearchOption(Enum):
    """Directory enumeration depth."""

    TOP_DIRECTORY_ONLY = "top"
    ALL_DIRECTORIES = "all"


@dataclass
class ProjectValidationResult:
    """Outcome of checking whether a directory is a Stride project root.

    Attributes:
        is_valid: True when both a solution file and a Stride package exist
        has_solution_file: A ``*.sln`` file sits directly in the directory
        has_stride_packages: A ``*.sdpkg`` file exists anywhere below it
        error_message: Reason the directory was rejected (empty when valid)
        success_message: Confirmation text (empty when invalid)
        suggestions: Hints for picking the right folder
    """

    is_valid: bool = False
    has_solution_file: bool = False
    has_stride_packages: bool = False
    error_message: str = ""
    success_message: str = ""
    suggestions: list[str] = field(default_factory=list)


class ScannedAsset(TypedDict):
    """Individual asset file found inside a project."""

    relative_path: str  # Forward-slash path relative to the project root
    asset_type: str  # AssetType value, e.g. 'Prefab'
    size_bytes: int  # File size in bytes
