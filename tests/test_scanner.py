"""Tests for scanner module."""

import logging
import os
from pathlib import Path

import pytest

from stride_packer.scanner import scan_project_assets, summarize_assets


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Stride project with assets, build output and hidden files."""
    root = tmp_path / "MyGame"
    assets = root / "MyGame" / "Assets"
    assets.mkdir(parents=True)
    (root / "MyGame.sln").write_text("solution")
    (root / "MyGame" / "MyGame.sdpkg").write_text("package")
    (assets / "Hero.sdprefab").write_text("prefab!")
    (assets / "level.SDSCENE").write_text("scene")
    (assets / "readme.txt").write_text("not an asset")
    (assets / ".hidden.sdprefab").write_text("hidden")

    for build_dir in ["bin/Debug", "obj"]:
        (root / "MyGame" / build_dir).mkdir(parents=True)
        (root / "MyGame" / build_dir / "Copy.sdmat").write_text("copy")
    (root / ".git").mkdir()
    (root / ".git" / "Stash.sdmat").write_text("vcs")
    return root


class TestScanProjectAssets:
    """Test project scanning."""

    def test_sentinels(self, tmp_path: Path) -> None:
        """Test that unusable paths yield an empty list."""
        assert scan_project_assets(None) == []
        assert scan_project_assets("") == []
        assert scan_project_assets(r"C:\<<invalid>>path") == []
        assert scan_project_assets(str(tmp_path / "missing")) == []

    def test_collects_assets(self, project: Path) -> None:
        """Test that recognized assets are collected in path order."""
        assets = scan_project_assets(str(project))

        assert [a["relative_path"] for a in assets] == [
            "MyGame/Assets/Hero.sdprefab",
            "MyGame/Assets/level.SDSCENE",
            "MyGame/MyGame.sdpkg",
        ]
        assert [a["asset_type"] for a in assets] == ["Prefab", "Scene", "Package"]
        assert assets[0]["size_bytes"] == len("prefab!")

    def test_skips_symlinks_outside_project(self, project: Path, tmp_path: Path) -> None:
        """Test that links resolving outside the project are skipped."""
        outside = tmp_path / "Elsewhere.sdprefab"
        outside.write_text("outside")
        (project / "MyGame" / "Assets" / "Link.sdprefab").symlink_to(outside)

        paths = [a["relative_path"] for a in scan_project_assets(str(project))]
        assert "MyGame/Assets/Link.sdprefab" not in paths
        assert len(paths) == 3

    @pytest.mark.skipif(os.name == "nt", reason="colons are not legal in Windows file names")
    def test_skips_non_portable_names(
        self, project: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that names illegal on Windows are skipped with a clear warning."""
        (project / "MyGame" / "Assets" / "Level:1.sdscene").write_text("scene")
        (project / "MyGame" / "Assets" / "notes:old.txt").write_text("text")

        with caplog.at_level(logging.WARNING, logger="stride_packer.scanner"):
            paths = [a["relative_path"] for a in scan_project_assets(str(project))]

        assert "MyGame/Assets/Level:1.sdscene" not in paths
        assert len(paths) == 3
        assert "not portable" in caplog.text
        assert "Level:1.sdscene" in caplog.text
        assert "notes:old.txt" not in caplog.text
        assert "resolves outside" not in caplog.text


class TestSummarizeAssets:
    """Test per-type counts."""

    def test_counts_by_type(self, project: Path) -> None:
        """Test that assets are counted per type."""
        summary = summarize_assets(scan_project_assets(str(project)))
        assert summary == {"Package": 1, "Prefab": 1, "Scene": 1}

    def test_empty(self) -> None:
        """Test that no assets give an empty summary."""
        assert summarize_assets([]) == {}
