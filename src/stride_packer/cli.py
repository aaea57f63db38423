"""Command-line interface for the packer path and asset helpers.

This module provides the ``stride-packer`` entry point used to inspect
projects, classify asset files and compute package file names.
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from .config import ConfigError, PackagerConfig, load_config
from .logging_setup import setup_logging
from .paths import (
    get_asset_type_from_extension,
    get_project_root_from_asset,
    is_stride_asset,
    make_package_file_name,
    validate_stride_project,
)
from .scanner import scan_project_assets, summarize_assets


def _dump(data: object) -> None:
    json.dump(data, sys.stdout, indent=2)
    print()  # Add newline at end


def cmd_classify(args: argparse.Namespace, config: PackagerConfig) -> int:
    _dump(
        [
            {
                "path": path,
                "asset_type": get_asset_type_from_extension(path).value,
                "is_stride_asset": is_stride_asset(path),
            }
            for path in args.files
        ]
    )
    return 0


def cmd_check_project(args: argparse.Namespace, config: PackagerConfig) -> int:
    result = validate_stride_project(args.directory, config)
    _dump(asdict(result))
    return 0 if result.is_valid else 1


def cmd_find_root(args: argparse.Namespace, config: PackagerConfig) -> int:
    root = get_project_root_from_asset(args.asset, config)
    if not root:
        print(f"Error: No project root found for {args.asset}", file=sys.stderr)
        return 1
    print(root)
    return 0


def cmd_package_name(args: argparse.Namespace, config: PackagerConfig) -> int:
    version = args.version or config.default_version
    print(make_package_file_name(args.name, version, config))
    return 0


def cmd_scan(args: argparse.Namespace, config: PackagerConfig) -> int:
    path = Path(args.directory)
    if not path.exists():
        print(f"Error: Path does not exist: {path}", file=sys.stderr)
        return 1

    if not path.is_dir():
        print(f"Error: Path is not a directory: {path}", file=sys.stderr)
        return 1

    validation = validate_stride_project(args.directory, config)
    print(f"Scanning directory: {args.directory}", file=sys.stderr)
    assets = scan_project_assets(args.directory)
    print(f"Found {len(assets)} assets", file=sys.stderr)

    _dump(
        {
            "project_root": args.directory,
            "is_stride_project": validation.is_valid,
            "summary": summarize_assets(assets),
            "assets": assets,
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per helper."""
    parser = argparse.ArgumentParser(
        prog="stride-packer",
        description="Inspect Stride projects and compute packer file names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check that a folder is a Stride project root
  stride-packer check-project /path/to/MyGame

  # Classify asset files
  stride-packer classify Assets/Hero.sdprefab Assets/Level1.sdscene

  # Package archive name
  stride-packer package-name "My Tools" 1.2.0
        """,
    )
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log diagnostic details to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser("classify", help="Classify files by asset extension")
    classify.add_argument("files", nargs="+", help="File paths to classify")
    classify.set_defaults(handler=cmd_classify)

    check = subparsers.add_parser("check-project", help="Validate a Stride project root")
    check.add_argument("directory", help="Directory to validate")
    check.set_defaults(handler=cmd_check_project)

    find_root = subparsers.add_parser("find-root", help="Find the project owning an asset")
    find_root.add_argument("asset", help="Existing asset file")
    find_root.set_defaults(handler=cmd_find_root)

    package_name = subparsers.add_parser("package-name", help="Build a package file name")
    package_name.add_argument("name", help="Package name")
    package_name.add_argument(
        "version", nargs="?", help="Package version (defaults to the configured version)"
    )
    package_name.set_defaults(handler=cmd_package_name)

    scan = subparsers.add_parser("scan", help="List and classify every asset in a project")
    scan.add_argument("directory", help="Project root directory")
    scan.set_defaults(handler=cmd_scan)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the stride-packer command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(args.handler(args, config))


if __name__ == "__main__":
    main()
