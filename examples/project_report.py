"""Basic project inspection example.

This example demonstrates how to:
- Validate a Stride project root
- Scan and classify its assets
- Display summary statistics
- Save the report next to the project under a timestamped name
"""

import json
import sys
from pathlib import Path

from stride_packer import (
    ensure_directory_exists,
    generate_unique_file_name,
    make_package_file_name,
    save_file,
    scan_project_assets,
    summarize_assets,
    validate_stride_project,
)


def main():
    # Inspect a project (change this to your Stride project folder)
    project_dir = Path.home() / "Documents" / "Stride Projects" / "MyGame"

    validation = validate_stride_project(str(project_dir))
    if not validation.is_valid:
        print(f"Not a Stride project: {project_dir}", file=sys.stderr)
        print(f"  {validation.error_message}", file=sys.stderr)
        for suggestion in validation.suggestions:
            print(f"  - {suggestion}", file=sys.stderr)
        return

    print(f"Scanning directory: {project_dir}", file=sys.stderr)
    assets = scan_project_assets(str(project_dir))

    # Display summary
    print(f"\n✓ Found {len(assets)} assets", file=sys.stderr)
    for asset_type, count in summarize_assets(assets).items():
        print(f"  {asset_type}: {count}", file=sys.stderr)

    total_size = sum(a['size_bytes'] for a in assets)
    print(f"  Total size: {total_size / 1024**2:.1f} MB", file=sys.stderr)
    print(f"  Package file: {make_package_file_name(project_dir.name, '1.0.0')}", file=sys.stderr)

    # Save to file
    reports_dir = project_dir / "Reports"
    if not ensure_directory_exists(str(reports_dir)):
        print(f"Unable to create {reports_dir}", file=sys.stderr)
        return

    output_file = generate_unique_file_name("assets", ".json", str(reports_dir))
    if save_file(json.dumps(assets, indent=2), output_file):
        print(f"\nReport saved to {output_file}", file=sys.stderr)
    else:
        print(f"\nFailed to save report to {output_file}", file=sys.stderr)


if __name__ == '__main__':
    main()
