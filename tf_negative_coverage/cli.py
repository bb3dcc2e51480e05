"""Command line interface for the negative coverage generator."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .catalog import available_platforms, catalog_for, load_catalog_file
from .core import export_controls_to_excel, generate_from_file, print_controls
from .render import control_to_dict, render_inspec_profile


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Return parsed command line arguments."""

    parser = argparse.ArgumentParser(
        description="Generate negative coverage compliance controls from a Terraform state file."
    )
    parser.add_argument("tfstate", help="Path to the Terraform state file (terraform.tfstate)")
    parser.add_argument(
        "--platform",
        choices=available_platforms(),
        default="aws",
        help="Platform whose resource catalog is used (default: aws)",
    )
    parser.add_argument(
        "--catalog",
        dest="catalog_path",
        help="Optional JSON resource catalog replacing the built-in one for --platform",
    )
    parser.add_argument(
        "--output",
        dest="output_path",
        help="Write InSpec controls to this path instead of stdout",
    )
    parser.add_argument("--json", dest="json_path", help="Optional path to export controls as JSON")
    parser.add_argument(
        "--excel",
        dest="excel_path",
        help="Optional path to export a control summary as an Excel workbook (.xlsx)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a tabular summary instead of InSpec source when --output is not given",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point used by ``python -m tf_negative_coverage``."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.catalog_path:
            catalog = load_catalog_file(args.catalog_path)
        else:
            catalog = catalog_for(args.platform)
        controls = generate_from_file(args.tfstate, args.platform, catalog=catalog)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output_path:
        with open(args.output_path, "w", encoding="utf-8") as fh:
            fh.write(render_inspec_profile(controls))
        print(f"{len(controls)} controls written to {args.output_path}")
    elif args.summary:
        print_controls(controls)
    else:
        sys.stdout.write(render_inspec_profile(controls))

    if args.json_path:
        with open(args.json_path, "w", encoding="utf-8") as fh:
            json.dump([control_to_dict(c) for c in controls], fh, indent=2, default=str)
        print(f"Controls exported to {args.json_path}")

    if args.excel_path:
        try:
            path = export_controls_to_excel(controls, args.excel_path)
        except RuntimeError as exc:
            print(f"Failed to export Excel report: {exc}", file=sys.stderr)
        else:
            print(f"Excel report written to {path}")

    return 0


__all__ = ["main", "parse_args"]
