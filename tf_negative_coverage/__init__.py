"""Negative coverage compliance controls from Terraform state."""

from __future__ import annotations

from .catalog import ResourceCatalogEntry, available_platforms, catalog_for
from .controls import NegativeControl
from .core import (
    export_controls_to_excel,
    generate_from_file,
    generate_negative_controls,
    print_controls,
)
from .matched import analyze_matched_resources
from .parser import SnapshotParseError, TerraformStateParser
from .qualifiers import deep_find, resolve, resolve_with_fallback
from .render import control_to_dict, render_inspec_control, render_inspec_profile
from .unmatched import analyze_unmatched_resources
from .version import __version__

__all__ = [
    "NegativeControl",
    "ResourceCatalogEntry",
    "SnapshotParseError",
    "TerraformStateParser",
    "__version__",
    "analyze_matched_resources",
    "analyze_unmatched_resources",
    "available_platforms",
    "catalog_for",
    "control_to_dict",
    "deep_find",
    "export_controls_to_excel",
    "generate_from_file",
    "generate_negative_controls",
    "print_controls",
    "render_inspec_control",
    "render_inspec_profile",
    "resolve",
    "resolve_with_fallback",
]
