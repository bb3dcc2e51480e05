"""Core orchestration utilities for negative coverage generation."""
from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Protocol

from .catalog import ResourceCatalog, catalog_for
from .controls import NegativeControl
from .matched import analyze_matched_resources
from .parser import ParsedResourceSet, TerraformStateParser, load_state_file
from .render import format_qualifiers
from .unmatched import analyze_unmatched_resources

logger = logging.getLogger(__name__)


class ResourceParser(Protocol):
    """Collaborator turning a raw state snapshot into a parsed resource set."""

    def parse_resources(self, snapshot: Any, platform: str) -> ParsedResourceSet:
        ...


def generate_negative_controls(
    snapshot: Any,
    resource_parser: ResourceParser,
    catalog: ResourceCatalog,
    platform: str,
    source_label: str,
    *,
    log: Optional[logging.Logger] = None,
) -> List[NegativeControl]:
    """Return unmatched controls followed by matched controls for *snapshot*.

    Errors raised by ``resource_parser`` propagate unchanged.
    """

    log = log or logger
    parsed = resource_parser.parse_resources(snapshot, platform)
    view: Mapping[str, Mapping[str, Any]] = MappingProxyType(
        {resource_type: MappingProxyType(dict(instances)) for resource_type, instances in parsed.items()}
    )

    controls = analyze_unmatched_resources(view, catalog, source_label, log=log)
    controls += analyze_matched_resources(view, catalog, source_label, log=log)
    return controls


def generate_from_file(
    path: str,
    platform: str,
    *,
    catalog: Optional[ResourceCatalog] = None,
    resource_parser: Optional[ResourceParser] = None,
    log: Optional[logging.Logger] = None,
) -> List[NegativeControl]:
    """Load the state file at *path* and generate its negative controls."""

    if catalog is None:
        catalog = catalog_for(platform)
    snapshot = load_state_file(path)
    return generate_negative_controls(
        snapshot,
        resource_parser or TerraformStateParser(),
        catalog,
        platform,
        os.path.abspath(path),
        log=log,
    )


def print_controls(controls: Iterable[NegativeControl]) -> None:
    """Pretty-print a summary of *controls* to stdout."""

    controls = list(controls)
    if not controls:
        print("No negative coverage controls generated.")
        return

    header = f"{'Scope':<10} {'Iterator':<40} {'Excluded':>8} Qualifiers"
    print(header)
    print("-" * len(header))
    for control in controls:
        iterator = (control.iterator[:37] + "...") if len(control.iterator) > 40 else control.iterator
        excluded = len(control.excluded_instance_ids)
        print(f"{control.scope:<10} {iterator:<40} {excluded:>8} {format_qualifiers(control.qualifiers)}")


EXCEL_HEADERS = ("Control ID", "Scope", "Iterator", "Qualifiers", "Index", "Excluded IDs", "Impact")
EXCEL_MAX_COLUMN_WIDTH = 60


def _control_row(control: NegativeControl) -> List[object]:
    return [
        control.id,
        control.scope,
        control.iterator,
        format_qualifiers(control.qualifiers),
        control.index or "",
        ", ".join(control.excluded_instance_ids),
        control.impact,
    ]


def export_controls_to_excel(controls: Iterable[NegativeControl], path: str) -> str:
    """Write one row per control to an Excel workbook at *path*.

    The header row is bold and frozen; column widths follow the longest
    value, capped at :data:`EXCEL_MAX_COLUMN_WIDTH`.
    """

    try:
        from openpyxl import Workbook
        from openpyxl.styles import Font
        from openpyxl.utils import get_column_letter
    except ImportError as exc:  # pragma: no cover - dependency missing during tests
        raise RuntimeError(
            "The 'openpyxl' package is required to export controls to Excel. "
            "Install it with 'pip install openpyxl'."
        ) from exc

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Negative Coverage"
    sheet.append(list(EXCEL_HEADERS))
    for cell in sheet[1]:
        cell.font = Font(bold=True)
    sheet.freeze_panes = "A2"

    widths = [len(header) for header in EXCEL_HEADERS]
    for control in controls:
        row = _control_row(control)
        sheet.append(row)
        widths = [max(width, len(str(value))) for width, value in zip(widths, row)]

    for column, width in enumerate(widths, start=1):
        sheet.column_dimensions[get_column_letter(column)].width = min(
            width + 2, EXCEL_MAX_COLUMN_WIDTH
        )

    workbook.save(path)
    return path


__all__ = [
    "ResourceParser",
    "export_controls_to_excel",
    "generate_from_file",
    "generate_negative_controls",
    "print_controls",
]
