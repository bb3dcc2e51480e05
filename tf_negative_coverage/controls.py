"""Data models for negative coverage controls."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Literal, Optional, Tuple

from .version import __version__

QualifierPair = Tuple[str, Any]
ControlScope = Literal["unmatched", "matched"]

TOOL_NAME = "tf-negative-coverage"
CONTROL_ID_PREFIX = "NEGATIVE-COVERAGE"
DEFAULT_IMPACT = 1.0


@dataclass(frozen=True)
class NegativeControl:
    """Assertion that a filtered set of live resources must be empty.

    ``unmatched`` controls cover resource types with no instances in state.
    ``matched`` controls cover the complement of the instances declared in
    state: every live identifier of ``iterator`` outside
    ``excluded_instance_ids`` must not exist.
    """

    id: str
    title: str
    description: str
    impact: float
    iterator: str
    qualifiers: Tuple[QualifierPair, ...]
    scope: ControlScope
    index: Optional[str] = None
    excluded_instance_ids: Tuple[str, ...] = ()
    resource: Optional[str] = None
    id_qualifier: Optional[str] = None
    resource_qualifiers: Tuple[QualifierPair, ...] = ()

    @property
    def excluded_set(self) -> FrozenSet[str]:
        return frozenset(self.excluded_instance_ids)

    def key(self) -> str:
        """Stable identifier used to de-duplicate controls."""

        return f"{self.scope}:{self.id}"


def control_id(iterator: str) -> str:
    return f"{CONTROL_ID_PREFIX}:{iterator}"


def control_header(iterator: str, source_label: str) -> Tuple[str, str, str]:
    """Return the ``(id, title, description)`` triple for *iterator*."""

    ctrl_id = control_id(iterator)
    title = f"{TOOL_NAME} {ctrl_id}"
    description = (
        f"{ctrl_id} from the source file {source_label}\n"
        f"Generated by {TOOL_NAME} v{__version__}"
    )
    return ctrl_id, title, description


__all__ = [
    "CONTROL_ID_PREFIX",
    "ControlScope",
    "DEFAULT_IMPACT",
    "NegativeControl",
    "QualifierPair",
    "TOOL_NAME",
    "control_header",
    "control_id",
]
