"""Negative coverage for catalog resource types absent from state."""
from __future__ import annotations

import logging
from typing import List, Optional

from .catalog import ResourceCatalog
from .controls import DEFAULT_IMPACT, NegativeControl, QualifierPair, control_header
from .parser import ParsedResourceSet
from .qualifiers import resolve

logger = logging.getLogger(__name__)


def analyze_unmatched_resources(
    parsed: ParsedResourceSet,
    catalog: ResourceCatalog,
    source_label: str,
    *,
    log: Optional[logging.Logger] = None,
) -> List[NegativeControl]:
    """Return one control per catalog resource type with no state instances.

    Types are visited in catalog order. Qualifier values are borrowed from
    the whole parsed set because the missing type has no instances of its
    own; a value that cannot be found is left as ``None``.
    """

    log = log or logger
    unmatched = [resource_type for resource_type in catalog if resource_type not in parsed]
    log.debug("unmatched resource types: %s", unmatched)

    controls: List[NegativeControl] = []
    for resource_type in unmatched:
        entry = catalog[resource_type]
        iterator = entry.iterator
        qualifiers: List[QualifierPair] = []
        for parameter in entry.qualifiers:
            value = resolve(parsed, entry.state_property(parameter))
            if value is None:
                log.debug("%s qualifier %s not found in state", iterator, parameter)
            else:
                log.debug("%s qualifier %s = %r", iterator, parameter, value)
            qualifiers.append((parameter, value))

        ctrl_id, title, description = control_header(iterator, source_label)
        controls.append(
            NegativeControl(
                id=ctrl_id,
                title=title,
                description=description,
                impact=DEFAULT_IMPACT,
                iterator=iterator,
                qualifiers=tuple(qualifiers),
                scope="unmatched",
            )
        )

    log.debug("unmatched negative controls: %d", len(controls))
    return controls


__all__ = ["analyze_unmatched_resources"]
