"""Negative coverage for resource types present in state.

For every type found in state the live universe of the catalog iterator,
narrowed by its qualifiers, minus the instances declared in state must be
empty. Instance names from state stand in for the iterator's index values.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from .catalog import ResourceCatalog, ResourceCatalogEntry
from .controls import DEFAULT_IMPACT, NegativeControl, QualifierPair, control_header
from .parser import ParsedResourceSet
from .qualifiers import resolve_with_fallback

logger = logging.getLogger(__name__)


def _resolve_qualifiers(
    resource_type: str,
    entry: ResourceCatalogEntry,
    parameters: Sequence[str],
    parsed: ParsedResourceSet,
    resolved: Dict[str, Any],
    log: logging.Logger,
) -> List[QualifierPair]:
    """Resolve ``parameters`` type-local first, reusing values in ``resolved``.

    Values are read from the state property behind each qualifier name; the
    emitted pair keeps the qualifier name.
    """

    local = parsed[resource_type]
    pairs: List[QualifierPair] = []
    for parameter in parameters:
        if parameter not in resolved:
            prop = entry.state_property(parameter)
            if prop != parameter:
                log.debug("%s qualifier %s read from property %s", resource_type, parameter, prop)
            resolved[parameter] = resolve_with_fallback(
                local, prop, parsed, scope_name=resource_type, log=log
            )
        pairs.append((parameter, resolved[parameter]))
    return pairs


def analyze_matched_resources(
    parsed: ParsedResourceSet,
    catalog: ResourceCatalog,
    source_label: str,
    *,
    log: Optional[logging.Logger] = None,
) -> List[NegativeControl]:
    """Return one complement control per state resource type with a catalog entry."""

    log = log or logger
    log.debug("matched resource types: %s", list(parsed))

    controls: List[NegativeControl] = []
    for resource_type, instances in parsed.items():
        entry = catalog.get(resource_type)
        if entry is None:
            log.warning("No iterator matching %s for this platform found!", resource_type)
            continue

        iterator = entry.iterator
        log.debug("%s iterator:%s index:%s", resource_type, iterator, entry.index)
        instance_qualifiers = entry.instance_qualifiers()
        resolved: Dict[str, Any] = {}
        qualifiers = _resolve_qualifiers(
            resource_type, entry, entry.qualifiers, parsed, resolved, log
        )
        resource_qualifiers = _resolve_qualifiers(
            resource_type, entry, instance_qualifiers[1:], parsed, resolved, log
        )
        ctrl_id, title, description = control_header(iterator, source_label)
        controls.append(
            NegativeControl(
                id=ctrl_id,
                title=title,
                description=description,
                impact=DEFAULT_IMPACT,
                iterator=iterator,
                qualifiers=tuple(qualifiers),
                scope="matched",
                index=entry.index,
                excluded_instance_ids=tuple(instances),
                resource=entry.check_resource(resource_type),
                id_qualifier=instance_qualifiers[0],
                resource_qualifiers=tuple(resource_qualifiers),
            )
        )

    log.debug("matched negative controls: %d", len(controls))
    return controls


__all__ = ["analyze_matched_resources"]
