"""Deep lookup of qualifier values inside parsed resource attributes."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

_MISSING = object()


def _iter_children(node: Any):
    if isinstance(node, Mapping):
        return iter(node.values())
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        return iter(node)
    return iter(())


def _deep_find(node: Any, key: str) -> Any:
    if isinstance(node, Mapping) and key in node:
        return node[key]
    for child in _iter_children(node):
        value = _deep_find(child, key)
        if value is not _MISSING:
            return value
    return _MISSING


def deep_find(scope: Any, key: str) -> Any:
    """Return the first value stored under ``key`` anywhere in ``scope``.

    A mapping's own keys are checked before any of its values are
    descended, and children are visited in their natural order, so the
    result is the shallowest-first, leftmost match. ``None`` is returned
    when the key does not occur. ``scope`` is never modified.
    """

    value = _deep_find(scope, key)
    return None if value is _MISSING else value


def resolve(scope: Any, parameter: str) -> Optional[Any]:
    """Return the value of ``parameter`` within ``scope`` or ``None``."""

    return deep_find(scope, str(parameter))


def resolve_with_fallback(
    scope: Any,
    parameter: str,
    fallback_scope: Any,
    *,
    scope_name: str = "resource",
    log: Optional[logging.Logger] = None,
) -> Optional[Any]:
    """Resolve ``parameter`` in ``scope`` first and ``fallback_scope`` second.

    The fallback is a heuristic: values such as region or project are
    assumed to be consistent across resource types, so a value borrowed
    from a sibling type is accepted without cross-checking. ``None`` is
    returned when neither scope holds the parameter.
    """

    log = log or logger
    value = resolve(scope, parameter)
    if value is not None:
        return value

    log.warning("%s no %s value found, searching outside scope.", scope_name, parameter)
    value = resolve(fallback_scope, parameter)
    if value is None:
        log.warning("%s no %s value found in any scope; leaving it unset.", scope_name, parameter)
    else:
        log.debug("%s %s borrowed from outside scope: %r", scope_name, parameter, value)
    return value


__all__ = ["deep_find", "resolve", "resolve_with_fallback"]
