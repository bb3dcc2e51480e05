"""Per-platform resource catalogs and registry helpers."""
from __future__ import annotations

from dataclasses import dataclass, field
import importlib
import json
import pkgutil
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

ResourceCatalog = Mapping[str, "ResourceCatalogEntry"]
CatalogBuilder = Callable[[], Dict[str, "ResourceCatalogEntry"]]


class UnknownPlatformError(ValueError):
    """Raised when no catalog is registered for a platform."""


@dataclass(frozen=True)
class ResourceCatalogEntry:
    """Describes how live instances of one resource type can be queried.

    ``iterator`` names the plural resource that lists live instances,
    ``index`` the field of that iterator holding instance identifiers and
    ``qualifiers`` the ordered filter parameters it accepts.
    ``resource_qualifiers`` are the parameters of the singular resource used
    to assert on one instance; the first one identifies the instance.
    ``property_translation`` maps state property names to qualifier names
    where the two differ.
    """

    iterator: str
    index: str
    qualifiers: Tuple[str, ...] = ()
    property_translation: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    resource: Optional[str] = None
    resource_qualifiers: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.iterator:
            raise ValueError("Catalog entry requires a non-empty iterator")
        if not self.index:
            raise ValueError(f"Catalog entry for '{self.iterator}' requires an index field")
        for name in ("qualifiers", "resource_qualifiers"):
            if isinstance(getattr(self, name), str):
                raise ValueError(f"Catalog entry for '{self.iterator}': {name} must be a sequence of names")
        object.__setattr__(self, "qualifiers", tuple(self.qualifiers))
        object.__setattr__(self, "resource_qualifiers", tuple(self.resource_qualifiers))
        object.__setattr__(
            self, "property_translation", MappingProxyType(dict(self.property_translation))
        )

    def check_resource(self, resource_type: str) -> str:
        """Return the singular resource name used for per-instance checks."""

        return self.resource or resource_type

    def instance_qualifiers(self) -> Tuple[str, ...]:
        """Return the singular resource qualifiers, identifier first."""

        if self.resource_qualifiers:
            return self.resource_qualifiers
        return (self.index,) + self.qualifiers

    def state_property(self, qualifier: str) -> str:
        """Translate a qualifier name back to the property name used in state."""

        for prop, translated in self.property_translation.items():
            if translated == qualifier:
                return prop
        return qualifier

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResourceCatalogEntry":
        """Build an entry from a JSON-style mapping.

        Both ``property_translation`` and ``propertyTranslation`` spellings are
        accepted, likewise for ``resource_qualifiers``.
        """

        if not isinstance(data, Mapping):
            raise ValueError(f"Catalog entry must be an object, got {type(data).__name__}")
        try:
            iterator = data["iterator"]
            index = data["index"]
        except KeyError as exc:
            raise ValueError(f"Catalog entry is missing required field {exc}") from None
        translation = data.get("property_translation", data.get("propertyTranslation")) or {}
        if not isinstance(translation, Mapping):
            raise ValueError("property_translation must be an object")
        return cls(
            iterator=iterator,
            index=index,
            qualifiers=_name_list(data, "qualifiers"),
            property_translation=translation,
            resource=data.get("resource"),
            resource_qualifiers=_name_list(data, "resource_qualifiers", "resourceQualifiers"),
        )


def _name_list(data: Mapping[str, Any], *keys: str) -> Tuple[str, ...]:
    """Return the first present list of names under ``keys`` as a tuple."""

    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ValueError(f"'{key}' must be a list of strings")
        return tuple(value)
    return ()


class CatalogRegistry:
    """Registry that stores catalog builders keyed by platform."""

    def __init__(self) -> None:
        self._builders: Dict[str, CatalogBuilder] = {}

    @staticmethod
    def _normalize(name: str) -> str:
        if not name:
            raise ValueError("Platform name must be a non-empty string")
        return name.strip().lower()

    def register(self, name: str) -> Callable[[CatalogBuilder], CatalogBuilder]:
        """Return a decorator that registers *name* for the wrapped builder."""

        normalized = self._normalize(name)

        def decorator(func: CatalogBuilder) -> CatalogBuilder:
            if normalized in self._builders and self._builders[normalized] is not func:
                raise ValueError(f"Platform '{name}' is already registered")
            self._builders[normalized] = func
            return func

        return decorator

    def platforms(self) -> Tuple[str, ...]:
        """Return the registered platform names in sorted order."""

        return tuple(sorted(self._builders))

    def catalog_for(self, name: str) -> ResourceCatalog:
        """Return a read-only catalog for the platform *name*."""

        normalized = self._normalize(name)
        try:
            builder = self._builders[normalized]
        except KeyError:
            valid = ", ".join(sorted(self._builders))
            raise UnknownPlatformError(
                f"Unknown platform '{name}'. Valid platforms: {valid}"
            ) from None
        return MappingProxyType(builder())


CATALOG_REGISTRY = CatalogRegistry()
register_platform = CATALOG_REGISTRY.register
catalog_for = CATALOG_REGISTRY.catalog_for


def available_platforms() -> Tuple[str, ...]:
    """Return the sorted names of registered platforms."""

    return CATALOG_REGISTRY.platforms()


def catalog_from_mapping(data: Mapping[str, Any]) -> ResourceCatalog:
    """Build a read-only catalog from ``{resource_type: entry}`` data."""

    if not isinstance(data, Mapping):
        raise ValueError("Catalog must be an object keyed by resource type")
    entries: Dict[str, ResourceCatalogEntry] = {}
    for resource_type, raw in data.items():
        try:
            entries[resource_type] = ResourceCatalogEntry.from_dict(raw)
        except ValueError as exc:
            raise ValueError(f"Invalid catalog entry '{resource_type}': {exc}") from exc
    return MappingProxyType(entries)


def load_catalog_file(path: str) -> ResourceCatalog:
    """Read a JSON catalog file located at *path*."""

    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Unable to read catalog file {path}: {exc}") from exc
    return catalog_from_mapping(data)


def _import_platform_modules() -> None:
    """Import the platform modules so their catalogs register themselves."""

    for module_info in pkgutil.iter_modules(__path__, prefix=f"{__name__}."):
        if not module_info.name.rsplit(".", 1)[-1].startswith("_"):
            importlib.import_module(module_info.name)


_import_platform_modules()

__all__ = [
    "CATALOG_REGISTRY",
    "CatalogBuilder",
    "CatalogRegistry",
    "ResourceCatalog",
    "ResourceCatalogEntry",
    "UnknownPlatformError",
    "available_platforms",
    "catalog_for",
    "catalog_from_mapping",
    "load_catalog_file",
    "register_platform",
]
