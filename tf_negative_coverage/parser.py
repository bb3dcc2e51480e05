"""Default Terraform state parser used by the negative coverage generator."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

ParsedResourceSet = Mapping[str, Mapping[str, Any]]

# Resource type prefixes that belong to each platform's Terraform providers.
PLATFORM_PREFIXES: Dict[str, Tuple[str, ...]] = {
    "aws": ("aws_",),
    "azure": ("azurerm_", "azuread_"),
    "gcp": ("google_",),
}


class SnapshotParseError(ValueError):
    """Raised when a state snapshot cannot be interpreted."""


def load_state_file(path: str) -> Dict[str, Any]:
    """Return the JSON document stored at *path*."""

    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as exc:
        raise SnapshotParseError(f"Unable to read state file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SnapshotParseError(f"State file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SnapshotParseError(f"State file {path} must contain a JSON object")
    return data


def _instance_name(name: str, index_key: Any, module: Optional[str] = None) -> str:
    if index_key is not None:
        name = f"{name}[{json.dumps(index_key)}]"
    if module:
        return f"{module}.{name}"
    return name


def _legacy_module_address(path: Any) -> Optional[str]:
    """Return ``module.a.module.b`` for a legacy ``["root", "a", "b"]`` path."""

    if not path:
        return None
    if not isinstance(path, list):
        raise SnapshotParseError("Module 'path' must be a list")
    names = [str(part) for part in path[1:]] if path[0] == "root" else [str(part) for part in path]
    return ".".join(f"module.{part}" for part in names) or None


class TerraformStateParser:
    """Group managed resources of a state snapshot by resource type.

    The result maps each resource type to ``{instance name: attributes}``.
    Instance names follow Terraform addressing: ``web`` for a single
    instance, ``web[0]`` or ``web["blue"]`` for ``count``/``for_each``,
    prefixed by the module address (``module.app.web``) outside the root
    module.
    """

    def __init__(self, prefixes: Optional[Mapping[str, Tuple[str, ...]]] = None) -> None:
        self._prefixes = dict(PLATFORM_PREFIXES if prefixes is None else prefixes)

    def _accepts(self, resource_type: str, platform: str) -> bool:
        prefixes = self._prefixes.get(platform.strip().lower())
        if not prefixes:
            return True
        return resource_type.startswith(prefixes)

    def parse_resources(self, snapshot: Mapping[str, Any], platform: str) -> ParsedResourceSet:
        """Return the parsed resource set of *snapshot* for *platform*."""

        if not isinstance(snapshot, Mapping):
            raise SnapshotParseError("State snapshot must be a JSON object")

        if "resources" in snapshot:
            entries = self._iter_v4_resources(snapshot["resources"])
        elif "modules" in snapshot:
            entries = self._iter_legacy_resources(snapshot["modules"])
        else:
            raise SnapshotParseError(
                "State snapshot has neither 'resources' nor 'modules'; is this a tfstate file?"
            )

        parsed: Dict[str, Dict[str, Any]] = {}
        for resource_type, instance_name, attributes in entries:
            if not self._accepts(resource_type, platform):
                logger.debug("Skipping %s.%s: not a %s resource", resource_type, instance_name, platform)
                continue
            parsed.setdefault(resource_type, {})[instance_name] = attributes
        logger.debug("Parsed resource types for %s: %s", platform, list(parsed))
        return parsed

    @staticmethod
    def _iter_v4_resources(resources: Any):
        if not isinstance(resources, list):
            raise SnapshotParseError("'resources' must be a list")
        for resource in resources:
            if not isinstance(resource, Mapping):
                raise SnapshotParseError("Each state resource must be an object")
            if resource.get("mode", "managed") != "managed":
                continue
            try:
                resource_type = resource["type"]
                name = resource["name"]
            except KeyError as exc:
                raise SnapshotParseError(f"State resource is missing {exc}") from None
            instances = resource.get("instances") or []
            if not isinstance(instances, list):
                raise SnapshotParseError(f"Instances of {resource_type}.{name} must be a list")
            for instance in instances:
                if not isinstance(instance, Mapping):
                    raise SnapshotParseError(f"Instance of {resource_type}.{name} must be an object")
                yield (
                    resource_type,
                    _instance_name(name, instance.get("index_key"), resource.get("module")),
                    dict(instance.get("attributes") or {}),
                )

    @staticmethod
    def _iter_legacy_resources(modules: Any):
        if not isinstance(modules, list):
            raise SnapshotParseError("'modules' must be a list")
        for module in modules:
            if not isinstance(module, Mapping):
                raise SnapshotParseError("Each state module must be an object")
            module_address = _legacy_module_address(module.get("path"))
            resources = module.get("resources") or {}
            if not isinstance(resources, Mapping):
                raise SnapshotParseError("Module 'resources' must be an object")
            for address, resource in resources.items():
                if address.startswith("data."):
                    continue
                if not isinstance(resource, Mapping):
                    raise SnapshotParseError(f"State resource {address} must be an object")
                parts = address.split(".")
                if len(parts) < 2:
                    raise SnapshotParseError(f"Unexpected resource address '{address}'")
                resource_type = resource.get("type", parts[0])
                index_key = int(parts[2]) if len(parts) > 2 and parts[2].isdigit() else None
                attributes = (resource.get("primary") or {}).get("attributes") or {}
                yield resource_type, _instance_name(parts[1], index_key, module_address), dict(attributes)


__all__ = [
    "PLATFORM_PREFIXES",
    "ParsedResourceSet",
    "SnapshotParseError",
    "TerraformStateParser",
    "load_state_file",
]
