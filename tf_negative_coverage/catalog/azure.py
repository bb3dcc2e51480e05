"""Resource catalog for Microsoft Azure state."""
from __future__ import annotations

from typing import Dict

from . import ResourceCatalogEntry, register_platform

# Terraform stores the resource group as ``resource_group_name`` while the
# check resources expect ``resource_group``.
_RESOURCE_GROUP_TRANSLATION = {"resource_group_name": "resource_group"}


@register_platform("azure")
def azure_catalog() -> Dict[str, ResourceCatalogEntry]:
    """Return catalog entries keyed by Terraform resource type."""

    return {
        "azurerm_resource_group": ResourceCatalogEntry(
            iterator="azure_resource_groups",
            index="names",
            resource="azure_resource_group",
            resource_qualifiers=("name",),
        ),
        "azurerm_virtual_network": ResourceCatalogEntry(
            iterator="azure_virtual_networks",
            index="names",
            qualifiers=("resource_group",),
            property_translation=_RESOURCE_GROUP_TRANSLATION,
            resource="azure_virtual_network",
            resource_qualifiers=("name", "resource_group"),
        ),
        "azurerm_network_security_group": ResourceCatalogEntry(
            iterator="azure_network_security_groups",
            index="names",
            qualifiers=("resource_group",),
            property_translation=_RESOURCE_GROUP_TRANSLATION,
            resource="azure_network_security_group",
            resource_qualifiers=("name", "resource_group"),
        ),
        "azurerm_storage_account": ResourceCatalogEntry(
            iterator="azure_storage_accounts",
            index="names",
            qualifiers=("resource_group",),
            property_translation=_RESOURCE_GROUP_TRANSLATION,
            resource="azure_storage_account",
            resource_qualifiers=("name", "resource_group"),
        ),
        "azurerm_virtual_machine": ResourceCatalogEntry(
            iterator="azure_virtual_machines",
            index="names",
            qualifiers=("resource_group",),
            property_translation=_RESOURCE_GROUP_TRANSLATION,
            resource="azure_virtual_machine",
            resource_qualifiers=("name", "resource_group"),
        ),
    }


__all__ = ["azure_catalog"]
