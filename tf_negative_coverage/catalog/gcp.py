"""Resource catalog for Google Cloud Platform state."""
from __future__ import annotations

from typing import Dict

from . import ResourceCatalogEntry, register_platform


@register_platform("gcp")
def gcp_catalog() -> Dict[str, ResourceCatalogEntry]:
    """Return catalog entries keyed by Terraform resource type."""

    return {
        "google_compute_instance": ResourceCatalogEntry(
            iterator="google_compute_instances",
            index="instance_names",
            qualifiers=("project", "zone"),
            resource="google_compute_instance",
            resource_qualifiers=("name", "project", "zone"),
        ),
        "google_compute_network": ResourceCatalogEntry(
            iterator="google_compute_networks",
            index="network_names",
            qualifiers=("project",),
            resource="google_compute_network",
            resource_qualifiers=("name", "project"),
        ),
        "google_compute_subnetwork": ResourceCatalogEntry(
            iterator="google_compute_subnetworks",
            index="subnetwork_names",
            qualifiers=("project", "region"),
            resource="google_compute_subnetwork",
            resource_qualifiers=("name", "project", "region"),
        ),
        "google_storage_bucket": ResourceCatalogEntry(
            iterator="google_storage_buckets",
            index="bucket_names",
            qualifiers=("project",),
            resource="google_storage_bucket",
            resource_qualifiers=("name",),
        ),
        "google_service_account": ResourceCatalogEntry(
            iterator="google_service_accounts",
            index="service_account_emails",
            qualifiers=("project",),
            resource="google_service_account",
            resource_qualifiers=("name", "project"),
        ),
    }


__all__ = ["gcp_catalog"]
