"""Tests for controls covering resource types missing from state."""

from __future__ import annotations

from tf_negative_coverage.catalog import ResourceCatalogEntry
from tf_negative_coverage.unmatched import analyze_unmatched_resources


def test_missing_type_yields_control_with_unset_qualifier(instance_catalog) -> None:
    """An empty state produces a full-severity control with ``region`` unset."""

    controls = analyze_unmatched_resources({}, instance_catalog, "/tmp/terraform.tfstate")

    assert len(controls) == 1
    control = controls[0]
    assert control.id == "NEGATIVE-COVERAGE:aws_ec2_instance"
    assert control.title == "tf-negative-coverage NEGATIVE-COVERAGE:aws_ec2_instance"
    assert "/tmp/terraform.tfstate" in control.description
    assert "Generated by tf-negative-coverage v" in control.description
    assert control.qualifiers == (("region", None),)
    assert control.impact == 1.0
    assert control.scope == "unmatched"
    assert control.excluded_instance_ids == ()


def test_qualifiers_are_borrowed_from_other_types(instance_catalog) -> None:
    """Environment-wide values such as region come from sibling resources."""

    parsed = {"aws_vpc": {"main": {"id": "vpc-1", "region": "ap-south-1"}}}

    controls = analyze_unmatched_resources(parsed, instance_catalog, "state")

    assert controls[0].qualifiers == (("region", "ap-south-1"),)


def test_present_types_are_skipped_and_catalog_order_kept() -> None:
    """Only absent types are covered, in the catalog's declaration order."""

    catalog = {
        "google_storage_bucket": ResourceCatalogEntry(
            iterator="google_storage_buckets", index="bucket_names", qualifiers=("project",)
        ),
        "google_compute_instance": ResourceCatalogEntry(
            iterator="google_compute_instances", index="instance_names", qualifiers=("project", "zone")
        ),
        "google_compute_network": ResourceCatalogEntry(
            iterator="google_compute_networks", index="network_names", qualifiers=("project",)
        ),
    }
    parsed = {"google_compute_instance": {"vm": {"project": "demo", "zone": "us-central1-a"}}}

    controls = analyze_unmatched_resources(parsed, catalog, "state")

    assert [c.iterator for c in controls] == ["google_storage_buckets", "google_compute_networks"]
    assert controls[0].qualifiers == (("project", "demo"),)


def test_borrowed_qualifiers_use_property_translation() -> None:
    """Missing types look up the translated state property in sibling data."""

    catalog = {
        "azurerm_storage_account": ResourceCatalogEntry(
            iterator="azure_storage_accounts",
            index="names",
            qualifiers=("resource_group",),
            property_translation={"resource_group_name": "resource_group"},
        )
    }
    parsed = {"azurerm_resource_group": {"main": {"name": "rg-main", "resource_group_name": "rg-main"}}}

    controls = analyze_unmatched_resources(parsed, catalog, "state")

    assert controls[0].qualifiers == (("resource_group", "rg-main"),)
