"""Tests for the Terraform state parser."""

from __future__ import annotations

import pytest

from tf_negative_coverage.parser import SnapshotParseError, TerraformStateParser, load_state_file


def test_parse_v4_groups_managed_resources(tfstate_v4) -> None:
    """Managed resources are grouped by type with count-style instance names."""

    parsed = TerraformStateParser().parse_resources(tfstate_v4, "aws")

    assert list(parsed) == ["aws_instance", "aws_vpc"]
    assert list(parsed["aws_instance"]) == ["web[0]", "web[1]"]
    assert parsed["aws_instance"]["web[1]"]["instance_id"] == "i-0b"
    assert list(parsed["aws_vpc"]) == ["main"]


def test_parse_v4_for_each_keys_are_quoted() -> None:
    """String index keys follow Terraform's quoted address form."""

    snapshot = {
        "resources": [
            {
                "type": "google_storage_bucket",
                "name": "b",
                "instances": [{"index_key": "logs", "attributes": {"name": "logs-bucket"}}],
            }
        ]
    }

    parsed = TerraformStateParser().parse_resources(snapshot, "gcp")

    assert list(parsed["google_storage_bucket"]) == ['b["logs"]']


def test_parse_filters_other_platforms(tfstate_v4) -> None:
    """Resources from another provider are left out."""

    tfstate_v4["resources"].append(
        {"type": "azurerm_resource_group", "name": "rg", "instances": [{"attributes": {}}]}
    )

    assert "azurerm_resource_group" not in TerraformStateParser().parse_resources(tfstate_v4, "aws")
    assert list(TerraformStateParser().parse_resources(tfstate_v4, "azure")) == ["azurerm_resource_group"]


def test_parse_legacy_modules() -> None:
    """Pre-0.12 state is read from module resource maps."""

    snapshot = {
        "version": 3,
        "modules": [
            {
                "path": ["root"],
                "resources": {
                    "aws_instance.web.0": {"type": "aws_instance", "primary": {"attributes": {"id": "i-1"}}},
                    "aws_instance.db": {"type": "aws_instance", "primary": {"attributes": {"id": "i-2"}}},
                    "data.aws_ami.ubuntu": {"type": "aws_ami", "primary": {"attributes": {}}},
                },
            }
        ],
    }

    parsed = TerraformStateParser().parse_resources(snapshot, "aws")

    assert parsed == {"aws_instance": {"web[0]": {"id": "i-1"}, "db": {"id": "i-2"}}}


@pytest.mark.parametrize(
    "snapshot",
    [
        [],
        {"version": 4},
        {"resources": {}},
        {"resources": [{"name": "web"}]},
        {"modules": [{"resources": {"broken": {}}}]},
    ],
)
def test_parse_rejects_malformed_snapshots(snapshot) -> None:
    """Snapshots that are not tfstate documents raise :class:`SnapshotParseError`."""

    with pytest.raises(SnapshotParseError):
        TerraformStateParser().parse_resources(snapshot, "aws")


def test_load_state_file_rejects_invalid_json(tmp_path) -> None:
    path = tmp_path / "bad.tfstate"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SnapshotParseError, match="not valid JSON"):
        load_state_file(str(path))


def test_load_state_file_missing(tmp_path) -> None:
    with pytest.raises(SnapshotParseError, match="Unable to read"):
        load_state_file(str(tmp_path / "absent.tfstate"))


def test_parse_v4_prefixes_module_address() -> None:
    """Same-named resources in different modules stay distinct."""

    snapshot = {
        "resources": [
            {"type": "aws_instance", "name": "web", "instances": [{"attributes": {"id": "i-root"}}]},
            {
                "module": "module.app",
                "type": "aws_instance",
                "name": "web",
                "instances": [{"attributes": {"id": "i-app"}}],
            },
            {
                "module": 'module.svc["blue"]',
                "type": "aws_instance",
                "name": "web",
                "instances": [{"index_key": 0, "attributes": {"id": "i-blue"}}],
            },
        ]
    }

    parsed = TerraformStateParser().parse_resources(snapshot, "aws")

    assert parsed["aws_instance"] == {
        "web": {"id": "i-root"},
        "module.app.web": {"id": "i-app"},
        'module.svc["blue"].web[0]': {"id": "i-blue"},
    }


def test_parse_legacy_prefixes_module_path() -> None:
    """Legacy module paths become module addresses."""

    snapshot = {
        "modules": [
            {"path": ["root"], "resources": {"aws_vpc.main": {"primary": {"attributes": {"id": "vpc-1"}}}}},
            {
                "path": ["root", "network"],
                "resources": {"aws_vpc.main": {"primary": {"attributes": {"id": "vpc-2"}}}},
            },
        ]
    }

    parsed = TerraformStateParser().parse_resources(snapshot, "aws")

    assert list(parsed["aws_vpc"]) == ["main", "module.network.main"]
