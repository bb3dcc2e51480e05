"""Shared fixtures for negative coverage tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


from tf_negative_coverage.catalog import ResourceCatalogEntry


@pytest.fixture
def instance_catalog():
    """Single-entry catalog with a region qualifier."""

    return {
        "aws_instance": ResourceCatalogEntry(
            iterator="aws_ec2_instance",
            qualifiers=("region",),
            index="instance_id",
        )
    }


@pytest.fixture
def tfstate_v4():
    """Minimal Terraform 0.12+ state document."""

    return {
        "version": 4,
        "terraform_version": "1.5.7",
        "resources": [
            {
                "mode": "managed",
                "type": "aws_instance",
                "name": "web",
                "provider": 'provider["registry.terraform.io/hashicorp/aws"]',
                "instances": [
                    {"index_key": 0, "attributes": {"id": "i-0a", "instance_id": "i-0a", "region": "us-east-1"}},
                    {"index_key": 1, "attributes": {"id": "i-0b", "instance_id": "i-0b", "region": "us-east-1"}},
                ],
            },
            {
                "mode": "managed",
                "type": "aws_vpc",
                "name": "main",
                "instances": [{"attributes": {"id": "vpc-1", "cidr_block": "10.0.0.0/16"}}],
            },
            {
                "mode": "data",
                "type": "aws_ami",
                "name": "ubuntu",
                "instances": [{"attributes": {"id": "ami-1"}}],
            },
        ],
    }
