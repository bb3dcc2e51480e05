"""Resource catalog for Amazon Web Services state."""
from __future__ import annotations

from typing import Dict

from . import ResourceCatalogEntry, register_platform


@register_platform("aws")
def aws_catalog() -> Dict[str, ResourceCatalogEntry]:
    """Return catalog entries keyed by Terraform resource type."""

    return {
        "aws_instance": ResourceCatalogEntry(
            iterator="aws_ec2_instances",
            index="instance_ids",
            resource="aws_ec2_instance",
            resource_qualifiers=("instance_id",),
        ),
        "aws_vpc": ResourceCatalogEntry(
            iterator="aws_vpcs",
            index="vpc_ids",
            resource="aws_vpc",
            resource_qualifiers=("vpc_id",),
        ),
        "aws_subnet": ResourceCatalogEntry(
            iterator="aws_subnets",
            index="subnet_ids",
            resource="aws_subnet",
            resource_qualifiers=("subnet_id",),
        ),
        "aws_security_group": ResourceCatalogEntry(
            iterator="aws_security_groups",
            index="group_ids",
            resource="aws_security_group",
            resource_qualifiers=("group_id", "vpc_id"),
        ),
        "aws_s3_bucket": ResourceCatalogEntry(
            iterator="aws_s3_buckets",
            index="bucket_names",
            resource="aws_s3_bucket",
            resource_qualifiers=("bucket_name",),
        ),
        "aws_iam_role": ResourceCatalogEntry(
            iterator="aws_iam_roles",
            index="role_names",
            resource="aws_iam_role",
            resource_qualifiers=("role_name",),
        ),
        "aws_iam_user": ResourceCatalogEntry(
            iterator="aws_iam_users",
            index="usernames",
            resource="aws_iam_user",
            resource_qualifiers=("username",),
        ),
        "aws_ebs_volume": ResourceCatalogEntry(
            iterator="aws_ebs_volumes",
            index="volume_ids",
            resource="aws_ebs_volume",
            resource_qualifiers=("volume_id",),
        ),
        "aws_kms_key": ResourceCatalogEntry(
            iterator="aws_kms_keys",
            index="key_ids",
            resource="aws_kms_key",
            resource_qualifiers=("key_id",),
        ),
        "aws_sns_topic": ResourceCatalogEntry(
            iterator="aws_sns_topics",
            index="topic_arns",
            resource="aws_sns_topic",
            resource_qualifiers=("arn",),
        ),
    }


__all__ = ["aws_catalog"]
