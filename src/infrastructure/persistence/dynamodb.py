"""
Shared boto3 wiring for the DynamoDB-backed repositories.
"""

import os
from typing import Any, Optional

import boto3


def dynamodb_table(
    table_name: str,
    region: Optional[str] = None,
    endpoint_url: Optional[str] = None,
) -> Any:
    """Return a boto3 Table resource; *endpoint_url* targets DynamoDB Local."""
    resource = boto3.resource(
        "dynamodb",
        region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        endpoint_url=endpoint_url or None,
    )
    return resource.Table(table_name)
