"""
Provision the userhub table.

The table name, region and endpoint come from userhub's Settings (env / .env),
so the script always targets the same table the API reads:

    DYNAMODB_TABLE_NAME=Users python scripts/create_table.py
    python scripts/create_table.py --local          # DynamoDB Local
"""

import argparse
import sys
from typing import Any

import boto3
from botocore.exceptions import ClientError

from userhub.core.config import Settings, get_settings

LOCAL_ENDPOINT = "http://localhost:8000"

# PK = USER#<userId>, SK = PROFILE; all other attributes are schemaless.
KEY_ATTRIBUTES = (("PK", "HASH"), ("SK", "RANGE"))


def build_client(settings: Settings, local: bool = False) -> Any:
    """DynamoDB client for the configured region / endpoint."""
    kwargs: dict[str, Any] = {"region_name": settings.aws_region}
    endpoint = settings.dynamodb_endpoint_url
    if local:
        endpoint = endpoint or LOCAL_ENDPOINT
        # DynamoDB Local accepts any credentials
        kwargs.update(aws_access_key_id="local", aws_secret_access_key="local")
    if endpoint:
        kwargs["endpoint_url"] = endpoint
    return boto3.client("dynamodb", **kwargs)


def ensure_table(client: Any, table_name: str) -> bool:
    """Create the table unless it exists. Returns True when it was created."""
    try:
        client.describe_table(TableName=table_name)
        return False
    except client.exceptions.ResourceNotFoundException:
        pass

    client.create_table(
        TableName=table_name,
        AttributeDefinitions=[
            {"AttributeName": name, "AttributeType": "S"} for name, _ in KEY_ATTRIBUTES
        ],
        KeySchema=[
            {"AttributeName": name, "KeyType": key_type} for name, key_type in KEY_ATTRIBUTES
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    client.get_waiter("table_exists").wait(
        TableName=table_name, WaiterConfig={"Delay": 2, "MaxAttempts": 30}
    )
    return True


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Provision the userhub DynamoDB table.")
    parser.add_argument("--local", action="store_true", help=f"Use DynamoDB Local ({LOCAL_ENDPOINT} unless DYNAMODB_ENDPOINT_URL is set)")
    parser.add_argument("--table-name", default=settings.dynamodb_table_name, help="Override DYNAMODB_TABLE_NAME")
    args = parser.parse_args(argv)

    client = build_client(settings, local=args.local)
    try:
        created = ensure_table(client, args.table_name)
    except ClientError as e:
        print(f"ERROR: {e.response['Error']['Message']}", file=sys.stderr)
        return 1

    status = client.describe_table(TableName=args.table_name)["Table"]["TableStatus"]
    verb = "created" if created else "already exists"
    print(f"{args.table_name} {verb} ({status}) in {settings.aws_region}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
