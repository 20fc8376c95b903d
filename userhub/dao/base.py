from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr

from userhub.core.config import Settings


def get_table(settings: Settings) -> Any:
    """Return a boto3 DynamoDB Table handle for the configured table."""
    kwargs: dict[str, Any] = {"region_name": settings.aws_region}
    if settings.dynamodb_endpoint_url:
        kwargs["endpoint_url"] = settings.dynamodb_endpoint_url
    dynamodb = boto3.resource("dynamodb", **kwargs)
    return dynamodb.Table(settings.dynamodb_table_name)


class BaseDAO:
    def __init__(self, table: Any) -> None:
        self._table = table

    def _item_not_exists_condition(self) -> Attr:
        return Attr("PK").not_exists()
