from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from . import config
from .errors import StoreError


class ContactStore:
    """Data access layer for the contacts table.

    Wraps a boto3 ``Table`` resource so the handlers never touch boto3
    directly. Every boto3 failure comes out as :class:`StoreError`.
    """

    def __init__(self, table):
        self.table = table

    @classmethod
    def from_environment(cls):
        kwargs = {}
        if config.ENDPOINT_URL:
            kwargs["endpoint_url"] = config.ENDPOINT_URL
        ddb = boto3.resource("dynamodb", **kwargs)
        return cls(ddb.Table(config.TABLE_NAME))

    @property
    def table_name(self) -> str:
        return self.table.name

    def get(self, name: str) -> Optional[Dict[str, Any]]:
        try:
            res = self.table.get_item(Key={"name": name})
        except (ClientError, BotoCoreError) as e:
            raise StoreError("get_item", e) from e
        return res.get("Item")

    def put(self, item: Dict[str, Any]) -> None:
        try:
            self.table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            raise StoreError("put_item", e) from e

    def put_many(self, items: List[Dict[str, Any]]) -> None:
        try:
            with self.table.batch_writer(overwrite_by_pkeys=["name"]) as batch:
                for it in items:
                    batch.put_item(Item=it)
        except (ClientError, BotoCoreError) as e:
            raise StoreError("batch_write_item", e) from e

    def update(self, name: str, expression: Dict[str, Any]) -> None:
        """Apply a partial update built by ``queries.build_update_expression``.

        DynamoDB creates the item when ``name`` does not exist yet; no
        condition is attached, so concurrent updates are last-write-wins.
        """
        try:
            self.table.update_item(Key={"name": name}, **expression)
        except (ClientError, BotoCoreError) as e:
            raise StoreError("update_item", e) from e

    def delete(self, name: str) -> None:
        try:
            self.table.delete_item(Key={"name": name})
        except (ClientError, BotoCoreError) as e:
            raise StoreError("delete_item", e) from e

    def scan(self, filter_expression=None, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Return every item matching ``filter_expression``, in scan order.

        Follows ``LastEvaluatedKey`` until the table is exhausted or ``limit``
        items have been collected.
        """
        scan_args = {}
        if filter_expression is not None:
            scan_args["FilterExpression"] = filter_expression
        if limit is not None:
            scan_args["Limit"] = limit

        items = []
        try:
            while True:
                resp = self.table.scan(**scan_args)
                items.extend(resp.get("Items", []))
                if limit is not None and len(items) >= limit:
                    return items[:limit]
                lek = resp.get("LastEvaluatedKey")
                if not lek:
                    return items
                scan_args["ExclusiveStartKey"] = lek
        except (ClientError, BotoCoreError) as e:
            raise StoreError("scan", e) from e
