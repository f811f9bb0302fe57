"""Record store clients for the products table.

The handlers only ever see a ``ProductStore``; the DynamoDB implementation is
built from settings at the edge and injected, and tests swap in the in-memory
one.
"""

import copy
import logging
from decimal import Decimal
from typing import Any, Protocol

import boto3

from products.config import Settings

logger = logging.getLogger(__name__)

KEY = "productId"


class ProductStore(Protocol):
    def put(self, record: dict[str, Any]) -> None: ...

    def get(self, product_id: str) -> dict[str, Any] | None: ...

    def delete(self, product_id: str) -> None: ...

    def scan_all(self) -> list[dict[str, Any]]: ...


def to_dynamo(value: Any) -> Any:
    """DynamoDB rejects Python floats; numbers go in as Decimal."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: to_dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_dynamo(v) for v in value]
    return value


def from_dynamo(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: from_dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [from_dynamo(v) for v in value]
    return value


class DynamoProductStore:
    """Products table backed by a boto3 DynamoDB ``Table`` resource.

    Errors from boto3 are left to propagate; there is no retry here beyond
    what botocore itself does.
    """

    def __init__(self, table):
        self._table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "DynamoProductStore":
        dynamodb = boto3.resource(
            "dynamodb",
            region_name=settings.region,
            endpoint_url=settings.endpoint_url,
        )
        return cls(dynamodb.Table(settings.table_name))

    def put(self, record: dict[str, Any]) -> None:
        self._table.put_item(Item=to_dynamo(record))

    def get(self, product_id: str) -> dict[str, Any] | None:
        response = self._table.get_item(Key={KEY: product_id})
        item = response.get("Item")
        return from_dynamo(item) if item is not None else None

    def delete(self, product_id: str) -> None:
        self._table.delete_item(Key={KEY: product_id})

    def scan_all(self) -> list[dict[str, Any]]:
        # Single scan, no LastEvaluatedKey follow-up; results past the 1 MB
        # page are not returned.
        response = self._table.scan()
        if "LastEvaluatedKey" in response:
            logger.warning("scan of %s truncated at one page", self._table.name)
        return [from_dynamo(item) for item in response.get("Items", [])]


class InMemoryProductStore:
    def __init__(self, records: dict[str, dict[str, Any]] | None = None):
        self._records: dict[str, dict[str, Any]] = {}
        for record in (records or {}).values():
            self.put(record)

    def put(self, record: dict[str, Any]) -> None:
        self._records[record[KEY]] = copy.deepcopy(record)

    def get(self, product_id: str) -> dict[str, Any] | None:
        record = self._records.get(product_id)
        return copy.deepcopy(record) if record is not None else None

    def delete(self, product_id: str) -> None:
        self._records.pop(product_id, None)

    def scan_all(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(r) for r in self._records.values()]


def build_store(settings: Settings) -> ProductStore:
    if settings.store == "memory":
        return InMemoryProductStore()
    if settings.store == "dynamodb":
        return DynamoProductStore.from_settings(settings)
    raise ValueError(f"Unknown PRODUCTS_STORE: {settings.store}")
