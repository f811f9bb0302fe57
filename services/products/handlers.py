"""Request handlers for the products API.

One method per operation. Each takes an API Gateway proxy event and returns a
proxy response dict. Only malformed bodies, validation failures and missing
records are answered here; store errors propagate to the Lambda runtime.

Update and delete read before they write so a missing id is a 404. A
concurrent delete landing between that read and the write is not detected;
last writer wins.
"""

import base64
import functools
import json
import logging
import math
import uuid
from collections.abc import Callable
from typing import Any, NoReturn

from products import responses
from products.config import configure_logging, load_settings
from products.models import Product
from products.store import ProductStore, build_store
from products.validation import validate_product

logger = logging.getLogger(__name__)


def _new_product_id() -> str:
    return str(uuid.uuid4())


# DynamoDB numbers: at most 38 significant digits, magnitude 1E-130 to 1E+126.
MAX_INT_DIGITS = 38
MIN_MAGNITUDE = 1e-130
MAX_MAGNITUDE = 1e126


def _reject_constant(constant: str) -> NoReturn:
    raise ValueError(f"{constant} is not a valid JSON number")


def _parse_float(literal: str) -> float:
    value = float(literal)
    mantissa = literal.lower().partition("e")[0]
    if value == 0:
        if mantissa.strip("-0.") == "":
            return value
        raise ValueError(f"{literal} is out of range")
    if not math.isfinite(value) or not MIN_MAGNITUDE <= abs(value) < MAX_MAGNITUDE:
        raise ValueError(f"{literal} is out of range")
    return value


def _parse_int(literal: str) -> int:
    if len(literal.lstrip("-")) > MAX_INT_DIGITS:
        raise ValueError(f"{literal} is out of range")
    return int(literal)


def parse_body(event: dict[str, Any]) -> Any:
    """Decode the event body as JSON; raises ValueError when it isn't."""
    body = event.get("body")
    if body is None or body == "":
        raise ValueError("request body is empty")
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(
        body,
        parse_constant=_reject_constant,
        parse_float=_parse_float,
        parse_int=_parse_int,
    )


def path_id(event: dict[str, Any]) -> str | None:
    return (event.get("pathParameters") or {}).get("id")


class ProductHandlers:
    def __init__(self, store: ProductStore, id_factory: Callable[[], str] = _new_product_id):
        self.store = store
        self.id_factory = id_factory

    def create(self, event: dict[str, Any]) -> dict[str, Any]:
        logger.debug("create event: %s", event)
        try:
            data = parse_body(event)
        except ValueError as exc:
            return responses.malformed_body(exc)

        result = validate_product(data)
        if not result.ok:
            return responses.validation_failed(result.errors)

        product = Product.from_input(self.id_factory(), result.product)
        record = product.model_dump()
        self.store.put(record)
        logger.info("created product %s", product.productId)
        return responses.ok(record)

    def get(self, event: dict[str, Any]) -> dict[str, Any]:
        product_id = path_id(event)
        record = self.store.get(product_id) if product_id else None
        if record is None:
            return responses.not_found()
        return responses.ok(record)

    def update(self, event: dict[str, Any]) -> dict[str, Any]:
        product_id = path_id(event)
        if not product_id or self.store.get(product_id) is None:
            return responses.not_found()

        try:
            data = parse_body(event)
        except ValueError as exc:
            return responses.malformed_body(exc)

        result = validate_product(data)
        if not result.ok:
            return responses.validation_failed(result.errors)

        record = Product.from_input(product_id, result.product).model_dump()
        self.store.put(record)
        logger.info("updated product %s", product_id)
        return responses.ok(record)

    def delete(self, event: dict[str, Any]) -> dict[str, Any]:
        product_id = path_id(event)
        if not product_id or self.store.get(product_id) is None:
            return responses.not_found()

        self.store.delete(product_id)
        logger.info("deleted product %s", product_id)
        return responses.no_content()

    def list(self, event: dict[str, Any]) -> dict[str, Any]:
        return responses.ok(self.store.scan_all())


@functools.lru_cache(maxsize=1)
def default_handlers() -> ProductHandlers:
    """Handlers wired to the configured store, built once per container."""
    settings = load_settings()
    configure_logging(settings.log_level)
    return ProductHandlers(build_store(settings))


# Lambda entry points


def create_product(event, context):
    return default_handlers().create(event)


def get_product(event, context):
    return default_handlers().get(event)


def update_product(event, context):
    return default_handlers().update(event)


def delete_product(event, context):
    return default_handlers().delete(event)


def list_products(event, context):
    return default_handlers().list(event)
