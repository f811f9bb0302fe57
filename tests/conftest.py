import json
import itertools

import pytest

from products.handlers import ProductHandlers
from products.store import InMemoryProductStore


@pytest.fixture
def store():
    return InMemoryProductStore()


@pytest.fixture
def handlers(store):
    counter = itertools.count(1)
    return ProductHandlers(store, id_factory=lambda: f"prod_{next(counter):03d}")


@pytest.fixture
def product_body():
    return {
        "name": "Wireless Headphones",
        "description": "Over-ear headphones with noise cancellation.",
        "price": 79.99,
        "available": True,
    }


def make_event(body=None, product_id=None):
    return {
        "body": json.dumps(body) if body is not None and not isinstance(body, str) else body,
        "pathParameters": {"id": product_id} if product_id is not None else None,
    }


def body_of(response):
    return json.loads(response["body"])
