import logging
import os
from dataclasses import dataclass


@dataclass
class Settings:
    table_name: str = "ProductsTable"
    region: str | None = None
    endpoint_url: str | None = None
    store: str = "dynamodb"
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        table_name=os.environ.get("PRODUCTS_TABLE", "ProductsTable"),
        region=os.environ.get("AWS_REGION") or None,
        endpoint_url=os.environ.get("DYNAMODB_ENDPOINT_URL") or None,
        store=os.environ.get("PRODUCTS_STORE", "dynamodb").lower(),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str) -> None:
    # Lambda installs its own root handler; only the level is ours to set.
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root.setLevel(level)
