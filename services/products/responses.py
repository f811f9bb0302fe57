import json
from typing import Any

JSON_HEADERS = {"content-type": "application/json"}

PRODUCT_NOT_FOUND = "Product not found"


def json_response(status_code: int, payload: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(payload),
    }


def ok(payload: Any) -> dict[str, Any]:
    return json_response(200, payload)


def no_content() -> dict[str, Any]:
    return {"statusCode": 204, "body": ""}


def not_found() -> dict[str, Any]:
    return json_response(404, {"error": PRODUCT_NOT_FOUND})


def malformed_body(exc: ValueError) -> dict[str, Any]:
    return json_response(400, {"error": f"Invalid request body format: {exc}"})


def validation_failed(errors: list[str]) -> dict[str, Any]:
    return json_response(400, {"errors": errors})
