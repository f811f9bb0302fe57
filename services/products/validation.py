"""Product body validation.

Every field rule is checked and every violation reported, so a client fixing
a bad request sees the whole list at once rather than one error per round
trip.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from products.models import PRODUCT_FIELDS, ProductInput

NOT_AN_OBJECT = "body must be a JSON object"

_EXPECTED_TYPES = {
    "name": "string",
    "description": "string",
    "price": "number",
    "available": "boolean",
}


@dataclass
class ValidationResult:
    product: ProductInput | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.product is not None and not self.errors


def _describe(error: dict) -> str:
    name = error["loc"][0]
    if error["type"] == "missing" or error.get("input") is None:
        return f"{name} is a required field"
    return f"{name} must be a {_EXPECTED_TYPES[name]}"


def validate_product(data: Any) -> ValidationResult:
    if not isinstance(data, dict):
        return ValidationResult(errors=[NOT_AN_OBJECT])
    try:
        product = ProductInput.model_validate(data)
    except ValidationError as exc:
        # Union members report one error each; keep the first per field.
        by_field: dict[str, str] = {}
        for error in exc.errors():
            by_field.setdefault(error["loc"][0], _describe(error))
        return ValidationResult(errors=[by_field[f] for f in PRODUCT_FIELDS if f in by_field])
    return ValidationResult(product=product)
