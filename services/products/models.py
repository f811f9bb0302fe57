from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr


class ProductInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    description: StrictStr
    price: StrictInt | StrictFloat
    available: StrictBool


class Product(ProductInput):
    productId: str

    @classmethod
    def from_input(cls, product_id: str, data: ProductInput) -> "Product":
        return cls(productId=product_id, **data.model_dump())


PRODUCT_FIELDS: tuple[str, ...] = tuple(ProductInput.model_fields)
