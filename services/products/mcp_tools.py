"""MCP tool definitions for the products catalog.

Exposes the same five operations as the HTTP handlers via the Model Context
Protocol, so agents can discover and manage products without knowing the
REST routes.
"""

import json

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from products.handlers import ProductHandlers


def unwrap(response: dict, product_id: str | None = None):
    """Turn a handler response into a tool result.

    Error bodies are returned as-is so the agent sees the same ``error`` or
    ``errors`` payload an HTTP client would.
    """
    if response["statusCode"] == 204:
        return {"deleted": product_id}
    return json.loads(response["body"])


def _event(product_id: str | None = None, body: dict | None = None) -> dict:
    return {
        "pathParameters": {"id": product_id} if product_id is not None else None,
        "body": json.dumps(body) if body is not None else None,
    }


def build_mcp(handlers: ProductHandlers) -> FastMCP:
    mcp = FastMCP(
        "Products Catalog",
        stateless_http=True,
        json_response=True,
        streamable_http_path="/",
        transport_security=TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
        ),
    )

    @mcp.tool()
    def browse_products() -> list[dict]:
        """List every product with its productId, name, description, price
        and availability."""
        return unwrap(handlers.list(_event()))

    @mcp.tool()
    def get_product_details(product_id: str) -> dict:
        """Get a single product.

        Args:
            product_id: The product identifier returned when it was created
        """
        return unwrap(handlers.get(_event(product_id)))

    @mcp.tool()
    def create_product(name: str, description: str, price: float, available: bool) -> dict:
        """Create a product. A new productId is generated and returned."""
        body = {"name": name, "description": description, "price": price, "available": available}
        return unwrap(handlers.create(_event(body=body)))

    @mcp.tool()
    def update_product(
        product_id: str, name: str, description: str, price: float, available: bool
    ) -> dict:
        """Replace every field of an existing product."""
        body = {"name": name, "description": description, "price": price, "available": available}
        return unwrap(handlers.update(_event(product_id, body)))

    @mcp.tool()
    def delete_product(product_id: str) -> dict:
        """Delete a product by id."""
        return unwrap(handlers.delete(_event(product_id)), product_id)

    return mcp
