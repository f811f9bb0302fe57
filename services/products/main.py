"""Local HTTP front end for the product handlers.

Translates plain HTTP requests into API Gateway proxy events so the same
handlers that run in Lambda can be exercised with curl or a browser.
"""

import base64
import contextlib
import os

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from products.handlers import ProductHandlers, default_handlers
from products.mcp_tools import build_mcp


def _to_response(result: dict) -> Response:
    return Response(
        content=result.get("body", ""),
        status_code=result["statusCode"],
        headers=result.get("headers") or {},
    )


async def _event(request: Request, product_id: str | None = None) -> dict:
    raw = await request.body()
    return {
        "httpMethod": request.method,
        "path": request.url.path,
        # Raw bytes; parse_body decodes them.
        "body": base64.b64encode(raw).decode("ascii") if raw else None,
        "pathParameters": {"id": product_id} if product_id is not None else None,
        "isBase64Encoded": True,
    }


def create_app(handlers: ProductHandlers, mount_mcp: bool = True) -> FastAPI:
    mcp = build_mcp(handlers) if mount_mcp else None

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        if mcp is None:
            yield
            return
        async with mcp.session_manager.run():
            yield

    app = FastAPI(title="Products Service", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if mcp is not None:
        app.mount("/mcp", mcp.streamable_http_app())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/products")
    async def list_products(request: Request):
        return _to_response(handlers.list(await _event(request)))

    @app.post("/products")
    async def create_product(request: Request):
        return _to_response(handlers.create(await _event(request)))

    @app.get("/products/{product_id}")
    async def get_product(product_id: str, request: Request):
        return _to_response(handlers.get(await _event(request, product_id)))

    @app.put("/products/{product_id}")
    async def update_product(product_id: str, request: Request):
        return _to_response(handlers.update(await _event(request, product_id)))

    @app.delete("/products/{product_id}")
    async def delete_product(product_id: str, request: Request):
        return _to_response(handlers.delete(await _event(request, product_id)))

    return app


def get_app() -> FastAPI:
    return create_app(default_handlers())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(get_app(), host="0.0.0.0", port=int(os.environ.get("PORT", "8000")))
