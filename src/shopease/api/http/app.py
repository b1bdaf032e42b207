"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.shopease.api.http.routers import admin, health
from src.shopease.api.http.routers.service import notification, order, product
from src.shopease.api.utils.app_startup import configure_logging
from src.shopease.core.errors import ShopEaseError
from src.shopease.core.storage import MemStorage, Storage
from src.shopease.runtime.config.config_data import ConfigData
from src.shopease.runtime.context import get_config

__all__ = ["create_app", "register_routes"]


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, environment: str = "development") -> None:
        super().__init__(app)
        self.environment = environment

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        # HSTS only in prod
        if self.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"message": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Error handlers ---
async def shopease_error_handler(request: Request, exc: ShopEaseError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Malformed request body: {exc.errors()[:1]}")
    return JSONResponse(
        status_code=400, content={"message": "Invalid request body", "field": None}
    )


# --- Router registration ---
def register_routes(app: FastAPI, storage: Storage) -> None:
    """Attach the entity store and mount every router.

    Handlers reach the store only through ``app.state``, so each app owns
    exactly the store it was registered with.
    """
    app.state.storage = storage

    app.include_router(health.router)
    app.include_router(product.router, prefix="/api")
    app.include_router(order.router, prefix="/api")
    app.include_router(notification.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")


def create_app(
    storage: Storage | None = None, config: ConfigData | None = None
) -> FastAPI:
    """Build the API around ``storage``.

    Args:
        storage: Entity store to serve; a seeded ``MemStorage`` is built
            from the configuration when omitted
        config: Configuration to use instead of the current app context
    """
    config = config or get_config()
    configure_logging(config)

    if storage is None:
        storage = MemStorage(
            seed_catalog=config.store.seed_catalog,
            enforce_product_reference=config.store.enforce_product_reference,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"ShopEase API ready on {config.app.base_url} "
            f"with {storage.count_products()} products"
        )
        try:
            yield
        finally:
            logger.info("ShopEase API shutting down")

    is_production = config.app.environment == "production"
    app = FastAPI(
        title="ShopEase API",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    app.state.config = config

    app.add_middleware(SecurityHeadersMiddleware, environment=config.app.environment)

    # --- CORS configuration ---
    cors = config.app.cors
    if is_production and "*" in cors.origins and cors.allow_credentials:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(ShopEaseError, shopease_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    register_routes(app, storage)
    return app
