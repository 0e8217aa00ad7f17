"""Builds the Shopfront ASGI app.

Business routes live under ``/api/v1``; ``/health`` stays unversioned so
load balancer health checks keep working across API versions.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator, Awaitable, Callable

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from shopfront.infrastructure.persistence.sqlalchemy.init_db import create_tables
from shopfront.presentation.api.dependencies import get_engine
from shopfront.presentation.api.exception_handlers import setup_exception_handlers
from shopfront.presentation.api.routers import (
    admin_router,
    auth_router,
    cart_router,
    orders_router,
    products_router,
    profile_router,
    wishlist_router,
)
from shopfront.presentation.api.schemas.common import HealthResponse
from shopfront_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Route all log records to stdout at ``LOG_LEVEL``. Runs once per process."""
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("shopfront").setLevel(log_level)
    logging.getLogger("shopfront_auth").setLevel(log_level)

    # Library chatter stays at WARNING regardless of LOG_LEVEL
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and session refresh.

**Tokens:**
- Access token: bearer header, carries the role
- Refresh token: HttpOnly cookie scoped to `/api/v1/auth`, stored hashed
""",
    },
    {"name": "Products", "description": "Public catalog; writes need an admin."},
    {"name": "Cart", "description": "The caller's cart. Quantity 0 removes a line."},
    {
        "name": "Orders",
        "description": """Checkout and order history.

**Status lifecycle:**
- `PENDING` -> `PAID` | `CANCELLED`
- `PAID` -> `SHIPPED` -> `DELIVERED`
""",
    },
    {"name": "Admin", "description": "Category management and the order overview."},
    {"name": "Profile", "description": "Self-service account details."},
    {"name": "Wishlist", "description": "Products saved for later."},
    {"name": "Health", "description": "Service health monitoring endpoints."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup and release the pool on shutdown."""
    logger.info("Starting Shopfront API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down Shopfront API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _add_security_headers(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


def create_v1_router() -> APIRouter:
    """Mount every business router under its resource prefix."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(products_router, prefix="/products", tags=["Products"])
    v1_router.include_router(cart_router, prefix="/cart", tags=["Cart"])
    v1_router.include_router(orders_router, prefix="/orders", tags=["Orders"])
    v1_router.include_router(admin_router, prefix="/admin", tags=["Admin"])
    v1_router.include_router(profile_router, prefix="/profile", tags=["Profile"])
    v1_router.include_router(wishlist_router, prefix="/wishlist", tags=["Wishlist"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Assemble the app.

    Parameters
    ----------
    settings
        Used instead of the environment, mainly by tests.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Storefront and admin backend: catalog, cart and orders.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(_add_security_headers)

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Liveness check for load balancers."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app


app = create_app()
