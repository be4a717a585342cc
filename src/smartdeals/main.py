"""FastAPI application factory.

Learn: App factory pattern: create_app() returns a configured FastAPI
instance. Lifespan opens the shared MongoDB client at startup and
closes it at shutdown. Middleware, CORS, error handlers and routers are
all registered here.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartdeals import __version__
from smartdeals.api import api_router
from smartdeals.auth.verifier import build_verifier
from smartdeals.config import settings
from smartdeals.db.store import open_store
from smartdeals.errors import register_error_handlers

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: Anything before `yield` runs at startup, after `yield` runs at
    shutdown. An unreachable MongoDB does not stop the server: the
    failure is logged and each request then fails with 503 on its own.
    """
    logger.info(
        "smartdeals.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )

    store = open_store(settings)
    app.state.store = store
    try:
        await store.ping()
        logger.info("smartdeals.mongodb_connected", database=settings.database_name)
    except Exception as e:
        logger.warning("smartdeals.mongodb_unavailable", error=str(e))

    yield

    logger.info("smartdeals.shutdown")
    store.close()


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Smart Deals",
        description="Marketplace backend, users, product listings and bids",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.verifier = build_verifier(settings)

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: CORS → RequestId → handler

    from smartdeals.middleware.request_id import RequestIdMiddleware

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: smartdeals.main:app)
app = create_app()
