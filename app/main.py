import asyncio
import os
from contextlib import asynccontextmanager

import sentry_sdk
import structlog
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from sentry_sdk.integrations.starlette import StarletteIntegration
from starlette.middleware.cors import CORSMiddleware

from app import db
from app.api import errors
from app.api.routers.equipment import router as equipment_router
from app.api.routers.healthz import router as healthz_router
from app.api.routers.readyz import router as readyz_router
from app.core.config import get_settings
from app.core.startup import run_database_migrations
from app.logging import setup_logging
from app.middleware.rate_limit import rate_limit_middleware
from app.middleware.request_id import request_id_middleware
from app.middleware.security_headers import security_headers_middleware

DOCS_PATH = "/api"
OPENAPI_PATH = "/api-json"

tags_metadata = [
    {"name": "equipment", "description": "Equipment catalog, brands, types and user registrations"},
    {"name": "health", "description": "Liveness / readiness"},
]


def _init_sentry(env: str) -> None:
    # No-op without SENTRY_DSN; traces_sample_rate clamped to [0.0, 0.2]
    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        return
    try:
        rate_raw = float(os.getenv("SENTRY_TRACES_RATE", "0"))
    except ValueError:
        rate_raw = 0.0
    sentry_sdk.init(
        dsn=dsn,
        environment=env,
        release=os.getenv("RELEASE"),
        integrations=[StarletteIntegration()],
        traces_sample_rate=max(0.0, min(0.2, rate_raw)),
        send_default_pii=False,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Schema must be current before the server accepts connections; the
    # subprocess and retry sleeps run in a worker thread.
    await asyncio.to_thread(run_database_migrations)
    structlog.get_logger(__name__).info("app_startup", env=get_settings().app_env)
    yield
    await db.engine.dispose()


def create_app() -> FastAPI:
    setup_logging()
    settings = get_settings()
    settings.check_production_secrets()
    _init_sentry(settings.app_env)

    app = FastAPI(
        title="Equipment Registry API",
        version="1.0.0",
        description="Equipment catalog and user-owned equipment registrations.",
        openapi_tags=tags_metadata,
        docs_url=DOCS_PATH,
        openapi_url=OPENAPI_PATH,
        redoc_url=None,
        lifespan=lifespan,
    )
    errors.install(app)

    app.middleware("http")(request_id_middleware)
    app.middleware("http")(security_headers_middleware)
    app.middleware("http")(rate_limit_middleware)

    allow_origins = settings.cors_origins()
    if allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allow_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"],
            allow_headers=["*"],
        )

    app.include_router(equipment_router)
    app.include_router(healthz_router)
    app.include_router(readyz_router)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
            tags=tags_metadata,
        )
        schema["servers"] = [{"url": f"http://localhost:{settings.port}", "description": "Local"}]
        app.openapi_schema = schema
        return app.openapi_schema

    app.openapi = custom_openapi
    return app


app = create_app()
