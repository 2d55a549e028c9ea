"""
Restaurant Menu Catalog API.
FastAPI async backend exposing menu item RPC procedures over a relational table.
"""
from __future__ import annotations

import time
import uuid as uuid_lib
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram, generate_latest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from app.api import menu
from app.config import get_settings
from app.db import get_db
from app.core.logging import get_logger, request_id_ctx

logger = get_logger(__name__)
settings = get_settings()

# Sentry (configurable via SENTRY_DSN)
if settings.sentry_dsn:
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.app_env,
        traces_sample_rate=0.1,
        integrations=[FastApiIntegration()],
    )

app = FastAPI(
    title="Menu Catalog API",
    description="Create, list, fetch, partially update and delete restaurant menu items.",
    version="1.0.0",
    openapi_tags=[
        {"name": "menu", "description": "Menu item procedures"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Prometheus metrics
REQUEST_COUNT = Counter("http_requests_total", "Total requests", ["method", "path", "status"])
REQUEST_LATENCY = Histogram("http_request_duration_seconds", "Request latency", ["method", "path"])


@app.middleware("http")
async def request_id_and_metrics(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid_lib.uuid4())
    request_id_ctx.set(request_id)
    start = time.perf_counter()
    path = request.scope.get("path", "")
    method = request.scope.get("method", "")
    response = await call_next(request)
    duration = time.perf_counter() - start
    REQUEST_COUNT.labels(method=method, path=path, status=response.status_code).inc()
    REQUEST_LATENCY.labels(method=method, path=path).observe(duration)
    response.headers["X-Request-ID"] = request_id
    return response


MENU_PROCEDURES = (
    "createMenuItem",
    "getMenuItems",
    "getMenuItemById",
    "updateMenuItem",
    "deleteMenuItem",
)

app.include_router(menu.router, prefix=settings.api_prefix)


@app.get("/healthcheck")
async def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/health")
async def health(session: AsyncSession = Depends(get_db)):
    """Liveness plus a round trip to the menu_items database."""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("health_database_unreachable")
        await session.rollback()
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "database": "unreachable"},
        )
    return {"status": "ok", "database": "ok"}


@app.get("/metrics")
async def metrics():
    return Response(generate_latest(), media_type="text/plain")


@app.get("/")
async def root():
    return {
        "message": "Menu Catalog API",
        "docs": "/docs",
        "procedures": [f"{settings.api_prefix}/{name}" for name in MENU_PROCEDURES],
    }


def run() -> None:
    import uvicorn

    logger.info("server_starting on %s:%s", settings.server_host, settings.server_port)
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    run()
