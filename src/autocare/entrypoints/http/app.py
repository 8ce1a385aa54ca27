from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from autocare.entrypoints.http.exception_handlers import register_exception_handlers
from autocare.entrypoints.http.routes.health import router as health_router
from autocare.entrypoints.http.routes.vehicles import router as vehicles_router
from autocare.infra.db.session import dispose_engine

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    dispose_engine()


def build_app() -> FastAPI:
    app = FastAPI(
        title="AutoCare API",
        description="""
        Vehicle catalog API for browsing and looking up serviced vehicles.

        ## Features
        - List vehicles with make/model/owner/maintainer filters
        - Server-side sorting with a fixed set of sort fields
        - Zero-based pagination with total counts
        - Get vehicle details with service history

        ## Authentication
        When AUTOCARE_API_KEY is set, send it in the X-API-Key header.

        ## Error Handling
        All errors return one JSON shape: status, code, message, path,
        plus an errors map for multi-field validation failures.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "AGPL-3.0-or-later",
        },
        lifespan=lifespan,
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(vehicles_router, prefix=API_PREFIX)

    return app


app = build_app()
