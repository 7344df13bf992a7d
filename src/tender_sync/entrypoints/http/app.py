from __future__ import annotations

from fastapi import FastAPI

from tender_sync.adapters.in_memory_tender_service import InMemoryTenderService
from tender_sync.entrypoints.http.exception_handlers import register_exception_handlers
from tender_sync.entrypoints.http.routes.favorites import router as favorites_router
from tender_sync.entrypoints.http.routes.health import router as health_router
from tender_sync.entrypoints.http.routes.tenders import router as tenders_router
from tender_sync.entrypoints.http.sample_data import sample_tenders


def build_app(service: InMemoryTenderService | None = None) -> FastAPI:
    app = FastAPI(
        title="Tender Sync Reference Service",
        description="""
        In-memory stand-in for the tender catalog backend.

        ## Features
        - Paged tender listing and filtered search
        - Per-user favorites addressed by management number

        ## Authentication
        None. A single implicit user owns the favorites.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    app.state.tender_service = (
        service if service is not None else InMemoryTenderService(sample_tenders())
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(tenders_router, prefix="/api")
    app.include_router(favorites_router, prefix="/api")

    return app


app = build_app()
