"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shopdesk.config import get_settings
from shopdesk.domain.exceptions import StorageError
from shopdesk.infrastructure.dependencies import (
    get_currency_service,
    get_event_broadcaster,
    get_settings_service,
    get_store_registry,
)
from shopdesk.infrastructure.logging.log_config import setup_logging
from shopdesk.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: prepare the data directory and settings file."""
    setup_logging()

    # 1. Ensure the data directory exists
    stores = app.dependency_overrides.get(get_store_registry, get_store_registry)()
    Path(stores.data_dir).mkdir(parents=True, exist_ok=True)

    # 2. Create settings.json with defaults when missing
    broadcaster = get_event_broadcaster()
    settings_service = get_settings_service(
        stores=stores,
        currency=get_currency_service(stores),
        broadcaster=broadcaster,
    )
    try:
        settings = await settings_service.load()
        logger.info("Data directory %s ready (currency %s)", stores.data_dir, settings.currency)
    except StorageError:
        logger.exception("Settings file is unreadable; serving defaults until it is fixed")

    yield

    # Shutdown
    await broadcaster.shutdown()


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # The rejected input is not echoed back; it may not be JSON-serializable (e.g. Infinity)
    details = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid data", "details": jsonable_encoder(details)},
    )


async def _storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Storage failure"},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StorageError, _storage_exception_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shopdesk.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
