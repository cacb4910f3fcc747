"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_admin import __version__
from catalog_admin.api.v1 import api_router
from catalog_admin.config import settings
from catalog_admin.database import SessionLocal, init_db
from catalog_admin.exceptions import (
    CatalogError,
    CatalogValidationError,
    DuplicateNameError,
    NotFoundError,
    PartialCascadeFailure,
    PersistenceError,
)
from catalog_admin.schemas import ErrorResponse
from catalog_admin.services import InventoryView, ReloadScheduler, change_feed
from catalog_admin.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    init_db()
    scheduler = ReloadScheduler(InventoryView(SessionLocal))
    scheduler.attach(change_feed)
    if settings.reload_on_change:
        scheduler.start()
    app.state.reload_scheduler = scheduler
    yield
    # Shutdown
    scheduler.stop()
    scheduler.detach()


app = FastAPI(
    title=settings.app_name,
    description="Catalog Admin API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# CORS middleware for the admin frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix="/api/v1")


def _status_for(exc: CatalogError) -> int:
    if isinstance(exc, DuplicateNameError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, CatalogValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, PersistenceError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(CatalogError)
async def catalog_exception_handler(request: Request, exc: CatalogError):
    """Map catalog errors to HTTP responses."""
    status_code = _status_for(exc)
    body = ErrorResponse(
        detail=str(exc),
        error=exc.__class__.__name__,
        completed=exc.completed if isinstance(exc, PartialCascadeFailure) else None,
    )
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Prevent stack traces from leaking to clients in production."""
    if settings.debug:
        raise exc
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "environment": settings.environment,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_admin.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
