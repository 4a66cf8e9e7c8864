"""FastAPI app entry: config, logging, similarity lookup, health."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from similarity_service.config.logging import configure_logging, get_logger
from similarity_service.config.settings import get_settings
from similarity_service.config.similarity.static import load_configured_index_settings
from similarity_service.controllers.routes.similarity import router as similarity_router
from similarity_service.services.similarity.lookup import SimilarityLookupService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and the similarity lookup. A bad similarity definition aborts startup."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    index_settings = load_configured_index_settings(settings)
    app.state.similarity_lookup = SimilarityLookupService.from_settings(index_settings)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Similarity Service",
    description="Resolve and validate per-field similarity configuration",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(similarity_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: never leak internals to the client."""
    logger.exception("Unhandled error", extra={"error_type": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "similarity_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
