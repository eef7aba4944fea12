"""
BhashaBazaar FastAPI Application
Voice interpretation API for the street-vendor app
"""

import time
import uuid
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from bhashabazaar import __version__
from bhashabazaar.api.v1 import api_v1_router
from bhashabazaar.core.config import settings
from bhashabazaar.core.exceptions import (
    BhashaBazaarException,
    bhashabazaar_exception_handler,
    create_error_response,
)
from bhashabazaar.core.logging_config import bind_request_id, reset_request_id, setup_logging
from bhashabazaar.services.voice_shopping_service import get_voice_shopping_service

logger = logging.getLogger(__name__)

DEBUG = not settings.is_production


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager
    Configures logging and validates the platform table before serving
    """
    setup_logging()
    logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})...")

    # Raises ConfigurationError on a broken platform table; must not start
    service = get_voice_shopping_service()
    logger.info(f"  ✓ {len(service.platforms)} e-commerce platforms configured")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


app = FastAPI(
    title=f"{settings.PROJECT_NAME} Voice API",
    description="Language detection, item extraction and voice orders for Indian street vendors",
    version=__version__,
    debug=DEBUG,
    lifespan=lifespan,
)

# =============================================================================
# MIDDLEWARE CONFIGURATION
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
    expose_headers=["X-Request-ID"]
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Propagate or mint a request ID and expose it to log records"""
    request_id = request.headers.get("X-Request-ID") or f"req_{uuid.uuid4().hex[:16]}"
    request.state.request_id = request_id
    token = bind_request_id(request_id)

    start_time = time.time()
    try:
        response = await call_next(request)
    finally:
        reset_request_id(token)

    response.headers["X-Request-ID"] = request_id
    response.headers["X-API-Version"] = __version__
    response.headers["X-Process-Time"] = str(time.time() - start_time)
    return response


# =============================================================================
# ROOT ENDPOINTS
# =============================================================================

@app.get("/", tags=["root"])
async def root():
    """API information and quick links"""
    return {
        "message": f"Welcome to {settings.PROJECT_NAME} Voice API",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_schema": "/openapi.json"
        },
        "health_check": f"{settings.API_V1_STR}/health",
    }


# =============================================================================
# ERROR HANDLERS
# =============================================================================

app.add_exception_handler(BhashaBazaarException, bhashabazaar_exception_handler)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Never expose internal error details outside development"""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(
        f"Unhandled exception [request_id={request_id}]: {exc}",
        exc_info=True,
        extra={"path": request.url.path, "method": request.method}
    )

    message = str(exc) if DEBUG else "An internal error occurred. Please try again later."
    return create_error_response(BhashaBazaarException(message, details={"request_id": request_id}))


# =============================================================================
# ROUTERS
# =============================================================================

app.include_router(api_v1_router)


if __name__ == "__main__":
    uvicorn.run(
        "bhashabazaar.main:app",
        host="0.0.0.0",
        port=8000,
        reload=DEBUG,
        log_level=settings.log_level.lower()
    )
