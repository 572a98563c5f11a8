"""
API Entrypoint for Content Quality Analysis

FastAPI application that:
1. Configures logging
2. Mounts the content analysis and SEO routers
3. Maps errors to the {success, error, details} envelope
4. Exposes liveness and health endpoints
"""

import logging
import sys
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src import __version__
from src.analysis import EeatOptimizationError
from src.utils.config import get_settings
from src.utils.responses import error_envelope

from api import content, seo

# Configure logging to stdout
logging.basicConfig(
    level=get_settings().LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
    force=True,  # Override any existing config
)
logger = logging.getLogger(__name__)

# Quiet down chatty loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

SERVICE_NAME = "Content Quality Analyzer"

app = FastAPI(
    title=SERVICE_NAME,
    description="Prohibited phrase, hallucination, E-E-A-T and local search analysis for SEO content",
    version=__version__,
)

app.include_router(content.router)
app.include_router(seo.router)


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Request body failed schema validation."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope("Validation failed", jsonable_encoder(exc.errors())),
    )


@app.exception_handler(EeatOptimizationError)
async def eeat_error_handler(request: Request, exc: EeatOptimizationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope("Validation failed", str(exc)),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Explicit HTTP errors raised by routes and dependencies."""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        body = error_envelope(exc.detail["error"], exc.detail.get("details"))
    elif exc.status_code == status.HTTP_401_UNAUTHORIZED:
        body = error_envelope("Unauthorized", exc.detail)
    else:
        body = error_envelope(str(exc.detail))

    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Anything unexpected: log it, return a generic 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope("Internal server error"),
    )


# ============================================================================
# API ENDPOINTS
# ============================================================================

@app.get("/")
async def root():
    """Liveness check endpoint."""
    return {"status": "ok", "service": SERVICE_NAME}


@app.get("/api/health")
async def health():
    """Detailed health check."""
    settings = get_settings()
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "auth_required": settings.REQUIRE_AUTH,
        "capabilities": [
            "prohibited_phrase_detection",
            "hallucination_detection",
            "eeat_optimization",
            "local_search_analysis",
            "quality_gates",
        ],
    }


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.analyze:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().ENVIRONMENT == "development",
    )
