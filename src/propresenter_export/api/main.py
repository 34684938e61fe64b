"""
ProPresenter Export API

FastAPI backend that turns a classified service schedule into a
ProPresenter playlist download.

Endpoints:
- /export/* - Archive download and export metadata
- /health - Health check
"""

import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from .dependencies import lifespan, settings
from .routers import export
from .schemas import ErrorResponse, HealthResponse

# Configure logging
logger.remove()
logger.add(
    sys.stderr,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level=settings.LOG_LEVEL,
)


# =============================================================================
# APP INITIALIZATION
# =============================================================================

app = FastAPI(
    title="ProPresenter Export API",
    description="""
Build ProPresenter 6 playlists from a classified service schedule.

POST the ordered entries (songs, scripture passages, events) with their
fetched text to `/export/propresenter` and receive a zip containing one
`.pro6` presentation per song/scripture and a `.pro6plx` playlist.
""",
    version=settings.VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# =============================================================================
# MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.info(f"→ {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"← {request.method} {request.url.path} [{response.status_code}]")
    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            detail="Internal server error",
            error_type=type(exc).__name__,
        ).model_dump(),
    )


# =============================================================================
# ROUTERS
# =============================================================================

app.include_router(export.router)


# =============================================================================
# ROOT ENDPOINTS
# =============================================================================


@app.get("/", include_in_schema=False)
async def root():
    """Service name and where to find the docs."""
    return {"message": "ProPresenter Export API", "docs": "/docs"}


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=settings.VERSION)


# =============================================================================
# DEVELOPMENT SERVER
# =============================================================================

def main():
    uvicorn.run(
        "propresenter_export.api.main:app",
        host="127.0.0.1",
        port=8000,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":
    main()
