"""
Paint Quote Backend - Main FastAPI Application.

Thin HTTP shell over the pricing engine: entity previews, project quotes
and project import.

Run with:
    uvicorn paintquote.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paintquote.api.v1.estimates import router as estimates_router
from paintquote.api.v1.projects import router as projects_router
from paintquote.config import get_settings
from paintquote.constants import API_TITLE, API_VERSION
from paintquote.logging_config import setup_logging
from paintquote.middleware import RequestContextMiddleware

# Get settings before logging setup so we know the debug flag
settings = get_settings()

setup_logging(settings.debug, settings.log_level)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan event handler for startup and shutdown."""
    logger.info(
        "api_startup",
        cors_origins=settings.cors_origins,
        default_wall_height=settings.default_wall_height,
        default_coats=settings.default_coats,
    )
    yield
    logger.info("api_shutdown")


app = FastAPI(
    title=API_TITLE,
    description=(
        "Pricing and quantity engine for painting estimates: paint gallons, "
        "labor and totals for rooms, staircases, fireplaces, built-ins and "
        "brick walls, with Good/Better/Best paint tiers."
    ),
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Request context middleware must come before CORS so every response gets
# the X-Request-ID header (including preflight OPTIONS responses).
app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(estimates_router, prefix="/api/v1")
app.include_router(projects_router, prefix="/api/v1")


@app.get("/")
async def root() -> dict:
    """Root endpoint with API info."""
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "description": "Painting estimate pricing engine",
        "docs": "/docs",
    }


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}
