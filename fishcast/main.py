"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from fishcast.config import get_settings
from fishcast.logging_config import setup_logging
from fishcast.routes.conditions import limiter
from fishcast.routes.conditions import router as conditions_router
from fishcast.services.openmeteo import clear_forecast_cache, close_http_client

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, json_format=settings.log_json)
    yield
    # Cleanup on shutdown
    await close_http_client()
    clear_forecast_cache()


app = FastAPI(
    title="Fishcast Marine Conditions API",
    description="Marine conditions and fishing suitability for the fishing assistant",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(conditions_router, tags=["conditions"])


@app.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint with service status.

    Returns:
        Status dictionary with service health information.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "fishcast",
        "version": APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "services": {
            "open_meteo": "configured" if settings.open_meteo_api_key else "public",
        },
    }


@app.get("/")
async def root() -> dict:
    """
    Root endpoint.

    Returns:
        Welcome message with API information.
    """
    return {
        "message": "Fishcast Marine Conditions API",
        "docs": "/docs",
        "health": "/health",
    }
