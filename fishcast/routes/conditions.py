"""Marine conditions endpoints."""

import time
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from fishcast.config import get_settings
from fishcast.logging_config import get_logger
from fishcast.models.marine_schemas import (
    ConditionsSummary,
    MarineReport,
    MarineReportResponse,
)
from fishcast.models.schemas import ForecastInput
from fishcast.services.conditions import build_marine_report
from fishcast.services.descriptions import summarize_report
from fishcast.services.openmeteo import get_marine_report

router = APIRouter()

limiter = Limiter(key_func=get_remote_address)

RATE_LIMIT = get_settings().rate_limit


def resolve_timezone(name: str | None) -> tzinfo | None:
    """
    Resolve an IANA timezone name.

    Raises:
        HTTPException: If the name is unknown.
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(status_code=400, detail=f"Unknown timezone '{name}'")


@router.post("/conditions", response_model=MarineReport)
@limiter.limit(RATE_LIMIT)
async def post_conditions(
    request: Request,
    forecast: ForecastInput,
    now: datetime | None = Query(default=None),
    timezone: str | None = Query(default=None),
) -> MarineReport:
    """
    Build a marine report from a raw forecast payload.

    Args:
        request: FastAPI request object.
        forecast: Hourly/daily series and optional current snapshot.
        now: Instant to align to (defaults to the wall clock).
        timezone: IANA zone for naive timestamps (defaults to the feed offset).

    Returns:
        MarineReport for the aligned hour.
    """
    tz = resolve_timezone(timezone)
    return build_marine_report(forecast, now=now, tz=tz)


@router.post("/conditions/summary", response_model=ConditionsSummary)
@limiter.limit(RATE_LIMIT)
async def post_conditions_summary(
    request: Request,
    forecast: ForecastInput,
    now: datetime | None = Query(default=None),
    timezone: str | None = Query(default=None),
) -> ConditionsSummary:
    """
    Build display labels from a raw forecast payload.

    Args:
        request: FastAPI request object.
        forecast: Hourly/daily series and optional current snapshot.
        now: Instant to align to (defaults to the wall clock).
        timezone: IANA zone for naive timestamps (defaults to the feed offset).

    Returns:
        ConditionsSummary with compass points, condition names and advice.
    """
    tz = resolve_timezone(timezone)
    report = build_marine_report(forecast, now=now, tz=tz)
    return summarize_report(report, forecast.daily)


@router.get("/conditions", response_model=MarineReportResponse)
@limiter.limit(RATE_LIMIT)
async def get_conditions(
    request: Request,
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
) -> MarineReportResponse:
    """
    Fetch the feed for a location and build its marine report.

    Args:
        request: FastAPI request object.
        latitude: Latitude coordinate.
        longitude: Longitude coordinate.

    Returns:
        MarineReportResponse with report data or error.
    """
    request_logger = get_logger(__name__, latitude=latitude, longitude=longitude)
    started = time.perf_counter()
    result = await get_marine_report(latitude, longitude)
    duration_ms = round((time.perf_counter() - started) * 1000, 1)

    if result.success:
        request_logger.info("Marine report built", extra={"duration_ms": duration_ms})
    else:
        request_logger.warning(
            f"Marine report unavailable: {result.error_message}",
            extra={"duration_ms": duration_ms},
        )
    return result
