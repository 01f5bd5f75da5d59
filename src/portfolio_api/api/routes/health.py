"""
Health endpoint: liveness plus profile store reachability.

``GET /api/health`` returns 200 when the store answers and 503 otherwise.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from portfolio_api import __version__
from portfolio_api.api.dependencies import get_profile_store
from portfolio_api.api.schemas import DatabaseHealth, HealthData, HealthResponse
from portfolio_api.core import DatabaseError, get_logger
from portfolio_api.database import ProfileStore

logger = get_logger(__name__)

router = APIRouter()

_STARTED_AT = time.monotonic()


@router.get(
    "",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Health check",
)
async def health(
    store: ProfileStore = Depends(get_profile_store),
) -> HealthResponse | JSONResponse:
    """Report API liveness, uptime and whether the profile store is reachable."""
    connected = store.ping()
    has_active = False
    if connected:
        try:
            has_active = store.get_active_record() is not None
        except DatabaseError as e:
            logger.warning("Health check could not read active profile: %s", e)
            connected = False

    payload = HealthResponse(
        success=connected,
        message="Service is healthy" if connected else "Service unavailable - database not connected",
        data=HealthData(
            status="ok" if connected else "unavailable",
            timestamp=datetime.now(timezone.utc).isoformat(),
            uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
            version=__version__,
            database=DatabaseHealth(
                status="connected" if connected else "disconnected",
                active_profile=has_active,
            ),
        ),
    )

    if not connected:
        return JSONResponse(status_code=503, content=payload.model_dump())
    return payload
