"""Health check router."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db, ping_db
from ..core.observability import SERVICE_NAME, SERVICE_VERSION
from ..schemas.health import HealthResponse, HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/health", tags=["health"])


@router.post("/ping", response_model=HealthResponse)
async def health_ping(db: AsyncSession = Depends(get_db)) -> JSONResponse:
    """
    Health check endpoint.

    Returns current service status, timestamp and database reachability.
    """
    try:
        database_ok = await ping_db(db)
    except SQLAlchemyError as e:
        logger.warning("Database ping failed", extra={"error": str(e)})
        database_ok = False

    response_data = HealthResponse(
        status=HealthStatus.HEALTHY if database_ok else HealthStatus.DEGRADED,
        service=SERVICE_NAME,
        timestamp=datetime.now(timezone.utc),
        version=SERVICE_VERSION,
        database=database_ok
    )

    logger.debug(
        "Health check requested",
        extra={
            "status": response_data.status.value,
            "timestamp": response_data.timestamp.isoformat()
        }
    )

    return JSONResponse(
        status_code=200,
        content=response_data.model_dump(mode="json")
    )
