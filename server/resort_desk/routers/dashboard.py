"""Dashboard router."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import ProblemDetailsException
from ..schemas.dashboard import DashboardStats, DashboardStatsRequest
from ..services.dashboard_service import DashboardService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/dashboard", tags=["dashboard"])

DB_DEPENDENCY = Depends(get_db)


@router.post("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    request: DashboardStatsRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """
    Sales and reservation statistics for a daily, weekly or monthly window.

    The window contains ``reference_date`` (today when omitted).
    """
    dashboard_service = DashboardService(db)

    try:
        stats = await dashboard_service.get_stats(request)
        return JSONResponse(status_code=200, content=stats.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error computing dashboard stats",
            extra={"view_mode": request.view_mode.value, "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e
