"""FastAPI routers package."""

from .accommodation import room_router
from .accommodation import router as accommodation_router
from .dashboard import router as dashboard_router
from .health import router as health_router
from .metrics import router as metrics_router
from .profile import router as profile_router
from .reservation import router as reservation_router
from .sale import router as sale_router
from .ticket import router as ticket_router

__all__ = [
    "accommodation_router",
    "dashboard_router",
    "health_router",
    "metrics_router",
    "profile_router",
    "reservation_router",
    "room_router",
    "sale_router",
    "ticket_router",
]
