"""Service layer package."""

from .accommodation_service import AccommodationService
from .dashboard_service import DashboardService
from .profile_service import ProfileService
from .reservation_service import ReservationService
from .sale_service import SaleService
from .ticket_service import TicketService

__all__ = [
    "AccommodationService",
    "DashboardService",
    "ProfileService",
    "ReservationService",
    "SaleService",
    "TicketService",
]
