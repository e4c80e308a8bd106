"""Models module exporting all database models."""

from .accommodation import Accommodation, Room
from .profile import Profile, ProfileRole
from .reservation import Reservation, ReservationStatus, ReservationType
from .sale import Sale, SaleCategory
from .ticket import Ticket

__all__ = [
    # Lodging
    "Accommodation",
    "Room",

    # Passes
    "Ticket",

    # Bookings
    "Reservation",
    "ReservationStatus",
    "ReservationType",

    # Revenue
    "Sale",
    "SaleCategory",

    # Staff
    "Profile",
    "ProfileRole",
]
