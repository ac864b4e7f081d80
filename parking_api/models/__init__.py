from .users import Role, User
from .parking_spots import ParkingSpot
from .bookings import Booking

__all__ = ["Role", "User", "ParkingSpot", "Booking"]
