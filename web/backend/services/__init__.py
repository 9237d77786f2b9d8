"""Business logic services."""

from .auth_service import AuthService
from .apartment_service import ApartmentService
from .room_service import RoomService
from .comparison_service import ComparisonService
from .user_service import UserService
