from .base import Base
from .user import User, VERIFICATION_STATUSES
from .listing import Apartment, Room, APARTMENT_STATUSES, ROOM_TYPES, ROOM_STATUSES
from .application import RoomApplication, APPLICATION_STATUSES, REVIEW_STATUSES
from .match import RoommateMatch, make_pair_key
from .comparison import ApartmentComparison

__all__ = [
    'Base',
    'User',
    'Apartment',
    'Room',
    'RoomApplication',
    'RoommateMatch',
    'ApartmentComparison',
    'make_pair_key',
    'VERIFICATION_STATUSES',
    'APARTMENT_STATUSES',
    'ROOM_TYPES',
    'ROOM_STATUSES',
    'APPLICATION_STATUSES',
    'REVIEW_STATUSES',
]
