from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.apartment import ApartmentRepository, ApartmentFilters
from database.repositories.room import RoomRepository, RoomFilters
from database.repositories.application import ApplicationRepository
from database.repositories.match import MatchRepository
from database.repositories.comparison import ComparisonRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'ApartmentRepository',
    'ApartmentFilters',
    'RoomRepository',
    'RoomFilters',
    'ApplicationRepository',
    'MatchRepository',
    'ComparisonRepository',
]
