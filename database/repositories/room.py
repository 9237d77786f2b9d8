import logging
from dataclasses import dataclass
from typing import List, Optional, Dict, Any, Tuple

from sqlalchemy import select, update

from database.models import Apartment, Room, User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


@dataclass
class RoomFilters:
    """Optional listing constraints; None/False means unconstrained."""
    city: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    room_type: Optional[str] = None
    furnished: bool = False
    private_bathroom: bool = False


class RoomRepository(BaseRepository):
    def create_room(self, apartment_id: int, values: Dict[str, Any]) -> Room:
        room = Room(apartment_id=apartment_id, **values)
        self.db.add(room)
        self.db.flush()
        return room

    def get_available(self, room_id: int) -> Optional[Room]:
        stmt = select(Room).where(Room.id == room_id, Room.status == 'available')
        return self.db.execute(stmt).scalar_one_or_none()

    def get_owner_id(self, room_id: int) -> Optional[int]:
        """Owner of the apartment the room belongs to, or None if the room is unknown."""
        stmt = (
            select(Apartment.owner_id)
            .join(Room, Room.apartment_id == Apartment.id)
            .where(Room.id == room_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def search_available(
        self,
        filters: RoomFilters,
        offset: int,
        limit: int
    ) -> List[Tuple[Room, Apartment, User]]:
        stmt = (
            select(Room, Apartment, User)
            .join(Apartment, Room.apartment_id == Apartment.id)
            .join(User, Apartment.owner_id == User.id)
            .where(Room.status == 'available', Apartment.status == 'available')
        )

        if filters.city:
            stmt = stmt.where(Apartment.city.icontains(filters.city, autoescape=True))
        if filters.min_price is not None:
            stmt = stmt.where(Room.monthly_rent >= filters.min_price)
        if filters.max_price is not None:
            stmt = stmt.where(Room.monthly_rent <= filters.max_price)
        if filters.room_type:
            stmt = stmt.where(Room.room_type == filters.room_type)
        if filters.furnished:
            stmt = stmt.where(Room.furnished.is_(True))
        if filters.private_bathroom:
            stmt = stmt.where(Room.private_bathroom.is_(True))

        stmt = (
            stmt.order_by(Room.created_at.desc(), Room.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return self.db.execute(stmt).all()

    def get_with_apartment(self, room_id: int) -> Optional[Tuple[Room, Apartment, User]]:
        stmt = (
            select(Room, Apartment, User)
            .join(Apartment, Room.apartment_id == Apartment.id)
            .join(User, Apartment.owner_id == User.id)
            .where(Room.id == room_id)
        )
        return self.db.execute(stmt).first()

    def mark_rented(self, room_id: int) -> int:
        stmt = (
            update(Room)
            .where(Room.id == room_id)
            .values(status='rented')
            .execution_options(synchronize_session=False)
        )
        return self.db.execute(stmt).rowcount
