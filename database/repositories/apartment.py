import logging
from dataclasses import dataclass
from typing import List, Optional, Dict, Any, Tuple

from sqlalchemy import select, update

from database.models import Apartment, Room, User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


@dataclass
class ApartmentFilters:
    """Optional listing constraints; None/False means unconstrained."""
    city: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_rooms: Optional[int] = None
    furnished: bool = False
    pet_friendly: bool = False
    parking: bool = False


class ApartmentRepository(BaseRepository):
    def create_apartment(self, owner_id: int, values: Dict[str, Any]) -> Apartment:
        apartment = Apartment(owner_id=owner_id, **values)
        self.db.add(apartment)
        self.db.flush()
        return apartment

    def exists(self, apartment_id: int) -> bool:
        stmt = select(Apartment.id).where(Apartment.id == apartment_id)
        return self.db.execute(stmt).first() is not None

    def get_owner_id(self, apartment_id: int) -> Optional[int]:
        stmt = select(Apartment.owner_id).where(Apartment.id == apartment_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def search_available(
        self,
        filters: ApartmentFilters,
        offset: int,
        limit: int
    ) -> List[Tuple[Apartment, User]]:
        stmt = (
            select(Apartment, User)
            .join(User, Apartment.owner_id == User.id)
            .where(Apartment.status == 'available')
        )

        if filters.city:
            stmt = stmt.where(Apartment.city.icontains(filters.city, autoescape=True))
        if filters.min_price is not None:
            stmt = stmt.where(Apartment.monthly_rent >= filters.min_price)
        if filters.max_price is not None:
            stmt = stmt.where(Apartment.monthly_rent <= filters.max_price)
        if filters.min_rooms is not None:
            stmt = stmt.where(Apartment.total_rooms >= filters.min_rooms)
        if filters.furnished:
            stmt = stmt.where(Apartment.furnished.is_(True))
        if filters.pet_friendly:
            stmt = stmt.where(Apartment.pet_friendly.is_(True))
        if filters.parking:
            stmt = stmt.where(Apartment.parking_available.is_(True))

        stmt = (
            stmt.order_by(Apartment.created_at.desc(), Apartment.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return self.db.execute(stmt).all()

    def get_with_owner(self, apartment_id: int) -> Optional[Tuple[Apartment, User]]:
        stmt = (
            select(Apartment, User)
            .join(User, Apartment.owner_id == User.id)
            .where(Apartment.id == apartment_id)
        )
        return self.db.execute(stmt).first()

    def get_available_rooms(self, apartment_id: int) -> List[Room]:
        stmt = select(Room).where(
            Room.apartment_id == apartment_id,
            Room.status == 'available'
        ).order_by(Room.id)
        return self.db.execute(stmt).scalars().all()

    def get_available_by_ids(self, apartment_ids: List[int]) -> List[Tuple[Apartment, User]]:
        if not apartment_ids:
            return []
        stmt = (
            select(Apartment, User)
            .join(User, Apartment.owner_id == User.id)
            .where(Apartment.id.in_(apartment_ids), Apartment.status == 'available')
        )
        return self.db.execute(stmt).all()

    def update_owned(self, apartment_id: int, owner_id: int, values: Dict[str, Any]) -> int:
        """
        Apply ``values`` only if ``owner_id`` owns the apartment.

        Returns the number of rows changed (0 or 1).
        """
        stmt = (
            update(Apartment)
            .where(Apartment.id == apartment_id, Apartment.owner_id == owner_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        return self.db.execute(stmt).rowcount
