import logging
from typing import List, Optional, Tuple

from sqlalchemy import select, update

from database.models import Apartment, Room, RoomApplication, User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ApplicationRepository(BaseRepository):
    def get_by_id(self, application_id: int) -> Optional[RoomApplication]:
        stmt = select(RoomApplication).where(RoomApplication.id == application_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def exists_for(self, room_id: int, applicant_id: int) -> bool:
        stmt = select(RoomApplication.id).where(
            RoomApplication.room_id == room_id,
            RoomApplication.applicant_id == applicant_id
        )
        return self.db.execute(stmt).first() is not None

    def create_application(self, room_id: int, applicant_id: int, message: Optional[str] = None) -> RoomApplication:
        """Insert an application. Raises IntegrityError on a duplicate (room, applicant)."""
        application = RoomApplication(room_id=room_id, applicant_id=applicant_id, message=message)
        self.db.add(application)
        self.db.flush()
        return application

    def get_for_room(self, room_id: int) -> List[Tuple[RoomApplication, User]]:
        stmt = (
            select(RoomApplication, User)
            .join(User, RoomApplication.applicant_id == User.id)
            .where(RoomApplication.room_id == room_id)
            .order_by(RoomApplication.created_at.desc(), RoomApplication.id.desc())
        )
        return self.db.execute(stmt).all()

    def update_status_if_owner(self, application_id: int, owner_id: int, status: str) -> int:
        """
        Set the status only when the application's room belongs to an
        apartment owned by ``owner_id``.

        Returns the number of rows changed (0 or 1).
        """
        owned_rooms = (
            select(Room.id)
            .join(Apartment, Room.apartment_id == Apartment.id)
            .where(Apartment.owner_id == owner_id)
        )
        stmt = (
            update(RoomApplication)
            .where(
                RoomApplication.id == application_id,
                RoomApplication.room_id.in_(owned_rooms)
            )
            .values(status=status)
            .execution_options(synchronize_session=False)
        )
        return self.db.execute(stmt).rowcount
