#!/usr/bin/env python3
"""
Room service - room listings, applications and owner review of applications.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from database.codec import decode_string_list
from database.models import REVIEW_STATUSES
from database.repositories import (
    ApartmentRepository,
    ApplicationRepository,
    RoomRepository,
    RoomFilters,
)
from ..exceptions import (
    ValidationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
)
from ..models.requests import RoomCreate
from ..models.responses import RoomListing, RoomDetail, ApplicationSummary
from ..utils import safe_datetime_iso
from .apartment_service import page_window
from .base import BaseService
from .listing_fields import room_fields

logger = logging.getLogger(__name__)


class RoomService(BaseService):
    """Service for rooms and room applications."""

    def search(
        self,
        filters: RoomFilters,
        page: int = 1,
        limit: Optional[int] = None
    ) -> List[RoomListing]:
        """
        Get available rooms in available apartments matching every filter.
        """
        offset, limit = page_window(page, limit)

        with self._transaction("listing rooms"):
            rows = RoomRepository(self.db).search_available(filters, offset, limit)
            return [
                RoomListing(
                    **room_fields(room),
                    apartment_title=apartment.title,
                    address=apartment.address,
                    city=apartment.city,
                    neighborhood=apartment.neighborhood,
                    apartment_amenities=decode_string_list(apartment.amenities),
                    first_name=owner.first_name,
                    last_name=owner.last_name,
                )
                for room, apartment, owner in rows
            ]

    def get_detail(self, room_id: int) -> RoomDetail:
        """
        Get a room with its apartment and owner contact details.

        Raises:
            NotFoundError: If the room does not exist.
        """
        with self._transaction("fetching room"):
            row = RoomRepository(self.db).get_with_apartment(room_id)
            if row is None:
                raise NotFoundError("Room not found")

            room, apartment, owner = row
            return RoomDetail(
                **room_fields(room),
                apartment_title=apartment.title,
                apartment_description=apartment.description,
                address=apartment.address,
                city=apartment.city,
                neighborhood=apartment.neighborhood,
                apartment_amenities=decode_string_list(apartment.amenities),
                pet_friendly=bool(apartment.pet_friendly),
                parking_available=bool(apartment.parking_available),
                first_name=owner.first_name,
                last_name=owner.last_name,
                email=owner.email,
                phone=owner.phone,
            )

    def create(self, actor_id: int, request: RoomCreate) -> int:
        """
        Add a room to an apartment owned by ``actor_id``.

        Raises:
            NotFoundError: If the apartment does not exist.
            AuthorizationError: If ``actor_id`` does not own the apartment.
        """
        values = request.model_dump(exclude={"apartment_id"})

        with self._transaction("creating room"):
            owner_id = ApartmentRepository(self.db).get_owner_id(request.apartment_id)
            if owner_id is None:
                raise NotFoundError("Apartment not found")
            if owner_id != actor_id:
                logger.warning(f"User {actor_id} tried to add a room to apartment {request.apartment_id}")
                raise AuthorizationError("Not authorized to add rooms to this apartment")

            room = RoomRepository(self.db).create_room(request.apartment_id, values)
            room_id = room.id

        logger.info(f"User {actor_id} created room {room_id} in apartment {request.apartment_id}")
        return room_id

    def apply(self, room_id: int, applicant_id: int, message: Optional[str] = None) -> int:
        """
        Apply for an available room. The room's status is not changed.

        Raises:
            NotFoundError: If the room does not exist or is not available.
            ConflictError: If the user already applied for this room.
        """
        with self._transaction("submitting application"):
            if RoomRepository(self.db).get_available(room_id) is None:
                raise NotFoundError("Room not found or not available")

            repo = ApplicationRepository(self.db)
            if repo.exists_for(room_id, applicant_id):
                raise ConflictError("You have already applied for this room")

            try:
                application = repo.create_application(room_id, applicant_id, message)
            except IntegrityError as e:
                raise ConflictError("You have already applied for this room") from e
            application_id = application.id

        logger.info(f"User {applicant_id} applied for room {room_id} (application {application_id})")
        return application_id

    def get_applications(self, room_id: int, actor_id: int) -> List[ApplicationSummary]:
        """
        List applications for a room, newest first, for the room's owner.

        Raises:
            NotFoundError: If the room does not exist.
            AuthorizationError: If ``actor_id`` does not own the room.
        """
        with self._transaction("listing applications"):
            owner_id = RoomRepository(self.db).get_owner_id(room_id)
            if owner_id is None:
                raise NotFoundError("Room not found")
            if owner_id != actor_id:
                raise AuthorizationError("Not authorized")

            rows = ApplicationRepository(self.db).get_for_room(room_id)
            return [
                ApplicationSummary(
                    id=application.id,
                    room_id=application.room_id,
                    applicant_id=application.applicant_id,
                    message=application.message,
                    status=application.status,
                    created_at=safe_datetime_iso(application.created_at),
                    first_name=applicant.first_name,
                    last_name=applicant.last_name,
                    email=applicant.email,
                    phone=applicant.phone,
                    bio=applicant.bio,
                    age=applicant.age,
                    occupation=applicant.occupation,
                )
                for application, applicant in rows
            ]

    def review_application(self, application_id: int, actor_id: int, status: str) -> None:
        """
        Approve or reject an application for a room the actor owns.

        Approval marks the room rented in the same transaction.

        Raises:
            ValidationError: If ``status`` is not approved/rejected.
            NotFoundError: If the application does not exist.
            AuthorizationError: If ``actor_id`` does not own the room.
        """
        if status not in REVIEW_STATUSES:
            raise ValidationError("Invalid status")

        with self._transaction("reviewing application"):
            repo = ApplicationRepository(self.db)
            updated = repo.update_status_if_owner(application_id, actor_id, status)
            if updated == 0:
                if repo.get_by_id(application_id) is None:
                    raise NotFoundError("Application not found")
                logger.warning(f"User {actor_id} tried to review application {application_id}")
                raise AuthorizationError("Not authorized")

            if status == 'approved':
                application = repo.get_by_id(application_id)
                RoomRepository(self.db).mark_rented(application.room_id)

        logger.info(f"User {actor_id} {status} application {application_id}")
