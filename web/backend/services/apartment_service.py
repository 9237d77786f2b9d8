#!/usr/bin/env python3
"""
Apartment service - listing, detail, creation and owner-only updates.
"""

import logging
from typing import List, Optional

from core.config_loader import get_config
from database.codec import encode_string_set
from database.repositories import ApartmentRepository, ApartmentFilters
from ..exceptions import ValidationError, AuthorizationError, NotFoundError
from ..models.requests import ApartmentCreate, ApartmentUpdate
from ..models.responses import ApartmentSummary, ApartmentDetail, RoomSummary
from .base import BaseService
from .listing_fields import apartment_fields, owner_fields, room_fields

logger = logging.getLogger(__name__)


def page_window(page: int, limit: Optional[int]) -> tuple:
    """
    Translate page/limit into (offset, limit).

    A missing limit falls back to the configured default; oversized limits
    are capped at the configured maximum.
    """
    listings = get_config().listings
    if page < 1:
        raise ValidationError("page must be at least 1")
    if limit is None:
        limit = listings.default_limit
    if limit < 1:
        raise ValidationError("limit must be positive")
    limit = min(limit, listings.max_limit)
    return (page - 1) * limit, limit


class ApartmentService(BaseService):
    """Service for apartment listings."""

    def search(
        self,
        filters: ApartmentFilters,
        page: int = 1,
        limit: Optional[int] = None
    ) -> List[ApartmentSummary]:
        """
        Get available apartments matching every supplied filter.

        Results are newest first and sliced to the requested page.
        """
        offset, limit = page_window(page, limit)

        with self._transaction("listing apartments"):
            rows = ApartmentRepository(self.db).search_available(filters, offset, limit)
            return [
                ApartmentSummary(**apartment_fields(apartment), **owner_fields(owner))
                for apartment, owner in rows
            ]

    def get_detail(self, apartment_id: int) -> ApartmentDetail:
        """
        Get an apartment with owner contact details and its available rooms.

        Raises:
            NotFoundError: If the apartment does not exist.
        """
        with self._transaction("fetching apartment"):
            repo = ApartmentRepository(self.db)
            row = repo.get_with_owner(apartment_id)
            if row is None:
                raise NotFoundError("Apartment not found")

            apartment, owner = row
            rooms = repo.get_available_rooms(apartment_id)

            return ApartmentDetail(
                **apartment_fields(apartment),
                **owner_fields(owner),
                owner_phone=owner.phone,
                available_rooms=[RoomSummary(**room_fields(room)) for room in rooms],
            )

    def create(self, owner_id: int, request: ApartmentCreate) -> int:
        """Create an apartment owned by ``owner_id`` and return its id."""
        values = request.model_dump()
        values["amenities"] = encode_string_set(values.get("amenities"))

        with self._transaction("creating apartment"):
            apartment = ApartmentRepository(self.db).create_apartment(owner_id, values)
            apartment_id = apartment.id

        logger.info(f"User {owner_id} created apartment {apartment_id}")
        return apartment_id

    def update(self, apartment_id: int, actor_id: int, request: ApartmentUpdate) -> None:
        """
        Update allow-listed fields of an apartment owned by ``actor_id``.

        The write is a single conditional update keyed on the owner, so a
        non-owner never changes anything.

        Raises:
            ValidationError: If no allow-listed field was submitted.
            NotFoundError: If the apartment does not exist.
            AuthorizationError: If ``actor_id`` is not the owner.
        """
        values = request.changes()
        if not values:
            raise ValidationError("No valid fields to update")
        if "amenities" in values:
            values["amenities"] = encode_string_set(values["amenities"])

        with self._transaction("updating apartment"):
            repo = ApartmentRepository(self.db)
            updated = repo.update_owned(apartment_id, actor_id, values)
            if updated == 0:
                if not repo.exists(apartment_id):
                    raise NotFoundError("Apartment not found")
                logger.warning(f"User {actor_id} tried to update apartment {apartment_id} they do not own")
                raise AuthorizationError("Not authorized")

        logger.info(f"User {actor_id} updated apartment {apartment_id}: {sorted(values)}")
