#!/usr/bin/env python3
"""
Comparison service - side-by-side apartment comparison and saved comparisons.
"""

import logging
from typing import Any, Dict, List, Optional

from database.codec import decode_list
from database.repositories import ApartmentRepository, ComparisonRepository
from ..exceptions import ValidationError, NotFoundError
from ..models.responses import ComparedApartment, CompareResponse, SavedComparison
from ..utils import round2, safe_datetime_iso
from .base import BaseService
from .listing_fields import apartment_fields, owner_fields

logger = logging.getLogger(__name__)

MIN_COMPARE = 2
MAX_COMPARE = 5


def _check_count(apartment_ids: List[int]) -> None:
    if len(apartment_ids) < MIN_COMPARE or len(apartment_ids) > MAX_COMPARE:
        raise ValidationError(f"Can compare between {MIN_COMPARE}-{MAX_COMPARE} apartments")


def _has_area(apartment: ComparedApartment) -> bool:
    return apartment.total_area is not None and apartment.total_area > 0


def build_stats(apartments: List[ComparedApartment]) -> Dict[str, Any]:
    """
    Aggregate price, room and area ranges.

    ``area_range`` covers only apartments with an area and is left out
    entirely when none has one.
    """
    prices = [a.monthly_rent for a in apartments]
    rooms = [a.total_rooms for a in apartments]

    stats: Dict[str, Any] = {
        "price_range": {
            "min": min(prices),
            "max": max(prices),
            "avg": round2(sum(prices) / len(prices)),
        },
        "room_range": {
            "min": min(rooms),
            "max": max(rooms),
        },
    }

    areas = [a.total_area for a in apartments if _has_area(a)]
    if areas:
        stats["area_range"] = {
            "min": min(areas),
            "max": max(areas),
            "avg": round2(sum(areas) / len(areas)),
        }

    return stats


class ComparisonService(BaseService):
    """Service for comparing apartments."""

    def compare(self, apartment_ids: List[int]) -> CompareResponse:
        """
        Compare 2-5 available apartments.

        Raises:
            ValidationError: If fewer than 2 or more than 5 ids are given.
            NotFoundError: If any id is unknown or not available; no partial
                comparison is returned.
        """
        _check_count(apartment_ids)

        with self._transaction("comparing apartments"):
            rows = ApartmentRepository(self.db).get_available_by_ids(apartment_ids)
            if len(rows) != len(apartment_ids):
                raise NotFoundError("One or more apartments not found")

            by_id = {apartment.id: (apartment, owner) for apartment, owner in rows}
            compared = []
            for apartment_id in apartment_ids:
                apartment, owner = by_id[apartment_id]
                item = ComparedApartment(**apartment_fields(apartment), **owner_fields(owner))
                if _has_area(item):
                    item.price_per_area = round2(item.monthly_rent / item.total_area)
                compared.append(item)

        return CompareResponse(apartments=compared, stats=build_stats(compared))

    def save(self, user_id: int, apartment_ids: List[int], notes: Optional[str] = None) -> int:
        """Save a comparison for later and return its id."""
        _check_count(apartment_ids)

        with self._transaction("saving comparison"):
            comparison = ComparisonRepository(self.db).create_comparison(user_id, apartment_ids, notes)
            comparison_id = comparison.id

        logger.info(f"User {user_id} saved comparison {comparison_id}")
        return comparison_id

    def list_saved(self, user_id: int) -> List[SavedComparison]:
        """Get a user's saved comparisons, newest first."""
        with self._transaction("listing comparisons"):
            comparisons = ComparisonRepository(self.db).get_for_user(user_id)
            return [
                SavedComparison(
                    id=c.id,
                    user_id=c.user_id,
                    apartment_ids=decode_list(c.apartment_ids),
                    comparison_notes=c.comparison_notes,
                    created_at=safe_datetime_iso(c.created_at),
                )
                for c in comparisons
            ]
