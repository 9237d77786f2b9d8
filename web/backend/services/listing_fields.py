#!/usr/bin/env python3
"""
ORM row -> response field conversion shared by the listing services.
"""

from typing import Any, Dict

from database.codec import decode_string_list
from database.models import Apartment, Room, User
from ..utils import safe_float, safe_datetime_iso


def apartment_fields(apartment: Apartment) -> Dict[str, Any]:
    """Apartment columns with amenities/images decoded."""
    return {
        "id": apartment.id,
        "owner_id": apartment.owner_id,
        "title": apartment.title,
        "description": apartment.description,
        "address": apartment.address,
        "city": apartment.city,
        "neighborhood": apartment.neighborhood,
        "postal_code": apartment.postal_code,
        "latitude": safe_float(apartment.latitude),
        "longitude": safe_float(apartment.longitude),
        "total_rooms": apartment.total_rooms,
        "total_bathrooms": apartment.total_bathrooms,
        "total_area": safe_float(apartment.total_area),
        "monthly_rent": safe_float(apartment.monthly_rent, 0.0),
        "deposit": safe_float(apartment.deposit),
        "utilities_included": bool(apartment.utilities_included),
        "pet_friendly": bool(apartment.pet_friendly),
        "furnished": bool(apartment.furnished),
        "parking_available": bool(apartment.parking_available),
        "amenities": decode_string_list(apartment.amenities),
        "images": decode_string_list(apartment.images),
        "available_from": safe_datetime_iso(apartment.available_from),
        "lease_duration_months": apartment.lease_duration_months,
        "status": apartment.status,
        "created_at": safe_datetime_iso(apartment.created_at),
        "updated_at": safe_datetime_iso(apartment.updated_at),
    }


def owner_fields(owner: User) -> Dict[str, Any]:
    return {
        "first_name": owner.first_name,
        "last_name": owner.last_name,
        "owner_email": owner.email,
    }


def room_fields(room: Room) -> Dict[str, Any]:
    """Room columns with images decoded."""
    return {
        "id": room.id,
        "apartment_id": room.apartment_id,
        "room_number": room.room_number,
        "room_type": room.room_type,
        "area": safe_float(room.area),
        "monthly_rent": safe_float(room.monthly_rent, 0.0),
        "deposit": safe_float(room.deposit),
        "private_bathroom": bool(room.private_bathroom),
        "furnished": bool(room.furnished),
        "description": room.description,
        "images": decode_string_list(room.images),
        "available_from": safe_datetime_iso(room.available_from),
        "status": room.status,
        "created_at": safe_datetime_iso(room.created_at),
        "updated_at": safe_datetime_iso(room.updated_at),
    }
