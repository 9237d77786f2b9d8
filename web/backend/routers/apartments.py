#!/usr/bin/env python3
"""
Apartment endpoints - browse, view, list, edit and compare apartments.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.models import User
from database.repositories import ApartmentFilters
from ..dependencies import get_db, get_current_user
from ..services.apartment_service import ApartmentService
from ..services.comparison_service import ComparisonService
from ..models.requests import ApartmentCreate, ApartmentUpdate, CompareRequest, ComparisonCreate
from ..models.responses import (
    ApartmentsResponse,
    ApartmentDetailResponse,
    ApartmentCreatedResponse,
    CompareResponse,
    ComparisonsResponse,
    ComparisonCreatedResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/apartments", tags=["apartments"])


@router.get("", response_model=ApartmentsResponse)
def get_apartments(
    city: Optional[str] = Query(default=None, description="Case-insensitive city substring"),
    min_price: Optional[float] = Query(default=None, ge=0, description="Minimum monthly rent"),
    max_price: Optional[float] = Query(default=None, ge=0, description="Maximum monthly rent"),
    rooms: Optional[int] = Query(default=None, ge=1, description="Minimum number of rooms"),
    furnished: bool = Query(default=False, description="Only furnished apartments"),
    pet_friendly: bool = Query(default=False, description="Only pet-friendly apartments"),
    parking: bool = Query(default=False, description="Only apartments with parking"),
    page: int = Query(default=1, ge=1, description="Page number (1-based)"),
    limit: Optional[int] = Query(default=None, ge=1, description="Results per page"),
    db: Session = Depends(get_db)
):
    """
    Get available apartments, newest first.

    Every supplied filter must match; omitted filters are ignored.
    """
    filters = ApartmentFilters(
        city=city,
        min_price=min_price,
        max_price=max_price,
        min_rooms=rooms,
        furnished=furnished,
        pet_friendly=pet_friendly,
        parking=parking,
    )
    apartments = ApartmentService(db).search(filters, page=page, limit=limit)
    return ApartmentsResponse(apartments=apartments)


@router.post("", response_model=ApartmentCreatedResponse, status_code=201)
def create_apartment(
    body: ApartmentCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List a new apartment owned by the current user."""
    apartment_id = ApartmentService(db).create(current_user.id, body)
    return ApartmentCreatedResponse(message="Apartment created successfully", apartmentId=apartment_id)


@router.post("/compare", response_model=CompareResponse)
def compare_apartments(
    body: CompareRequest,
    db: Session = Depends(get_db)
):
    """
    Compare 2-5 available apartments side by side.

    Fails with 404 if any requested apartment is missing or unavailable.
    """
    return ComparisonService(db).compare(body.apartment_ids)


@router.get("/comparisons", response_model=ComparisonsResponse)
def get_comparisons(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the current user's saved comparisons."""
    comparisons = ComparisonService(db).list_saved(current_user.id)
    return ComparisonsResponse(comparisons=comparisons)


@router.post("/comparisons", response_model=ComparisonCreatedResponse, status_code=201)
def create_comparison(
    body: ComparisonCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Save a comparison of 2-5 apartments."""
    comparison_id = ComparisonService(db).save(current_user.id, body.apartment_ids, body.comparison_notes)
    return ComparisonCreatedResponse(message="Comparison saved successfully", comparisonId=comparison_id)


@router.get("/{apartment_id}", response_model=ApartmentDetailResponse)
def get_apartment(
    apartment_id: int,
    db: Session = Depends(get_db)
):
    """Get an apartment with owner contact details and its available rooms."""
    return ApartmentDetailResponse(apartment=ApartmentService(db).get_detail(apartment_id))


@router.put("/{apartment_id}", response_model=MessageResponse)
def update_apartment(
    apartment_id: int,
    body: ApartmentUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Update an apartment owned by the current user.

    Only title, description, monthly_rent, deposit, utilities_included,
    pet_friendly, furnished, parking_available, amenities and status can be
    changed; other fields are ignored.
    """
    ApartmentService(db).update(apartment_id, current_user.id, body)
    return MessageResponse(message="Apartment updated successfully")
