#!/usr/bin/env python3
"""
Room endpoints - browse rooms, apply, and review applications.
"""

import logging
from typing import Optional, Literal
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.models import User
from database.repositories import RoomFilters
from ..dependencies import get_db, get_current_user
from ..services.room_service import RoomService
from ..models.requests import RoomCreate, ApplyRequest, ApplicationReview
from ..models.responses import (
    RoomsResponse,
    RoomDetailResponse,
    RoomCreatedResponse,
    ApplicationsResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.get("", response_model=RoomsResponse)
def get_rooms(
    city: Optional[str] = Query(default=None, description="Case-insensitive city substring"),
    min_price: Optional[float] = Query(default=None, ge=0, description="Minimum monthly rent"),
    max_price: Optional[float] = Query(default=None, ge=0, description="Maximum monthly rent"),
    room_type: Optional[Literal["bedroom", "studio", "shared_bedroom"]] = Query(default=None),
    furnished: bool = Query(default=False, description="Only furnished rooms"),
    private_bathroom: bool = Query(default=False, description="Only rooms with a private bathroom"),
    page: int = Query(default=1, ge=1, description="Page number (1-based)"),
    limit: Optional[int] = Query(default=None, ge=1, description="Results per page"),
    db: Session = Depends(get_db)
):
    """
    Get available rooms in available apartments, newest first.
    """
    filters = RoomFilters(
        city=city,
        min_price=min_price,
        max_price=max_price,
        room_type=room_type,
        furnished=furnished,
        private_bathroom=private_bathroom,
    )
    return RoomsResponse(rooms=RoomService(db).search(filters, page=page, limit=limit))


@router.post("", response_model=RoomCreatedResponse, status_code=201)
def create_room(
    body: RoomCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add a room to an apartment owned by the current user."""
    room_id = RoomService(db).create(current_user.id, body)
    return RoomCreatedResponse(message="Room created successfully", roomId=room_id)


@router.put("/applications/{application_id}", response_model=MessageResponse)
def update_application_status(
    application_id: int,
    body: ApplicationReview,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Approve or reject an application. Approval marks the room as rented.
    """
    RoomService(db).review_application(application_id, current_user.id, body.status)
    return MessageResponse(message=f"Application {body.status} successfully")


@router.get("/{room_id}", response_model=RoomDetailResponse)
def get_room(
    room_id: int,
    db: Session = Depends(get_db)
):
    """Get a room with its apartment and owner details."""
    return RoomDetailResponse(room=RoomService(db).get_detail(room_id))


@router.post("/{room_id}/apply", response_model=MessageResponse, status_code=201)
def apply_for_room(
    room_id: int,
    body: Optional[ApplyRequest] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Apply for an available room. Each user may apply once per room."""
    message = body.message if body else None
    RoomService(db).apply(room_id, current_user.id, message)
    return MessageResponse(message="Application submitted successfully")


@router.get("/{room_id}/applications", response_model=ApplicationsResponse)
def get_room_applications(
    room_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get applications for a room owned by the current user."""
    return ApplicationsResponse(applications=RoomService(db).get_applications(room_id, current_user.id))
