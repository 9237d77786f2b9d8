#!/usr/bin/env python3
"""
User endpoints - profile, roommate search and mutual interest.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.models import User
from ..dependencies import get_db, get_current_user
from ..services.user_service import UserService
from ..models.requests import ProfileUpdate, InterestRequest
from ..models.responses import (
    ProfileResponse,
    RoommatesResponse,
    InterestResponse,
    MatchesResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the current user's profile."""
    return ProfileResponse(profile=UserService(db).get_profile(current_user.id))


@router.put("/profile", response_model=MessageResponse)
def update_profile(
    body: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the submitted profile fields."""
    UserService(db).update_profile(current_user.id, body)
    return MessageResponse(message="Profile updated successfully")


@router.get("/roommates", response_model=RoommatesResponse)
def find_roommates(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Get compatible verified roommates.

    Scores are percentages; only scores of at least 60 are returned,
    highest first, at most 20.
    """
    return RoommatesResponse(matches=UserService(db).find_roommates(current_user.id))


@router.post("/interest", response_model=InterestResponse)
def express_interest(
    body: InterestRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Express roommate interest in another user.

    Returns mutual=true once both users have expressed interest.
    """
    return UserService(db).express_interest(current_user.id, body.user_id)


@router.get("/matches", response_model=MatchesResponse)
def get_matches(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get mutual matches for the current user."""
    return MatchesResponse(matches=UserService(db).get_mutual_matches(current_user.id))
