#!/usr/bin/env python3
"""
Request models for API endpoints.

Field constraints here are the per-route validation rules; a violation is
answered with 400 before any database access.
"""

from datetime import date
from typing import Optional, List, Dict, Any, Literal

from pydantic import BaseModel, Field, EmailStr, field_validator, model_validator

RoomType = Literal["bedroom", "studio", "shared_bedroom"]
ApartmentStatus = Literal["available", "rented", "unavailable"]


class RegisterRequest(BaseModel):
    """Request to create an account."""
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    phone: Optional[str] = None

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def strip_names(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class LoginRequest(BaseModel):
    """Request to exchange credentials for a token."""
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class ApartmentCreate(BaseModel):
    """Request to list a new apartment."""
    title: str = Field(min_length=1)
    description: Optional[str] = None
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    neighborhood: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    total_rooms: int = Field(ge=1)
    total_bathrooms: int = Field(ge=1)
    total_area: Optional[float] = Field(None, gt=0)
    monthly_rent: float = Field(ge=0)
    deposit: Optional[float] = Field(None, ge=0)
    utilities_included: bool = False
    pet_friendly: bool = False
    furnished: bool = False
    parking_available: bool = False
    amenities: List[str] = Field(default_factory=list)
    available_from: Optional[date] = None
    lease_duration_months: Optional[int] = Field(None, ge=1)

    @field_validator("title", "address", "city", mode="before")
    @classmethod
    def strip_required_text(cls, value):
        return value.strip() if isinstance(value, str) else value


class ApartmentUpdate(BaseModel):
    """
    Partial apartment update.

    Only the fields declared here can change; anything else in the body is
    dropped during parsing.
    """
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    monthly_rent: Optional[float] = Field(None, ge=0)
    deposit: Optional[float] = Field(None, ge=0)
    utilities_included: Optional[bool] = None
    pet_friendly: Optional[bool] = None
    furnished: Optional[bool] = None
    parking_available: Optional[bool] = None
    amenities: Optional[List[str]] = None
    status: Optional[ApartmentStatus] = None

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        required = {
            "title", "monthly_rent", "utilities_included", "pet_friendly",
            "furnished", "parking_available", "status"
        }
        for name in required & self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Submitted allow-listed fields and their values."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class CompareRequest(BaseModel):
    """Request to compare apartments side by side."""
    apartment_ids: List[int] = Field(default_factory=list)


class ComparisonCreate(BaseModel):
    """Request to save a comparison."""
    apartment_ids: List[int] = Field(min_length=2, max_length=5)
    comparison_notes: Optional[str] = Field(None, max_length=2000)


class RoomCreate(BaseModel):
    """Request to list a room inside an owned apartment."""
    apartment_id: int
    room_number: Optional[str] = None
    room_type: RoomType
    area: Optional[float] = Field(None, gt=0)
    monthly_rent: float = Field(ge=0)
    deposit: Optional[float] = Field(None, ge=0)
    private_bathroom: bool = False
    furnished: bool = False
    description: Optional[str] = None
    available_from: Optional[date] = None


class ApplyRequest(BaseModel):
    """Request to apply for a room."""
    message: Optional[str] = Field(None, max_length=500)


class ApplicationReview(BaseModel):
    """Owner decision on an application."""
    status: str = Field(description="approved or rejected")


class ProfileUpdate(BaseModel):
    """Partial profile update; only submitted fields are written."""
    bio: Optional[str] = Field(None, max_length=500)
    age: Optional[int] = Field(None, ge=18, le=100)
    occupation: Optional[str] = None
    budget_min: Optional[float] = Field(None, ge=0)
    budget_max: Optional[float] = Field(None, ge=0)
    lifestyle_preferences: Optional[Dict[str, Any]] = None

    @model_validator(mode="after")
    def check_budget_order(self):
        if (
            self.budget_min is not None
            and self.budget_max is not None
            and self.budget_min > self.budget_max
        ):
            raise ValueError("budget_min must not exceed budget_max")
        return self

    def changes(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.model_fields_set}


class InterestRequest(BaseModel):
    """Request to express roommate interest in another user."""
    user_id: int
