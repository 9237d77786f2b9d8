#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str


class UserResponse(BaseModel):
    """Public account fields returned after register/login."""
    id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None


class AuthResponse(BaseModel):
    """Access token plus the authenticated user."""
    token: str
    user: UserResponse


class RoomSummary(BaseModel):
    """Room columns with images decoded."""
    id: int
    apartment_id: int
    room_number: Optional[str]
    room_type: str
    area: Optional[float]
    monthly_rent: float
    deposit: Optional[float]
    private_bathroom: bool
    furnished: bool
    description: Optional[str]
    images: List[str] = Field(default_factory=list)
    available_from: Optional[str]
    status: str
    created_at: Optional[str]
    updated_at: Optional[str]


class ApartmentSummary(BaseModel):
    """Apartment columns with structured fields decoded and owner name joined."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 12,
                "owner_id": 3,
                "title": "Sunny 3BR near the park",
                "address": "12 Elm St",
                "city": "Springfield",
                "total_rooms": 3,
                "total_bathrooms": 1,
                "total_area": 85.0,
                "monthly_rent": 1500.0,
                "amenities": ["washer", "balcony"],
                "images": [],
                "status": "available",
                "first_name": "Ada",
                "last_name": "Lovelace",
                "owner_email": "ada@example.com"
            }
        }
    )

    id: int
    owner_id: int
    title: str
    description: Optional[str]
    address: str
    city: str
    neighborhood: Optional[str]
    postal_code: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]
    total_rooms: int
    total_bathrooms: int
    total_area: Optional[float]
    monthly_rent: float
    deposit: Optional[float]
    utilities_included: bool
    pet_friendly: bool
    furnished: bool
    parking_available: bool
    amenities: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    available_from: Optional[str]
    lease_duration_months: Optional[int]
    status: str
    created_at: Optional[str]
    updated_at: Optional[str]

    # Owner
    first_name: str
    last_name: str
    owner_email: str


class ApartmentDetail(ApartmentSummary):
    """Apartment with owner phone and its currently available rooms."""
    owner_phone: Optional[str]
    available_rooms: List[RoomSummary] = Field(default_factory=list)


class ComparedApartment(ApartmentSummary):
    """Apartment in a comparison, with price per unit of area when known."""
    price_per_area: Optional[float] = None


class RoomListing(RoomSummary):
    """Room with parent apartment and owner fields joined."""
    apartment_title: str
    address: str
    city: str
    neighborhood: Optional[str]
    apartment_amenities: List[str] = Field(default_factory=list)
    first_name: str
    last_name: str


class RoomDetail(RoomListing):
    """Room listing plus apartment description, policies and owner contact."""
    apartment_description: Optional[str]
    pet_friendly: bool
    parking_available: bool
    email: str
    phone: Optional[str]


class ApartmentsResponse(BaseModel):
    apartments: List[ApartmentSummary]


class ApartmentDetailResponse(BaseModel):
    apartment: ApartmentDetail


class ApartmentCreatedResponse(BaseModel):
    message: str
    apartmentId: int


class CompareResponse(BaseModel):
    """
    Compared apartments and aggregate stats.

    ``stats`` holds price_range and room_range; area_range is only present
    when at least one apartment defines an area.
    """
    apartments: List[ComparedApartment]
    stats: Dict[str, Any]


class SavedComparison(BaseModel):
    id: int
    user_id: int
    apartment_ids: List[int]
    comparison_notes: Optional[str]
    created_at: Optional[str]


class ComparisonsResponse(BaseModel):
    comparisons: List[SavedComparison]


class ComparisonCreatedResponse(BaseModel):
    message: str
    comparisonId: int


class RoomsResponse(BaseModel):
    rooms: List[RoomListing]


class RoomDetailResponse(BaseModel):
    room: RoomDetail


class RoomCreatedResponse(BaseModel):
    message: str
    roomId: int


class ApplicationSummary(BaseModel):
    """An application joined with the applicant's profile."""
    id: int
    room_id: int
    applicant_id: int
    message: Optional[str]
    status: str
    created_at: Optional[str]
    first_name: str
    last_name: str
    email: str
    phone: Optional[str]
    bio: Optional[str]
    age: Optional[int]
    occupation: Optional[str]


class ApplicationsResponse(BaseModel):
    applications: List[ApplicationSummary]


class Profile(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str]
    bio: Optional[str]
    age: Optional[int]
    occupation: Optional[str]
    budget_min: Optional[float]
    budget_max: Optional[float]
    lifestyle_preferences: Dict[str, Any] = Field(default_factory=dict)
    verification_status: str


class ProfileResponse(BaseModel):
    profile: Profile


class RoommateCandidate(BaseModel):
    """A verified user scored against the requesting user."""
    id: int
    first_name: str
    last_name: str
    age: Optional[int]
    occupation: Optional[str]
    bio: Optional[str]
    budget_min: Optional[float]
    budget_max: Optional[float]
    lifestyle_preferences: Dict[str, Any] = Field(default_factory=dict)
    verification_status: str
    compatibility_score: int = Field(ge=0, le=100)


class RoommatesResponse(BaseModel):
    matches: List[RoommateCandidate]


class InterestResponse(BaseModel):
    message: str
    mutual: bool


class MutualMatch(BaseModel):
    """A mutual match annotated with the other party's details."""
    id: int
    user1_id: int
    user2_id: int
    compatibility_score: Optional[float] = Field(None, ge=0, le=1)
    mutual_interest: bool
    created_at: Optional[str]
    user_id: int
    first_name: str
    last_name: str
    email: str
    age: Optional[int]
    occupation: Optional[str]
    bio: Optional[str]


class MatchesResponse(BaseModel):
    matches: List[MutualMatch]
