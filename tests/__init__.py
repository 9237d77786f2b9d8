#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against an in-memory SQLite database, so no server is needed:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker, Session

from database.database import create_db_engine
from database.models import Base, User, Apartment, Room, RoomApplication, RoommateMatch, make_pair_key
from database.codec import encode_map

TEST_DB_URL = "sqlite:///:memory:"

# Fixed creation times keep newest-first ordering deterministic
BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_session_factory() -> sessionmaker:
    """Fresh in-memory database with every table created."""
    engine = create_db_engine(TEST_DB_URL)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def add_user(
    db: Session,
    email: str,
    first_name: str = "Test",
    last_name: str = "User",
    verification_status: str = "unverified",
    age: Optional[int] = None,
    budget_min: Optional[float] = None,
    budget_max: Optional[float] = None,
    lifestyle: Optional[dict] = None,
    password_hash: str = "not-a-real-hash",
) -> User:
    user = User(
        email=email,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
        verification_status=verification_status,
        age=age,
        budget_min=budget_min,
        budget_max=budget_max,
        lifestyle_preferences=encode_map(lifestyle) if lifestyle is not None else None,
    )
    db.add(user)
    db.commit()
    return user


def add_apartment(db: Session, owner: User, seq: int = 0, **overrides) -> Apartment:
    """Insert an available apartment; higher ``seq`` means newer."""
    values = dict(
        title=f"Apartment {seq}",
        address=f"{seq} Main St",
        city="Springfield",
        total_rooms=2,
        total_bathrooms=1,
        monthly_rent=1000.0,
        status="available",
        created_at=BASE_TIME + timedelta(minutes=seq),
    )
    values.update(overrides)
    apartment = Apartment(owner_id=owner.id, **values)
    db.add(apartment)
    db.commit()
    return apartment


def add_room(db: Session, apartment: Apartment, seq: int = 0, **overrides) -> Room:
    values = dict(
        room_number=str(seq),
        room_type="bedroom",
        monthly_rent=500.0,
        status="available",
        created_at=BASE_TIME + timedelta(minutes=seq),
    )
    values.update(overrides)
    room = Room(apartment_id=apartment.id, **values)
    db.add(room)
    db.commit()
    return room


def count_applications(db: Session, room_id: int, applicant_id: int) -> int:
    stmt = select(func.count()).select_from(RoomApplication).where(
        RoomApplication.room_id == room_id,
        RoomApplication.applicant_id == applicant_id
    )
    return db.execute(stmt).scalar_one()


def count_matches(db: Session, user_a_id: int, user_b_id: int) -> int:
    stmt = select(func.count()).select_from(RoommateMatch).where(
        RoommateMatch.pair_key == make_pair_key(user_a_id, user_b_id)
    )
    return db.execute(stmt).scalar_one()
