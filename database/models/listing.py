from sqlalchemy import (
    Column, Integer, Text, Boolean, Date, TIMESTAMP, Numeric, Float,
    ForeignKey, CheckConstraint, Index, func
)
from sqlalchemy.orm import relationship

from .base import Base

APARTMENT_STATUSES = ('available', 'rented', 'unavailable')
ROOM_TYPES = ('bedroom', 'studio', 'shared_bedroom')
ROOM_STATUSES = ('available', 'rented')


class Apartment(Base):
    """
    An apartment listed by its owner. Rooms inside it are listed separately.
    """
    __tablename__ = 'apartments'

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    title = Column(Text, nullable=False)
    description = Column(Text)

    # Location
    address = Column(Text, nullable=False)
    city = Column(Text, nullable=False)
    neighborhood = Column(Text)
    postal_code = Column(Text)
    latitude = Column(Float)
    longitude = Column(Float)

    # Layout
    total_rooms = Column(Integer, nullable=False)
    total_bathrooms = Column(Integer, nullable=False)
    total_area = Column(Numeric(10, 2, asdecimal=False))

    # Terms
    monthly_rent = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    deposit = Column(Numeric(10, 2, asdecimal=False))
    utilities_included = Column(Boolean, nullable=False, default=False)
    pet_friendly = Column(Boolean, nullable=False, default=False)
    furnished = Column(Boolean, nullable=False, default=False)
    parking_available = Column(Boolean, nullable=False, default=False)
    available_from = Column(Date)
    lease_duration_months = Column(Integer)

    amenities = Column(Text)  # JSON array of strings
    images = Column(Text)  # JSON array of image paths

    status = Column(Text, nullable=False, default='available')  # available|rented|unavailable

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="apartments")
    rooms = relationship("Room", back_populates="apartment", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("status IN ('available', 'rented', 'unavailable')", name='check_apartments_status'),
        Index('idx_apartments_status_created', 'status', 'created_at'),
        Index('idx_apartments_owner', 'owner_id'),
        Index('idx_apartments_city', 'city'),
    )

    def __repr__(self):
        return f"<Apartment(id={self.id}, title='{self.title}', status='{self.status}')>"


class Room(Base):
    """A rentable room inside an apartment."""
    __tablename__ = 'rooms'

    id = Column(Integer, primary_key=True, autoincrement=True)
    apartment_id = Column(Integer, ForeignKey('apartments.id', ondelete='CASCADE'), nullable=False)

    room_number = Column(Text)
    room_type = Column(Text, nullable=False)  # bedroom|studio|shared_bedroom
    area = Column(Numeric(10, 2, asdecimal=False))
    monthly_rent = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    deposit = Column(Numeric(10, 2, asdecimal=False))
    private_bathroom = Column(Boolean, nullable=False, default=False)
    furnished = Column(Boolean, nullable=False, default=False)
    description = Column(Text)
    images = Column(Text)  # JSON array of image paths
    available_from = Column(Date)

    status = Column(Text, nullable=False, default='available')  # available|rented

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    apartment = relationship("Apartment", back_populates="rooms")
    applications = relationship("RoomApplication", back_populates="room", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("room_type IN ('bedroom', 'studio', 'shared_bedroom')", name='check_rooms_room_type'),
        CheckConstraint("status IN ('available', 'rented')", name='check_rooms_status'),
        Index('idx_rooms_status_created', 'status', 'created_at'),
        Index('idx_rooms_apartment', 'apartment_id'),
    )

    def __repr__(self):
        return f"<Room(id={self.id}, apartment_id={self.apartment_id}, status='{self.status}')>"
