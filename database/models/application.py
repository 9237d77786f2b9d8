from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, CheckConstraint, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base

APPLICATION_STATUSES = ('pending', 'approved', 'rejected')
REVIEW_STATUSES = ('approved', 'rejected')


class RoomApplication(Base):
    """
    A user's application for a room.

    At most one application exists per (room, applicant).
    """
    __tablename__ = 'room_applications'

    id = Column(Integer, primary_key=True, autoincrement=True)
    room_id = Column(Integer, ForeignKey('rooms.id', ondelete='CASCADE'), nullable=False)
    applicant_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    message = Column(Text)
    status = Column(Text, nullable=False, default='pending')  # pending|approved|rejected

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    room = relationship("Room", back_populates="applications")
    applicant = relationship("User")

    __table_args__ = (
        UniqueConstraint('room_id', 'applicant_id', name='uq_room_applications_room_applicant'),
        CheckConstraint("status IN ('pending', 'approved', 'rejected')", name='check_room_applications_status'),
        Index('idx_room_applications_room', 'room_id'),
    )
