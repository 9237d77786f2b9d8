from sqlalchemy import Column, Integer, Text, TIMESTAMP, Numeric, CheckConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base

VERIFICATION_STATUSES = ('unverified', 'pending', 'verified')


class User(Base):
    """
    User account plus the roommate profile used for compatibility scoring.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    phone = Column(Text)

    # Roommate profile
    bio = Column(Text)
    age = Column(Integer)
    occupation = Column(Text)
    budget_min = Column(Numeric(10, 2, asdecimal=False))
    budget_max = Column(Numeric(10, 2, asdecimal=False))
    lifestyle_preferences = Column(Text)  # JSON object, see database.codec

    verification_status = Column(Text, nullable=False, default='unverified')  # unverified|pending|verified

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    apartments = relationship("Apartment", back_populates="owner")

    __table_args__ = (
        CheckConstraint(
            "verification_status IN ('unverified', 'pending', 'verified')",
            name='check_users_verification_status'
        ),
        Index('idx_users_verification_status', 'verification_status'),
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
