from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Index, func

from .base import Base


class ApartmentComparison(Base):
    """A saved side-by-side comparison of 2-5 apartments."""
    __tablename__ = 'apartment_comparisons'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    apartment_ids = Column(Text, nullable=False)  # JSON array, order preserved
    comparison_notes = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index('idx_apartment_comparisons_user', 'user_id'),
    )
