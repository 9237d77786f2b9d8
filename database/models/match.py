from sqlalchemy import Column, Integer, Text, Boolean, TIMESTAMP, Numeric, ForeignKey, UniqueConstraint, Index, func

from .base import Base


def make_pair_key(user_a_id: int, user_b_id: int) -> str:
    """Canonical key for an unordered pair of users: '<low>:<high>'."""
    low, high = sorted((int(user_a_id), int(user_b_id)))
    return f"{low}:{high}"


class RoommateMatch(Base):
    """
    Interest between two users.

    user1_id expressed interest first. The row turns mutual once user2_id
    reciprocates; pair_key keeps one row per unordered pair.
    """
    __tablename__ = 'roommate_matches'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user1_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    user2_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    pair_key = Column(Text, nullable=False)

    compatibility_score = Column(Numeric(4, 3, asdecimal=False))  # 0.000-1.000
    mutual_interest = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint('pair_key', name='uq_roommate_matches_pair'),
        Index('idx_roommate_matches_user1', 'user1_id'),
        Index('idx_roommate_matches_user2', 'user2_id'),
    )
