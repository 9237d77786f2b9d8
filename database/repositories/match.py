import logging
from typing import List, Optional, Tuple

from sqlalchemy import select, update, or_
from sqlalchemy.orm import aliased

from database.models import RoommateMatch, User, make_pair_key
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_for_pair(self, user_a_id: int, user_b_id: int) -> Optional[RoommateMatch]:
        stmt = select(RoommateMatch).where(
            RoommateMatch.pair_key == make_pair_key(user_a_id, user_b_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def create_match(self, user1_id: int, user2_id: int, compatibility_score: float) -> RoommateMatch:
        """Insert a one-directional match. Raises IntegrityError if the pair already has a row."""
        match = RoommateMatch(
            user1_id=user1_id,
            user2_id=user2_id,
            pair_key=make_pair_key(user1_id, user2_id),
            compatibility_score=compatibility_score,
            mutual_interest=False,
        )
        self.db.add(match)
        self.db.flush()
        return match

    def mark_mutual(self, user_a_id: int, user_b_id: int) -> int:
        stmt = (
            update(RoommateMatch)
            .where(RoommateMatch.pair_key == make_pair_key(user_a_id, user_b_id))
            .values(mutual_interest=True)
            .execution_options(synchronize_session=False)
        )
        return self.db.execute(stmt).rowcount

    def get_mutual_for_user(self, user_id: int) -> List[Tuple[RoommateMatch, User, User]]:
        """Mutual matches involving ``user_id`` with both parties, newest first."""
        user1 = aliased(User)
        user2 = aliased(User)
        stmt = (
            select(RoommateMatch, user1, user2)
            .join(user1, RoommateMatch.user1_id == user1.id)
            .join(user2, RoommateMatch.user2_id == user2.id)
            .where(
                or_(RoommateMatch.user1_id == user_id, RoommateMatch.user2_id == user_id),
                RoommateMatch.mutual_interest.is_(True)
            )
            .order_by(RoommateMatch.created_at.desc(), RoommateMatch.id.desc())
        )
        return self.db.execute(stmt).all()
