from typing import List, Optional

from sqlalchemy import select

from database.codec import encode_list
from database.models import ApartmentComparison
from database.repositories.base import BaseRepository


class ComparisonRepository(BaseRepository):
    def create_comparison(
        self,
        user_id: int,
        apartment_ids: List[int],
        comparison_notes: Optional[str] = None
    ) -> ApartmentComparison:
        comparison = ApartmentComparison(
            user_id=user_id,
            apartment_ids=encode_list(apartment_ids),
            comparison_notes=comparison_notes,
        )
        self.db.add(comparison)
        self.db.flush()
        return comparison

    def get_for_user(self, user_id: int) -> List[ApartmentComparison]:
        stmt = (
            select(ApartmentComparison)
            .where(ApartmentComparison.user_id == user_id)
            .order_by(ApartmentComparison.created_at.desc(), ApartmentComparison.id.desc())
        )
        return self.db.execute(stmt).scalars().all()
