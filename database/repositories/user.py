import logging
from typing import List, Optional, Dict, Any

from sqlalchemy import select, update

from database.models import User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    def get_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def email_exists(self, email: str) -> bool:
        stmt = select(User.id).where(User.email == email)
        return self.db.execute(stmt).first() is not None

    def create_user(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: Optional[str] = None
    ) -> User:
        user = User(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
        )
        self.db.add(user)
        self.db.flush()  # Generate ID
        return user

    def update_profile(self, user_id: int, values: Dict[str, Any]) -> int:
        if not values:
            return 0
        stmt = update(User).where(User.id == user_id).values(**values)
        return self.db.execute(stmt).rowcount

    def get_verified_candidates(self, exclude_user_id: int) -> List[User]:
        stmt = select(User).where(
            User.id != exclude_user_id,
            User.verification_status == 'verified'
        ).order_by(User.id)
        return self.db.execute(stmt).scalars().all()
