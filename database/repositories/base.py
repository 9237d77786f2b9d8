from sqlalchemy.orm import Session


class BaseRepository:
    """Repositories share the caller's Session; transaction scope belongs to the caller."""

    def __init__(self, db: Session):
        self.db = db
