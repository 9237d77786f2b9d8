import contextlib
import logging

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def transaction(session: Session):
    """Per-unit-of-work transaction scope on an existing Session.

    Commits on success, rolls back on exception. The session stays open;
    its owner (usually the request dependency) closes it.

    Usage:
        with transaction(db):
            repo.mark_rented(room_id)
            ...
        # commit happens automatically on successful exit
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
