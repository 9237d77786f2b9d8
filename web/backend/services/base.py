#!/usr/bin/env python3
"""
Shared service plumbing: one transaction per operation, storage errors
turned into ServerError at the service boundary.
"""

import contextlib
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.uow import transaction
from ..exceptions import ServiceException, ServerError

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for services bound to a request-scoped Session."""

    def __init__(self, db: Session):
        self.db = db

    @contextlib.contextmanager
    def _transaction(self, action: str):
        """
        Run a block as a single transaction.

        Service exceptions pass through untouched (after rollback);
        SQLAlchemy errors are logged and re-raised as ServerError.
        """
        try:
            with transaction(self.db):
                yield self.db
        except ServiceException:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Storage error while {action}: {e}", exc_info=True)
            raise ServerError("Server error") from e
