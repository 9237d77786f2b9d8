#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

import logging
from typing import Generator, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from database.database import get_session_factory
from database.models import User
from database.repositories import UserRepository
from .auth import get_user_id_from_token
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


def _extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the acting user from ``Authorization: Bearer <token>``.

    Raises:
        AuthenticationError: 401 when the token is missing, 403 when it is
            invalid, expired, or names an unknown user.
    """
    token = _extract_bearer_token(authorization)
    if token is None:
        raise AuthenticationError("Access token required", status_code=401)

    user_id = get_user_id_from_token(token)
    if user_id is None:
        raise AuthenticationError("Invalid token", status_code=403)

    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        logger.warning(f"Token presented for unknown user {user_id}")
        raise AuthenticationError("Invalid token", status_code=403)

    return user
