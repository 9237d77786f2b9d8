#!/usr/bin/env python3
"""
Authentication helpers: password hashing and JWT access tokens.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, VerificationError, InvalidHashError

from core.config_loader import get_config

logger = logging.getLogger(__name__)

# Password hasher (using Argon2)
ph = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password using Argon2."""
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash."""
    try:
        return ph.verify(password_hash, password)
    except VerifyMismatchError:
        return False
    except (VerificationError, InvalidHashError):
        logger.warning("Stored password hash could not be verified")
        return False


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT whose subject is the user id."""
    auth = get_config().auth
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=auth.access_token_expire_minutes))

    payload = {"sub": str(user_id), "iat": now, "exp": expire}
    return jwt.encode(payload, auth.secret_key, algorithm=auth.algorithm)


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and validate a JWT token. Returns None if invalid or expired."""
    auth = get_config().auth
    try:
        return jwt.decode(token, auth.secret_key, algorithms=[auth.algorithm])
    except jwt.ExpiredSignatureError:
        return None  # Token expired
    except jwt.InvalidTokenError:
        return None  # Invalid token


def get_user_id_from_token(token: str) -> Optional[int]:
    """Extract the user id from a valid token."""
    payload = decode_access_token(token)
    if payload is None:
        return None

    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        return None
