#!/usr/bin/env python3
"""
Auth service - account registration and credential login.
"""

import logging

from sqlalchemy.exc import IntegrityError

from database.models import User
from database.repositories import UserRepository
from ..auth import hash_password, verify_password, create_access_token
from ..exceptions import ValidationError
from ..models.requests import RegisterRequest, LoginRequest
from ..models.responses import AuthResponse, UserResponse
from .base import BaseService

logger = logging.getLogger(__name__)


class AuthService(BaseService):
    """Service for creating accounts and issuing tokens."""

    def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create an account and return a token for it.

        Raises:
            ValidationError: If the email is already registered.
        """
        with self._transaction("registering user"):
            repo = UserRepository(self.db)
            if repo.email_exists(request.email):
                raise ValidationError("User already exists")

            try:
                user = repo.create_user(
                    email=request.email,
                    password_hash=hash_password(request.password),
                    first_name=request.first_name,
                    last_name=request.last_name,
                    phone=request.phone,
                )
            except IntegrityError as e:
                raise ValidationError("User already exists") from e

            response = self._to_auth_response(user)

        logger.info(f"Registered user {response.user.id}")
        return response

    def login(self, request: LoginRequest) -> AuthResponse:
        """
        Exchange email and password for a token.

        Raises:
            ValidationError: If the email is unknown or the password is wrong.
        """
        with self._transaction("logging in"):
            user = UserRepository(self.db).get_by_email(request.email)
            if user is None or not verify_password(request.password, user.password_hash):
                raise ValidationError("Invalid credentials")
            return self._to_auth_response(user)

    def _to_auth_response(self, user: User) -> AuthResponse:
        return AuthResponse(
            token=create_access_token(user.id),
            user=UserResponse(
                id=user.id,
                email=user.email,
                first_name=user.first_name,
                last_name=user.last_name,
                phone=user.phone,
            )
        )
