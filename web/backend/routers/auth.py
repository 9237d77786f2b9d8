#!/usr/bin/env python3
"""
Auth endpoints - register and log in.
"""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from ..dependencies import get_db
from ..services.auth_service import AuthService
from ..models.requests import RegisterRequest, LoginRequest
from ..models.responses import AuthResponse

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path}")
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "message": "Too many requests, please try again later",
            "type": "RateLimitExceeded"
        }
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
@limiter.limit("10/minute")
def register(
    request: Request,
    body: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Create an account and return an access token.
    """
    return AuthService(db).register(body)


@router.post("/login", response_model=AuthResponse)
@limiter.limit("20/minute")
def login(
    request: Request,
    body: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Exchange email and password for an access token.
    """
    return AuthService(db).login(body)
