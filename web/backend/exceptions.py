#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceException):
    """Raised when input is malformed or missing."""
    status_code = 400


class AuthenticationError(ServiceException):
    """Raised when credentials or a bearer token are missing or invalid."""
    status_code = 401

    def __init__(self, message: str = "Access token required", status_code: int = 401):
        super().__init__(message)
        self.status_code = status_code


class AuthorizationError(ServiceException):
    """Raised when an authenticated user does not own the resource."""
    status_code = 403


class NotFoundError(ServiceException):
    """Raised when a resource does not exist."""
    status_code = 404


class ConflictError(ServiceException):
    """Raised when a write would duplicate an existing record."""
    status_code = 400


class ServerError(ServiceException):
    """Raised when storage or another dependency fails unexpectedly."""
    status_code = 500


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}")
        message = "Server error"
    else:
        logger.info(f"{exc.__class__.__name__} in {request.method} {request.url.path}: {exc.message}")
        message = exc.message

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": message,
            "type": exc.__class__.__name__
        }
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Render request validation failures as 400 with per-field errors.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg"),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Validation failed",
            "type": "ValidationError",
            "errors": errors
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions without leaking internals.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "Server error",
            "type": "InternalError"
        }
    )
