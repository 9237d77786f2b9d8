#!/usr/bin/env python3
"""
RoomMatch API - FastAPI Application

Backend for apartment and room listings, applications, side-by-side
comparisons and roommate matching.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:3000/api/apartments - Listings (port configurable in config.yaml)
    - http://localhost:3000/docs - API Documentation (Swagger UI)
    - http://localhost:3000/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from core.config_loader import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    auth_router,
    apartments_router,
    rooms_router,
    users_router
)
from .routers.auth import add_rate_limit_handlers

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()

# Create FastAPI app
app = FastAPI(
    title="RoomMatch API",
    description="API for apartment listings, room applications and roommate matching",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure rate limiting
add_rate_limit_handlers(app)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(auth_router)
app.include_router(apartments_router)
app.include_router(rooms_router)
app.include_router(users_router)


@app.get("/")
def read_root():
    """Service banner."""
    return {"message": "RoomMatch API", "docs": "/docs"}


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "roommatch-api"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting RoomMatch API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
