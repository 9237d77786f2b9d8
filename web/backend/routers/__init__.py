"""API route handlers."""

from .auth import router as auth_router
from .apartments import router as apartments_router
from .rooms import router as rooms_router
from .users import router as users_router
