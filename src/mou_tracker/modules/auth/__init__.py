"""Authentication module."""

from mou_tracker.modules.auth.router import router
from mou_tracker.modules.auth.schemas import LoginRequest, LoginResponse

__all__ = ["router", "LoginRequest", "LoginResponse"]
