"""Authentication schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class DemoLoginRequest(BaseModel):
    """Demo login request schema."""
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)


class DemoUser(BaseModel):
    """Identity returned by a successful demo login."""
    username: str
    role: str
    name: str


class DemoLoginResponse(BaseModel):
    """Demo login response schema."""
    success: bool = True
    user: DemoUser
    token: str


class SessionUserResponse(BaseModel):
    """Signed-in user derived from the session cookie."""
    id: int
    open_id: str
    username: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: str
    last_signed_in: Optional[datetime] = None


class SuccessResponse(BaseModel):
    """Generic mutation acknowledgement."""
    success: bool = True
