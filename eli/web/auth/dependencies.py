"""FastAPI authentication dependencies."""

from datetime import datetime
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status

from ..config import config
from .cookies import get_session_token
from .jwt import decode_session_token

UNAUTHED_ERR_MSG = "Please login (10001)"
NOT_ADMIN_ERR_MSG = "You do not have required permission (10002)"


class SessionUser:
    """Signed-in user built from the session token claims."""

    def __init__(self, username: str, role: str, name: str):
        self.id = 1
        self.open_id = username
        self.username = username
        self.name = name
        self.email = config.DEMO_EMAIL
        self.login_method = "password"
        self.role = role
        self.last_signed_in = datetime.utcnow()

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "open_id": self.open_id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "login_method": self.login_method,
            "role": self.role,
            "last_signed_in": self.last_signed_in,
        }


async def get_optional_user(request: Request) -> Optional[SessionUser]:
    """
    Get the signed-in user from the session cookie.

    Missing, invalid or expired tokens mean no session.
    """
    token = get_session_token(request)
    if not token:
        return None

    claims = decode_session_token(token)
    if not claims or claims.is_expired:
        return None

    return SessionUser(claims.username, claims.role, claims.name)


async def get_current_user(
    user: Optional[SessionUser] = Depends(get_optional_user),
) -> SessionUser:
    """
    Require a signed-in user.

    Raises:
        HTTPException 401: If not authenticated
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHED_ERR_MSG,
        )
    return user


async def require_admin(
    user: SessionUser = Depends(get_current_user),
) -> SessionUser:
    """
    Require admin role.

    Raises:
        HTTPException 403: If user is not an admin
    """
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=NOT_ADMIN_ERR_MSG,
        )
    return user


# Type aliases for cleaner route signatures
OptionalUser = Annotated[Optional[SessionUser], Depends(get_optional_user)]
CurrentUser = Annotated[SessionUser, Depends(get_current_user)]
AdminUser = Annotated[SessionUser, Depends(require_admin)]
