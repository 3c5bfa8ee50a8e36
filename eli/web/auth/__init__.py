"""Authentication module."""

from .jwt import create_session_token, decode_session_token, SessionClaims
from .cookies import (
    get_session_token,
    set_session_cookie,
    clear_session_cookie,
    is_secure_request,
)
from .dependencies import (
    SessionUser,
    get_optional_user,
    get_current_user,
    require_admin,
    OptionalUser,
    CurrentUser,
    AdminUser,
    UNAUTHED_ERR_MSG,
    NOT_ADMIN_ERR_MSG,
)

__all__ = [
    "create_session_token",
    "decode_session_token",
    "SessionClaims",
    "get_session_token",
    "set_session_cookie",
    "clear_session_cookie",
    "is_secure_request",
    "SessionUser",
    "get_optional_user",
    "get_current_user",
    "require_admin",
    "OptionalUser",
    "CurrentUser",
    "AdminUser",
    "UNAUTHED_ERR_MSG",
    "NOT_ADMIN_ERR_MSG",
]
