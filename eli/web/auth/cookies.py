"""Session cookie helpers."""

from typing import Optional

from fastapi import Request, Response

from ..config import config
from .jwt import get_token_expiry_seconds


def is_secure_request(request: Request) -> bool:
    """Whether the client connection is HTTPS, directly or behind a proxy."""
    if request.url.scheme == "https":
        return True

    forwarded = request.headers.get("x-forwarded-proto")
    if not forwarded:
        return False
    return any(proto.strip().lower() == "https" for proto in forwarded.split(","))


def get_session_token(request: Request) -> Optional[str]:
    """Read the session token, falling back to the legacy cookie name."""
    return (
        request.cookies.get(config.COOKIE_NAME)
        or request.cookies.get(config.LEGACY_COOKIE_NAME)
    )


def set_session_cookie(request: Request, response: Response, token: str) -> None:
    """Set the session cookie. Cross-site cookies need HTTPS, so plain HTTP gets lax."""
    secure = is_secure_request(request)
    response.set_cookie(
        key=config.COOKIE_NAME,
        value=token,
        httponly=True,
        secure=secure,
        samesite="none" if secure else "lax",
        max_age=get_token_expiry_seconds(),
        path="/",
    )


def clear_session_cookie(request: Request, response: Response) -> None:
    """Clear the session cookie and the legacy one."""
    secure = is_secure_request(request)
    for name in (config.COOKIE_NAME, config.LEGACY_COOKIE_NAME):
        response.delete_cookie(
            key=name,
            path="/",
            httponly=True,
            secure=secure,
            samesite="none" if secure else "lax",
        )
