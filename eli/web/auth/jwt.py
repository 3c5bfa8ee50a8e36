"""Session JWT handling."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from ..config import config


class SessionClaims:
    """Parsed session token claims."""

    def __init__(self, username: str, role: str, name: str, exp: datetime):
        self.username = username
        self.role = role
        self.name = name
        self.exp = exp

    @property
    def is_expired(self) -> bool:
        """Check if token is expired."""
        return datetime.utcnow() > self.exp


def create_session_token(
    username: str,
    role: str,
    name: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed session token.

    Args:
        username: Login name
        role: Role claim (admin, user, ...)
        name: Display name
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(hours=config.JWT_EXPIRE_HOURS)

    payload = {
        "username": username,
        "role": role,
        "name": name,
        "exp": expire,
        "iat": datetime.utcnow(),
    }

    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_session_token(token: str) -> Optional[SessionClaims]:
    """
    Decode and validate a session token.

    Returns:
        SessionClaims if valid, None otherwise
    """
    try:
        payload = jwt.decode(
            token,
            config.JWT_SECRET,
            algorithms=[config.JWT_ALGORITHM],
        )
    except JWTError as e:
        print(f"[AUTH] Session verification failed: {e}")
        return None

    username = payload.get("username")
    role = payload.get("role")
    exp = payload.get("exp")
    if not all([username, role, exp]):
        print("[AUTH] Session payload missing required fields")
        return None

    return SessionClaims(
        username=username,
        role=role,
        name=payload.get("name") or username,
        exp=datetime.fromtimestamp(exp, tz=timezone.utc).replace(tzinfo=None),
    )


def get_token_expiry_seconds() -> int:
    """Get token expiry time in seconds."""
    return config.JWT_EXPIRE_HOURS * 3600
