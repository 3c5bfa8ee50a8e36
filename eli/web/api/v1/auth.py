"""Authentication API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Request, Response, status

from ....shared.db.models import UserRole
from ....shared.db.repositories.users import UserRepository
from ....shared.schemas.auth import (
    DemoLoginRequest,
    DemoLoginResponse,
    DemoUser,
    SessionUserResponse,
    SuccessResponse,
)
from ...auth.cookies import set_session_cookie, clear_session_cookie
from ...auth.dependencies import OptionalUser
from ...auth.jwt import create_session_token
from ...config import config
from ...deps import DbSession

router = APIRouter()


@router.get("/me", response_model=Optional[SessionUserResponse])
async def get_me(user: OptionalUser):
    """Get the signed-in user, or null without a session."""
    if user is None:
        return None
    return SessionUserResponse(**user.to_dict())


@router.post("/demo-login", response_model=DemoLoginResponse)
async def demo_login(
    body: DemoLoginRequest,
    request: Request,
    response: Response,
    db: DbSession,
):
    """
    Sign in with the demo credentials.

    Sets the session cookie on success. The user row is upserted when a
    database is configured.
    """
    if body.username != config.DEMO_USERNAME or body.password != config.DEMO_PASSWORD:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    user = DemoUser(
        username=config.DEMO_USERNAME,
        role="admin",
        name=config.DEMO_DISPLAY_NAME,
    )
    token = create_session_token(user.username, user.role, user.name)
    set_session_cookie(request, response, token)

    if db is not None:
        await UserRepository(db).upsert_sign_in(
            open_id=user.username,
            username=user.username,
            name=user.name,
            email=config.DEMO_EMAIL,
            login_method="password",
            role=UserRole.ADMIN,
        )

    print(f"[AUTH] Demo login for {user.username}")
    return DemoLoginResponse(success=True, user=user, token=token)


@router.post("/logout", response_model=SuccessResponse)
async def logout(request: Request, response: Response):
    """Clear the session cookie."""
    clear_session_cookie(request, response)
    return SuccessResponse(success=True)
