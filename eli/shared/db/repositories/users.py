"""User repository."""

from typing import Optional
from datetime import datetime

from ..models import User, UserRole
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for dashboard users."""

    model = User

    async def get_by_open_id(self, open_id: str) -> Optional[User]:
        """Get user by open id."""
        query = self._base_query().where(User.open_id == open_id).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def upsert_sign_in(
        self,
        open_id: str,
        username: Optional[str] = None,
        name: Optional[str] = None,
        email: Optional[str] = None,
        login_method: Optional[str] = None,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create the user on first sign-in, otherwise refresh profile and last_signed_in."""
        now = datetime.utcnow()
        user = await self.get_by_open_id(open_id)
        if user:
            user.username = username or user.username
            user.name = name or user.name
            user.email = email or user.email
            user.login_method = login_method or user.login_method
            user.role = role
            user.last_signed_in = now
            user.updated_at = now
            await self.session.flush()
            return user

        return await self.create(User(
            open_id=open_id,
            username=username,
            name=name,
            email=email,
            login_method=login_method,
            role=role,
            last_signed_in=now,
        ))
