"""Key/value configuration repository."""

from typing import Any, List, Optional
from datetime import datetime

from ..models import ConfigEntry
from .base import BaseRepository


class ConfigRepository(BaseRepository[ConfigEntry]):
    """Repository for platform settings."""

    model = ConfigEntry

    async def list_by_key(self) -> List[ConfigEntry]:
        """Get all settings ordered by key."""
        return await self.list_all(ConfigEntry.key)

    async def get_by_key(self, key: str) -> Optional[ConfigEntry]:
        """Get a setting by key."""
        query = self._base_query().where(ConfigEntry.key == key).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        key: str,
        value: Any,
        description: Optional[str] = None,
    ) -> ConfigEntry:
        """Insert or replace a setting. A missing description keeps the old one."""
        entry = await self.get_by_key(key)
        if entry:
            entry.value = value
            if description is not None:
                entry.description = description
            entry.updated_at = datetime.utcnow()
            return await self.update(entry)

        return await self.create(
            ConfigEntry(key=key, value=value, description=description)
        )
