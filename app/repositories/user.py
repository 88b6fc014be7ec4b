"""Credential lookups on top of the generic repository."""

from app.domain.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_username(self, username: str | None) -> User | None:
        return await self.find_one(username=username)

    async def get_by_credentials(self, username: str | None, password: str | None) -> User | None:
        """Exact, case-sensitive match on both columns."""
        return await self.find_one(username=username, password=password)
