"""Credential service: signup and login against the users table.

Passwords are stored and compared as plain text. Login failure never says
whether the username exists.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, UnauthorizedError, ValidationError
from app.repositories.user import UserRepository
from app.schemas.auth import Credentials

logger = logging.getLogger(__name__)

class CredentialService:
    def __init__(self, session: AsyncSession):
        self._repo = UserRepository(session)

    async def register(self, creds: Credentials) -> None:
        if creds.username is None or creds.password is None:
            raise ValidationError("Username and password are required")

        if await self._repo.get_by_username(creds.username):
            logger.warning("Signup rejected: username %r already exists", creds.username)
            raise ConflictError("Username already exists")

        user = await self._repo.create(username=creds.username, password=creds.password)
        logger.info("User %s registered (%r)", user.id, creds.username)

    async def verify(self, creds: Credentials) -> None:
        user = await self._repo.get_by_credentials(creds.username, creds.password)
        if user is None:
            logger.warning("Login failed for %r", creds.username)
            raise UnauthorizedError("Invalid username or password")
        logger.info("User %s logged in", user.id)
