"""Application service for creating user accounts with hashed credentials."""

from __future__ import annotations

import logging

from salesboard_auth.application.ports.user_repository_port import (
    UserCreateInput,
    UserRecord,
    UserRepositoryPort,
)
from salesboard_auth.application.services.credential_hashing_service import (
    CredentialHashingService,
)
from salesboard_auth.domain.auth.credentials import normalize_username, require_password_policy

logger = logging.getLogger(__name__)


class UsernameTakenError(ValueError):
    """Raised when a registration targets an existing username."""

    def __init__(self, *, username: str) -> None:
        super().__init__(f"username already exists: {username}")
        self.username = username


class RegistrationService:
    """Validate, hash and persist new user accounts."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        hashing: CredentialHashingService,
        password_min_length: int,
    ) -> None:
        self._users = users
        self._hashing = hashing
        self._password_min_length = password_min_length

    async def register(
        self,
        *,
        username: str,
        password: str,
        name: str,
        role: str = "admin",
        agency_id: int | None = None,
        is_super_admin: bool = False,
    ) -> UserRecord:
        """Create one account; the plaintext password never reaches the repository."""

        normalized_username = normalize_username(username=username)
        require_password_policy(password=password, min_length=self._password_min_length)

        if await self._users.get_by_username(username=normalized_username) is not None:
            raise UsernameTakenError(username=normalized_username)

        password_hash = await self._hashing.hash_password(password)
        user = await self._users.create_user(
            UserCreateInput(
                username=normalized_username,
                password_hash=password_hash,
                name=name,
                role=role,
                agency_id=agency_id,
                is_super_admin=is_super_admin,
            )
        )
        logger.info("user_registered user_id=%s role=%s", user.user_id, user.role)
        return user
