"""Port for user lookup and creation used by account services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class UserRecord:
    """User persistence model."""

    user_id: int
    username: str
    password_hash: str
    name: str
    role: str
    agency_id: int | None
    is_super_admin: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class UserCreateInput:
    """Payload for creating one user row with an already-hashed password."""

    username: str
    password_hash: str
    name: str
    role: str = "admin"
    agency_id: int | None = None
    is_super_admin: bool = False


class UserRepositoryPort(Protocol):
    """User repository contract."""

    async def get_by_username(self, *, username: str) -> UserRecord | None:
        """Return user by normalized username or None."""

    async def create_user(self, payload: UserCreateInput) -> UserRecord:
        """Persist one user and return the stored row."""

    async def count_users(self) -> int:
        """Return the total number of persisted users."""
