"""Application authentication service for credential verification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from salesboard_auth.application.ports.user_repository_port import UserRecord, UserRepositoryPort
from salesboard_auth.application.services.credential_hashing_service import (
    CredentialHashingService,
)
from salesboard_auth.domain.auth.credential_record import MalformedRecordError
from salesboard_auth.domain.auth.credentials import normalize_username

logger = logging.getLogger(__name__)


class AuthOutcome(StrEnum):
    """Supported authentication outcomes."""

    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"
    CORRUPT_CREDENTIAL_RECORD = "corrupt_credential_record"


@dataclass(frozen=True)
class AuthResult:
    """Authentication result model."""

    outcome: AuthOutcome
    user: UserRecord | None = None


class AuthService:
    """Authenticate username/password pairs against stored credential records."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        hashing: CredentialHashingService,
    ) -> None:
        self._users = users
        self._hashing = hashing

    async def authenticate(self, *, username: str, password: str) -> AuthResult:
        """Authenticate user credentials; `DerivationError` propagates to the caller."""

        try:
            normalized_username = normalize_username(username=username)
        except ValueError:
            logger.info("login_failed reason=blank_username")
            return AuthResult(outcome=AuthOutcome.INVALID_CREDENTIALS)

        user = await self._users.get_by_username(username=normalized_username)
        if user is None:
            logger.info("login_failed username=%s reason=unknown_user", normalized_username)
            return AuthResult(outcome=AuthOutcome.INVALID_CREDENTIALS)

        try:
            is_valid = await self._hashing.verify_password(
                password=password,
                password_hash=user.password_hash,
            )
        except MalformedRecordError as exc:
            logger.error(
                "login_failed user_id=%s reason=corrupt_credential_record detail=%s",
                user.user_id,
                exc.reason,
            )
            return AuthResult(outcome=AuthOutcome.CORRUPT_CREDENTIAL_RECORD)

        if not is_valid:
            logger.info("login_failed user_id=%s reason=invalid_credentials", user.user_id)
            return AuthResult(outcome=AuthOutcome.INVALID_CREDENTIALS)

        logger.info("login_success user_id=%s role=%s", user.user_id, user.role)
        return AuthResult(outcome=AuthOutcome.SUCCESS, user=user)
