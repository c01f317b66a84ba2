"""Bootstrap helper for creating an initial super-admin account at startup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from salesboard_auth.application.ports.user_repository_port import (
    UserCreateInput,
    UserRepositoryPort,
)
from salesboard_auth.application.services.credential_hashing_service import (
    CredentialHashingService,
)
from salesboard_auth.domain.auth.credentials import normalize_username

logger = logging.getLogger(__name__)


class AdminBootstrapConfigError(ValueError):
    """Raised when bootstrap-admin environment configuration is invalid."""


@dataclass(frozen=True)
class AdminBootstrapConfig:
    """Runtime configuration for one-time admin bootstrap."""

    username: str
    password: str


class AdminBootstrapOutcome(StrEnum):
    """Outcome states for initial admin bootstrap execution."""

    CREATED = "created"
    SKIPPED_USERS_PRESENT = "skipped_users_present"


@dataclass(frozen=True)
class AdminBootstrapResult:
    """Result model for one initial-admin bootstrap attempt."""

    outcome: AdminBootstrapOutcome
    username: str


def resolve_admin_bootstrap_config(
    *,
    username: str | None,
    password: str | None,
    password_file: str | None,
) -> AdminBootstrapConfig | None:
    """Resolve bootstrap-admin config from env values or return None when disabled."""

    if username is None:
        if password is not None or password_file is not None:
            raise AdminBootstrapConfigError(
                "BOOTSTRAP_ADMIN_USERNAME is required when bootstrap-admin variables are set"
            )
        return None

    if password is not None and password_file is not None:
        raise AdminBootstrapConfigError(
            "set only one of BOOTSTRAP_ADMIN_PASSWORD or BOOTSTRAP_ADMIN_PASSWORD_FILE"
        )

    resolved_password = password
    if password_file is not None:
        try:
            resolved_password = Path(password_file).read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise AdminBootstrapConfigError(
                "failed to read BOOTSTRAP_ADMIN_PASSWORD_FILE"
            ) from exc

    if resolved_password is None:
        raise AdminBootstrapConfigError(
            "set BOOTSTRAP_ADMIN_PASSWORD or BOOTSTRAP_ADMIN_PASSWORD_FILE "
            "when BOOTSTRAP_ADMIN_USERNAME is set"
        )
    if not resolved_password.strip():
        raise AdminBootstrapConfigError("bootstrap admin password cannot be blank")

    try:
        normalized_username = normalize_username(username=username)
    except ValueError as exc:
        raise AdminBootstrapConfigError("BOOTSTRAP_ADMIN_USERNAME cannot be blank") from exc

    return AdminBootstrapConfig(username=normalized_username, password=resolved_password)


async def ensure_initial_admin_user(
    *,
    users: UserRepositoryPort,
    hashing: CredentialHashingService,
    config: AdminBootstrapConfig,
) -> AdminBootstrapResult:
    """Create the initial super-admin when no users exist, otherwise skip."""

    if await users.count_users() > 0:
        logger.info("admin_bootstrap_skipped reason=users_present")
        return AdminBootstrapResult(
            outcome=AdminBootstrapOutcome.SKIPPED_USERS_PRESENT,
            username=config.username,
        )

    user = await users.create_user(
        UserCreateInput(
            username=config.username,
            password_hash=await hashing.hash_password(config.password),
            name="Super Admin",
            role="admin",
            is_super_admin=True,
        )
    )
    logger.info("admin_bootstrap_created user_id=%s", user.user_id)
    return AdminBootstrapResult(outcome=AdminBootstrapOutcome.CREATED, username=config.username)
