"""Shared normalization helpers for user credential inputs."""

from __future__ import annotations


class PasswordPolicyError(ValueError):
    """Raised when a new password does not satisfy the account policy."""


def normalize_username(*, username: str) -> str:
    """Normalize one username and reject blank values."""

    normalized = username.strip().lower()
    if not normalized:
        raise ValueError("username cannot be blank")
    return normalized


def require_password_policy(*, password: str, min_length: int) -> str:
    """Return the password unchanged when it satisfies the account policy."""

    if not password.strip():
        raise PasswordPolicyError("password cannot be blank")
    if len(password) < min_length:
        raise PasswordPolicyError(f"password must be at least {min_length} characters")
    return password
