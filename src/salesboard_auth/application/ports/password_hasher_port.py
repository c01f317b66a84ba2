"""Port for password hashing and verification."""

from __future__ import annotations

from typing import Protocol


class DerivationError(RuntimeError):
    """Raised when the key-derivation step cannot run to completion."""


class PasswordHasherPort(Protocol):
    """Password hashing/verification contract."""

    def hash_password(self, password: str) -> str:
        """Hash plaintext password into a storable credential record."""

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against a stored credential record."""
