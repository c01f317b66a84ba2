"""Scrypt password hasher adapter."""

from __future__ import annotations

import hashlib
import hmac
import os

from salesboard_auth.application.ports.password_hasher_port import (
    DerivationError,
    PasswordHasherPort,
)
from salesboard_auth.config.settings import Settings
from salesboard_auth.domain.auth.credential_record import (
    DIGEST_LENGTH_BYTES,
    SALT_LENGTH_BYTES,
    CredentialRecord,
)

DEFAULT_SCRYPT_COST = 16_384
DEFAULT_SCRYPT_BLOCK_SIZE = 8
DEFAULT_SCRYPT_PARALLELIZATION = 1
DEFAULT_SCRYPT_MAXMEM_BYTES = 32 * 1024 * 1024


class ScryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using scrypt with hex-salted credential records.

    The salt is fed to scrypt as its hex text, not as the decoded bytes, so
    records written by the dashboard's existing accounts keep verifying.
    """

    def __init__(
        self,
        *,
        cost: int = DEFAULT_SCRYPT_COST,
        block_size: int = DEFAULT_SCRYPT_BLOCK_SIZE,
        parallelization: int = DEFAULT_SCRYPT_PARALLELIZATION,
        maxmem_bytes: int = DEFAULT_SCRYPT_MAXMEM_BYTES,
    ) -> None:
        self._cost = cost
        self._block_size = block_size
        self._parallelization = parallelization
        self._maxmem_bytes = maxmem_bytes

    def hash_password(self, password: str) -> str:
        salt_hex = _random_salt_hex()
        digest = self._derive(password=password, salt_hex=salt_hex)
        return CredentialRecord(digest=digest, salt_hex=salt_hex).encode()

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        record = CredentialRecord.parse(password_hash)
        candidate = self._derive(password=password, salt_hex=record.salt_hex)
        return hmac.compare_digest(candidate, record.digest)

    def _derive(self, *, password: str, salt_hex: str) -> bytes:
        """Run scrypt for one password/salt pair and return the raw digest."""

        password_bytes = _encode_plaintext(password)
        salt_bytes = salt_hex.encode("ascii")
        try:
            return hashlib.scrypt(
                password_bytes,
                salt=salt_bytes,
                n=self._cost,
                r=self._block_size,
                p=self._parallelization,
                maxmem=self._maxmem_bytes,
                dklen=DIGEST_LENGTH_BYTES,
            )
        except (ValueError, MemoryError) as exc:
            raise DerivationError(f"scrypt derivation failed: {exc}") from exc


def _encode_plaintext(password: str) -> bytes:
    """UTF-8 encode a plaintext, replacing lone surrogates with U+FFFD.

    Surrogate pairs are joined first, matching how existing records were
    produced from UTF-16 strings; unpaired halves (for example from
    surrogateescape-decoded argv) become the replacement character.
    """

    utf16 = password.encode("utf-16-le", "surrogatepass")
    return utf16.decode("utf-16-le", "replace").encode("utf-8")


def _random_salt_hex() -> str:
    """Return a fresh hex-encoded salt drawn from the OS entropy source."""

    try:
        return os.urandom(SALT_LENGTH_BYTES).hex()
    except (NotImplementedError, OSError) as exc:
        raise DerivationError("entropy source unavailable") from exc


def build_password_hasher(settings: Settings) -> ScryptPasswordHasher:
    """Create the scrypt hasher using cost parameters from runtime settings."""

    return ScryptPasswordHasher(
        cost=settings.scrypt_cost,
        block_size=settings.scrypt_block_size,
        parallelization=settings.scrypt_parallelization,
        maxmem_bytes=settings.scrypt_maxmem_bytes,
    )
