"""Canonical `<digest_hex>.<salt_hex>` credential record codec."""

from __future__ import annotations

import re
from dataclasses import dataclass

DIGEST_LENGTH_BYTES = 64
SALT_LENGTH_BYTES = 16
RECORD_SEPARATOR = "."

_DIGEST_HEX_PATTERN = re.compile(rf"[0-9a-f]{{{DIGEST_LENGTH_BYTES * 2}}}")
_SALT_HEX_PATTERN = re.compile(rf"[0-9a-f]{{{SALT_LENGTH_BYTES * 2}}}")


class MalformedRecordError(ValueError):
    """Raised when a stored credential record does not parse."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid credential record: {reason}")
        self.reason = reason


@dataclass(frozen=True)
class CredentialRecord:
    """Parsed credential record with raw digest bytes and hex salt text."""

    digest: bytes
    salt_hex: str

    @classmethod
    def parse(cls, value: str) -> CredentialRecord:
        """Decode one stored record string or raise `MalformedRecordError`."""

        digest_hex, separator, salt_hex = value.partition(RECORD_SEPARATOR)
        if not separator:
            raise MalformedRecordError("missing separator")
        if _DIGEST_HEX_PATTERN.fullmatch(digest_hex) is None:
            raise MalformedRecordError(
                f"digest must be {DIGEST_LENGTH_BYTES * 2} lowercase hex characters"
            )
        if _SALT_HEX_PATTERN.fullmatch(salt_hex) is None:
            raise MalformedRecordError(
                f"salt must be {SALT_LENGTH_BYTES * 2} lowercase hex characters"
            )
        return cls(digest=bytes.fromhex(digest_hex), salt_hex=salt_hex)

    def encode(self) -> str:
        """Return the canonical wire string for this record."""

        return f"{self.digest.hex()}{RECORD_SEPARATOR}{self.salt_hex}"

    def __str__(self) -> str:
        return self.encode()
