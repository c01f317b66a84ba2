"""Async facade that bounds concurrent key derivations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TypeVar

from salesboard_auth.application.ports.password_hasher_port import (
    DerivationError,
    PasswordHasherPort,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class CredentialHashingService:
    """Run blocking hasher calls off the event loop with bounded concurrency.

    Each in-flight derivation allocates its own scrypt scratch memory, so the
    semaphore caps peak memory at roughly `max_concurrency` times the KDF
    working set. A timed-out call is reported as `DerivationError`; the
    worker thread still runs to completion in the background and keeps its
    slot until it does.
    """

    def __init__(
        self,
        *,
        password_hasher: PasswordHasherPort,
        max_concurrency: int,
        timeout_seconds: float | None = None,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._password_hasher = password_hasher
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._timeout_seconds = timeout_seconds

    async def hash_password(self, password: str) -> str:
        """Hash plaintext password into a storable credential record."""

        return await self._run(self._password_hasher.hash_password, password)

    async def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against a stored credential record."""

        return await self._run(
            lambda: self._password_hasher.verify_password(
                password=password,
                password_hash=password_hash,
            )
        )

    async def _run(self, func: Callable[..., _T], *args: object) -> _T:
        await self._semaphore.acquire()
        derivation = asyncio.ensure_future(asyncio.to_thread(func, *args))
        derivation.add_done_callback(self._release_slot)
        try:
            return await asyncio.wait_for(
                asyncio.shield(derivation),
                timeout=self._timeout_seconds,
            )
        except TimeoutError as exc:
            logger.warning(
                "credential_derivation_timeout timeout_seconds=%s",
                self._timeout_seconds,
            )
            raise DerivationError(
                f"key derivation exceeded {self._timeout_seconds}s deadline"
            ) from exc

    def _release_slot(self, _derivation: asyncio.Future[object]) -> None:
        self._semaphore.release()
