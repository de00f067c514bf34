"""Bounded verification for asyncio callers."""

from __future__ import annotations

import asyncio
from typing import Iterable

from credhash.config import get_settings
from credhash.crypto.pbkdf2 import VerificationResult
from credhash.services.passwords import PasswordService


class BoundedVerifier:
    """Run CPU-bound verifications on worker threads, at most ``limit`` at a time."""

    def __init__(self, service: PasswordService | None = None, limit: int | None = None) -> None:
        self._service = service or PasswordService()
        self._limit = limit if limit is not None else get_settings().max_concurrency
        if self._limit < 1:
            raise ValueError("limit must be at least 1")
        self._semaphore: asyncio.Semaphore | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def limit(self) -> int:
        return self._limit

    def _gate(self) -> asyncio.Semaphore:
        # a semaphore is bound to one loop; rebuild it when called from another
        loop = asyncio.get_running_loop()
        if self._semaphore is None or self._loop is not loop:
            self._semaphore = asyncio.Semaphore(self._limit)
            self._loop = loop
        return self._semaphore

    async def inspect(self, password: str | bytes, stored: str | bytes) -> VerificationResult:
        async with self._gate():
            return await asyncio.to_thread(self._service.inspect, password, stored)

    async def verify(self, password: str | bytes, stored: str | bytes) -> bool:
        result = await self.inspect(password, stored)
        return result.valid

    async def verify_many(self, attempts: Iterable[tuple[str | bytes, str | bytes]]) -> list[bool]:
        return list(await asyncio.gather(*(self.verify(password, stored) for password, stored in attempts)))
