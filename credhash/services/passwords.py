"""Password hashing service driven by the configured policy."""

from __future__ import annotations

import logging

import shortuuid

from credhash.config import Settings, get_settings
from credhash.crypto import pbkdf2
from credhash.crypto.algorithms import HashAlgorithm
from credhash.crypto.pbkdf2 import VerificationResult
from credhash.crypto.record import try_decode

logger = logging.getLogger("credhash.audit")


class PasswordService:
    """Create and check credential records using one hashing policy."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._salts = shortuuid.ShortUUID()

    @property
    def settings(self) -> Settings:
        return self._settings

    def generate_salt(self) -> str:
        return self._salts.random(length=self._settings.salt_length)

    def hash(
        self,
        password: str | bytes,
        salt: str | bytes | None = None,
        *,
        iterations: int | None = None,
        key_length: int | None = None,
        algorithm: str | HashAlgorithm | None = None,
        strict: bool | None = None,
    ) -> str:
        """Encode a record; keyword arguments override the configured policy for this call."""
        record = pbkdf2.create_record(
            password,
            salt if salt is not None else self.generate_salt(),
            self._settings.iterations if iterations is None else iterations,
            self._settings.key_length if key_length is None else key_length,
            algorithm or self._settings.algorithm,
            strict=self._settings.strict if strict is None else strict,
        )
        logger.info(
            "credential record created",
            extra={
                "algorithm": record.algorithm.value,
                "iterations": record.iterations,
                "key_length": record.key_length,
            },
        )
        return record.to_string()

    def inspect(self, password: str | bytes, stored: str | bytes) -> VerificationResult:
        result = pbkdf2.inspect(password, stored)
        if not result.valid:
            logger.info("credential verification failed", extra={"reason": result.reason.value})
        return result

    def verify(self, password: str | bytes, stored: str | bytes) -> bool:
        return self.inspect(password, stored).valid

    def needs_rehash(self, stored: str | bytes) -> bool:
        """Return True when ``stored`` is unreadable or was made with a different policy."""
        record = try_decode(stored)
        if record is None:
            return True
        return (
            record.algorithm is not self._settings.algorithm
            or record.iterations != self._settings.iterations
            or record.key_length != self._settings.key_length
        )
