"""Application settings using Pydantic settings management."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from credhash.crypto.algorithms import HashAlgorithm
from credhash.crypto.params import (
    DEFAULT_ITERATION,
    DEFAULT_KEY_LENGTH,
    MAX_ITERATION,
    MAX_KEY_LENGTH,
    MIN_ITERATION,
    MIN_KEY_LENGTH,
)


class Settings(BaseSettings):
    """Hashing policy read from ``CREDHASH_*`` environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="CREDHASH_", extra="ignore")

    algorithm: HashAlgorithm = Field(default=HashAlgorithm.SHA512)
    iterations: int = Field(default=DEFAULT_ITERATION, ge=MIN_ITERATION, le=MAX_ITERATION)
    key_length: int = Field(default=DEFAULT_KEY_LENGTH, ge=MIN_KEY_LENGTH, le=MAX_KEY_LENGTH)
    salt_length: int = Field(
        default=16,
        ge=4,
        le=128,
        description="Number of characters in generated salts.",
    )
    strict: bool = Field(
        default=False,
        description="Reject out-of-range parameters instead of falling back to defaults.",
    )
    max_concurrency: int = Field(
        default=4,
        ge=1,
        description="Upper bound on verifications running at once in the async verifier.",
    )
    log_level: str = Field(default="INFO")

    @field_validator("algorithm", mode="before")
    @classmethod
    def lower_algorithm(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("CREDHASH_LOG_LEVEL must be a standard logging level name.")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
