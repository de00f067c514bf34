"""Schemas for CLI output."""

from __future__ import annotations

from pydantic import BaseModel, Field

from credhash.crypto.record import CredentialRecord


class RecordSummary(BaseModel):
    algorithm: str
    salt: str
    iterations: int
    key_length: int = Field(description="Derived key length in bytes")

    @classmethod
    def from_record(cls, record: CredentialRecord) -> "RecordSummary":
        return cls(
            algorithm=record.algorithm.value,
            salt=record.salt,
            iterations=record.iterations,
            key_length=record.key_length,
        )


class VerifyResponse(BaseModel):
    valid: bool


class InspectResponse(BaseModel):
    valid: bool | None = Field(default=None, description="Unset when no password was checked")
    reason: str | None = None
    record: RecordSummary | None = None
