"""Encode and verify self-describing PBKDF2 password records."""

from __future__ import annotations

import hmac
from dataclasses import dataclass

from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .algorithms import HashAlgorithm, resolve
from .errors import CredentialError, FailureReason, InvalidSaltError
from .params import DEFAULT_ITERATION, DEFAULT_KEY_LENGTH, normalise
from .record import SEPARATOR, CredentialRecord, HashParameters, decode


def _as_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _salt_text(salt: str | bytes) -> str:
    if isinstance(salt, (bytes, bytearray)):
        try:
            salt = bytes(salt).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidSaltError("salt must be UTF-8 text to be stored verbatim") from exc
    if not salt:
        raise InvalidSaltError("salt must not be empty")
    if SEPARATOR in salt:
        raise InvalidSaltError(f"salt must not contain {SEPARATOR!r}")
    return salt


def derive(
    password: str | bytes,
    salt: str | bytes,
    iterations: int,
    key_length: int,
    algorithm: str | HashAlgorithm,
) -> bytes:
    """Run PBKDF2-HMAC with the given parameters as-is, without clamping."""
    _, factory = resolve(algorithm)
    kdf = PBKDF2HMAC(
        algorithm=factory(),
        length=key_length,
        salt=_as_bytes(salt),
        iterations=iterations,
    )
    return kdf.derive(_as_bytes(password))


def create_record(
    password: str | bytes,
    salt: str | bytes,
    iteration: int = DEFAULT_ITERATION,
    key_length: int = DEFAULT_KEY_LENGTH,
    algorithm: str | HashAlgorithm = HashAlgorithm.SHA512,
    *,
    strict: bool = False,
) -> CredentialRecord:
    """Derive a digest and wrap it with the parameters that produced it.

    In permissive mode out-of-range numbers fall back to the defaults and an
    unknown algorithm falls back to sha512. With ``strict`` set, those inputs
    raise instead.
    """
    algo, _ = resolve(algorithm, strict=strict)
    iterations, key_length = normalise(iteration, key_length, strict=strict)
    salt_text = _salt_text(salt)
    digest = derive(password, salt_text, iterations, key_length, algo)
    return CredentialRecord(
        salt=salt_text,
        parameters=HashParameters(algorithm=algo, iterations=iterations, key_length=key_length),
        digest=digest,
    )


def encode(
    password: str | bytes,
    salt: str | bytes,
    iteration: int = DEFAULT_ITERATION,
    key_length: int = DEFAULT_KEY_LENGTH,
    algorithm: str | HashAlgorithm = HashAlgorithm.SHA512,
    *,
    strict: bool = False,
) -> str:
    """Return ``pbkdf2_<algo>$<salt>$<iterations>$<key length>$<hex digest>``."""
    return create_record(password, salt, iteration, key_length, algorithm, strict=strict).to_string()


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: FailureReason | None = None
    record: CredentialRecord | None = None

    def __bool__(self) -> bool:
        return self.valid


def inspect(password: str | bytes, stored: str | bytes) -> VerificationResult:
    """Verify ``password`` and report why verification failed, if it did."""
    if not stored:
        return VerificationResult(valid=False, reason=FailureReason.EMPTY)
    try:
        record = decode(stored)
    except CredentialError as exc:
        return VerificationResult(valid=False, reason=exc.reason)

    candidate = create_record(
        password,
        record.salt,
        record.iterations,
        record.key_length,
        record.algorithm,
    ).to_string()
    # compare the full canonical string in constant time
    if hmac.compare_digest(candidate.encode("utf-8"), _as_bytes(stored)):
        return VerificationResult(valid=True, record=record)
    return VerificationResult(valid=False, reason=FailureReason.MISMATCH, record=record)


def verify(password: str | bytes, stored: str | bytes) -> bool:
    """Return True only when ``stored`` is well formed and matches ``password``."""
    return inspect(password, stored).valid


__all__ = [
    "derive",
    "create_record",
    "encode",
    "VerificationResult",
    "inspect",
    "verify",
]
