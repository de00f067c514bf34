"""Canonical credential record and its parser.

A record has exactly five ``$`` separated fields::

    pbkdf2_<algorithm>$<salt>$<iterations>$<key length>$<hex digest>
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .algorithms import HashAlgorithm
from .errors import CredentialError, EmptyFieldError, MalformedRecordError
from .params import check_iteration, check_key_length

PREFIX = "pbkdf2_"
SEPARATOR = "$"
FIELD_COUNT = 5

# wide enough for MAX_ITERATION, narrow enough that int() never hits the digit limit
_DECIMAL = re.compile(r"[0-9]{1,7}")
_LOWER_HEX = re.compile(r"[0-9a-f]+")


@dataclass(frozen=True)
class HashParameters:
    algorithm: HashAlgorithm
    iterations: int
    key_length: int

    def __post_init__(self) -> None:
        check_iteration(self.iterations)
        check_key_length(self.key_length)


@dataclass(frozen=True)
class CredentialRecord:
    """Immutable view over a stored credential string."""

    salt: str
    parameters: HashParameters
    digest: bytes

    def __post_init__(self) -> None:
        if not self.salt:
            raise EmptyFieldError("salt must not be empty")
        if SEPARATOR in self.salt:
            raise MalformedRecordError("salt must not contain the field separator")
        if len(self.digest) != self.parameters.key_length:
            raise MalformedRecordError(
                f"digest is {len(self.digest)} bytes, expected {self.parameters.key_length}"
            )

    @property
    def algorithm(self) -> HashAlgorithm:
        return self.parameters.algorithm

    @property
    def iterations(self) -> int:
        return self.parameters.iterations

    @property
    def key_length(self) -> int:
        return self.parameters.key_length

    def to_string(self) -> str:
        return SEPARATOR.join(
            [
                f"{PREFIX}{self.algorithm.value}",
                self.salt,
                str(self.iterations),
                str(self.key_length),
                self.digest.hex(),
            ]
        )

    def __str__(self) -> str:
        return self.to_string()


def _parse_decimal(raw: str, label: str) -> int:
    if not _DECIMAL.fullmatch(raw):
        raise MalformedRecordError(f"{label} is not a decimal integer")
    return int(raw)


def decode(stored: str | bytes) -> CredentialRecord:
    """Parse a stored record, raising a :class:`CredentialError` subclass on the first violation."""
    if isinstance(stored, bytes):
        try:
            stored = stored.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRecordError("record is not valid UTF-8") from exc

    parts = stored.split(SEPARATOR)
    if len(parts) != FIELD_COUNT:
        raise MalformedRecordError(f"expected {FIELD_COUNT} fields, found {len(parts)}")
    tag, salt, iterations_raw, key_length_raw, digest_hex = parts

    if not tag.startswith(PREFIX):
        raise MalformedRecordError(f"record must start with {PREFIX!r}")
    algorithm = HashAlgorithm.from_tag(tag[len(PREFIX) :])

    iterations = check_iteration(_parse_decimal(iterations_raw, "iteration count"))
    key_length = check_key_length(_parse_decimal(key_length_raw, "key length"))

    if not salt:
        raise EmptyFieldError("salt is empty")
    if not digest_hex:
        raise EmptyFieldError("digest is empty")
    if len(digest_hex) != 2 * key_length or not _LOWER_HEX.fullmatch(digest_hex):
        raise MalformedRecordError("digest must be lower-case hex matching the key length")

    return CredentialRecord(
        salt=salt,
        parameters=HashParameters(algorithm=algorithm, iterations=iterations, key_length=key_length),
        digest=bytes.fromhex(digest_hex),
    )


def try_decode(stored: str | bytes) -> CredentialRecord | None:
    try:
        return decode(stored)
    except CredentialError:
        return None


__all__ = [
    "PREFIX",
    "SEPARATOR",
    "HashParameters",
    "CredentialRecord",
    "decode",
    "try_decode",
]
