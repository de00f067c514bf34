"""Digest algorithms supported inside the PBKDF2 construction."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from cryptography.hazmat.primitives import hashes

from .errors import UnknownAlgorithmError

HashFactory = Callable[[], hashes.HashAlgorithm]


class HashAlgorithm(str, Enum):
    """Closed set of digest primitives a record may name."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    def hash_factory(self) -> HashFactory:
        if self is HashAlgorithm.MD5:
            return hashes.MD5
        if self is HashAlgorithm.SHA1:
            return hashes.SHA1
        if self is HashAlgorithm.SHA256:
            return hashes.SHA256
        return hashes.SHA512

    @classmethod
    def from_tag(cls, tag: str) -> "HashAlgorithm":
        """Look up a stored tag. Tags are always lower-case, so matching is exact."""
        try:
            return cls(tag)
        except ValueError as exc:
            raise UnknownAlgorithmError(f"unsupported hash algorithm {tag!r}") from exc


DEFAULT_ALGORITHM = HashAlgorithm.SHA512


def resolve(name: str | HashAlgorithm | None, *, strict: bool = False) -> tuple[HashAlgorithm, HashFactory]:
    """Map a case-insensitive algorithm name to its canonical member and factory.

    Unknown names fall back to sha512 unless ``strict`` is set, in which case
    :class:`UnknownAlgorithmError` is raised.
    """
    if isinstance(name, HashAlgorithm):
        return name, name.hash_factory()
    try:
        algorithm = HashAlgorithm.from_tag((name or "").lower())
    except UnknownAlgorithmError:
        if strict:
            raise
        algorithm = DEFAULT_ALGORITHM
    return algorithm, algorithm.hash_factory()


__all__ = ["HashAlgorithm", "HashFactory", "DEFAULT_ALGORITHM", "resolve"]
