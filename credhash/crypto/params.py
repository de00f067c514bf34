"""Bounds and normalisation for PBKDF2 parameters."""

from __future__ import annotations

from .errors import IterationOutOfRangeError, KeyLengthOutOfRangeError

DEFAULT_ITERATION = 10_000
MIN_ITERATION = 1_000
MAX_ITERATION = 1_000_000

DEFAULT_KEY_LENGTH = 32
MIN_KEY_LENGTH = 8
MAX_KEY_LENGTH = 1_024


def iteration_in_range(iterations: int) -> bool:
    return MIN_ITERATION <= iterations <= MAX_ITERATION


def key_length_in_range(key_length: int) -> bool:
    return MIN_KEY_LENGTH <= key_length <= MAX_KEY_LENGTH


def clamp_iteration(iterations: int) -> int:
    """Return ``iterations`` when within bounds, otherwise the default."""
    if not iteration_in_range(iterations):
        return DEFAULT_ITERATION
    return iterations


def clamp_key_length(key_length: int) -> int:
    """Return ``key_length`` when within bounds, otherwise the default."""
    if not key_length_in_range(key_length):
        return DEFAULT_KEY_LENGTH
    return key_length


def check_iteration(iterations: int) -> int:
    if not iteration_in_range(iterations):
        raise IterationOutOfRangeError(
            f"iteration count {iterations} outside [{MIN_ITERATION}, {MAX_ITERATION}]"
        )
    return iterations


def check_key_length(key_length: int) -> int:
    if not key_length_in_range(key_length):
        raise KeyLengthOutOfRangeError(
            f"key length {key_length} outside [{MIN_KEY_LENGTH}, {MAX_KEY_LENGTH}]"
        )
    return key_length


def normalise(iterations: int, key_length: int, *, strict: bool = False) -> tuple[int, int]:
    """Apply either the strict checks or the permissive clamps to both parameters."""
    if strict:
        return check_iteration(iterations), check_key_length(key_length)
    return clamp_iteration(iterations), clamp_key_length(key_length)


__all__ = [
    "DEFAULT_ITERATION",
    "MIN_ITERATION",
    "MAX_ITERATION",
    "DEFAULT_KEY_LENGTH",
    "MIN_KEY_LENGTH",
    "MAX_KEY_LENGTH",
    "iteration_in_range",
    "key_length_in_range",
    "clamp_iteration",
    "clamp_key_length",
    "check_iteration",
    "check_key_length",
    "normalise",
]
