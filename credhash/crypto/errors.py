"""Errors raised while encoding or decoding credential records."""

from __future__ import annotations

from enum import Enum


class FailureReason(str, Enum):
    """Why a verification did not succeed."""

    EMPTY = "empty"
    MALFORMED_RECORD = "malformed_record"
    UNKNOWN_ALGORITHM = "unknown_algorithm"
    ITERATION_OUT_OF_RANGE = "iteration_out_of_range"
    KEY_LENGTH_OUT_OF_RANGE = "key_length_out_of_range"
    EMPTY_FIELD = "empty_field"
    INVALID_SALT = "invalid_salt"
    MISMATCH = "mismatch"


class CredentialError(ValueError):
    """Base class for credential record failures."""

    reason: FailureReason = FailureReason.MALFORMED_RECORD


class MalformedRecordError(CredentialError):
    """Raised for a wrong field count, prefix or digest encoding."""

    reason = FailureReason.MALFORMED_RECORD


class UnknownAlgorithmError(CredentialError):
    reason = FailureReason.UNKNOWN_ALGORITHM


class IterationOutOfRangeError(CredentialError):
    reason = FailureReason.ITERATION_OUT_OF_RANGE


class KeyLengthOutOfRangeError(CredentialError):
    reason = FailureReason.KEY_LENGTH_OUT_OF_RANGE


class EmptyFieldError(CredentialError):
    """Raised when the salt or digest field is empty."""

    reason = FailureReason.EMPTY_FIELD


class InvalidSaltError(CredentialError):
    """Raised when a salt cannot be stored verbatim in a record."""

    reason = FailureReason.INVALID_SALT


__all__ = [
    "FailureReason",
    "CredentialError",
    "MalformedRecordError",
    "UnknownAlgorithmError",
    "IterationOutOfRangeError",
    "KeyLengthOutOfRangeError",
    "EmptyFieldError",
    "InvalidSaltError",
]
