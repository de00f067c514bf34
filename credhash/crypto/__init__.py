"""Cryptographic helpers."""

from .algorithms import HashAlgorithm, resolve
from .errors import (
    CredentialError,
    EmptyFieldError,
    FailureReason,
    InvalidSaltError,
    IterationOutOfRangeError,
    KeyLengthOutOfRangeError,
    MalformedRecordError,
    UnknownAlgorithmError,
)
from .params import clamp_iteration, clamp_key_length
from .pbkdf2 import VerificationResult, create_record, derive, encode, inspect, verify
from .record import CredentialRecord, HashParameters, decode, try_decode

__all__ = [
    "HashAlgorithm",
    "resolve",
    "CredentialError",
    "EmptyFieldError",
    "FailureReason",
    "InvalidSaltError",
    "IterationOutOfRangeError",
    "KeyLengthOutOfRangeError",
    "MalformedRecordError",
    "UnknownAlgorithmError",
    "clamp_iteration",
    "clamp_key_length",
    "VerificationResult",
    "create_record",
    "derive",
    "encode",
    "inspect",
    "verify",
    "CredentialRecord",
    "HashParameters",
    "decode",
    "try_decode",
]
