import pytest

from credhash.crypto.algorithms import HashAlgorithm
from credhash.crypto.errors import (
    EmptyFieldError,
    IterationOutOfRangeError,
    KeyLengthOutOfRangeError,
    MalformedRecordError,
    UnknownAlgorithmError,
)
from credhash.crypto.record import CredentialRecord, HashParameters, decode, try_decode

DIGEST = "72629a41b076e588fba8c71ca37fadc9acdc8e7321b9cb4ea55fd0bf9fe8ed72"
VALID = f"pbkdf2_sha512$salt$10000$32${DIGEST}"


class TestDecode:
    def test_valid_record(self):
        record = decode(VALID)
        assert record.algorithm is HashAlgorithm.SHA512
        assert record.salt == "salt"
        assert record.iterations == 10_000
        assert record.key_length == 32
        assert record.digest == bytes.fromhex(DIGEST)
        assert record.to_string() == VALID

    def test_bytes_input(self):
        assert decode(VALID.encode()).to_string() == VALID

    @pytest.mark.parametrize(
        "stored, error",
        [
            ("", MalformedRecordError),
            ("not_pbkdf2_format", MalformedRecordError),
            (f"sha512$salt$10000$32${DIGEST}", MalformedRecordError),
            (f"pbkdf3_sha512$salt$10000$32${DIGEST}", MalformedRecordError),
            (f"pbkdf2_sha512$salt$10000$32${DIGEST}$extra", MalformedRecordError),
            (f"pbkdf2_unknown$salt$10000$32${DIGEST}", UnknownAlgorithmError),
            (f"pbkdf2_SHA512$salt$10000$32${DIGEST}", UnknownAlgorithmError),
            (f"pbkdf2_sha512$salt$ten$32${DIGEST}", MalformedRecordError),
            (f"pbkdf2_sha512$salt$+10000$32${DIGEST}", MalformedRecordError),
            (f"pbkdf2_sha512$salt$999$32${DIGEST}", IterationOutOfRangeError),
            (f"pbkdf2_sha512$salt$1000001$32${DIGEST}", IterationOutOfRangeError),
            ("pbkdf2_sha512$salt$" + "1" * 5000 + f"$32${DIGEST}", MalformedRecordError),
            ("pbkdf2_sha512$salt$10000$" + "3" * 5000 + f"${DIGEST}", MalformedRecordError),
            (f"pbkdf2_sha512$salt$00010000$32${DIGEST}", MalformedRecordError),
            (f"pbkdf2_sha512$salt$10000$0${DIGEST}", KeyLengthOutOfRangeError),
            (f"pbkdf2_sha512$salt$10000$1025${DIGEST}", KeyLengthOutOfRangeError),
            (f"pbkdf2_sha512$$10000$32${DIGEST}", EmptyFieldError),
            ("pbkdf2_sha512$salt$10000$32$", EmptyFieldError),
            ("pbkdf2_sha512$salt$10000$32$abcd", MalformedRecordError),
            (f"pbkdf2_sha512$salt$10000$32${DIGEST.upper()}", MalformedRecordError),
            (f"pbkdf2_sha512$salt$10000$32${DIGEST[:-1]}z", MalformedRecordError),
        ],
    )
    def test_rejections(self, stored, error):
        with pytest.raises(error):
            decode(stored)

    def test_checks_run_in_order(self):
        # both iteration and key length are bad; the iteration check comes first
        with pytest.raises(IterationOutOfRangeError):
            decode("pbkdf2_sha512$salt$1$1$")
        # numeric checks precede the salt check
        with pytest.raises(KeyLengthOutOfRangeError):
            decode("pbkdf2_sha512$$10000$1$")

    def test_non_utf8_bytes(self):
        with pytest.raises(MalformedRecordError):
            decode(b"pbkdf2_sha512$\xff$10000$32$00")

    def test_try_decode(self):
        assert try_decode(VALID) is not None
        assert try_decode("garbage") is None
        assert try_decode("pbkdf2_sha512$salt$" + "1" * 5000 + f"$32${DIGEST}") is None


class TestCredentialRecord:
    def test_digest_length_must_match(self):
        params = HashParameters(algorithm=HashAlgorithm.SHA1, iterations=1_000, key_length=8)
        with pytest.raises(MalformedRecordError):
            CredentialRecord(salt="salt", parameters=params, digest=b"\x00" * 7)

    def test_parameters_are_bounded(self):
        with pytest.raises(IterationOutOfRangeError):
            HashParameters(algorithm=HashAlgorithm.SHA1, iterations=10, key_length=8)

    def test_str_is_wire_form(self):
        params = HashParameters(algorithm=HashAlgorithm.MD5, iterations=1_000, key_length=8)
        record = CredentialRecord(salt="abc", parameters=params, digest=bytes(range(8)))
        assert str(record) == "pbkdf2_md5$abc$1000$8$0001020304050607"
