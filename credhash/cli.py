"""Command line entry points exposed as the ``credhash`` script."""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from typing import Sequence, TextIO

from credhash.config import get_settings
from credhash.crypto import CredentialError, decode
from credhash.schemas import InspectResponse, RecordSummary, VerifyResponse
from credhash.services import PasswordService


def _read_password(stream: TextIO) -> str:
    if stream.isatty():
        return getpass.getpass("Password: ")
    return stream.readline().rstrip("\r\n")


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="credhash", description="PBKDF2 credential records.")
    commands = parser.add_subparsers(dest="command", required=True)

    hash_cmd = commands.add_parser("hash", help="hash a password read from stdin")
    hash_cmd.add_argument("--salt", help="salt to store verbatim; random when omitted")
    hash_cmd.add_argument("--iterations", type=int, default=settings.iterations)
    hash_cmd.add_argument("--key-length", type=int, default=settings.key_length)
    hash_cmd.add_argument("--algorithm", default=settings.algorithm.value)
    hash_cmd.add_argument("--strict", action=argparse.BooleanOptionalAction, default=settings.strict)

    verify_cmd = commands.add_parser("verify", help="check a password read from stdin against a record")
    verify_cmd.add_argument("record")

    inspect_cmd = commands.add_parser("inspect", help="decode a record and report its parameters")
    inspect_cmd.add_argument("record")
    inspect_cmd.add_argument("--password", action="store_true", help="also check a password read from stdin")
    return parser


def _hash(args: argparse.Namespace, service: PasswordService, stdin: TextIO, stdout: TextIO) -> int:
    record = service.hash(
        _read_password(stdin),
        salt=args.salt,
        iterations=args.iterations,
        key_length=args.key_length,
        algorithm=args.algorithm,
        strict=args.strict,
    )
    print(record, file=stdout)
    return 0


def _verify(args: argparse.Namespace, service: PasswordService, stdin: TextIO, stdout: TextIO) -> int:
    valid = service.verify(_read_password(stdin), args.record)
    print(VerifyResponse(valid=valid).model_dump_json(), file=stdout)
    return 0 if valid else 1


def _inspect(args: argparse.Namespace, service: PasswordService, stdin: TextIO, stdout: TextIO) -> int:
    if args.password:
        result = service.inspect(_read_password(stdin), args.record)
        response = InspectResponse(
            valid=result.valid,
            reason=result.reason.value if result.reason else None,
            record=RecordSummary.from_record(result.record) if result.record else None,
        )
        ok = result.valid
    else:
        try:
            response = InspectResponse(record=RecordSummary.from_record(decode(args.record)))
            ok = True
        except CredentialError as exc:
            response = InspectResponse(reason=exc.reason.value)
            ok = False
    print(response.model_dump_json(), file=stdout)
    return 0 if ok else 1


_COMMANDS = {"hash": _hash, "verify": _verify, "inspect": _inspect}


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    args = _build_parser().parse_args(argv)
    service = PasswordService(settings)
    try:
        return _COMMANDS[args.command](args, service, stdin, stdout)
    except CredentialError as exc:
        print(f"error: {exc}", file=stderr)
        return 2


def run() -> None:  # pragma: no cover - console script
    sys.exit(main())


__all__ = ["main", "run"]
