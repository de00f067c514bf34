"""Self-describing PBKDF2 password records."""

from importlib import metadata

from .crypto import decode, encode, inspect, verify


def get_version() -> str:
    """Return package version, defaulting to dev if unavailable."""
    try:
        return metadata.version("credhash")
    except metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
        return "0.0.0-dev"


__all__ = ["get_version", "encode", "decode", "verify", "inspect"]
