"""Service layer exported symbols."""

from .passwords import PasswordService
from .pool import BoundedVerifier

__all__ = ["PasswordService", "BoundedVerifier"]
