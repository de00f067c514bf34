"""Pydantic schema exports."""

from .records import InspectResponse, RecordSummary, VerifyResponse

__all__ = ["InspectResponse", "RecordSummary", "VerifyResponse"]
