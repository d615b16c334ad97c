"""
Pydantic schemas for the note entity, use-case contracts and API responses.

Messages are built by the parsers, results are produced by the use-cases,
and the common schemas describe error and health payloads.
"""

from .common import ErrorResponse, HealthCheckResponse
from .notes import (
    CreateMessage,
    CreateResult,
    DeleteMessage,
    DeleteResult,
    Note,
    ReadAllMessage,
    ReadAllResult,
    ReadMessage,
    ReadResult,
    UpdateMessage,
    UpdateResult,
)

__all__ = [
    # Entity
    "Note",
    # Messages
    "ReadAllMessage",
    "ReadMessage",
    "CreateMessage",
    "UpdateMessage",
    "DeleteMessage",
    # Results
    "ReadAllResult",
    "ReadResult",
    "CreateResult",
    "UpdateResult",
    "DeleteResult",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
]
